# minicomp

`minicomp` compiles programs written in a tiny symbolic language into
assembly for a simple accumulator machine. It scans the source and builds
a parse tree with a recursive-descent parser. It then checks that every
variable is declared before use and that no variable is declared twice.
Finally it writes the assembly next to the input file.

## Installation

```
pip install .
```

## Command line

```
minicomp program.txt
```

This writes `program.txt.asm` and prints
`Assembly code has been generated in program.txt.asm`. The command exits
with status 0.

The command stops with status 1 and prints a message in these cases:

- it is given more than one argument
- the file cannot be opened
- the file is empty
- there is a scanner, parser or semantic error

## The language

There are three kinds of token:

- **t1**: single symbols: `! " # $ % & ' ( )`
- **t2**: identifiers, written as `+` followed by digits, such as `+12`
- **t3**: integer literals, written as a letter followed by digits. An
  upper-case letter makes the number positive and a lower-case letter makes
  it negative, so `R100` is 100 and `r100` is -100.

Text between a pair of `*` on one line is a comment. Only the first such
pair on a line is removed.

Grammar:

```
S -> A ( B B )
A -> " t2 | empty
B -> S | C | D | E | G | empty
C -> # t2 | ! F
D -> $ F
E -> ' F F F B
F -> t2 | t3 | & F F
G -> t2 % F
```

Meaning:

- `" +1`: declare `+1` and set it to zero
- `# +1`: declare `+1` and read a number into it
- `! F`: negate
- `$ F`: print a value
- `' F1 F2 F3 B`: if F1 > F2, repeat B F3 times
- `& F F`: add two values
- `+1 % F`: assign to `+1`

In the generated assembly, identifier `+N` is stored as `pN`. Temporaries
are named `temp0`, `temp1` and so on. The program ends with `STOP`,
followed by one `name 0` storage line for each variable.

Example:

```
" +1 ( # +2 $ & +2 R5 )
```

## Library use

```python
from minicomp.parser import parse_file
from minicomp.semantics import SymbolTable
from minicomp.codegen import AsmGenerator, write_asm

tree = parse_file("program.txt")
table = SymbolTable()
table.check_tree(tree)
write_asm(tree, table, "program.txt.asm")

# or keep the assembly as a string
text = AsmGenerator(table).generate(tree)
```

Other entry points:

- `minicomp.scanner.scan(text, start_line=0)` turns text into a list of
  `Token`s, ending with an EOF token.
- `minicomp.scanner.scan_file(path)` does the same for a file.
- `minicomp.parser.parse_tokens(tokens)` and `Parser(tokens).parse()` build
  a tree from tokens.
- `minicomp.tree.format_tree(root)` renders a tree as text, and
  `print_tree(root)` prints it. Each node goes on one line, with children
  indented by four spaces.
- `SymbolTable.format_table()` renders the declared identifiers.
- `minicomp.codegen.identifier_name("+12")` returns `"p12"`.
- `minicomp.codegen.immediate_value("r100")` returns `-100`.

Errors are raised as:

- `minicomp.scanner.ScannerError`
- `minicomp.parser.ParseError`
- `minicomp.semantics.SemanticError`
- `minicomp.codegen.CodeGenError`

## What it does not do

`minicomp` only produces assembly text. It does not assemble or run the
program, and it includes no simulator for the target machine. The command
reads a named file only. It does not take a program from standard input.

## Running the tests

```
pip install .[test]
pytest
```