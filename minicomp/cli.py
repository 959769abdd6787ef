"""Command line entry point: compile a source file to assembly."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .codegen import CodeGenError, write_asm
from .parser import ParseError, parse_file
from .scanner import ScannerError
from .semantics import SemanticError, SymbolTable


def main(argv: Sequence[str] | None = None) -> int:
    """Compile the named file into '<file>.asm'; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) >= 2:
        print("Fatal: Improper Usage")
        print("Usage: minicomp [filename]")
        return 1

    file_name = args[0] if args else ""
    if args:
        try:
            with open(file_name, "rb"):
                pass
        except OSError:
            print("Error: File could not be found")
            return 1

    output_name = file_name + ".asm"
    try:
        root = parse_file(file_name)
        table = SymbolTable()
        table.check_tree(root)
        write_asm(root, table, output_name)
    except (ScannerError, ParseError, SemanticError, CodeGenError) as exc:
        print(exc)
        return 1

    print(f"Assembly code has been generated in {output_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())