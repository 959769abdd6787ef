import re

import pytest

from minicomp.codegen import (
    AsmGenerator,
    CodeGenError,
    identifier_name,
    immediate_value,
    write_asm,
)
from minicomp.parser import parse_tokens
from minicomp.scanner import scan
from minicomp.semantics import SymbolTable
from minicomp.tree import Node


def _tree(text):
    root = parse_tokens(scan(text))
    SymbolTable().check_tree(root)
    return root


def _compile(text):
    return AsmGenerator(SymbolTable()).generate(_tree(text)).splitlines()


def test_identifier_name_replaces_plus():
    assert identifier_name("+7") == "p7"


@pytest.mark.parametrize("token", ["7x", "", "p1"])
def test_identifier_name_rejects_non_plus(token):
    with pytest.raises(CodeGenError):
        identifier_name(token)


def test_immediate_value_sign_follows_case():
    upper = immediate_value("A12")
    lower = immediate_value("a12")
    assert upper > 0
    assert lower == -upper


def test_immediate_value_zero():
    assert immediate_value("Z0") == 0


@pytest.mark.parametrize("token", ["[5", "5x", "+3", ""])
def test_immediate_value_rejects_non_letter(token):
    with pytest.raises(CodeGenError):
        immediate_value(token)


def test_declaration_loads_zero():
    name = identifier_name("+1")
    assert _compile('" +1 ( )\n') == ["LOAD 0", f"STORE {name}", "STOP", f"{name} 0"]


def test_read_and_write_variable():
    name = identifier_name("+2")
    assert _compile("( # +2 $ +2 )\n") == [
        f"READ {name}",
        f"WRITE {name}",
        "STOP",
        f"{name} 0",
    ]


def test_write_immediate():
    lines = _compile("( $ A5 )\n")
    assert lines == [f"LOAD {immediate_value('A5')}", "WRITE ", "STOP"]


def test_negate_variable_in_place():
    name = identifier_name("+3")
    assert _compile("( # +3 ! +3 )\n") == [
        f"READ {name}",
        f"LOAD {name}",
        "MULT -1",
        f"STORE {name}",
        "STOP",
        f"{name} 0",
    ]


def test_negate_immediate_uses_temporary():
    lines = _compile("( ! b4 )\n")
    assert lines[0] == f"LOAD {immediate_value('b4')}"
    temp = lines[1].split()[1]
    assert temp.startswith("temp")
    assert lines[1:6] == [
        f"STORE {temp}",
        f"LOAD {temp}",
        "MULT -1",
        f"STORE {temp}",
        "STOP",
    ]
    assert lines[-1] == f"{temp} 0"


def test_assignment_of_sum():
    name = identifier_name("+1")
    lines = _compile("( # +1 +1 % & +1 C2 )\n")
    stop = lines.index("STOP")
    body, storage = lines[:stop], lines[stop + 1:]
    assert body[0] == f"READ {name}"
    assert any(line.startswith("ADD ") for line in body)
    assert body[-2:] == [f"STORE {name}", f"STORE {name}"]
    assert f"LOAD {immediate_value('C2')}" in body
    assert storage.count(f"{name} 0") == 1
    assert all(line.endswith(" 0") for line in storage)
    assert len(storage) == 3


def test_loop_structure():
    name = identifier_name("+1")
    lines = _compile("( # +1 ' +1 A0 B3 $ +1 )\n")
    start_line = next(line for line in lines if re.fullmatch(r"start\d+: NOOP", line))
    end_line = next(line for line in lines if re.fullmatch(r"end\d+: NOOP", line))
    start = start_line.split(":")[0]
    end = end_line.split(":")[0]
    assert lines.count(f"BRZNEG {end}") == 2
    start_index = lines.index(start_line)
    branch_index = lines.index(f"BRPOS {start}")
    assert start_index < lines.index(f"WRITE {name}") < branch_index
    assert lines.index(end_line) == branch_index + 1
    assert lines[branch_index + 2] == "STOP"
    assert "SUB 1" in lines[start_index:branch_index]


def test_generate_none_is_empty():
    assert AsmGenerator(SymbolTable()).generate(None) == ""


def test_generate_is_repeatable():
    root = _tree("( ! b4 )\n")
    generator = AsmGenerator(SymbolTable())
    first = generator.generate(root)
    first_lines = first.splitlines()
    assert first_lines[0] == f"LOAD {immediate_value('b4')}"
    assert first_lines[2:4] == [first_lines[2], "MULT -1"]
    assert "STOP" in first_lines
    second = generator.generate(root)
    assert second.splitlines() == first_lines


def test_bad_identifier_in_tree_raises():
    root = Node("S")
    b = Node("B")
    g = Node("G")
    g.add_child(Node("t2", "x1"))
    g.add_child(Node("t1", "%"))
    f = Node("F")
    f.add_child(Node("t3", "A1"))
    g.add_child(f)
    b.add_child(g)
    root.add_child(b)
    with pytest.raises(CodeGenError):
        AsmGenerator(SymbolTable()).generate(root)


def test_write_asm_writes_generated_text(tmp_path):
    root = _tree("( # +2 $ +2 )\n")
    target = tmp_path / "out.asm"
    write_asm(root, SymbolTable(), target)
    assert target.read_text() == AsmGenerator(SymbolTable()).generate(root)


def test_write_asm_unopenable_path(tmp_path):
    root = _tree("( # +2 $ +2 )\n")
    with pytest.raises(CodeGenError):
        write_asm(root, SymbolTable(), tmp_path / "missing" / "out.asm")