"""Assembly code generation from a checked parse tree."""

from __future__ import annotations

import os
import re
from collections.abc import Callable

from .semantics import SymbolTable
from .tree import Node

_LEADING_DIGITS = re.compile(r"[0-9]*")


class CodeGenError(Exception):
    """Raised when a tree cannot be turned into assembly code."""


def identifier_name(token: str) -> str:
    """Turn a t2 token such as '+12' into its storage name 'p12'."""
    if not token or token[0] != "+":
        raise CodeGenError(
            "Expected a plus sign for the first character of a t2 token."
        )
    return "p" + token[1:]


def immediate_value(token: str) -> int:
    """Turn a t3 token into an integer: upper case is positive, lower case negative."""
    first = token[:1]
    if "A" <= first <= "Z":
        sign = 1
    elif "a" <= first <= "z":
        sign = -1
    else:
        raise CodeGenError("Expected a letter for the first character of a t3 token.")
    digits = _LEADING_DIGITS.match(token, 1).group()
    return sign * int("0" + digits)


class AsmGenerator:
    """Generates assembly text for a parse tree."""

    def __init__(self, table: SymbolTable) -> None:
        self.table = table
        self._temp_count = 0
        self._variables: list[str] = []
        self._lines: list[str] = []
        self._handlers: dict[str, Callable[[Node], None]] = {
            "S": self._s,
            "A": self._a,
            "B": self._b,
            "C": self._c,
            "D": self._d,
            "E": self._e,
            "G": self._g,
        }

    def generate(self, root: Node | None) -> str:
        """Return the assembly program for a tree, ending with STOP and storage."""
        self._temp_count = 0
        self._variables = []
        self._lines = []
        if root is None:
            return ""
        self._visit(root)
        self._emit("STOP")
        self._lines.extend(f"{name} 0" for name in self._variables)
        return "".join(line + "\n" for line in self._lines)

    def _emit(self, line: str) -> None:
        self._lines.append(line)

    def _new_temp(self) -> str:
        name = f"temp{self._temp_count}"
        self._temp_count += 1
        self._variables.append(name)
        return name

    def _visit(self, node: Node | None) -> None:
        if node is None:
            return
        handler = self._handlers.get(node.kind)
        if handler is not None:
            handler(node)

    def _s(self, node: Node) -> None:
        for child in node.children:
            self._visit(child)

    def _a(self, node: Node) -> None:
        children = node.children
        if not children or children[0].kind == "EMPTY":
            return
        if children[0].text == '"' and len(children) > 1 and children[1].kind == "t2":
            name = identifier_name(children[1].text)
            self._variables.append(name)
            self._emit("LOAD 0")
            self._emit(f"STORE {name}")

    def _b(self, node: Node) -> None:
        if not node.children or node.children[0].kind == "EMPTY":
            return
        self._visit(node.children[0])

    def _c(self, node: Node) -> None:
        children = node.children
        if not children:
            return
        if children[0].text == "#":
            if len(children) > 1 and children[1].kind == "t2":
                name = identifier_name(children[1].text)
                self._variables.append(name)
                self._emit(f"READ {name}")
        elif children[0].text == "!" and len(children) > 1:
            operand = children[1]
            if operand.children and operand.children[0].kind == "t2":
                name = identifier_name(operand.children[0].text)
                self._emit(f"LOAD {name}")
                self._emit("MULT -1")
                self._emit(f"STORE {name}")
            else:
                temp = self._new_temp()
                self._f(operand, temp)
                self._emit(f"STORE {temp}")
                self._emit(f"LOAD {temp}")
                self._emit("MULT -1")
                self._emit(f"STORE {temp}")

    def _d(self, node: Node) -> None:
        children = node.children
        if not children or children[0].text != "$" or len(children) < 2:
            return
        operand = children[1]
        first = operand.children[0] if operand.children else None
        if first is not None and first.kind == "t2":
            self._emit(f"WRITE {identifier_name(first.text)}")
        elif first is not None and first.kind == "t3":
            self._emit(f"LOAD {immediate_value(first.text)}")
            self._emit("WRITE ")
        else:
            temp = self._new_temp()
            self._f(operand, temp)
            self._emit(f"STORE {temp}")
            self._emit(f"WRITE {temp}")

    def _e(self, node: Node) -> None:
        children = node.children
        if not children or children[0].text != "'" or len(children) < 5:
            return
        first = self._new_temp()
        self._f(children[1], first)
        self._emit(f"STORE {first}")

        second = self._new_temp()
        self._f(children[2], second)
        self._emit(f"STORE {second}")

        start = f"start{self._temp_count}"
        end = f"end{self._temp_count}"
        self._temp_count += 1

        counter = self._new_temp()
        self._f(children[3], counter)
        self._emit(f"STORE {counter}")

        self._emit(f"LOAD {counter}")
        self._emit(f"BRZNEG {end}")
        self._emit(f"LOAD {first}")
        self._emit(f"SUB {second}")
        self._emit(f"BRZNEG {end}")
        self._emit(f"{start}: NOOP")

        self._visit(children[4])

        self._emit(f"LOAD {counter}")
        self._emit("SUB 1")
        self._emit(f"STORE {counter}")
        self._emit(f"BRPOS {start}")
        self._emit(f"{end}: NOOP")

    def _f(self, node: Node, target: str) -> None:
        children = node.children
        if not children:
            return
        first = children[0]
        if first.kind == "t2":
            self._emit(f"LOAD {identifier_name(first.text)}")
        elif first.kind == "t3":
            self._emit(f"LOAD {immediate_value(first.text)}")
        elif first.kind == "t1" and first.text == "&" and len(children) >= 3:
            left = self._new_temp()
            self._f(children[1], left)
            self._emit(f"STORE {left}")
            right = self._new_temp()
            self._f(children[2], right)
            self._emit(f"STORE {right}")
            self._emit(f"LOAD {left}")
            self._emit(f"ADD {right}")
            self._emit(f"STORE {target}")

    def _g(self, node: Node) -> None:
        children = node.children
        if len(children) < 3 or children[1].text != "%":
            return
        target = identifier_name(children[0].text)
        if target not in self._variables:
            self._variables.append(target)
        self._f(children[2], target)
        self._emit(f"STORE {target}")


def write_asm(
    root: Node | None, table: SymbolTable, path: str | os.PathLike[str]
) -> None:
    """Generate assembly for a tree and write it to a file."""
    try:
        handle = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise CodeGenError(
            "Error: Could not open output file for assembly code creation."
        ) from exc
    with handle:
        handle.write(AsmGenerator(table).generate(root))