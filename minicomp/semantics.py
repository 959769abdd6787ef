"""Static semantics: a symbol table of declared identifiers."""

from __future__ import annotations

from .tree import Node


class SemanticError(Exception):
    """Raised when an identifier is redeclared or used undeclared."""


def _declares(node: Node) -> bool:
    if not node.children:
        return False
    first = node.children[0]
    if node.kind == "A":
        return first.kind == "t1" and first.text in ('"', "#")
    if node.kind == "C":
        return first.kind == "t1" and first.text == "#"
    return False


def _uses(node: Node) -> bool:
    if not node.children:
        return False
    first = node.children[0]
    if node.kind == "D":
        return first.kind == "t1" and first.text == "$"
    if node.kind == "G":
        return first.kind == "t2"
    return False


class SymbolTable:
    """Ordered set of declared identifiers."""

    def __init__(self) -> None:
        self.symbols: list[str] = []

    def verify(self, name: str) -> bool:
        """True if the name is in the table."""
        return name in self.symbols

    def insert(self, name: str) -> bool:
        """Add a name; return False if it was already present."""
        if self.verify(name):
            return False
        self.symbols.append(name)
        return True

    def check_tree(self, root: Node | None) -> None:
        """Record declarations and check uses throughout a parse tree."""
        if root is None:
            return
        identifiers = [c.text for c in root.children if c.kind == "t2"]
        if _declares(root):
            for name in identifiers:
                if not self.insert(name):
                    raise SemanticError(
                        f"Error: {name} is already inserted into table"
                    )
        elif _uses(root):
            for name in identifiers:
                if not self.verify(name):
                    raise SemanticError(f"Error: {name} is not in the table")
        for child in root.children:
            self.check_tree(child)

    def format_table(self) -> str:
        """Render the table as printed after all checks."""
        return "Table is: \n" + "".join(f"{name}\n" for name in self.symbols)