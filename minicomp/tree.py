"""Parse tree nodes and tree printing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Node:
    """A parse tree node: a nonterminal or a terminal with its text."""

    kind: str
    text: str = ""
    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node | None) -> None:
        """Append a child; None is ignored."""
        if child is not None:
            self.children.append(child)


def _lines(node: Node, indent: int) -> Iterator[str]:
    label = f"{node.kind} {node.text}" if node.text else node.kind
    yield " " * indent + label
    for child in node.children:
        yield from _lines(child, indent + 4)


def format_tree(root: Node | None, indent: int = 0) -> str:
    """Render a tree, one node per line, children indented by four spaces."""
    if root is None:
        return ""
    return "".join(line + "\n" for line in _lines(root, indent))


def print_tree(root: Node | None, indent: int = 0) -> None:
    """Print a tree to standard output."""
    print(format_tree(root, indent), end="")