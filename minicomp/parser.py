"""Recursive-descent parser building a parse tree from scanned tokens."""

from __future__ import annotations

import os
from collections.abc import Sequence

from .scanner import scan_file
from .tokens import Token, TokenID
from .tree import Node

_EOF_TOKEN = Token(TokenID.EOF, "EOF", -1)


class ParseError(Exception):
    """Raised when the token stream does not match the grammar."""


def _empty(kind: str) -> Node:
    node = Node(kind)
    node.add_child(Node("EMPTY"))
    return node


class Parser:
    """Parses a token sequence according to the language grammar.

    S -> A ( B B )
    A -> " t2 | empty
    B -> S | C | D | E | G | empty
    C -> # t2 | ! F
    D -> $ F
    E -> ' F F F B
    F -> t2 | t3 | & F F
    G -> t2 % F
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._position = 0

    @property
    def _current(self) -> Token:
        if self._position < len(self._tokens):
            return self._tokens[self._position]
        return _EOF_TOKEN

    def _advance(self) -> None:
        if self._position < len(self._tokens):
            self._position += 1

    def _error(self, expected: str) -> ParseError:
        current = self._current
        return ParseError(
            f"PARSER ERROR: Expected {expected}, got '{current.text}' "
            f"on line {current.line}"
        )

    def _terminal(self, kind: str) -> Node:
        node = Node(kind, self._current.text)
        self._advance()
        return node

    def parse(self) -> Node:
        """Parse the whole token sequence and return the root S node."""
        self._position = 0
        root = self._s()
        if self._current.kind is not TokenID.EOF:
            raise self._error("End of file")
        return root

    def _s(self) -> Node:
        node = Node("S")
        node.add_child(self._a())
        if self._current.text != "(":
            raise self._error("( in S non-terminal grammar")
        node.add_child(self._terminal("t1"))
        node.add_child(self._b())
        if self._current.text != ")":
            node.add_child(self._b())
        else:
            node.add_child(_empty("B"))
        if self._current.text != ")":
            raise self._error("Expected ) at end of S production")
        node.add_child(self._terminal("t1"))
        return node

    def _a(self) -> Node:
        node = Node("A")
        if self._current.text == '"':
            node.add_child(self._terminal("t1"))
            if self._current.kind is not TokenID.T2:
                raise self._error("Needs t2_tk for non-terminal A grammar")
            node.add_child(self._terminal("t2"))
        else:
            node.add_child(Node("EMPTY"))
        return node

    def _b(self) -> Node:
        node = Node("B")
        current = self._current
        if current.text in ('"', "("):
            node.add_child(self._s())
        elif current.text in ("#", "!"):
            node.add_child(self._c())
        elif current.text == "$":
            node.add_child(self._d())
        elif current.text == "'":
            node.add_child(self._e())
        elif current.kind is TokenID.T2:
            node.add_child(self._g())
        elif current.text == ")":
            node.add_child(Node("EMPTY"))
        else:
            raise self._error(
                "Valid start of B production (one of: \", (, #, !, $, ', or t2 token)"
            )
        return node

    def _c(self) -> Node:
        node = Node("C")
        if self._current.text == "#":
            node.add_child(self._terminal("t1"))
            if self._current.kind is not TokenID.T2:
                raise self._error("Need t2_tk")
            node.add_child(self._terminal("t2"))
        elif self._current.text == "!":
            node.add_child(self._terminal("t1"))
            node.add_child(self._f())
        else:
            raise self._error("Need '#' or '!' for C non-terminal grammar")
        return node

    def _d(self) -> Node:
        node = Node("D")
        if self._current.text != "$":
            raise self._error("Need $ for D non-terminal grammar")
        node.add_child(self._terminal("t1"))
        node.add_child(self._f())
        return node

    def _e(self) -> Node:
        node = Node("E")
        if self._current.text != "'":
            raise self._error("Need ' for E non-terminal grammar")
        node.add_child(self._terminal("t1"))
        for _ in range(3):
            node.add_child(self._f())
        node.add_child(self._b())
        return node

    def _f(self) -> Node:
        node = Node("F")
        current = self._current
        if current.kind is TokenID.T2:
            node.add_child(self._terminal("t2"))
        elif current.kind is TokenID.T3:
            node.add_child(self._terminal("t3"))
        elif current.text == "&":
            node.add_child(self._terminal("t1"))
            node.add_child(self._f())
            node.add_child(self._f())
        else:
            raise self._error("Need t2_tk, t3_tk, or & for F non-termial grammar")
        return node

    def _g(self) -> Node:
        node = Node("G")
        if self._current.kind is not TokenID.T2:
            raise self._error("Need t2_tk for G non-terminal grammar")
        node.add_child(self._terminal("t2"))
        if self._current.text != "%":
            raise self._error("Need % for G non-terminal grammar")
        node.add_child(self._terminal("t1"))
        node.add_child(self._f())
        return node


def parse_tokens(tokens: Sequence[Token]) -> Node:
    """Parse a token sequence into a tree."""
    return Parser(tokens).parse()


def parse_file(path: str | os.PathLike[str]) -> Node:
    """Scan and parse a source file."""
    return parse_tokens(scan_file(path, 0))