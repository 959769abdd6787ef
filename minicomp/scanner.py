"""Scanner: turns source text into tokens."""

from __future__ import annotations

import os

from .tokens import Token, TokenID

_SPECIALS = frozenset("!\"#$%&()'")
_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


class ScannerError(Exception):
    """Raised when the input cannot be scanned."""


def _is_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_digit(c: str) -> bool:
    return c in _DIGITS


def remove_comments(line: str) -> str:
    """Remove the first comment delimited by a pair of '*' from a line."""
    start = line.find("*")
    if start == -1:
        return line
    end = line.find("*", start + 1)
    if end == -1:
        return line
    return line[:start] + line[end + 1:]


def is_token_one(word: str) -> bool:
    """True if the word holds only operator characters and whitespace."""
    return all(c in _SPECIALS or c in _WHITESPACE for c in word)


def is_token_two(word: str) -> bool:
    """True if the word is '+' followed by digits."""
    return word.startswith("+") and all(_is_digit(c) for c in word[1:])


def is_token_three(word: str) -> bool:
    """True if the word is a letter followed by digits."""
    return bool(word) and _is_alpha(word[0]) and all(_is_digit(c) for c in word[1:])


def split_tokens(line: str) -> list[str]:
    """Split a line into candidate token words."""
    words: list[str] = []
    current = ""

    def flush() -> None:
        nonlocal current
        if current:
            words.append(current)
            current = ""

    for c in line:
        if c in _WHITESPACE:
            flush()
        elif c in _SPECIALS:
            flush()
            words.append(c)
        elif c == "+":
            flush()
            current = c
        elif _is_alpha(c):
            if not current or current == "+" or _is_digit(current[-1]):
                flush()
            current += c
        elif _is_digit(c):
            if current and _is_alpha(current[-1]) and len(current) > 1:
                flush()
            current += c
        else:
            raise ScannerError(f"SCANNER ERROR: {c}, {line}")
    flush()
    return words


def _classify(word: str, line: int) -> Token | None:
    if len(word) == 1:
        if not is_token_one(word):
            raise ScannerError(f"SCANNER ERROR: {word}, {line}")
        return Token(TokenID.T1, word, line)
    if word[0] == "+":
        if not is_token_two(word):
            raise ScannerError(f"SCANNER ERROR: {word}, {line}")
        return Token(TokenID.T2, word, line)
    if _is_alpha(word[0]):
        if not is_token_three(word):
            raise ScannerError(f"SCANNER ERROR: {word}, {line}")
        return Token(TokenID.T3, word, line)
    return None


def scan(text: str, start_line: int = 0) -> list[Token]:
    """Scan source text into tokens, ending with an EOF token.

    Line numbers count from start_line + 1.
    """
    if not text:
        raise ScannerError("File missing data")
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    tokens: list[Token] = []
    line = start_line
    for content in lines:
        line += 1
        for word in split_tokens(remove_comments(content)):
            token = _classify(word, line)
            if token is not None:
                tokens.append(token)
    tokens.append(Token(TokenID.EOF, "EOF", line))
    return tokens


def scan_file(path: str | os.PathLike[str], start_line: int = 0) -> list[Token]:
    """Read a file and scan its contents."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise ScannerError(f"{os.fspath(path)} couldn't open") from exc
    return scan(text, start_line)