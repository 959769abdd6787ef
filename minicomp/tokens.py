"""Token kinds and the tokens produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenID(Enum):
    """Kinds of tokens in the language."""

    T1 = "t1_tk"
    T2 = "t2_tk"
    T3 = "t3_tk"
    EOF = "EOFTk"


@dataclass(frozen=True)
class Token:
    """A scanned token: its kind, its text and the line it came from."""

    kind: TokenID
    text: str
    line: int

    def kind_name(self) -> str:
        """Return the printable name of this token's kind."""
        return self.kind.value