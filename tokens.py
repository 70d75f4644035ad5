"""Token definitions for the tree-markup lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type, the exact
text it covers and its source position. The seven symbol kinds use their own
character as the enum value, so `TokenType("[")` is `TokenType.LBRACKET`.
"""

from __future__ import annotations
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Symbols
    DOT = "."
    STAR = "*"
    SLASH = "/"
    UNDERSCORE = "_"
    CARET = "^"
    LBRACKET = "["
    RBRACKET = "]"

    # Runs
    WORD = "WORD"
    WHITESPACE = "WHITESPACE"

    # Special
    EOF = "EOF"

    def __str__(self) -> str:
        if self in SYMBOLS.values():
            return repr(self.value)
        return self.name


# Single-character symbol tokens, keyed by their character.
SYMBOLS = {
    ".": TokenType.DOT,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "_": TokenType.UNDERSCORE,
    "^": TokenType.CARET,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str] = None
    line: int = 0
    column: int = 0
    offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        """The exact source text covered by this token."""
        if self.value is None:
            return ""
        return self.value
