"""
Lexer for the bracketed tree markup.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms a markup string into a stream of `Token` objects defined in
    `tokens.py`.
- It recognizes the seven one-character symbols `. * / _ ^ [ ]`, maximal runs
    of whitespace and maximal runs of anything else (words). Nothing is
    skipped: whitespace becomes a token of its own because the parser needs
    it verbatim inside leaf data.

Examples:
    Input:  "[NP_1 the dog]"
    Tokens: [LBRACKET, WORD('NP'), UNDERSCORE, WORD('1'), WHITESPACE(' '),
             WORD('the'), WHITESPACE(' '), WORD('dog'), RBRACKET, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- `tokens()` is a generator, so a parser can pull tokens lazily; `tokenize()`
    materializes the same sequence into a list.
- Any input is accepted. Words may contain arbitrary Unicode, including
    punctuation outside the symbol set.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
from tokens import SYMBOLS, Token, TokenType


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def is_word_char(self, char: Optional[str]) -> bool:
        return char is not None and char not in SYMBOLS and not char.isspace()

    def whitespace(self) -> str:
        """Consume a maximal run of whitespace."""
        result = []
        while self.current_char is not None and self.current_char.isspace():
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def word(self) -> str:
        """Consume a maximal run of non-symbol, non-whitespace characters."""
        result = []
        while self.is_word_char(self.current_char):
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        if self.current_char is None:
            return Token(TokenType.EOF, None, self.line, self.column, self.pos)

        line, column, offset = self.line, self.column, self.pos

        if self.current_char in SYMBOLS:
            char = self.current_char
            self.advance()
            return Token(SYMBOLS[char], char, line, column, offset)

        if self.current_char.isspace():
            return Token(TokenType.WHITESPACE, self.whitespace(), line, column, offset)

        return Token(TokenType.WORD, self.word(), line, column, offset)

    def tokens(self) -> Iterator[Token]:
        """Yield tokens lazily, ending with a single EOF token."""
        while True:
            token = self.get_next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        return list(self.tokens())


def tokenize(text: str) -> Iterator[Token]:
    """Lazily tokenize `text`. Each call scans independently."""
    return Lexer(text).tokens()
