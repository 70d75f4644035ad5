"""
Parser for the bracketed tree markup.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser over the
    grammar below, pulling tokens from the lexer with one token of lookahead
    (`self.current`).

        Node       := "[" "]" | "[" NodeType {"." NodeType} (NodeList | NodeData) "]"
        NodeType   := WORD [ (sub [sup]) | (sup [sub]) ]
        sub        := "_" WORD
        sup        := "^" WORD
        NodeList   := { Node }
        NodeData   := ( ["*"] WORD {WORD | DataSymbol} ) | "/"
        DataSymbol := "." | "*" | "/" | "_" | "^"

Key points:
- Whitespace is insignificant everywhere except inside NodeData. `accept()`
    and `expect()` skip one pending WHITESPACE token before matching;
    `advance()` consumes the lookahead as-is and is the only primitive the
    NodeData capture loop uses.
- Dot chains are shorthand for non-branching nodes: `[A.B.C x]` parses the
    same as `[A [B [C x]]]`. The content attaches to the last link and the
    outermost node is returned.
- Once NodeData has started, tokens are glued back together verbatim until
    the next `[`, `]` or end of input, so leaf text may contain stray symbols
    and internal whitespace.

Examples:
    - `[S [NP John] [VP.V runs]]`
    - `[X_1^2 /]`   (typed node with a null leaf)
    - `[VP* saw the dog]`   (collapsed subtree)
"""

from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Union
from tokens import Token, TokenType
from tree_nodes import NULL_DATA, Leaf, NodeType, Tree
from lexer import tokenize

# Token kinds that may start NodeData.
DATA_START = {
    TokenType.STAR,
    TokenType.DOT,
    TokenType.SLASH,
    TokenType.UNDERSCORE,
    TokenType.CARET,
    TokenType.WORD,
}

# Token kinds that end verbatim capture of NodeData.
DATA_END = {TokenType.LBRACKET, TokenType.RBRACKET, TokenType.EOF}


class TreeSyntaxError(SyntaxError):
    """Raised at the first token that does not fit the grammar."""

    def __init__(
        self,
        expected: Union[TokenType, str],
        found: TokenType,
        line: int = 0,
        column: int = 0,
        message: Optional[str] = None,
    ):
        self.expected = expected
        self.found = found
        self.line = line
        self.column = column
        super().__init__(
            f"Syntax error at line {line}, column {column}: "
            + (message or f"expected {expected}, got {found}")
        )


class Parser:
    def __init__(self, tokens: Iterable[Token]):
        self.tokens: Iterator[Token] = iter(tokens)
        self.current = next(self.tokens, Token(TokenType.EOF, None))

    def advance(self) -> Token:
        """Consume the lookahead verbatim and return it."""
        token = self.current
        # Past the end the lookahead stays on EOF.
        if token.type != TokenType.EOF:
            self.current = next(
                self.tokens,
                Token(TokenType.EOF, None, token.line, token.column, token.offset),
            )
        return token

    def skip_whitespace(self) -> None:
        """Skip a pending whitespace token. Runs are maximal, so one is enough."""
        if self.current.type == TokenType.WHITESPACE:
            self.advance()

    def accept(self, token_type: TokenType) -> Optional[Token]:
        """Skip whitespace, then consume the lookahead if it matches."""
        self.skip_whitespace()
        if self.current.type == token_type:
            return self.advance()
        return None

    def expect(
        self, token_type: TokenType, expected: Union[TokenType, str, None] = None
    ) -> Token:
        """Expect and consume token of given type."""
        token = self.accept(token_type)
        if token is None:
            raise self.error(expected or token_type)
        return token

    def error(self, expected: Union[TokenType, str]) -> TreeSyntaxError:
        return TreeSyntaxError(
            expected, self.current.type, self.current.line, self.current.column
        )

    def parse_node_type(self) -> NodeType:
        """Parse `WORD` with optional `_sub` and `^sup` in either order."""
        node_type = NodeType(self.expect(TokenType.WORD, "node type").value)

        if self.accept(TokenType.UNDERSCORE):
            node_type.sub = self.expect(TokenType.WORD, "subscript").value
            if self.accept(TokenType.CARET):
                node_type.sup = self.expect(TokenType.WORD, "superscript").value
        elif self.accept(TokenType.CARET):
            node_type.sup = self.expect(TokenType.WORD, "superscript").value
            if self.accept(TokenType.UNDERSCORE):
                node_type.sub = self.expect(TokenType.WORD, "subscript").value

        return node_type

    def parse_node_list(self) -> List[Tree]:
        """Parse zero or more nodes."""
        nodes: List[Tree] = []
        self.skip_whitespace()
        while self.current.type == TokenType.LBRACKET:
            nodes.append(self.parse_node())
            self.skip_whitespace()
        return nodes

    def parse_node_data(self) -> Leaf:
        """Parse leaf data: `/`, or an optional `*` and verbatim text."""
        if self.accept(TokenType.SLASH):
            return Leaf(NULL_DATA)

        is_collapsed = self.accept(TokenType.STAR) is not None
        parts = [self.expect(TokenType.WORD, "leaf data").value]

        # Verbatim capture: no whitespace skipping from here on.
        while self.current.type not in DATA_END:
            parts.append(self.advance().lexeme)

        return Leaf("".join(parts), is_collapsed)

    def parse_node(self) -> Tree:
        """Parse a bracketed node, desugaring any dot chain into nested nodes."""
        self.expect(TokenType.LBRACKET)

        self.skip_whitespace()
        if self.current.type != TokenType.WORD:
            # Totally empty node `[]`.
            self.expect(TokenType.RBRACKET, "node type or ']'")
            return Tree()

        chain = [self.parse_node_type()]
        while self.accept(TokenType.DOT):
            chain.append(self.parse_node_type())

        self.skip_whitespace()
        children: List[Tree] = []
        leaf: Optional[Leaf] = None
        if self.current.type == TokenType.LBRACKET:
            children = self.parse_node_list()
        elif self.current.type in DATA_START:
            leaf = self.parse_node_data()

        self.expect(TokenType.RBRACKET)

        # Build the chain bottom-up: the last link owns the content.
        node = Tree(node_type=chain[-1], children=children, leaf=leaf)
        for node_type in reversed(chain[:-1]):
            node = Tree(node_type=node_type, children=[node])
        return node

    def parse(self) -> Tree:
        """Parse a single root node followed by end of input."""
        try:
            root = self.parse_node()
        except RecursionError:
            raise TreeSyntaxError(
                "shallower nesting",
                self.current.type,
                self.current.line,
                self.current.column,
                "nesting too deep",
            ) from None
        self.expect(TokenType.EOF, "end of input")
        return root


def parse(text: str) -> Tree:
    """Parse markup text into a `Tree`, raising `TreeSyntaxError` on bad input."""
    return Parser(tokenize(text)).parse()
