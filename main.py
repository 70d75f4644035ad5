from __future__ import annotations
from typing import List
from lexer import Lexer
from tokens import Token
from tree_nodes import Tree
from parser import Parser
from pretty_printer import PrettyPrinter
from tree_json import dumps


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> Tree:
    """Parse tokens into a tree."""
    parser = Parser(tokens)
    return parser.parse()


def parse_text(text: str) -> Tree:
    """Lex and parse markup text into a tree."""
    return parse_tokens(lex(text))


def process_markup(
    text: str,
    *,
    print_tokens: bool = False,
    print_tree: bool = True,
    print_json: bool = False,
) -> bool:
    """Process one markup string: lex, parse and optionally print each stage.

    Syntax errors are reported on stdout instead of raised. Returns whether
    the markup parsed.
    """
    tokens = lex(text)
    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens[:50]):
            print(f"  {i:3}: {token}")
        if len(tokens) > 50:
            print(f"  ... and {len(tokens) - 50} more")

    try:
        tree = parse_tokens(tokens)
    except SyntaxError as e:
        print(f"✗ Syntax error: {e}")
        return False

    if print_tree:
        print("\nTree:")
        print(PrettyPrinter.print_tree(tree))

    if print_json:
        print("\nJSON:")
        print(dumps(tree))

    return True
