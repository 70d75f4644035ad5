import sys

import pytest

from parser import Parser, TreeSyntaxError, parse
from lexer import tokenize
from tokens import TokenType
from tree_nodes import NULL_DATA, Leaf, NodeType, Tree, TreeBuilder
from main import parse_text


@pytest.mark.parametrize(
    "text",
    [
        "[]",
        "[X]",
        "[X.X]",
        "[X_1^2]",
        "[X^2.X_1]",
        "[X data]",
        "  [  X  data  ]   ",
        "[X [X data] [Y data]]",
        "[X * this is data.]",
        "[XX.YY.ZZ* more data]",
        "[XX /]",
        "[X [XX [] [Y [Z data] ] ] [] ]",
        "[X this_data ^ has./punct* ]",
        "[X*X.X looks incorect, but is valid]",
    ],
)
def test_parser_accepts(text):
    assert isinstance(parse(text), Tree)


@pytest.mark.parametrize(
    "text",
    [
        "[",
        "[[]",
        "[]]",
        "X[]",
        "[X.]",
        "[X X []]",
        "[X [] X]",
        "[X /this_data ^starts with.punct* ]",
        "[/ data]",
        "",
        "[X*]",
        "[X_]",
        "[X^1^2]",
    ],
)
def test_parser_rejects(text):
    with pytest.raises(TreeSyntaxError):
        parse(text)


def test_empty_node_has_no_type():
    tree = parse("[]")
    assert tree.node_type is None
    assert tree.children == []
    assert tree.leaf is None
    assert tree.is_empty


def test_typed_node_without_content():
    tree = parse("[X]")
    assert tree.node_type == NodeType("X")
    assert tree.children == []
    assert tree.leaf is None


def test_dot_chain_desugars_into_nested_nodes():
    tree = parse("[X.Y]")
    assert tree.node_type.name == "X"
    assert len(tree.children) == 1
    assert tree.leaf is None
    child = tree.children[0]
    assert child.node_type.name == "Y"
    assert child.children == []
    assert child.leaf is None


def test_dot_chain_matches_explicit_nesting():
    assert parse("[A.B.C [D x] [E y]]") == parse("[A [B [C [D x] [E y]]]]")
    assert parse("[A.B* hidden]") == parse("[A [B * hidden]]")


def test_scripts_in_either_order():
    expected = NodeType("X", sub="1", sup="2")
    assert parse("[X_1^2]").node_type == expected
    assert parse("[X^2_1]").node_type == expected
    assert parse("[X^2]").node_type == NodeType("X", sup="2")


def test_scripts_on_chain_links():
    tree = parse("[X^2.X_1]")
    assert tree.node_type == NodeType("X", sup="2")
    assert tree.children[0].node_type == NodeType("X", sub="1")


def test_collapsed_leaf():
    assert parse("[X* data]").leaf == Leaf("data", is_collapsed=True)
    assert parse("[X * this is data.]").leaf == Leaf("this is data.", True)


def test_null_leaf():
    leaf = parse("[X /]").leaf
    assert leaf.data == NULL_DATA
    assert leaf.is_collapsed is False


def test_leaf_data_is_captured_verbatim():
    tree = parse("[X this_data ^ has./punct* ]")
    assert tree.leaf.data == "this_data ^ has./punct* "
    assert tree.leaf.is_collapsed is False


def test_leaf_data_keeps_internal_whitespace_runs():
    tree = parse("[X a  b\n\tc]")
    assert tree.leaf.data == "a  b\n\tc"


def test_collapsed_data_may_start_right_after_star():
    tree = parse("[X*X.X looks incorect, but is valid]")
    assert tree.node_type == NodeType("X")
    assert tree.leaf == Leaf("X.X looks incorect, but is valid", True)


def test_nested_node_list_shape():
    expected = (
        TreeBuilder()
        .name("X")
        .add(
            TreeBuilder().name("XX").add(
                TreeBuilder(),
                TreeBuilder().name("Y").add(TreeBuilder().name("Z").data("data")),
            ),
            TreeBuilder(),
        )
        .build()
    )
    assert parse("[X [XX [] [Y [Z data] ] ] [] ]") == expected


def test_chain_content_attaches_to_last_link():
    tree = parse("[XX.YY.ZZ* more data]")
    assert tree.leaf is None
    assert tree.children[0].leaf is None
    last = tree.children[0].children[0]
    assert last.node_type.name == "ZZ"
    assert last.leaf == Leaf("more data", True)


def test_parser_never_sets_classes():
    tree = parse("[S [NP John] [VP.V runs]]")
    stack = [tree]
    while stack:
        node = stack.pop()
        assert node.classes is None
        stack.extend(node.children)


def test_parser_accepts_lazy_token_stream_and_list():
    text = "[S [NP John] [VP runs]]"
    assert Parser(tokenize(text)).parse() == parse_text(text)


def test_error_reports_found_token_and_position():
    with pytest.raises(TreeSyntaxError) as exc_info:
        parse("[X.]")
    err = exc_info.value
    assert err.found == TokenType.RBRACKET
    assert err.expected == "node type"
    assert (err.line, err.column) == (1, 4)
    assert "line 1, column 4" in str(err)


def test_error_position_on_later_line():
    with pytest.raises(TreeSyntaxError) as exc_info:
        parse("[X\n  [Y a]\n  Z]")
    err = exc_info.value
    assert err.expected == TokenType.RBRACKET
    assert err.found == TokenType.WORD
    assert (err.line, err.column) == (3, 3)


def test_trailing_input_is_rejected():
    with pytest.raises(TreeSyntaxError) as exc_info:
        parse("[X] [Y]")
    assert exc_info.value.expected == "end of input"
    assert exc_info.value.found == TokenType.LBRACKET


def test_syntax_error_is_builtin_syntax_error():
    with pytest.raises(SyntaxError):
        parse("X[]")


def test_parses_do_not_share_subtrees():
    first = parse("[S [NP a]]")
    second = parse("[S [NP a]]")
    assert first == second
    assert first.children[0] is not second.children[0]


def test_moderate_nesting_parses():
    depth = 100
    tree = parse("[X " * depth + "]" * depth)
    for _ in range(depth - 1):
        assert len(tree.children) == 1
        tree = tree.children[0]
    assert tree.children == []


def test_nesting_past_recursion_limit_raises_syntax_error():
    depth = sys.getrecursionlimit() * 2
    with pytest.raises(TreeSyntaxError) as exc_info:
        parse("[X " * depth + "]" * depth)
    err = exc_info.value
    assert err.line == 1
    assert "nesting too deep" in str(err)
