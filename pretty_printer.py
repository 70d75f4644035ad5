"""Pretty-printer for parsed trees.

Provides two renderings:

- `PrettyPrinter.print_tree(tree, indent, prefix)` returns a readable
    multi-line outline, one node per line. It is intended for debugging and
    tests.
- `PrettyPrinter.print_markup(tree)` writes the tree back as bracket
    markup in a canonical spacing. Chains come out expanded (`[A [B x]]`
    rather than `[A.B x]`); the result parses back to an equal tree. Untyped
    nodes with children or a leaf, which only hand-built trees can have,
    raise `ValueError`. Both printers recurse once per nesting level.

Examples:
    PrettyPrinter.print_tree(parse("[S [NP John] [VP runs]]"))
"""

from __future__ import annotations
from tree_nodes import NULL_DATA, NodeType, Tree


class PrettyPrinter:
    @staticmethod
    def format_node_type(node_type: NodeType) -> str:
        text = node_type.name
        if node_type.sub:
            text += f"_{node_type.sub}"
        if node_type.sup:
            text += f"^{node_type.sup}"
        return text

    @staticmethod
    def print_tree(tree: Tree, indent: int = 0, prefix: str = "") -> str:
        """Pretty print a tree and return it as a string."""
        lines = []
        indent_str = " " * indent

        label = (
            PrettyPrinter.format_node_type(tree.node_type)
            if tree.node_type is not None
            else "Empty"
        )
        if tree.leaf is not None:
            collapsed = " (collapsed)" if tree.leaf.is_collapsed else ""
            label += f" = {tree.leaf.data!r}{collapsed}"
        lines.append(f"{indent_str}{prefix}{label}")

        for child in tree.children:
            lines.append(PrettyPrinter.print_tree(child, indent + 2))

        return "\n".join(lines)

    @staticmethod
    def print_markup(tree: Tree) -> str:
        """Render a tree as bracket markup."""
        if tree.node_type is None:
            if tree.children or tree.leaf is not None:
                raise ValueError("untyped node with content has no markup form")
            return "[]"

        parts = [PrettyPrinter.format_node_type(tree.node_type)]
        if tree.leaf is not None:
            if tree.leaf.data == NULL_DATA and not tree.leaf.is_collapsed:
                parts.append("/")
            elif tree.leaf.is_collapsed:
                parts.append(f"* {tree.leaf.data}")
            else:
                parts.append(tree.leaf.data)
        parts.extend(PrettyPrinter.print_markup(child) for child in tree.children)
        return "[" + " ".join(parts) + "]"
