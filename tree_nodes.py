"""Tree node definitions for parsed markup.

This module defines the dataclasses produced by the parser:

- `NodeType`: the label of a node, a base name plus optional subscript and
    superscript (both default to the empty string).
- `Leaf`: data attached to a terminal node, with a flag marking a collapsed
    ("hidden") subtree.
- `Tree`: a node with an optional type, ordered children, an optional leaf
    and optional style classes.

Conventions:
- A `Tree` without a `node_type` is an empty node (`[]`), not to be confused
    with a null leaf, whose data is `NULL_DATA`.
- A node has either children or a leaf, never both; the grammar guarantees it.
- Nodes are plain mutable dataclasses. Consumers such as a renderer may hang
    their own attributes (measured sizes, positions) on them.
- The generated `__eq__` and `__repr__` recurse once per level, so trees
    nested deeper than the interpreter recursion limit cannot be compared or
    printed; walk such trees with an explicit stack, as `tree_json` does.
"""

from __future__ import annotations
import copy
from dataclasses import dataclass, field
from typing import List, Optional

# Data of a `/` leaf.
NULL_DATA = "∅"


@dataclass
class NodeType:
    name: str
    sub: str = ""
    sup: str = ""


@dataclass
class Leaf:
    data: str
    is_collapsed: bool = False


@dataclass
class Tree:
    node_type: Optional[NodeType] = None
    children: List[Tree] = field(default_factory=list)
    leaf: Optional[Leaf] = None
    # Reserved for downstream styling; the parser never sets it.
    classes: Optional[List[str]] = None

    @property
    def is_empty(self) -> bool:
        return self.node_type is None and not self.children and self.leaf is None


class TreeBuilder:
    """Fluent builder for trees, mostly useful for writing expected values in tests.

    Example:
        TreeBuilder().name("S").add(
            TreeBuilder().name("NP").data("John"),
            TreeBuilder().name("VP").data("runs"),
        ).build()
    """

    def __init__(self):
        self.tree = Tree()

    def _node_type(self) -> NodeType:
        if self.tree.node_type is None:
            self.tree.node_type = NodeType("")
        return self.tree.node_type

    def _leaf(self) -> Leaf:
        if self.tree.leaf is None:
            self.tree.leaf = Leaf("")
        return self.tree.leaf

    def name(self, name: str) -> TreeBuilder:
        self._node_type().name = name
        return self

    def sub(self, sub: str) -> TreeBuilder:
        self._node_type().sub = sub
        return self

    def sup(self, sup: str) -> TreeBuilder:
        self._node_type().sup = sup
        return self

    def data(self, data: str) -> TreeBuilder:
        self._leaf().data = data
        return self

    def collapse(self, is_collapsed: bool = True) -> TreeBuilder:
        self._leaf().is_collapsed = is_collapsed
        return self

    def add(self, *builders: TreeBuilder) -> TreeBuilder:
        for builder in builders:
            self.tree.children.append(builder.build())
        return self

    def build(self) -> Tree:
        """Return a fresh copy, so one builder can be added in several places."""
        return copy.deepcopy(self.tree)
