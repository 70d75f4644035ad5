"""Convert trees to and from JSON-serializable structures.

This module provides `tree_to_json(tree)` which returns nested dicts/lists
in the shape a renderer consumes (`nodeType`, `children`, `leaf`,
`classes`, with `isCollapsed` inside the leaf). Optional fields that are
absent on the node are left out rather than written as `null`.
`tree_from_json(data)` reads the same shape back.

Both walk the tree with an explicit stack, so long dot chains do not run
into the interpreter's recursion limit. `dumps` goes through `json`, which
still recurses per nesting level.
"""

import json
from typing import Any, Dict
from tree_nodes import Leaf, NodeType, Tree


def _node_to_json(tree: Tree) -> Dict[str, Any]:
    data: Dict[str, Any] = {}
    if tree.node_type is not None:
        data["nodeType"] = {
            "name": tree.node_type.name,
            "sub": tree.node_type.sub,
            "sup": tree.node_type.sup,
        }
    data["children"] = []
    if tree.leaf is not None:
        data["leaf"] = {
            "data": tree.leaf.data,
            "isCollapsed": tree.leaf.is_collapsed,
        }
    if tree.classes is not None:
        data["classes"] = list(tree.classes)
    return data


def _node_from_json(data: Dict[str, Any]) -> Tree:
    node_type = data.get("nodeType")
    leaf = data.get("leaf")
    classes = data.get("classes")
    return Tree(
        node_type=(
            NodeType(
                node_type["name"], node_type.get("sub", ""), node_type.get("sup", "")
            )
            if node_type is not None
            else None
        ),
        leaf=(
            Leaf(leaf["data"], leaf.get("isCollapsed", False))
            if leaf is not None
            else None
        ),
        classes=list(classes) if classes is not None else None,
    )


def tree_to_json(tree: Tree) -> Dict[str, Any]:
    root = _node_to_json(tree)
    stack = [(tree, root)]
    while stack:
        node, data = stack.pop()
        for child in node.children:
            child_data = _node_to_json(child)
            data["children"].append(child_data)
            stack.append((child, child_data))
    return root


def tree_from_json(data: Dict[str, Any]) -> Tree:
    root = _node_from_json(data)
    stack = [(data, root)]
    while stack:
        node_data, node = stack.pop()
        for child_data in node_data.get("children", []):
            child = _node_from_json(child_data)
            node.children.append(child)
            stack.append((child_data, child))
    return root


def dumps(tree: Tree, indent: int = 2) -> str:
    """Serialize a tree to a JSON string."""
    return json.dumps(tree_to_json(tree), indent=indent, ensure_ascii=False)
