"""A plain binary tree node with helpers to connect, describe and walk trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional, TextIO


@dataclass(eq=False)
class BinaryTreeNode:
    """A node of a binary tree."""

    value: Any
    left: Optional["BinaryTreeNode"] = None
    right: Optional["BinaryTreeNode"] = None


def connect_tree_nodes(
    parent: Optional[BinaryTreeNode],
    left: Optional[BinaryTreeNode],
    right: Optional[BinaryTreeNode],
) -> None:
    """Attach ``left`` and ``right`` as the children of ``parent`` (if any)."""
    if parent is not None:
        parent.left = left
        parent.right = right


def describe_node(node: Optional[BinaryTreeNode]) -> str:
    """Return a multi-line description of a node and its immediate children."""
    if node is None:
        return "this node is None.\n\n"
    lines = [f"value of this node is: {node.value}"]
    if node.left is not None:
        lines.append(f"value of its left child is: {node.left.value}.")
    else:
        lines.append("left child is None.")
    if node.right is not None:
        lines.append(f"value of its right child is: {node.right.value}.")
    else:
        lines.append("right child is None.")
    return "\n".join(lines) + "\n\n"


def iter_preorder(root: Optional[BinaryTreeNode]) -> Iterator[BinaryTreeNode]:
    """Yield the nodes of the tree in pre-order (root, left, right)."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def print_tree(root: Optional[BinaryTreeNode], file: Optional[TextIO] = None) -> None:
    """Write the description of every node, in pre-order, to ``file``."""
    if root is None:
        print(describe_node(None), end="", file=file)
        return
    for node in iter_preorder(root):
        print(describe_node(node), end="", file=file)