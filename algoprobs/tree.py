"""A general tree whose nodes hold any number of children."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, TextIO


@dataclass(eq=False)
class TreeNode:
    """A node of a tree with an ordered list of children."""

    value: Any
    children: list[Optional["TreeNode"]] = field(default_factory=list)

    def add_child(self, child: Optional["TreeNode"]) -> None:
        """Append ``child`` to this node's children."""
        self.children.append(child)


def connect_tree_nodes(parent: Optional[TreeNode], child: Optional[TreeNode]) -> None:
    """Add ``child`` to ``parent``'s children, if there is a parent."""
    if parent is not None:
        parent.add_child(child)


def describe_node(node: Optional[TreeNode]) -> str:
    """Return a description of a node and the values of its children."""
    if node is None:
        return "this node is None.\n\n"
    children = "".join(f"{child.value}\t" for child in node.children if child is not None)
    return (
        f"value of this node is: {node.value}.\n"
        "its children is as the following:\n"
        f"{children}\n\n"
    )


def print_tree(root: Optional[TreeNode], file: Optional[TextIO] = None) -> None:
    """Write the description of every node, in pre-order, to ``file``."""
    stack: list[Optional[TreeNode]] = [root]
    while stack:
        node = stack.pop()
        print(describe_node(node), end="", file=file)
        if node is not None:
            stack.extend(reversed(node.children))