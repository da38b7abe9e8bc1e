"""Root-to-leaf paths with a given sum, and flattening a search tree into a sorted list."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Optional

from algoprobs.binary_tree import BinaryTreeNode


def find_paths(root: Optional[BinaryTreeNode], expected_sum: Any) -> list[list[Any]]:
    """Return every root-to-leaf path whose values add up to ``expected_sum``.

    Paths are lists of node values from the root down to a leaf, given in the
    order a left-first depth-first walk reaches their leaves. An empty tree
    has no paths.
    """
    found: list[list[Any]] = []
    if root is None:
        return found

    path: list[Any] = []

    def walk(node: BinaryTreeNode, current_sum: Any) -> None:
        current_sum += node.value
        path.append(node.value)
        is_leaf = node.left is None and node.right is None
        if is_leaf and current_sum == expected_sum:
            found.append(list(path))
        if node.left is not None:
            walk(node.left, current_sum)
        if node.right is not None:
            walk(node.right, current_sum)
        path.pop()

    walk(root, 0)
    return found


def convert_to_linked_list(root: Optional[BinaryTreeNode]) -> Optional[BinaryTreeNode]:
    """Turn a binary search tree into a sorted doubly linked list, in place.

    Each node's ``left`` becomes the link to the previous node and ``right``
    the link to the next one. Returns the head of the list, or None for an
    empty tree.
    """
    last: Optional[BinaryTreeNode] = None

    def convert(node: BinaryTreeNode) -> None:
        nonlocal last
        if node.left is not None:
            convert(node.left)
        node.left = last
        if last is not None:
            last.right = node
        last = node
        if node.right is not None:
            convert(node.right)

    if root is None:
        return None
    convert(root)

    head = last
    while head is not None and head.left is not None:
        head = head.left
    return head


def iter_forward(head: Optional[BinaryTreeNode]) -> Iterator[Any]:
    """Yield the values of a doubly linked list from ``head`` following ``right`` links."""
    node = head
    while node is not None:
        yield node.value
        node = node.right


def iter_backward(tail: Optional[BinaryTreeNode]) -> Iterator[Any]:
    """Yield the values of a doubly linked list from ``tail`` following ``left`` links."""
    node = tail
    while node is not None:
        yield node.value
        node = node.left