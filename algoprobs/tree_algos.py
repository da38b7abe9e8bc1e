"""Binary tree puzzles: subtree matching, mirroring, level order and reconstruction."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any, Optional

from algoprobs.binary_tree import BinaryTreeNode

_EPSILON = 0.0000001


def _equal(first: Any, second: Any) -> bool:
    return -_EPSILON < first - second < _EPSILON


def _matches_at(
    root1: Optional[BinaryTreeNode], root2: Optional[BinaryTreeNode]
) -> bool:
    """Return whether ``root2`` matches the top of the tree at ``root1``."""
    if root2 is None:
        return True
    if root1 is None:
        return False
    if not _equal(root1.value, root2.value):
        return False
    return _matches_at(root1.left, root2.left) and _matches_at(root1.right, root2.right)


def has_subtree(
    root1: Optional[BinaryTreeNode], root2: Optional[BinaryTreeNode]
) -> bool:
    """Return whether the tree ``root2`` appears inside the tree ``root1``.

    Values are compared with a small tolerance. An empty tree on either side
    gives False.
    """
    if root1 is None or root2 is None:
        return False
    if _equal(root1.value, root2.value) and _matches_at(root1, root2):
        return True
    return has_subtree(root1.left, root2) or has_subtree(root1.right, root2)


def mirror_recursively(root: Optional[BinaryTreeNode]) -> None:
    """Turn the tree into its mirror image in place, recursively."""
    if root is None:
        return
    root.left, root.right = root.right, root.left
    mirror_recursively(root.left)
    mirror_recursively(root.right)


def mirror_iteratively(root: Optional[BinaryTreeNode]) -> None:
    """Turn the tree into its mirror image in place, using an explicit stack."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)


def level_order(root: Optional[BinaryTreeNode]) -> list[Any]:
    """Return the tree's values from top to bottom, left to right within a level."""
    values: list[Any] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        values.append(node.value)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return values


def construct(
    preorder: Sequence[Any], inorder: Sequence[Any]
) -> Optional[BinaryTreeNode]:
    """Rebuild a binary tree from its pre-order and in-order walks.

    Returns None for empty walks. Raises ``ValueError`` when the walks cannot
    belong to the same tree.
    """
    if not preorder or not inorder:
        return None
    if len(preorder) != len(inorder):
        raise ValueError("Invalid input")

    def build(pre_start: int, pre_end: int, in_start: int, in_end: int) -> BinaryTreeNode:
        root_value = preorder[pre_start]
        root = BinaryTreeNode(root_value)

        if pre_start == pre_end:
            if in_start == in_end and inorder[in_start] == root_value:
                return root
            raise ValueError("Invalid input")

        root_index = next(
            (i for i in range(in_start, in_end + 1) if inorder[i] == root_value),
            None,
        )
        if root_index is None:
            raise ValueError("Invalid input")

        left_length = root_index - in_start
        left_pre_end = pre_start + left_length
        if left_length > 0:
            root.left = build(pre_start + 1, left_pre_end, in_start, root_index - 1)
        if left_length < pre_end - pre_start:
            if root_index + 1 > in_end:
                raise ValueError("Invalid input")
            root.right = build(left_pre_end + 1, pre_end, root_index + 1, in_end)
        return root

    return build(0, len(preorder) - 1, 0, len(inorder) - 1)