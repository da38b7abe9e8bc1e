"""A linked list whose nodes also point at an arbitrary sibling, and its deep copy."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ComplexListNode:
    """A list node with a ``next`` link and a ``sibling`` link to any node or None."""

    value: Any
    next: Optional["ComplexListNode"] = None
    sibling: Optional["ComplexListNode"] = None


def build_node(
    node: Optional[ComplexListNode],
    next_node: Optional[ComplexListNode],
    sibling: Optional[ComplexListNode],
) -> None:
    """Set the ``next`` and ``sibling`` links of ``node``, if there is a node."""
    if node is not None:
        node.next = next_node
        node.sibling = sibling


def _iter_nodes(head: Optional[ComplexListNode]) -> Iterator[ComplexListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def describe_list(head: Optional[ComplexListNode]) -> str:
    """Return a description of each node's value and its sibling's value."""
    parts = []
    for node in _iter_nodes(head):
        parts.append(f"The value of this node is: {node.value}.\n")
        if node.sibling is not None:
            parts.append(f"The value of its sibling is: {node.sibling.value}.\n")
        else:
            parts.append("This node does not have a sibling.\n")
        parts.append("\n")
    return "".join(parts)


def _interleave_clones(head: Optional[ComplexListNode]) -> None:
    node = head
    while node is not None:
        copy = ComplexListNode(node.value, node.next)
        node.next = copy
        node = copy.next


def _connect_siblings(head: Optional[ComplexListNode]) -> None:
    node = head
    while node is not None:
        copy = node.next
        if node.sibling is not None:
            copy.sibling = node.sibling.next
        node = copy.next


def _split(head: Optional[ComplexListNode]) -> Optional[ComplexListNode]:
    if head is None:
        return None
    clone_head = clone_node = head.next
    node = head
    node.next = clone_node.next
    node = node.next
    while node is not None:
        clone_node.next = node.next
        clone_node = clone_node.next
        node.next = clone_node.next
        node = node.next
    return clone_head


def clone(head: Optional[ComplexListNode]) -> Optional[ComplexListNode]:
    """Return a deep copy of the list; the original is left as it was.

    Each copy's sibling points at the copy of the original's sibling.
    """
    _interleave_clones(head)
    _connect_siblings(head)
    return _split(head)