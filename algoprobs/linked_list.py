"""A singly linked list of nodes and the usual operations on it."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional, TextIO


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = None


def connect_list_nodes(current: Optional[ListNode], next_node: Optional[ListNode]) -> None:
    """Make ``next_node`` follow ``current``."""
    if current is None:
        raise ValueError("Error to connect two nodes.")
    current.next = next_node


def describe_node(node: Optional[ListNode]) -> str:
    """Return a one-line description of a node."""
    if node is None:
        return "The node is None"
    return f"The key in node is {node.value}."


def iter_values(head: Optional[ListNode]) -> Iterator[Any]:
    """Yield the values of the list from head to tail."""
    node = head
    while node is not None:
        yield node.value
        node = node.next


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def print_list(head: Optional[ListNode], file: Optional[TextIO] = None) -> None:
    """Write the list's values, tab separated, between start and end markers."""
    print("PrintList starts.", file=file)
    print("".join(f"{value}\t" for value in iter_values(head)), file=file)
    print("PrintList ends.", file=file)


def from_values(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; return its head."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def add_to_tail(head: Optional[ListNode], value: Any) -> ListNode:
    """Append ``value`` to the end of the list; return the (possibly new) head."""
    new_node = ListNode(value)
    if head is None:
        return new_node
    last = head
    while last.next is not None:
        last = last.next
    last.next = new_node
    return head


def remove_node(head: Optional[ListNode], value: Any) -> Optional[ListNode]:
    """Remove the first node holding ``value``; return the (possibly new) head."""
    if head is None:
        return None
    if head.value == value:
        return head.next
    for node in _iter_nodes(head):
        if node.next is not None and node.next.value == value:
            node.next = node.next.next
            break
    return head


def values_reversed(head: Optional[ListNode]) -> list[Any]:
    """Return the list's values from tail to head."""
    stack = list(iter_values(head))
    stack.reverse()
    return stack