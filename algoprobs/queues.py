"""A queue built from two stacks, and a stack that tracks its minimum."""

from __future__ import annotations

from typing import Any


class TwoStackQueue:
    """A first-in first-out queue made from two last-in first-out stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def append_tail(self, value: Any) -> None:
        """Add ``value`` at the back of the queue."""
        self._inbox.append(value)

    def delete_head(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("delete from empty queue")
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class StackWithMin:
    """A stack whose minimum element is available in constant time."""

    def __init__(self) -> None:
        self._data: list[Any] = []
        self._mins: list[Any] = []

    def push(self, value: Any) -> None:
        """Push ``value`` onto the stack."""
        self._data.append(value)
        if not self._mins or value < self._mins[-1]:
            self._mins.append(value)
        else:
            self._mins.append(self._mins[-1])

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._data:
            raise IndexError("pop from empty stack")
        self._mins.pop()
        return self._data.pop()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if not self._data:
            raise IndexError("top of empty stack")
        return self._data[-1]

    def min(self) -> Any:
        """Return the smallest value currently on the stack."""
        if not self._mins:
            raise IndexError("min of empty stack")
        return self._mins[-1]

    def __len__(self) -> int:
        return len(self._data)