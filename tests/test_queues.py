import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoprobs.queues import StackWithMin, TwoStackQueue


def test_queue_source_sequence():
    queue = TwoStackQueue()
    queue.append_tail("a")
    queue.append_tail("b")
    queue.append_tail("c")
    assert queue.delete_head() == "a"
    assert queue.delete_head() == "b"
    assert queue.delete_head() == "c"
    queue.append_tail("d")
    assert queue.delete_head() == "d"
    with pytest.raises(IndexError):
        queue.delete_head()


@given(st.lists(st.integers()))
def test_queue_is_fifo(values):
    queue = TwoStackQueue()
    for value in values:
        queue.append_tail(value)
    assert len(queue) == len(values)
    assert [queue.delete_head() for _ in values] == values
    assert len(queue) == 0


def test_queue_interleaved_operations():
    queue = TwoStackQueue()
    queue.append_tail(1)
    queue.append_tail(2)
    assert queue.delete_head() == 1
    queue.append_tail(3)
    assert len(queue) == 2
    assert queue.delete_head() == 2
    assert queue.delete_head() == 3


def test_stack_with_min_source_sequence():
    stack = StackWithMin()
    stack.push(3)
    assert stack.min() == 3
    stack.push(4)
    assert stack.min() == 3
    stack.push(2)
    assert stack.min() == 2
    stack.push(3)
    assert stack.min() == 2
    stack.pop()
    assert stack.min() == 2
    stack.pop()
    assert stack.min() == 3
    stack.pop()
    assert stack.min() == 3
    stack.push(0)
    assert stack.min() == 0


@given(st.lists(st.integers(), min_size=1))
def test_stack_min_matches_contents(values):
    stack = StackWithMin()
    for value in values:
        stack.push(value)
    for remaining in range(len(values), 0, -1):
        assert len(stack) == remaining
        assert stack.min() == min(values[:remaining])
        assert stack.top() == values[remaining - 1]
        assert stack.pop() == values[remaining - 1]
    assert len(stack) == 0


def test_empty_stack_raises():
    stack = StackWithMin()
    with pytest.raises(IndexError):
        stack.min()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()