import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoset.containers import MinStack, QueueStack, StackQueue

values_lists = st.lists(st.integers(-1000, 1000), min_size=1, max_size=40)


@given(values_lists)
def test_min_stack_tracks_top_and_min_while_pushing(values):
    stack = MinStack()
    for count, value in enumerate(values, start=1):
        stack.push(value)
        assert len(stack) == count
        assert stack.top() == value
        assert stack.get_min() == min(values[:count])


@given(values_lists)
def test_min_stack_tracks_top_and_min_while_popping(values):
    stack = MinStack()
    for value in values:
        stack.push(value)
    for remaining in range(len(values), 1, -1):
        stack.pop()
        assert len(stack) == remaining - 1
        assert stack.top() == values[remaining - 2]
        assert stack.get_min() == min(values[: remaining - 1])
    stack.pop()
    assert len(stack) == 0


def test_min_stack_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.get_min()


def test_min_stack_min_recovers_after_pop():
    stack = MinStack()
    stack.push(5)
    stack.push(2)
    stack.push(8)
    assert stack.get_min() == 2
    stack.pop()
    stack.pop()
    assert stack.get_min() == 5
    assert stack.top() == 5


@given(values_lists)
def test_queue_stack_is_lifo(values):
    stack = QueueStack()
    for value in values:
        stack.push(value)
        assert stack.top() == value
        assert stack.empty() is False
    for expected in reversed(values):
        assert stack.top() == expected
        assert stack.pop() == expected
    assert stack.empty() is True


@given(values_lists, values_lists)
def test_queue_stack_interleaved(first, second):
    stack = QueueStack()
    for value in first:
        stack.push(value)
    half = len(first) // 2
    popped = [stack.pop() for _ in range(half)]
    assert popped == list(reversed(first))[:half]
    for value in second:
        stack.push(value)
    rest = [stack.pop() for _ in range(len(first) - half + len(second))]
    assert rest == list(reversed(first[: len(first) - half] + second))
    assert stack.empty() is True


def test_queue_stack_empty_raises():
    stack = QueueStack()
    assert stack.empty()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


@given(values_lists, values_lists)
def test_stack_queue_is_fifo(first, second):
    queue = StackQueue()
    for count, value in enumerate(first, start=1):
        queue.push(value)
        assert len(queue) == count
        assert queue.peek() == first[0]
    half = len(first) // 2
    popped = [queue.pop() for _ in range(half)]
    assert popped == first[:half]
    for value in second:
        queue.push(value)
    expected = first[half:] + second
    assert len(queue) == len(expected)
    for item in expected:
        assert queue.empty() is False
        assert queue.peek() == item
        assert queue.pop() == item
    assert queue.empty() is True
    assert len(queue) == 0


def test_stack_queue_empty_raises():
    queue = StackQueue()
    assert queue.empty()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.peek()


def test_stack_queue_peek_after_drain_and_refill():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert queue.peek() == 2
    assert queue.pop() == 2
    assert queue.peek() == 3