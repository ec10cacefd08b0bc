"""Stacks and queues with extra guarantees or built from each other."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Tuple


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: List[Tuple[int, int]] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> None:
        """Remove the top element; raises IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        self._items.pop()

    def top(self) -> int:
        """Return the top element; raises IndexError when empty."""
        if not self._items:
            raise IndexError("top of an empty stack")
        return self._items[-1][0]

    def get_min(self) -> int:
        """Return the smallest element held; raises IndexError when empty."""
        if not self._items:
            raise IndexError("minimum of an empty stack")
        return self._items[-1][1]


class QueueStack:
    """A LIFO stack kept in a queue whose front is always the newest element."""

    def __init__(self) -> None:
        self._queue: Deque[int] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def push(self, x: int) -> None:
        """Push ``x`` and rotate it to the front of the queue."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the newest element; raises IndexError when empty."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the newest element; raises IndexError when empty."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._queue


class StackQueue:
    """A FIFO queue built from an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: List[int] = []
        self._outbox: List[int] = []
        self._front = 0

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)

    def push(self, x: int) -> None:
        """Append ``x`` to the back of the queue."""
        if not self._inbox:
            self._front = x
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the oldest element; raises IndexError when empty."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("pop from an empty queue")
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the oldest element; raises IndexError when empty."""
        if self._outbox:
            return self._outbox[-1]
        if not self._inbox:
            raise IndexError("peek at an empty queue")
        return self._front

    def empty(self) -> bool:
        """Tell whether the queue holds nothing."""
        return not self._inbox and not self._outbox