"""A last-in, first-out stack kept in a single queue."""

from __future__ import annotations

from collections import deque


class QueueStack:
    """A stack whose only storage is a queue, kept with the top at the front."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the top value."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the top value without removing it."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        """Tell whether the stack holds nothing."""
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)