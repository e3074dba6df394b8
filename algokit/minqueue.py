"""FIFO queue that reports its minimum in constant time, built from two stacks."""

from __future__ import annotations

from typing import Iterable


class MinQueue:
    """Queue of comparable values with ``min`` in amortised constant time."""

    def __init__(self):
        # Each stack holds (value, minimum of the stack up to and including it).
        self._inbox: list[tuple[int, int]] = []
        self._outbox: list[tuple[int, int]] = []

    def __len__(self):
        return len(self._inbox) + len(self._outbox)

    @staticmethod
    def _push(stack: list[tuple[int, int]], value: int) -> None:
        running = min(value, stack[-1][1]) if stack else value
        stack.append((value, running))

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                value, _ = self._inbox.pop()
                self._push(self._outbox, value)

    def enqueue(self, value: int) -> None:
        self._push(self._inbox, value)

    def dequeue(self) -> int:
        """Remove and return the oldest value."""
        self._refill()
        if not self._outbox:
            raise IndexError("queue is empty")
        return self._outbox.pop()[0]

    def front(self) -> int:
        self._refill()
        if not self._outbox:
            raise IndexError("queue is empty")
        return self._outbox[-1][0]

    def min(self) -> int:
        candidates = [stack[-1][1] for stack in (self._inbox, self._outbox) if stack]
        if not candidates:
            raise IndexError("queue is empty")
        return min(candidates)

    def clear(self) -> None:
        self._inbox.clear()
        self._outbox.clear()


def run_commands(commands: Iterable[str]) -> list[str]:
    """Run ``enqueue x``, ``dequeue``, ``front``, ``size``, ``clear`` and ``min``.

    Returns the printed lines; reads from an empty queue print ``error``.
    """
    queue = MinQueue()
    readers = {"dequeue": queue.dequeue, "front": queue.front, "min": queue.min}
    output = []
    for command in commands:
        name, *args = command.split()
        if name == "enqueue":
            queue.enqueue(int(args[0]))
            output.append("ok")
        elif name in readers:
            try:
                output.append(str(readers[name]()))
            except IndexError:
                output.append("error")
        elif name == "size":
            output.append(str(len(queue)))
        elif name == "clear":
            queue.clear()
            output.append("ok")
        else:
            raise ValueError(f"unknown command: {name!r}")
    return output