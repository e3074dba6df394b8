"""Binary heaps: a min-heap with decrease-key handles and a paired min/max heap."""

from __future__ import annotations

import operator
from itertools import count
from typing import Callable, Iterable


class IndexedMinHeap:
    """Min-heap whose elements can be found again through the handle ``insert`` returns."""

    def __init__(self):
        self._items: list[list[int]] = []  # [value, handle]
        self._where: dict[int, int] = {}
        self._handles = count(1)

    def __len__(self):
        return len(self._items)

    def _place(self, index: int, item: list[int]) -> None:
        self._items[index] = item
        self._where[item[1]] = index

    def _sift_up(self, index: int) -> None:
        item = self._items[index]
        while index:
            parent = (index - 1) // 2
            above = self._items[parent]
            if above[0] <= item[0]:
                break
            self._place(index, above)
            index = parent
        self._place(index, item)

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        item = items[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            if child + 1 < size and items[child + 1][0] < items[child][0]:
                child += 1
            if item[0] <= items[child][0]:
                break
            self._place(index, items[child])
            index = child
        self._place(index, item)

    def insert(self, value: int) -> int:
        """Add ``value``; return a handle for ``decrease_key``."""
        handle = next(self._handles)
        self._items.append([value, handle])
        self._where[handle] = len(self._items) - 1
        self._sift_up(len(self._items) - 1)
        return handle

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0][0]

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("heap is empty")
        top = self._items[0]
        last = self._items.pop()
        del self._where[top[1]]
        if self._items:
            self._place(0, last)
            self._sift_down(0)
        return top[0]

    def decrease_key(self, handle: int, delta: int) -> None:
        """Subtract ``delta`` from the element inserted under ``handle``."""
        try:
            index = self._where[handle]
        except KeyError:
            raise KeyError(f"no element with handle {handle}") from None
        self._items[index][0] -= delta
        self._sift_up(index)
        self._sift_down(self._where[handle])


class _Entry:
    __slots__ = ("value", "slots")

    def __init__(self, value: int):
        self.value = value
        self.slots = [0, 0]


class _LinkedHeap:
    """One side of a min/max pair; each entry remembers its index on this side."""

    def __init__(self, side: int, before: Callable[[int, int], bool]):
        self.side = side
        self.before = before
        self.items: list[_Entry] = []

    def _place(self, index: int, entry: _Entry) -> None:
        self.items[index] = entry
        entry.slots[self.side] = index

    def _sift_up(self, index: int) -> None:
        entry = self.items[index]
        while index:
            parent = (index - 1) // 2
            if not self.before(entry.value, self.items[parent].value):
                break
            self._place(index, self.items[parent])
            index = parent
        self._place(index, entry)

    def _sift_down(self, index: int) -> None:
        items = self.items
        size = len(items)
        entry = items[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            if child + 1 < size and self.before(items[child + 1].value, items[child].value):
                child += 1
            if not self.before(items[child].value, entry.value):
                break
            self._place(index, items[child])
            index = child
        self._place(index, entry)

    def push(self, entry: _Entry) -> None:
        self.items.append(entry)
        entry.slots[self.side] = len(self.items) - 1
        self._sift_up(len(self.items) - 1)

    def remove(self, entry: _Entry) -> None:
        index = entry.slots[self.side]
        last = self.items.pop()
        if last is not entry:
            self._place(index, last)
            self._sift_down(index)
            self._sift_up(last.slots[self.side])


class MinMaxHeap:
    """Multiset that yields both its smallest and its largest value quickly."""

    def __init__(self):
        self._min = _LinkedHeap(0, operator.lt)
        self._max = _LinkedHeap(1, operator.gt)

    def __len__(self):
        return len(self._min.items)

    def insert(self, value: int) -> None:
        entry = _Entry(value)
        self._min.push(entry)
        self._max.push(entry)

    def _top(self, side: _LinkedHeap) -> _Entry:
        if not side.items:
            raise IndexError("heap is empty")
        return side.items[0]

    def get_min(self) -> int:
        return self._top(self._min).value

    def get_max(self) -> int:
        return self._top(self._max).value

    def _extract(self, side: _LinkedHeap) -> int:
        entry = self._top(side)
        self._min.remove(entry)
        self._max.remove(entry)
        return entry.value

    def extract_min(self) -> int:
        return self._extract(self._min)

    def extract_max(self) -> int:
        return self._extract(self._max)

    def clear(self) -> None:
        self._min.items.clear()
        self._max.items.clear()


def run_indexed_heap(commands: Iterable[str]) -> list[str]:
    """Run ``insert x``, ``getMin``, ``extractMin`` and ``decreaseKey i d`` commands.

    ``i`` in ``decreaseKey`` is the 1-based number of the command that inserted
    the element. Returns the lines printed by ``getMin``.
    """
    heap = IndexedMinHeap()
    handle_by_line: dict[int, int] = {}
    output = []
    for line_number, command in enumerate(commands, start=1):
        name, *args = command.split()
        if name == "insert":
            handle_by_line[line_number] = heap.insert(int(args[0]))
        elif name == "getMin":
            output.append(str(heap.get_min()))
        elif name == "extractMin":
            heap.extract_min()
        elif name == "decreaseKey":
            line, delta = int(args[0]), int(args[1])
            if line not in handle_by_line:
                raise KeyError(f"command {line} inserted nothing")
            heap.decrease_key(handle_by_line[line], delta)
        else:
            raise ValueError(f"unknown command: {name!r}")
    return output


def run_minmax_heap(commands: Iterable[str]) -> list[str]:
    """Run min/max heap commands and return the printed lines.

    Commands are ``insert x``, ``get_min``, ``extract_min``, ``get_max``,
    ``extract_max``, ``size`` and ``clear``; reads from an empty heap print
    ``error``.
    """
    heap = MinMaxHeap()
    readers = {
        "get_min": heap.get_min,
        "get_max": heap.get_max,
        "extract_min": heap.extract_min,
        "extract_max": heap.extract_max,
    }
    output = []
    for command in commands:
        name, *args = command.split()
        if name == "insert":
            heap.insert(int(args[0]))
            output.append("ok")
        elif name in readers:
            try:
                output.append(str(readers[name]()))
            except IndexError:
                output.append("error")
        elif name == "size":
            output.append(str(len(heap)))
        elif name == "clear":
            heap.clear()
            output.append("ok")
        else:
            raise ValueError(f"unknown command: {name!r}")
    return output