"""Doubly linked list with stable positions and an optional bump allocator.

A ``LinkedList`` keeps its elements in a ring closed by a sentinel node, so
``end()`` is a real position that ``insert`` can target. When the list is
given an allocator, every node is placed through ``allocate`` and given back
through ``deallocate``. ``StackAllocator`` reserves space from a fixed
``StackStorage`` and never reuses it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

_NODE_SIZE = 24


class StackStorage:
    """Fixed-size arena that hands out space from the front and never shrinks."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("storage size must be non-negative")
        self.size = size
        self.used = 0

    @property
    def free(self) -> int:
        return self.size - self.used

    def __repr__(self):
        return f"StackStorage(size={self.size}, used={self.used})"


class StackAllocator:
    """Bump allocator over a shared ``StackStorage``.

    Several allocators may share one storage; they then hand out
    non-overlapping regions of it.
    """

    def __init__(self, storage: StackStorage):
        self.storage = storage
        self.released = 0

    def allocate(self, count: int, item_size: int) -> int:
        """Reserve ``count`` items of ``item_size`` bytes; return the aligned offset."""
        if item_size <= 0:
            raise ValueError("item size must be positive")
        if count < 0:
            raise ValueError("count must be non-negative")
        storage = self.storage
        misalignment = storage.used % item_size
        offset = storage.used + (item_size - misalignment if misalignment else 0)
        end = offset + count * item_size
        if end > storage.size:
            raise MemoryError(
                f"stack storage exhausted: need {end} bytes, have {storage.size}"
            )
        storage.used = end
        return offset

    def deallocate(self, offset: int, count: int) -> None:
        """Record a release; the space itself comes back only with the storage."""
        if count < 0:
            raise ValueError("count must be non-negative")
        if not 0 <= offset <= self.storage.used:
            raise ValueError("offset was not handed out by this storage")
        self.released += count

    def __eq__(self, other):
        if not isinstance(other, StackAllocator):
            return NotImplemented
        return self.storage is other.storage

    def __hash__(self):
        return id(self.storage)


class _Node:
    __slots__ = ("value", "prev", "next", "owner", "handle")

    def __init__(self, value: Any, owner: Optional[LinkedList], handle: Any = None):
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self
        self.owner = owner
        self.handle = handle


class Position:
    """A place in a list: an element, or the end marker after the last one."""

    __slots__ = ("_node",)

    def __init__(self, node: _Node):
        self._node = node

    def next(self) -> Position:
        return Position(self._node.next)

    def prev(self) -> Position:
        return Position(self._node.prev)

    def __eq__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return id(self._node)

    def __repr__(self):
        return f"Position({self._node.value!r})"


class LinkedList:
    """Doubly linked list whose positions stay valid across other insertions."""

    def __init__(self, items: Iterable[Any] = (), allocator=None):
        self.allocator = allocator
        self._sentinel = _Node(None, self)
        self._size = 0
        try:
            for item in items:
                self.push_back(item)
        except BaseException:
            self._release_all()
            raise

    def _release_all(self) -> None:
        while self._size:
            self.pop_back()

    def _new_node(self, value: Any) -> _Node:
        handle = None
        if self.allocator is not None:
            handle = self.allocator.allocate(1, _NODE_SIZE)
        return _Node(value, self, handle)

    def _own(self, position: Position) -> _Node:
        node = position._node
        if node.owner is not self:
            raise ValueError("position does not belong to this list")
        return node

    def _element(self, position: Position) -> _Node:
        node = self._own(position)
        if node is self._sentinel:
            raise IndexError("end position has no element")
        return node

    def __len__(self):
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __repr__(self):
        return f"LinkedList({list(self)!r})"

    def begin(self) -> Position:
        return Position(self._sentinel.next)

    def end(self) -> Position:
        return Position(self._sentinel)

    def get(self, position: Position) -> Any:
        return self._element(position).value

    def set(self, position: Position, value: Any) -> None:
        self._element(position).value = value

    def insert(self, position: Position, value: Any) -> Position:
        """Insert ``value`` before ``position``; return the new element's position."""
        after = self._own(position)
        node = self._new_node(value)
        before = after.prev
        node.prev, node.next = before, after
        before.next = node
        after.prev = node
        self._size += 1
        return Position(node)

    def erase(self, position: Position) -> Position:
        """Remove the element at ``position``; return the position that followed it."""
        node = self._element(position)
        follower = node.next
        node.prev.next = follower
        follower.prev = node.prev
        node.owner = None
        self._size -= 1
        if self.allocator is not None:
            self.allocator.deallocate(node.handle, 1)
        return Position(follower)

    def push_back(self, value: Any) -> None:
        self.insert(self.end(), value)

    def push_front(self, value: Any) -> None:
        self.insert(self.begin(), value)

    def pop_back(self) -> Any:
        if not self._size:
            raise IndexError("pop from empty list")
        value = self._sentinel.prev.value
        self.erase(Position(self._sentinel.prev))
        return value

    def pop_front(self) -> Any:
        if not self._size:
            raise IndexError("pop from empty list")
        value = self._sentinel.next.value
        self.erase(Position(self._sentinel.next))
        return value

    def copy(self) -> LinkedList:
        """Element-wise copy that shares this list's allocator."""
        return LinkedList(self, self.allocator)