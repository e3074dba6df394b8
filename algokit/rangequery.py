"""Range queries: segment-tree sums, alternating sums and second minima."""

from __future__ import annotations

from typing import Iterable


def floor_log2(n: int) -> int:
    """Largest ``s`` with ``2**s <= n``; 0 when ``n`` is below 2."""
    if n < 2:
        return 0
    return n.bit_length() - 1


class SegmentTree:
    """Point updates and half-open range sums over a fixed-length sequence."""

    def __init__(self, values: Iterable[int]):
        values = list(values)
        self._n = len(values)
        self._tree = [0] * self._n + values
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self):
        return self._n

    def sum(self, left: int, right: int) -> int:
        """Sum of the elements with indices in ``[left, right)``."""
        if not 0 <= left <= right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        total = 0
        left += self._n
        right += self._n
        while left < right:
            if left & 1:
                total += self._tree[left]
                left += 1
            if right & 1:
                right -= 1
                total += self._tree[right]
            left >>= 1
            right >>= 1
        return total

    def set(self, index: int, value: int) -> None:
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} out of bounds")
        i = index + self._n
        self._tree[i] = value
        i >>= 1
        while i:
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]
            i >>= 1


class AlternatingSum:
    """Signed sums ``a[first] - a[first+1] + a[first+2] - ...`` with 1-based positions."""

    def __init__(self, values: Iterable[int]):
        self._tree = SegmentTree(v if i % 2 == 0 else -v for i, v in enumerate(values))

    def __len__(self):
        return len(self._tree)

    def set(self, position: int, value: int) -> None:
        if not 1 <= position <= len(self._tree):
            raise IndexError(f"position {position} out of bounds")
        index = position - 1
        self._tree.set(index, value if index % 2 == 0 else -value)

    def query(self, first: int, last: int) -> int:
        """Alternating sum from ``first`` to ``last`` inclusive, starting with a plus."""
        if not 1 <= first <= last <= len(self._tree):
            raise IndexError(f"range [{first}, {last}] out of bounds")
        total = self._tree.sum(first - 1, last)
        return total if first % 2 == 1 else -total


def _merge(first: tuple, second: tuple) -> tuple:
    """Two smallest (value, index) pairs of the union, distinct by index."""
    return tuple(sorted(set(first) | set(second))[:2])


class SparseTable:
    """Static table answering second-smallest-value queries on ranges."""

    def __init__(self, values: Iterable[int]):
        base = [((value, i),) for i, value in enumerate(values)]
        self._n = len(base)
        self._levels = [base]
        width = 1
        while 2 * width <= self._n:
            previous = self._levels[-1]
            self._levels.append(
                [_merge(previous[i], previous[i + width]) for i in range(len(previous) - width)]
            )
            width *= 2

    def __len__(self):
        return self._n

    def second_min(self, left: int, right: int) -> int:
        """Second smallest element among indices ``[left, right)``, counting repeats."""
        if not 0 <= left < right <= self._n:
            raise IndexError(f"range [{left}, {right}) out of bounds")
        if right - left < 2:
            raise ValueError("range must hold at least two elements")
        level = floor_log2(right - left)
        pairs = _merge(self._levels[level][left], self._levels[level][right - (1 << level)])
        return pairs[1][0]