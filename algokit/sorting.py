"""Sorting routines, order statistics, inversion counting and interval merging."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Sequence

_SEQUENCE_MODULUS = 10 * 1000 * 1000 + 4321


def _merge_counting(first: list, second: list) -> tuple[list, int]:
    merged = []
    count = 0
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            count += len(first) - i
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged, count


def _sort_counting(values: list) -> tuple[list, int]:
    if len(values) <= 1:
        return values, 0
    mid = len(values) // 2
    left, left_count = _sort_counting(values[:mid])
    right, right_count = _sort_counting(values[mid:])
    merged, cross = _merge_counting(left, right)
    return merged, left_count + right_count + cross


def count_inversions(values: Iterable[Any]) -> int:
    """Number of pairs ``i < j`` with ``values[i] >= values[j]``.

    Equal elements count as an inversion, so a run of repeats is never in order.
    """
    return _sort_counting(list(values))[1]


def _partition(items: list, left: int, right: int) -> int:
    """Hoare partition of ``items[left..right]``; return the split index."""
    pivot = items[(left + right) // 2]
    i, j = left, right
    while i <= j:
        while items[i] < pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            break
        items[i], items[j] = items[j], items[i]
        i += 1
        j -= 1
    return j


def quicksort(values: Iterable[Any]) -> list:
    """Return the values in ascending order, sorted with Hoare's partition."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if right - left <= 0:
            continue
        split = _partition(items, left, right)
        pending.append((left, split))
        pending.append((split + 1, right))
    return items


def kth_smallest(values: Iterable[Any], k: int) -> Any:
    """The ``k``-th smallest value, counting from 1, found by quickselect."""
    items = list(values)
    if not 1 <= k <= len(items):
        raise ValueError(f"k must lie in 1..{len(items)}, got {k}")
    target = k - 1
    left, right = 0, len(items) - 1
    while right - left > 0:
        split = _partition(items, left, right)
        if split == target:
            return items[split]
        if split > target:
            right = split
        else:
            left = split + 1
    return items[left]


def generate_sequence(n: int, first: int, second: int) -> list[int]:
    """``n`` terms of ``a[i] = (123 * a[i-1] + 45 * a[i-2]) mod 10004321``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    terms = [first, second][:n]
    while len(terms) < n:
        terms.append((123 * terms[-1] + 45 * terms[-2]) % _SEQUENCE_MODULUS)
    return terms


def merge_sort(items: Iterable[Any], key: Optional[Callable[[Any], Any]] = None) -> list:
    """Stable top-down merge sort; returns a new list ordered by ``key``."""
    keyed = [(item if key is None else key(item), item) for item in items]

    def sort(part: list) -> list:
        if len(part) <= 1:
            return part
        mid = len(part) // 2
        left, right = sort(part[:mid]), sort(part[mid:])
        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            if right[j][0] < left[i][0]:
                merged.append(right[j])
                j += 1
            else:
                merged.append(left[i])
                i += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged

    return [item for _, item in sort(keyed)]


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Union of closed intervals as sorted disjoint ``(begin, end)`` pairs.

    Intervals that touch at an end point are joined.
    """
    ordered = merge_sort(((begin, end) for begin, end in intervals), key=lambda pair: pair)
    result: list[tuple[int, int]] = []
    for begin, end in ordered:
        if result and begin <= result[-1][1]:
            last_begin, last_end = result[-1]
            result[-1] = (last_begin, max(last_end, end))
        else:
            result.append((begin, end))
    return result