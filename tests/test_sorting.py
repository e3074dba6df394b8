import random

import pytest

from algokit.sorting import (
    count_inversions,
    generate_sequence,
    kth_smallest,
    merge_intervals,
    merge_sort,
    quicksort,
)


def _random_lists():
    rng = random.Random(7)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(25)]


def test_inversions_of_sorted_distinct_is_zero():
    assert count_inversions(range(20)) == 0


@pytest.mark.parametrize("n", [1, 2, 5, 17])
def test_inversions_of_reversed_is_all_pairs(n):
    assert count_inversions(reversed(range(n))) == n * (n - 1) // 2


@pytest.mark.parametrize("n", [1, 3, 6])
def test_equal_elements_count_as_inversions(n):
    assert count_inversions([4] * n) == n * (n - 1) // 2


def test_inversions_of_permutation_and_its_reverse_sum_to_all_pairs():
    rng = random.Random(3)
    values = list(range(30))
    rng.shuffle(values)
    total = count_inversions(values) + count_inversions(values[::-1])
    assert total == 30 * 29 // 2


def test_count_inversions_leaves_input_untouched():
    values = [3, 1, 2]
    count_inversions(values)
    assert values == [3, 1, 2]


def test_count_inversions_empty():
    assert count_inversions([]) == 0


@pytest.mark.parametrize("values", _random_lists())
def test_quicksort_matches_sorted(values):
    assert quicksort(values) == sorted(values)


def test_quicksort_does_not_mutate_input():
    values = [5, 2, 9, 1]
    quicksort(values)
    assert values == [5, 2, 9, 1]


@pytest.mark.parametrize("k", [0, 4, -1])
def test_kth_smallest_rejects_out_of_range(k):
    with pytest.raises(ValueError):
        kth_smallest([1, 2, 3], k)


def test_generate_sequence_starts_with_seeds():
    terms = generate_sequence(10, 17, 42)
    assert terms[:2] == [17, 42]
    assert len(terms) == 10


def test_generate_sequence_stays_below_modulus():
    terms = generate_sequence(500, 9999999, 10004320)
    assert all(0 <= t < 10004321 for t in terms[2:])


def test_generate_sequence_third_term():
    assert generate_sequence(3, 1, 1)[2] == 168


def test_generate_sequence_zero_seeds_stay_zero():
    assert generate_sequence(5, 0, 0) == [0] * 5


def test_generate_sequence_short_and_negative():
    assert generate_sequence(1, 8, 9) == [8]
    with pytest.raises(ValueError):
        generate_sequence(-1, 1, 1)


@pytest.mark.parametrize("values", _random_lists())
def test_merge_sort_matches_sorted(values):
    assert merge_sort(values) == sorted(values)


def test_merge_sort_is_stable_with_key():
    items = [(i % 4, i) for i in range(20)]
    assert merge_sort(items, key=lambda pair: pair[0]) == sorted(items, key=lambda pair: pair[0])


def test_merge_intervals_example():
    assert merge_intervals([(7, 8), (2, 5), (1, 3)]) == [(1, 5), (7, 8)]


def test_merge_intervals_joins_touching():
    assert merge_intervals([(2, 3), (1, 2)]) == [(1, 3)]


def test_merge_intervals_empty():
    assert merge_intervals([]) == []


def test_merge_intervals_invariants():
    rng = random.Random(11)
    intervals = []
    for _ in range(60):
        begin = rng.randint(0, 200)
        intervals.append((begin, begin + rng.randint(0, 10)))
    merged = merge_intervals(intervals)
    assert len(merged) >= 1
    gaps = [(left[1], right[0]) for left, right in zip(merged, merged[1:])]
    assert all(end < begin for end, begin in gaps)
    assert all(
        any(b <= begin and end <= e for b, e in merged) for begin, end in intervals
    )
    starts = {begin for begin, _ in intervals}
    ends = {end for _, end in intervals}
    assert all(b in starts and e in ends for b, e in merged)