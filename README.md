# algokit

A collection of classic algorithms and data structures written in plain Python.
It has no runtime dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_list` | `LinkedList` (doubly linked list with stable `Position`s), `StackStorage`, `StackAllocator` |
| `algokit.geometry` | `Point`, `Vector`, point/line/ray/segment distances, segment intersection, convexity, point-in-polygon, convex hull, Minkowski sums |
| `algokit.assignment` | `hungarian`, which solves the assignment problem on a square cost matrix |
| `algokit.number_theory` | `prime_factors`, `euler_phi` |
| `algokit.heaps` | `IndexedMinHeap` (with `decrease_key`), `MinMaxHeap`, and the command runners `run_indexed_heap` and `run_minmax_heap` |
| `algokit.minqueue` | `MinQueue`, a queue that reports its minimum in amortised constant time, and `run_commands` |
| `algokit.rangequery` | `SegmentTree`, `AlternatingSum`, `SparseTable` (second minimum on a range), `floor_log2` |
| `algokit.sorting` | `quicksort`, `merge_sort`, `count_inversions`, `kth_smallest`, `merge_intervals`, `generate_sequence` |

Reading from an empty heap or queue raises `IndexError`; the command runners
turn that into an `error` line.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

A doubly linked list:

```python
from algokit.linked_list import LinkedList

lst = LinkedList([3, 4])
lst.push_front(2)
lst.push_back(5)
print(list(lst))            # [2, 3, 4, 5]
print(list(reversed(lst)))  # [5, 4, 3, 2]
```

Passing `allocator=StackAllocator(StackStorage(size))` makes every node take
space from a fixed arena; `MemoryError` is raised once it is used up.

Geometry and assignment:

```python
from algokit.geometry import Point, convex_hull, double_area
from algokit.assignment import hungarian

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 1)]
hull = convex_hull(square)
print(len(hull), double_area(hull))  # 4 8

print(hungarian([[4, 1], [2, 3]]))   # (3, [(1, 0), (0, 1)])
```

Heaps, queues and range queries:

```python
from algokit.heaps import MinMaxHeap
from algokit.minqueue import MinQueue
from algokit.rangequery import AlternatingSum, SegmentTree, SparseTable

heap = MinMaxHeap()
for value in (4, 9, 1):
    heap.insert(value)
print(heap.get_min(), heap.get_max())  # 1 9

queue = MinQueue()
for value in (5, 2, 7):
    queue.enqueue(value)
print(queue.min(), len(queue))         # 2 3

print(SegmentTree([1, 2, 3, 4]).sum(1, 3))          # 5
print(AlternatingSum([1, 2, 3, 4]).query(1, 4))     # -2
print(SparseTable([5, 1, 4, 2]).second_min(0, 4))   # 2
```

Number theory and sorting:

```python
from algokit.number_theory import euler_phi, prime_factors
from algokit.sorting import count_inversions, kth_smallest, merge_intervals, quicksort

print(prime_factors(36))                           # [2, 3]
print(euler_phi(36))                               # 12
print(count_inversions([2, 3, 1]))                 # 2
print(quicksort([3, 1, 2]))                        # [1, 2, 3]
print(kth_smallest([5, 1, 4], 2))                  # 4
print(merge_intervals([(1, 3), (2, 5), (7, 8)]))   # [(1, 5), (7, 8)]
```

## Command-line tools

Each tool reads its input from standard input and writes its answer to
standard output.

- `algokit-phi` reads an integer `n` and prints Euler's totient of `n`.
- `algokit-assignment` reads `n` followed by an `n` by `n` cost matrix and
  prints the minimal total cost, then one 1-based `row column` pair per line.
- `algokit-minkowski` reads three convex polygons (each as a vertex count
  followed by its vertices, counter-clockwise) and then a count of query
  points followed by the points. For each query it prints `YES` or `NO`:
  whether that point is the centroid of some triangle with one vertex in each
  polygon.

```
echo 36 | algokit-phi
```

## What it does not include

There is no arbitrary-precision integer or exact fraction type here, and no
hash table of its own; use Python's `int`, `fractions.Fraction` and `dict`.