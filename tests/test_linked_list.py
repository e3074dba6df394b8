import pytest

from algokit.linked_list import LinkedList, Position, StackAllocator, StackStorage


class CountingAllocator:
    def __init__(self, fail_on=None):
        self.fail_on = fail_on
        self.allocations = 0
        self.deallocations = 0

    def allocate(self, count, item_size):
        self.allocations += 1
        if self.fail_on is not None and self.allocations == self.fail_on:
            raise RuntimeError("allocation refused")
        return self.allocations

    def deallocate(self, offset, count):
        self.deallocations += 1


def reverse_values(lst):
    values = list(reversed(lst))
    pos = lst.begin()
    for value in values:
        lst.set(pos, value)
        pos = pos.next()


def as_text(lst):
    return "".join(str(x) for x in lst)


def advance(pos, steps):
    for _ in range(abs(steps)):
        pos = pos.next() if steps > 0 else pos.prev()
    return pos


@pytest.fixture(params=["plain", "stack"])
def allocator(request):
    if request.param == "plain":
        return None
    return StackAllocator(StackStorage(200_000))


def test_basic_list(allocator):
    lst = LinkedList(allocator=allocator)
    assert len(lst) == 0

    lst.push_back(3)
    lst.push_back(4)
    lst.push_front(2)
    lst.push_back(5)
    lst.push_front(1)
    reverse_values(lst)
    assert len(lst) == 5
    assert as_text(lst) == "54321"

    cit = advance(lst.begin(), 3)
    lst.insert(cit, 6)
    lst.insert(cit, 7)
    cit = advance(cit, -3)
    lst.insert(cit, 8)
    lst.insert(cit, 9)
    assert len(lst) == 9
    assert as_text(lst) == "548936721"

    lst.erase(lst.begin())
    lst.erase(cit)
    lst.pop_front()
    lst.pop_back()

    copy = lst.copy()
    assert len(lst) == 5
    assert len(copy) == 5
    assert as_text(lst) == "89672"

    lst.erase(lst.end().prev())
    assert len(lst) == 4
    lst.set(lst.end().prev(), 3)
    assert as_text(lst) == "8963"
    assert len(copy) == 5
    assert as_text(copy) == "89672"

    last = copy.end().prev()
    assert copy.get(last) == 2
    assert copy.get(advance(copy.end(), -2)) == 7


def test_reversed_iteration():
    lst = LinkedList([1, 2, 3])
    assert list(reversed(lst)) == [3, 2, 1]


def test_allocation_counts():
    alloc = CountingAllocator()
    lst = LinkedList(range(5), alloc)
    assert len(lst) == 5
    assert alloc.allocations == 5

    another = lst.copy()
    assert len(another) == 5
    assert alloc.allocations == 10
    assert alloc.deallocations == 0

    another.pop_back()
    another.pop_front()
    assert alloc.deallocations == 2
    assert list(another) == [1, 2, 3]

    while len(lst):
        lst.pop_back()
    assert alloc.deallocations == 7


def test_construction_failure_releases_nodes():
    alloc = CountingAllocator(fail_on=4)
    with pytest.raises(RuntimeError):
        LinkedList(range(8), alloc)
    assert alloc.allocations == 4
    assert alloc.deallocations == 3


def test_copy_failure_releases_nodes():
    alloc = CountingAllocator()
    lst = LinkedList(range(13), alloc)
    before_alloc = alloc.allocations
    alloc.fail_on = before_alloc + 4
    with pytest.raises(RuntimeError):
        lst.copy()
    assert alloc.allocations == before_alloc + 4
    assert alloc.deallocations == 3
    assert list(lst) == list(range(13))


def test_copy_shares_allocator():
    alloc = StackAllocator(StackStorage(1_000))
    lst = LinkedList([1, 2], alloc)
    copy = lst.copy()
    assert copy.allocator is lst.allocator
    assert list(copy) == [1, 2]


def test_alignment():
    storage = StackStorage(200_000)
    char_alloc = StackAllocator(storage)
    int_alloc = StackAllocator(storage)
    pchar = char_alloc.allocate(3, 1)
    pint = int_alloc.allocate(1, 4)
    assert pchar != pint
    assert pint % 4 == 0
    assert pint == 4
    char_alloc.deallocate(pchar, 3)
    pchar = char_alloc.allocate(555, 1)
    assert pchar == 8
    ld_alloc = StackAllocator(storage)
    pld = ld_alloc.allocate(25, 16)
    assert pld % 16 == 0
    assert pld == 576
    assert storage.used == 576 + 25 * 16


def test_storage_exhaustion():
    alloc = StackAllocator(StackStorage(48))
    lst = LinkedList([1, 2], alloc)
    with pytest.raises(MemoryError):
        lst.push_back(3)
    assert list(lst) == [1, 2]


def test_allocator_rejects_bad_sizes():
    alloc = StackAllocator(StackStorage(10))
    with pytest.raises(ValueError):
        alloc.allocate(1, 0)
    with pytest.raises(ValueError):
        StackStorage(-1)


def test_end_wraps_to_begin():
    lst = LinkedList([1, 2, 3])
    assert lst.end().next() == lst.begin()
    assert lst.begin().prev() == lst.end()
    assert isinstance(lst.begin(), Position)


def test_pop_empty_raises():
    lst = LinkedList()
    with pytest.raises(IndexError):
        lst.pop_back()
    with pytest.raises(IndexError):
        lst.pop_front()


def test_end_has_no_element():
    lst = LinkedList([1])
    with pytest.raises(IndexError):
        lst.get(lst.end())
    with pytest.raises(IndexError):
        lst.erase(lst.end())


def test_foreign_and_stale_positions():
    first = LinkedList([1, 2])
    second = LinkedList([3])
    with pytest.raises(ValueError):
        first.insert(second.begin(), 5)
    pos = first.begin()
    first.erase(pos)
    with pytest.raises(ValueError):
        first.erase(pos)
    assert list(first) == [2]


def test_insert_and_erase_return_positions():
    lst = LinkedList([1, 3])
    new = lst.insert(lst.begin().next(), 2)
    assert lst.get(new) == 2
    after = lst.erase(new)
    assert lst.get(after) == 3
    assert list(lst) == [1, 3]


def test_pop_returns_values():
    lst = LinkedList([1, 2, 3])
    assert lst.pop_front() == 1
    assert lst.pop_back() == 3
    assert list(lst) == [2]