"""A priority queue stored as a binary heap, optionally backed by an allocator."""

from __future__ import annotations

import operator
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

Compare = Callable[[Any, Any], bool]

DEFAULT_ITEM_SIZE = 8


class BinaryHeap(Generic[T]):
    """A binary heap ordered by ``compare``.

    ``compare(a, b)`` returns true when ``a`` belongs closer to the root than
    ``b``: ``operator.lt`` gives a min heap, ``operator.gt`` a max heap.

    When an ``allocator`` is given, every storage block of ``capacity``
    elements of ``item_size`` bytes is taken from it, and the block's address
    is available as :attr:`address`. Storage grows by doubling.
    """

    def __init__(
        self,
        compare: Compare = operator.lt,
        values: Optional[Iterable[T]] = None,
        *,
        capacity: int = 0,
        allocator: Any = None,
        item_size: int = DEFAULT_ITEM_SIZE,
    ) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        if item_size <= 0:
            raise ValueError(f"item_size must be positive, got {item_size}")
        self._compare = compare
        self._allocator = allocator
        self._item_size = item_size
        self._items: list[T] = []
        self._capacity = 0
        self._address: Optional[int] = None

        initial = list(values) if values is not None else []
        wanted = max(capacity, len(initial))
        if wanted:
            self._set_capacity(wanted)
        for value in initial:
            self.insert(value)

    @property
    def compare(self) -> Compare:
        """The ordering function of this heap."""
        return self._compare

    @property
    def allocator(self) -> Any:
        """The allocator backing the storage, or None."""
        return self._allocator

    @property
    def address(self) -> Optional[int]:
        """Address of the current storage block, or None if there is none."""
        return self._address

    @property
    def capacity(self) -> int:
        """Number of elements the storage can hold before it must grow."""
        return self._capacity

    @property
    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in storage (heap) order."""
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[T]:
        return reversed(list(self._items))

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __repr__(self) -> str:
        return f"BinaryHeap({self._items!r})"

    def __copy__(self) -> BinaryHeap[T]:
        duplicate: BinaryHeap[T] = BinaryHeap(
            self._compare,
            capacity=len(self._items),
            allocator=self._allocator,
            item_size=self._item_size,
        )
        duplicate._items = list(self._items)
        return duplicate

    def __enter__(self) -> BinaryHeap[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._release_storage()

    def reserve(self, n: int) -> None:
        """Grow the storage to hold at least ``n`` elements."""
        if self._capacity < n:
            self._set_capacity(n)

    def insert(self, value: T) -> int:
        """Insert ``value`` and return the index where it came to rest."""
        if len(self._items) == self._capacity:
            self._expand(1)
        self._items.append(value)
        return self._sift_up(len(self._items) - 1)

    def peek(self) -> T:
        """Return the root element without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def pop(self) -> T:
        """Remove and return the root element."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return root

    def find(self, value: object) -> Optional[int]:
        """Return the storage index of an element equal to ``value``, or None."""
        for index, item in enumerate(self._items):
            if item == value:
                return index
        return None

    def clear(self) -> None:
        """Remove every element, keeping the storage."""
        self._items.clear()

    def _expand(self, n: int) -> None:
        self._set_capacity(self._capacity + max(self._capacity, n))

    def _set_capacity(self, n: int) -> None:
        if self._allocator is not None:
            new_address = None
            if n > 0:
                new_address = self._allocator.allocate(n * self._item_size)
                if new_address is None:
                    raise MemoryError(
                        f"allocator could not provide {n * self._item_size} bytes"
                    )
            if self._address is not None:
                self._allocator.deallocate(
                    self._address, self._capacity * self._item_size
                )
            self._address = new_address
        del self._items[n:]
        self._capacity = n

    def _release_storage(self) -> None:
        self._items.clear()
        if self._allocator is not None and self._address is not None:
            self._allocator.deallocate(self._address, self._capacity * self._item_size)
        self._address = None
        self._capacity = 0

    def _sift_up(self, index: int) -> int:
        items = self._items
        value = items[index]
        while index != 0:
            parent = (index - 1) // 2
            if not self._compare(value, items[parent]):
                break
            items[index] = items[parent]
            index = parent
        items[index] = value
        return index

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        parent = index
        while True:
            left = parent * 2 + 1
            right = left + 1
            child = parent
            if left < size and self._compare(items[left], items[child]):
                child = left
            if right < size and self._compare(items[right], items[child]):
                child = right
            if child == parent:
                break
            items[child], items[parent] = items[parent], items[child]
            parent = child


def min_heap(values: Iterable[T] = ()) -> BinaryHeap[T]:
    """Build a heap whose root is its smallest element."""
    return BinaryHeap(operator.lt, values)


def max_heap(values: Iterable[T] = ()) -> BinaryHeap[T]:
    """Build a heap whose root is its largest element."""
    return BinaryHeap(operator.gt, values)