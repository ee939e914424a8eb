"""A growable sequence of plain values, optionally backed by an allocator."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar, overload

T = TypeVar("T")

DEFAULT_ITEM_SIZE = 8


class TrivialVector(Generic[T]):
    """A dynamic array of plain values.

    Growth follows a fixed policy: when more room is needed the capacity
    grows by the larger of half the current capacity and the room required.
    When an ``allocator`` is given, every storage block of ``capacity``
    elements of ``item_size`` bytes is taken from it, and the block's address
    is available as :attr:`address`.

    Slots that come into existence without a value (through ``size`` or
    :meth:`resize`) hold ``fill``.
    """

    def __init__(
        self,
        values: Optional[Iterable[T]] = None,
        *,
        size: int = 0,
        fill: Any = None,
        allocator: Any = None,
        item_size: int = DEFAULT_ITEM_SIZE,
    ) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        if item_size <= 0:
            raise ValueError(f"item_size must be positive, got {item_size}")
        if values is not None and size:
            raise TypeError("give either values or size, not both")
        self._allocator = allocator
        self._item_size = item_size
        self._fill = fill
        self._items: list[T] = []
        self._capacity = 0
        self._address: Optional[int] = None

        initial = list(values) if values is not None else [fill] * size
        if initial:
            self._set_capacity(len(initial))
            self._items = initial

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
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[T]:
        return reversed(list(self._items))

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TrivialVector):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TrivialVector({self._items!r})"

    def __copy__(self) -> TrivialVector[T]:
        return TrivialVector(
            self._items,
            fill=self._fill,
            allocator=self._allocator,
            item_size=self._item_size,
        )

    def __enter__(self) -> TrivialVector[T]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._release_storage()

    def append(self, value: T) -> int:
        """Add ``value`` at the end and return its index."""
        if len(self._items) == self._capacity:
            self._expand(1)
        self._items.append(value)
        return len(self._items) - 1

    def extend(self, values: Iterable[T]) -> int:
        """Add every value at the end and return the index of the first one."""
        added = list(values)
        first = len(self._items)
        if self._capacity - first < len(added):
            self._expand(len(added))
        self._items.extend(added)
        return first

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before position ``index`` (which may equal the length)."""
        if not 0 <= index <= len(self._items):
            raise IndexError(f"insert position {index} out of range")
        if len(self._items) == self._capacity:
            self._expand(1)
        self._items.insert(index, value)

    def erase(self, start: int, stop: Optional[int] = None) -> int:
        """Remove the element at ``start``, or the range ``[start, stop)``.

        Returns the index of the element that now follows the removed ones.
        """
        size = len(self._items)
        if stop is None:
            if not 0 <= start < size:
                raise IndexError(f"erase position {start} out of range")
            del self._items[start]
            return start
        if start > stop:
            raise ValueError(f"erase range start {start} is after stop {stop}")
        if start < 0 or stop > size:
            raise IndexError(f"erase range [{start}, {stop}) out of range")
        del self._items[start:stop]
        return start

    def pop(self) -> T:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from an empty vector")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every element, keeping the storage."""
        self._items.clear()

    def resize(self, n: int) -> None:
        """Make the vector hold ``n`` elements, padding with the fill value."""
        if n < 0:
            raise ValueError(f"size must not be negative, got {n}")
        if self._capacity < n:
            self._expand(n - self._capacity)
        if n < len(self._items):
            del self._items[n:]
        else:
            self._items.extend([self._fill] * (n - len(self._items)))

    def reserve(self, n: int) -> None:
        """Grow the storage to hold at least ``n`` elements."""
        if self._capacity < n:
            self._set_capacity(n)

    def _expand(self, n: int) -> None:
        self._set_capacity(self._capacity + max(self._capacity // 2, n))

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