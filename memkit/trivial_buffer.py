"""A fixed-size buffer of plain values with wrap-around indexing."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class TrivialBuffer(Generic[T]):
    """A buffer of exactly ``size`` elements.

    Indexing wraps: position ``i`` refers to element ``i % size``. Slots not
    given a value hold ``fill``.
    """

    def __init__(
        self,
        size: int,
        values: Optional[Iterable[T]] = None,
        *,
        fill: Any = None,
    ) -> None:
        if size <= 0:
            raise ValueError(f"size must be positive, got {size}")
        initial = list(values) if values is not None else []
        if len(initial) > size:
            raise ValueError(
                f"{len(initial)} values do not fit in a buffer of {size}"
            )
        self._size = size
        self._items: list[Any] = initial + [fill] * (size - len(initial))

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> T:
        return self._items[index % self._size]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index % self._size] = value

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __reversed__(self) -> Iterator[T]:
        return reversed(list(self._items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrivialBuffer):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> TrivialBuffer[T]:
        return TrivialBuffer(self._size, self._items)

    def __repr__(self) -> str:
        return f"TrivialBuffer({self._size}, {self._items!r})"

    def assign(self, values: Iterable[T]) -> None:
        """Replace every element; exactly ``len(self)`` values are required."""
        new = list(values)
        if len(new) != self._size:
            raise ValueError(
                f"expected {self._size} values, got {len(new)}"
            )
        self._items = new