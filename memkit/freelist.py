"""An allocator that recycles freed blocks of a bounded size range."""

from __future__ import annotations

from typing import Any, Optional

POINTER_SIZE = 8


class Freelist:
    """Serves requests whose size is in ``(minimum, maximum]`` from a free list.

    Every block taken from the underlying allocator is ``maximum`` bytes long.
    Freed blocks are kept for reuse and only handed back to the underlying
    allocator by :meth:`release`.
    """

    def __init__(self, minimum: int, maximum: int, allocator: Any) -> None:
        if maximum < POINTER_SIZE:
            raise ValueError(
                f"maximum must be at least {POINTER_SIZE} bytes, got {maximum}"
            )
        self._min = minimum
        self._max = maximum
        self._alloc = allocator
        self._free: list[int] = []

    @property
    def allocator(self) -> Any:
        """The underlying allocator."""
        return self._alloc

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Freelist):
            return NotImplemented
        return self._alloc == other._alloc and self._free == other._free

    def __hash__(self) -> int:
        return id(self)

    def __enter__(self) -> Freelist:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def _in_range(self, n: int) -> bool:
        return self._min < n <= self._max

    def allocate(self, n: int) -> Optional[int]:
        """Return an address for ``n`` bytes, or None if ``n`` is out of range
        or the underlying allocator is exhausted."""
        if not self._in_range(n):
            return None
        if self._free:
            return self._free.pop()
        return self._alloc.allocate(self._max)

    def deallocate(self, address: Optional[int], n: int) -> None:
        """Keep the block at ``address`` for reuse if ``n`` is in range."""
        if address is None:
            raise ValueError("cannot deallocate a null address")
        if self._in_range(n):
            self._free.append(address)

    def max_size(self) -> int:
        """The underlying allocator's largest allocation size."""
        return self._alloc.max_size()

    def owns(self, address: Optional[int]) -> bool:
        """Whether the underlying allocator owns ``address``."""
        return self._alloc.owns(address)

    def release(self) -> None:
        """Hand every recycled block back to the underlying allocator."""
        while self._free:
            self._alloc.deallocate(self._free.pop(), self._max)