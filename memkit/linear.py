"""A bump allocator handing out addresses from a fixed-size region."""

from __future__ import annotations

import threading
from typing import Optional

ALIGNMENT = 16


def align_to_architecture(n: int) -> int:
    """Return the padding that rounds ``n`` bytes up to a multiple of ALIGNMENT."""
    if n < 0:
        raise ValueError(f"size must not be negative, got {n}")
    return -n % ALIGNMENT


class _AddressSpace:
    """Hands out disjoint, aligned address ranges; address 0 is never used."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._next = ALIGNMENT * 4096

    def reserve(self, size: int) -> int:
        with self._lock:
            base = self._next
            self._next += size + align_to_architecture(size) + ALIGNMENT
            return base


_ADDRESS_SPACE = _AddressSpace()


class LinearAllocator:
    """Gives out consecutive chunks of its region by bumping a pointer.

    Memory is only reclaimed when the most recent allocation is freed, or when
    every allocation has been freed.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self._size = size
        self._base = _ADDRESS_SPACE.reserve(size)
        self._free = self._base
        self._object_count = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearAllocator):
            return NotImplemented
        return self._base == other._base

    def __hash__(self) -> int:
        return hash(self._base)

    def allocate(self, n: int) -> Optional[int]:
        """Return the address of ``n`` free bytes, or None if they do not fit."""
        total = n + align_to_architecture(n)
        if (self._free - self._base) + total > self._size:
            return None
        current = self._free
        self._free += total
        self._object_count += total
        return current

    def deallocate(self, address: Optional[int], n: int) -> None:
        """Release ``n`` bytes at ``address``."""
        if address is None:
            raise ValueError("cannot deallocate a null address")
        total = n + align_to_architecture(n)
        if self._free - total == address:
            self._free -= total
        self._object_count -= total
        if self._object_count == 0:
            self._free = self._base

    def max_size(self) -> int:
        """The largest allocation this allocator can satisfy."""
        return self._size

    def owns(self, address: Optional[int]) -> bool:
        """Whether ``address`` lies inside this allocator's region."""
        if address is None:
            return False
        return self._base <= address < self._base + self._size