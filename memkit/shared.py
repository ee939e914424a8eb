"""A reference-counted allocator handle."""

from __future__ import annotations

import threading
from typing import Any, Optional


class _Block:
    __slots__ = ("allocator", "use_count", "lock")

    def __init__(self, allocator: Any) -> None:
        self.allocator = allocator
        self.use_count = 1
        self.lock = threading.Lock()


class Shared:
    """Shares one allocator between handles, counting how many are alive.

    When the last handle is released the allocator is released too, if it
    has a ``release`` method.
    """

    def __init__(self, allocator: Any) -> None:
        self._block: Optional[_Block] = _Block(allocator)

    def _require(self) -> _Block:
        if self._block is None:
            raise RuntimeError("this shared allocator handle has been released")
        return self._block

    @property
    def allocator(self) -> Any:
        """The shared underlying allocator."""
        return self._require().allocator

    @property
    def use_count(self) -> int:
        """Number of live handles sharing the allocator; 0 once released."""
        if self._block is None:
            return 0
        return self._block.use_count

    def copy(self) -> Shared:
        """Return a new handle to the same allocator."""
        block = self._require()
        with block.lock:
            block.use_count += 1
        handle = Shared.__new__(Shared)
        handle._block = block
        return handle

    __copy__ = copy

    def release(self) -> None:
        """Drop this handle; releasing an empty handle does nothing."""
        block = self._block
        if block is None:
            return
        self._block = None
        with block.lock:
            block.use_count -= 1
            last = block.use_count == 0
        if last:
            release = getattr(block.allocator, "release", None)
            if callable(release):
                release()

    def __enter__(self) -> Shared:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shared):
            return NotImplemented
        if self._block is None or other._block is None:
            return self._block is other._block
        return (
            self._block is other._block
            and self._block.allocator == other._block.allocator
        )

    def __hash__(self) -> int:
        return id(self._block)

    def allocate(self, n: int) -> Optional[int]:
        """Allocate ``n`` bytes from the shared allocator."""
        return self._require().allocator.allocate(n)

    def deallocate(self, address: Optional[int], n: int) -> None:
        """Return ``n`` bytes at ``address`` to the shared allocator."""
        self._require().allocator.deallocate(address, n)

    def max_size(self) -> int:
        """The shared allocator's largest allocation size."""
        return self._require().allocator.max_size()

    def owns(self, address: Optional[int]) -> bool:
        """Whether the shared allocator owns ``address``."""
        return self._require().allocator.owns(address)