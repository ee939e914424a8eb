"""An allocator that forwards every call to an allocator it does not own."""

from __future__ import annotations

from typing import Any, Optional


class Reference:
    """A lightweight handle to another allocator; copies share the target."""

    def __init__(self, allocator: Any) -> None:
        self._alloc = allocator

    @property
    def allocator(self) -> Any:
        """The allocator this handle forwards to."""
        return self._alloc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reference):
            return NotImplemented
        return self._alloc is other._alloc and self._alloc == other._alloc

    def __hash__(self) -> int:
        return id(self._alloc)

    def allocate(self, n: int) -> Optional[int]:
        """Allocate ``n`` bytes from the target allocator."""
        return self._alloc.allocate(n)

    def deallocate(self, address: Optional[int], n: int) -> None:
        """Return ``n`` bytes at ``address`` to the target allocator."""
        self._alloc.deallocate(address, n)

    def max_size(self) -> int:
        """The target allocator's largest allocation size."""
        return self._alloc.max_size()

    def owns(self, address: Optional[int]) -> bool:
        """Whether the target allocator owns ``address``."""
        return self._alloc.owns(address)