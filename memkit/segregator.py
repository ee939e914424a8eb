"""An allocator that picks one of two allocators by request size."""

from __future__ import annotations

from typing import Any, Optional


class Segregator:
    """Sends requests of at most ``threshold`` bytes to ``primary`` and larger
    requests to ``fallback``."""

    def __init__(self, threshold: int, primary: Any, fallback: Any) -> None:
        if threshold < 0:
            raise ValueError(f"threshold must not be negative, got {threshold}")
        self._threshold = threshold
        self._primary = primary
        self._fallback = fallback

    @property
    def threshold(self) -> int:
        return self._threshold

    @property
    def primary(self) -> Any:
        return self._primary

    @property
    def fallback(self) -> Any:
        return self._fallback

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Segregator):
            return NotImplemented
        return self._primary == other._primary and self._fallback == other._fallback

    def __hash__(self) -> int:
        return id(self)

    def _select(self, n: int) -> Any:
        return self._primary if n <= self._threshold else self._fallback

    def allocate(self, n: int) -> Optional[int]:
        """Allocate ``n`` bytes from the allocator chosen by size."""
        return self._select(n).allocate(n)

    def deallocate(self, address: Optional[int], n: int) -> None:
        """Return ``n`` bytes at ``address`` to the allocator chosen by size."""
        self._select(n).deallocate(address, n)

    def max_size(self) -> int:
        """The larger of the two allocators' maximum sizes."""
        return max(self._primary.max_size(), self._fallback.max_size())

    def owns(self, address: Optional[int]) -> bool:
        """Whether either allocator owns ``address``."""
        return self._primary.owns(address) or self._fallback.owns(address)