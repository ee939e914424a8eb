"""An allocator that grows by creating more instances of a sub-allocator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass(eq=False)
class _Node:
    allocator: Any
    allocations: int = 0


class Cascading:
    """Owns a chain of allocators made by ``factory``.

    Allocation uses the newest allocator; when it cannot satisfy a request, a
    new allocator is created in front of the chain. An allocator other than
    the newest one is dropped as soon as it holds no allocations.
    Deallocation walks the chain, so it can take time linear in its length.
    The allocators made must have an ``owns(address)`` method.
    """

    def __init__(self, factory: Callable[[], Any]) -> None:
        self._factory = factory
        self._nodes: list[_Node] = []

    def _new_node(self) -> _Node:
        allocator = self._factory()
        if not callable(getattr(allocator, "owns", None)):
            raise TypeError("the allocator is required to have an 'owns' method")
        return _Node(allocator)

    def _head(self) -> _Node:
        if not self._nodes:
            self._nodes.append(self._new_node())
        return self._nodes[0]

    @property
    def node_count(self) -> int:
        """Number of allocator instances currently in the chain."""
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cascading):
            return NotImplemented
        mine = self._nodes[0] if self._nodes else None
        theirs = other._nodes[0] if other._nodes else None
        return mine is theirs

    def __hash__(self) -> int:
        return id(self)

    def __enter__(self) -> Cascading:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def allocate(self, n: int) -> Optional[int]:
        """Return an address for ``n`` bytes, or None if it cannot be had,
        creating a new allocator instance when the newest one is full."""
        head = self._head()

        max_size = getattr(head.allocator, "max_size", None)
        if callable(max_size) and n > max_size():
            return None

        address = head.allocator.allocate(n)
        if address is None:
            head = self._new_node()
            self._nodes.insert(0, head)
            address = head.allocator.allocate(n)

        if address is not None:
            head.allocations += 1
        return address

    def deallocate(self, address: Optional[int], n: int) -> None:
        """Return ``n`` bytes at ``address`` to the allocator that owns them."""
        if address is None:
            raise ValueError("cannot deallocate a null address")

        for position, node in enumerate(self._nodes):
            if node.allocator.owns(address):
                node.allocator.deallocate(address, n)
                node.allocations -= 1
                if node.allocations == 0 and position > 0:
                    del self._nodes[position]
                    self._release_allocator(node.allocator)
                return

    def max_size(self) -> int:
        """The largest allocation the allocator instances can satisfy."""
        return self._head().allocator.max_size()

    def owns(self, address: Optional[int]) -> bool:
        """Whether any allocator in the chain owns ``address``."""
        return any(node.allocator.owns(address) for node in self._nodes)

    def release(self) -> None:
        """Drop every allocator instance in the chain."""
        nodes, self._nodes = self._nodes, []
        for node in nodes:
            self._release_allocator(node.allocator)

    @staticmethod
    def _release_allocator(allocator: Any) -> None:
        release = getattr(allocator, "release", None)
        if callable(release):
            release()