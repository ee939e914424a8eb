"""Reusable checks that exercise an allocator's allocate/deallocate cycle."""

from __future__ import annotations

import random
from typing import Any, Iterable, Optional

from .unit import check

RANDOM_GENERATOR = random.Random()


def check_raw_allocate_deallocate(
    allocator: Any,
    sizes: Iterable[int],
    rng: Optional[random.Random] = None,
) -> None:
    """Allocate blocks of ``sizes`` in shuffled order, free and reallocate the
    first half, then free everything.

    Raises :class:`memkit.unit.AssertionFailure` if an allocation fails or two
    neighbouring allocations share an address.
    """
    generator = RANDOM_GENERATOR if rng is None else rng
    order = list(sizes)
    generator.shuffle(order)
    half = len(order) // 2

    addresses: list[int] = []
    for size in order:
        address = allocator.allocate(size)
        check(address is not None, "valid_ptr")
        addresses.append(address)

    for before, after in zip(addresses, addresses[1:]):
        check(before != after, "ptr_not_equal")

    for address, size in zip(addresses[:half], order[:half]):
        allocator.deallocate(address, size)

    for index, size in enumerate(order[:half]):
        address = allocator.allocate(size)
        check(address is not None, "valid_ptr")
        addresses[index] = address

    for before, after in zip(addresses, addresses[1:]):
        check(before != after, "ptr_not_equal")

    for address, size in zip(addresses, order):
        allocator.deallocate(address, size)