import random

import pytest

from memkit.checks import check_raw_allocate_deallocate
from memkit.freelist import Freelist
from memkit.linear import LinearAllocator
from memkit.reference import Reference
from memkit.unit import AssertionFailure


class Recording:
    def __init__(self, inner):
        self.inner = inner
        self.live = {}
        self.allocations = 0
        self.deallocations = []

    def allocate(self, n):
        address = self.inner.allocate(n)
        if address is not None:
            self.live[address] = n
            self.allocations += 1
        return address

    def deallocate(self, address, n):
        self.deallocations.append((address, n, self.live.pop(address)))
        self.inner.deallocate(address, n)


def _start_address(alloc):
    start = alloc.allocate(8)
    alloc.deallocate(start, 8)
    return start


def test_linear_allocator_is_fully_freed():
    alloc = LinearAllocator(4096)
    start = _start_address(alloc)
    check_raw_allocate_deallocate(alloc, (2, 4, 8, 16, 32, 64), random.Random(1))
    whole = alloc.allocate(4096)
    assert whole == start


def test_every_block_is_freed_with_its_own_size():
    alloc = Recording(LinearAllocator(4096))
    sizes = (2, 4, 8, 16, 32, 64)
    check_raw_allocate_deallocate(alloc, sizes, random.Random(3))
    assert alloc.live == {}
    assert alloc.allocations == len(sizes) + len(sizes) // 2
    assert all(n == allocated for _, n, allocated in alloc.deallocations)


def test_sizes_argument_is_not_modified():
    sizes = [2, 4, 8, 16, 32, 64]
    check_raw_allocate_deallocate(LinearAllocator(4096), sizes, random.Random(5))
    assert sizes == [2, 4, 8, 16, 32, 64]


def test_freelist_over_linear():
    freelist = Freelist(0, 8, LinearAllocator(4096))
    check_raw_allocate_deallocate(freelist, (1, 2, 4, 4, 8, 8), random.Random(2))
    assert len(set(freelist.allocate(8) for _ in range(6))) == 6


def test_reference_allocator():
    target = LinearAllocator(4096)
    start = _start_address(target)
    check_raw_allocate_deallocate(Reference(target), (2, 4, 8, 16, 32, 64))
    whole = target.allocate(4096)
    assert whole == start


def test_exhausted_allocator_fails():
    with pytest.raises(AssertionFailure, match="valid_ptr"):
        check_raw_allocate_deallocate(LinearAllocator(16), (16, 32), random.Random(0))


def test_repeated_address_fails():
    class SameAddress:
        def allocate(self, n):
            return 4096

        def deallocate(self, address, n):
            pass

    with pytest.raises(AssertionFailure, match="ptr_not_equal"):
        check_raw_allocate_deallocate(SameAddress(), (8, 8), random.Random(0))