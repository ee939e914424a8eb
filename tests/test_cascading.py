import random

import pytest

from memkit.cascading import Cascading
from memkit.checks import check_raw_allocate_deallocate
from memkit.freelist import Freelist
from memkit.linear import LinearAllocator


def make_cascade(size=64):
    return Cascading(lambda: LinearAllocator(size))


def test_first_allocation_creates_a_node():
    alloc = make_cascade()
    assert alloc.node_count == 0
    address = alloc.allocate(16)
    assert address is not None
    assert alloc.node_count == 1
    assert alloc.owns(address)


def test_full_allocator_cascades_to_a_new_one():
    alloc = make_cascade(64)
    first = alloc.allocate(64)
    second = alloc.allocate(64)
    assert first is not None and second is not None
    assert first != second
    assert alloc.node_count == 2
    assert alloc.owns(first) and alloc.owns(second)


def test_empty_older_node_is_dropped():
    alloc = make_cascade(64)
    first = alloc.allocate(64)
    second = alloc.allocate(64)
    alloc.deallocate(first, 64)
    assert alloc.node_count == 1
    assert not alloc.owns(first)
    assert alloc.owns(second)


def test_newest_node_is_kept_when_empty():
    alloc = make_cascade(64)
    address = alloc.allocate(32)
    alloc.deallocate(address, 32)
    assert alloc.node_count == 1
    assert alloc.allocate(64) is not None


def test_too_large_request_is_refused():
    alloc = make_cascade(64)
    assert alloc.allocate(65) is None
    assert alloc.node_count == 1


def test_max_size_comes_from_sub_allocator():
    alloc = make_cascade(256)
    assert alloc.max_size() == 256


def test_deallocate_null_raises():
    alloc = make_cascade()
    with pytest.raises(ValueError):
        alloc.deallocate(None, 8)


def test_allocator_without_owns_is_rejected():
    class NoOwns:
        def allocate(self, n):
            return 1

        def deallocate(self, address, n):
            pass

    alloc = Cascading(NoOwns)
    with pytest.raises(TypeError):
        alloc.allocate(8)


def test_release_drops_every_node():
    alloc = make_cascade(64)
    alloc.allocate(64)
    alloc.allocate(64)
    alloc.release()
    assert alloc.node_count == 0
    assert not alloc.owns(None)


def test_context_manager_releases():
    with make_cascade(64) as alloc:
        address = alloc.allocate(64)
        assert alloc.owns(address)
    assert alloc.node_count == 0


def test_release_releases_sub_allocators():
    made = []

    def factory():
        freelist = Freelist(0, 64, LinearAllocator(64))
        made.append(freelist)
        return freelist

    alloc = Cascading(factory)
    address = alloc.allocate(64)
    assert alloc.owns(address) is True
    alloc.deallocate(address, 64)
    assert alloc.node_count == 1
    inner = made[0].allocator
    refused = inner.allocate(64)
    assert refused is None
    alloc.release()
    assert alloc.node_count == 0
    granted = inner.allocate(64)
    assert inner.owns(granted) is True


def test_fresh_cascades_compare_equal_and_diverge_after_use():
    a = make_cascade()
    b = make_cascade()
    assert a == b
    a.allocate(8)
    assert not a == b


def test_raw_allocate_deallocate_through_cascade():
    alloc = make_cascade(128)
    check_raw_allocate_deallocate(alloc, (2, 4, 8, 16, 32, 64), random.Random(7))
    assert alloc.node_count >= 1
    assert alloc.allocate(128) is not None