import pytest

from memkit.linear import ALIGNMENT, LinearAllocator, align_to_architecture


@pytest.mark.parametrize("n", range(0, 70))
def test_align_rounds_up_to_alignment(n):
    pad = align_to_architecture(n)
    assert 0 <= pad < ALIGNMENT
    assert (n + pad) % ALIGNMENT == 0


def test_align_known_values():
    assert align_to_architecture(ALIGNMENT) == 0
    assert align_to_architecture(1) == ALIGNMENT - 1


def test_align_rejects_negative():
    with pytest.raises(ValueError):
        align_to_architecture(-1)


def test_allocations_are_aligned_unique_and_owned():
    alloc = LinearAllocator(4096)
    addresses = [alloc.allocate(n) for n in (2, 4, 8, 16, 32, 64)]
    assert all(a is not None and a % ALIGNMENT == 0 for a in addresses)
    assert len(set(addresses)) == len(addresses)
    assert all(alloc.owns(a) for a in addresses)


def test_full_capacity_then_exhausted():
    alloc = LinearAllocator(64)
    first = alloc.allocate(64)
    assert alloc.owns(first)
    assert alloc.allocate(1) is None


def test_too_large_returns_none():
    alloc = LinearAllocator(64)
    assert alloc.allocate(65) is None
    assert alloc.max_size() == 64


def test_deallocating_last_allocation_rewinds():
    alloc = LinearAllocator(4096)
    alloc.allocate(8)
    second = alloc.allocate(24)
    alloc.deallocate(second, 24)
    assert alloc.allocate(24) == second


def test_owns_rejects_foreign_and_out_of_range_addresses():
    a = LinearAllocator(128)
    b = LinearAllocator(128)
    base = a.allocate(16)
    other = b.allocate(16)
    assert not a.owns(other)
    assert not b.owns(base)
    assert not a.owns(base + 128)
    assert a.owns(base + 127)
    assert not a.owns(None)


def test_deallocate_null_raises():
    alloc = LinearAllocator(64)
    with pytest.raises(ValueError):
        alloc.deallocate(None, 8)


def test_equality_is_identity_of_region():
    a = LinearAllocator(64)
    b = LinearAllocator(64)
    assert a == a
    assert not (a == b)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        LinearAllocator(-1)