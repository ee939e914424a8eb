# memkit

Composable allocators over a simulated address space, and containers that
take their storage from them.

Allocators give out integer addresses instead of real memory. This lets you
build, combine and test allocation strategies in pure Python. Every allocator
has `allocate(n)`, which returns an address or `None`, and
`deallocate(address, n)`. Most also have `max_size()` and `owns(address)`.

## Allocators

- `memkit.linear.LinearAllocator(size)`: a bump allocator over an arena of
  `size` bytes. Each request is padded up to a multiple of 16 bytes;
  `align_to_architecture(n)` returns that padding. `allocate` returns `None`
  when the arena is full. Freeing the most recent block gives its space back.
  Once every block has been freed, the arena starts again from the beginning.
- `memkit.reference.Reference(allocator)`: a handle to another allocator that
  does not own it. Every call is passed on to that allocator.
- `memkit.shared.Shared(allocator)`: a reference-counted handle. `copy()`
  makes another handle to the same allocator and `use_count` tells how many
  handles are live. `release()` (also called on leaving a `with` block) drops
  the handle. When the last handle is dropped, the allocator's own `release()`
  is called, if it has one.
- `memkit.freelist.Freelist(minimum, maximum, allocator)`: serves requests
  whose size is in `(minimum, maximum]`. Each block it takes from the
  underlying allocator is `maximum` bytes. Freed blocks are kept and reused.
  `release()` hands them back to the underlying allocator. `maximum` must be
  at least 8.
- `memkit.segregator.Segregator(threshold, primary, fallback)`: sends requests
  of at most `threshold` bytes to `primary` and larger ones to `fallback`.
- `memkit.cascading.Cascading(factory)`: keeps a chain of allocators made by
  `factory()`. When the newest allocator cannot serve a request, a new one is
  created. An older allocator is dropped as soon as it holds no allocations.
  `node_count` gives the length of the chain. The allocators made by `factory`
  must have `owns`.

## Containers

- `memkit.binary_heap.BinaryHeap(compare, values, *, capacity, allocator,
  item_size)`: a priority queue. Its methods are `insert`, `peek`, `pop`,
  `find`, `clear` and `reserve`. Capacity doubles as the heap grows. The
  helpers `min_heap(values)` and `max_heap(values)` build a heap with
  `operator.lt` or `operator.gt` as `compare`.
- `memkit.trivial_vector.TrivialVector(values, *, size, fill, allocator,
  item_size)`: a growable sequence. Its methods are `append`, `extend`,
  `insert`, `erase`, `pop`, `clear`, `resize` and `reserve`. When it needs
  more room, capacity grows by the larger of half the current capacity and
  the room needed.
- `memkit.trivial_buffer.TrivialBuffer(size, values, *, fill)`: a buffer of
  fixed size. Indices wrap around modulo its size. `assign(values)` replaces
  every element and requires exactly `size` values.

If a container is given an `allocator`, it allocates each storage block from
that allocator as `capacity * item_size` bytes. The block's address is
available as `address`. When the allocator cannot supply a block, the
container raises `MemoryError`.

## Sample types

`memkit.types` holds three value types for trying out the containers:

- `Trivial(g_cost, h_cost)`: ordered by the sum of its two costs.
- `Packed(ref1, ref2, shorty, caca)`: ordered by `shorty`, which must fit in
  16 bits.
- `Complex(value)`: a value that may be empty. Comparing an empty `Complex`
  raises `ValueError`.

## Test helpers

- `memkit.unit.TestRegistry`: collects named test functions with `add(name,
  func)` or the `register` decorator, and holds at most 256 of them.
  `run(out)` writes a report and returns `(passed, total)`. If any test
  failed, it raises `TestRunFailed` instead.
- `memkit.unit.check(condition, message)` and `fail(message)` raise
  `AssertionFailure`.
- `memkit.checks.check_raw_allocate_deallocate(allocator, sizes, rng)`:
  allocates blocks of the given sizes in shuffled order, then frees and
  reallocates the first half, then frees everything. Along the way it checks
  that every allocation succeeds and that neighbouring addresses differ.

## Example

```python
from memkit.linear import LinearAllocator
from memkit.freelist import Freelist
from memkit.binary_heap import min_heap

arena = Freelist(0, 64, LinearAllocator(4096))
address = arena.allocate(32)
arena.deallocate(address, 32)
assert arena.allocate(16) == address   # the freed block is reused

heap = min_heap([4.0, 8.0, -1.0, 10.0])
assert heap.pop() == -1.0
```

## What it does not do

- Allocators take no lock around `allocate` and `deallocate`. If several
  threads share an allocator, guard it with a lock of your own. `Shared`
  locks only its use count.
- No real memory is reserved. Addresses are plain integers for bookkeeping.

## Development

Install the package with its `test` extra. This pulls in pytest, which runs
the suite in `tests/`.