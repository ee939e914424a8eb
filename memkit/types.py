"""Sample value types used to exercise the allocators and containers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, eq=False)
class Trivial:
    """A pair of path costs, ordered by their total."""

    g_cost: float
    h_cost: float

    @property
    def total(self) -> float:
        return self.g_cost + self.h_cost

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trivial):
            return NotImplemented
        return self.g_cost == other.g_cost and self.h_cost == other.h_cost

    def __hash__(self) -> int:
        return hash((self.g_cost, self.h_cost))

    def __lt__(self, other: Trivial) -> bool:
        if not isinstance(other, Trivial):
            return NotImplemented
        return self.total < other.total

    def __gt__(self, other: Trivial) -> bool:
        if not isinstance(other, Trivial):
            return NotImplemented
        return self.total > other.total

    def __str__(self) -> str:
        return f"[g:{self.g_cost:g}, h:{self.h_cost:g}]"


@dataclass(frozen=True, eq=False)
class Packed:
    """Two references, a 16-bit number and a character, ordered by the number.

    Equality compares the references by identity, like pointers.
    """

    ref1: Any
    ref2: Any
    shorty: int
    caca: str

    def __post_init__(self) -> None:
        if not 0 <= self.shorty <= 0xFFFF:
            raise ValueError(f"shorty must fit in 16 bits, got {self.shorty}")
        if len(self.caca) != 1:
            raise ValueError(f"caca must be a single character, got {self.caca!r}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Packed):
            return NotImplemented
        return (
            self.ref1 is other.ref1
            and self.ref2 is other.ref2
            and self.shorty == other.shorty
            and self.caca == other.caca
        )

    def __hash__(self) -> int:
        return hash((id(self.ref1), id(self.ref2), self.shorty, self.caca))

    def __lt__(self, other: Packed) -> bool:
        if not isinstance(other, Packed):
            return NotImplemented
        return self.shorty < other.shorty

    def __gt__(self, other: Packed) -> bool:
        if not isinstance(other, Packed):
            return NotImplemented
        return self.shorty > other.shorty

    def __str__(self) -> str:
        return (
            f"[p1:{id(self.ref1):#x}, p2:{id(self.ref2):#x}, "
            f"short:{self.shorty}, caca:{self.caca}]"
        )


class Complex:
    """A value held in its own storage, which may be empty.

    Comparing an empty instance is an error.
    """

    __slots__ = ("_value",)

    def __init__(self, value: float | None = None) -> None:
        self._value = None if value is None else float(value)

    @property
    def value(self) -> float | None:
        return self._value

    @property
    def empty(self) -> bool:
        return self._value is None

    def _require(self) -> float:
        if self._value is None:
            raise ValueError("cannot compare an empty Complex")
        return self._value

    def __copy__(self) -> Complex:
        return Complex(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._require() == other._require()

    def __hash__(self) -> int:
        return hash(self._value)

    def __lt__(self, other: Complex) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._require() < other._require()

    def __gt__(self, other: Complex) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self._require() > other._require()

    def __repr__(self) -> str:
        return f"Complex({self._value!r})"

    def __str__(self) -> str:
        shown = "null" if self._value is None else f"{self._value:g}"
        return f"[value:{shown}]"