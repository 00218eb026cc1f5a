"""
Per-symbol position eligibility.

A PositionMask is the set of positions a symbol may still occupy. It is a
fixed-size bitset over range(size) and bits only ever get cleared. When a
position is confirmed, RefinementState.confirm discards that bit from every
other symbol's mask; the confirmed symbol keeps its own.
"""

from __future__ import annotations
from typing import Iterator, List


class PositionMask:
    __slots__ = ("size", "_bits")

    def __init__(self, size: int, bits: int | None = None):
        if size < 0:
            raise ValueError(f"size must be >= 0; got {size}")
        self.size = size
        full = (1 << size) - 1
        self._bits = full if bits is None else (bits & full)

    @classmethod
    def full(cls, size: int) -> "PositionMask":
        return cls(size)

    @classmethod
    def empty(cls, size: int) -> "PositionMask":
        return cls(size, 0)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < self.size:
            raise IndexError(f"position {pos} out of range for size {self.size}")

    def __contains__(self, pos: int) -> bool:
        self._check(pos)
        return bool((self._bits >> pos) & 1)

    def discard(self, pos: int) -> None:
        self._check(pos)
        self._bits &= ~(1 << pos)

    def __iter__(self) -> Iterator[int]:
        return (p for p in range(self.size) if (self._bits >> p) & 1)

    def __len__(self) -> int:
        return bin(self._bits).count("1")

    def __eq__(self, other: object) -> bool:
        return (isinstance(other, PositionMask)
                and self.size == other.size and self._bits == other._bits)

    def positions(self) -> List[int]:
        return list(self)

    def copy(self) -> "PositionMask":
        return PositionMask(self.size, self._bits)

    def __repr__(self) -> str:
        # Position 0 printed first
        return "PositionMask(" + "".join("1" if p in self else "0" for p in range(self.size)) + ")"
