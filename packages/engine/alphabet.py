"""
Symbol alphabet for secret codes.

Conventions:
  - The alphabet is an ORDERED set of single-character symbols.
  - Order matters only as a deterministic tie-break and for the default
    fill symbol (the first one).
  - Default instance: B A C X I U, secrets up to 18 symbols long.
"""

from __future__ import annotations
from typing import Iterable, Sequence, Tuple

# Single source of truth for the reference instance.
DEFAULT_SYMBOLS = "BACXIU"
MAX_SECRET_LENGTH = 18


def _assert_max_length(max_length: int) -> None:
    """Guardrail: a session needs room for at least one symbol."""
    if max_length < 1:
        raise ValueError(f"max_length must be >= 1; got {max_length}")


class Alphabet:
    """Ordered, immutable set of distinct single-character symbols."""

    def __init__(self, symbols: Iterable[str]):
        syms: Tuple[str, ...] = tuple(symbols)
        if not syms:
            raise ValueError("alphabet must contain at least one symbol")
        for s in syms:
            if not isinstance(s, str) or len(s) != 1:
                raise ValueError(f"alphabet symbols must be single characters; got {s!r}")
        if len(set(syms)) != len(syms):
            raise ValueError(f"alphabet symbols must be distinct; got {''.join(syms)!r}")
        self.symbols = syms
        self._index = {s: i for i, s in enumerate(syms)}

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def __getitem__(self, i: int) -> str:
        return self.symbols[i]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._index

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Alphabet) and self.symbols == other.symbols

    def __hash__(self) -> int:
        return hash(self.symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(self.symbols)!r})"

    def __str__(self) -> str:
        return "".join(self.symbols)

    @property
    def first(self) -> str:
        """Default fill symbol and the one used for length detection."""
        return self.symbols[0]

    def index(self, symbol: str) -> int:
        """Position of `symbol` in the alphabet; ValueError if foreign."""
        try:
            return self._index[symbol]
        except KeyError as e:
            raise ValueError(f"symbol {symbol!r} not in alphabet {self}") from e

    def repeat(self, symbol: str, n: int) -> str:
        """Uniform probe string: `symbol` repeated n times."""
        self.index(symbol)
        return symbol * n

    def join(self, seq: Sequence[str]) -> str:
        return "".join(seq)


DEFAULT_ALPHABET = Alphabet(DEFAULT_SYMBOLS)
