"""
Secret generators for experiments and exhaustive checks.

- all_secrets:    every code of one length, in alphabet (lexicographic) order.
                  |alphabet| ** length of them, so keep the length small.
- sample_secrets: seeded random codes with lengths in [min_length, max_length].
"""

from __future__ import annotations
from itertools import product
from typing import Iterator, List

import numpy as np

from packages.engine import Alphabet, DEFAULT_ALPHABET, MAX_SECRET_LENGTH


def all_secrets(length: int, alphabet: Alphabet = DEFAULT_ALPHABET) -> Iterator[str]:
    if length < 1:
        raise ValueError(f"length must be >= 1; got {length}")
    for combo in product(alphabet.symbols, repeat=length):
        yield "".join(combo)


def sample_secrets(
        k: int,
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        min_length: int = 1,
        max_length: int = MAX_SECRET_LENGTH,
        seed: int | None = None,
) -> List[str]:
    """
    Draw `k` secrets uniformly per position; lengths are uniform over
    [min_length, max_length]. Same seed, same list.
    """
    if not 1 <= min_length <= max_length:
        raise ValueError(f"need 1 <= min_length <= max_length; got {min_length}, {max_length}")
    rng = np.random.default_rng(seed)
    symbols = np.array(alphabet.symbols)
    lengths = rng.integers(min_length, max_length, size=k, endpoint=True)
    return ["".join(rng.choice(symbols, size=int(n))) for n in lengths]
