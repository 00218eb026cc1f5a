"""
Positional-match scoring for a single (guess, secret) pair.

Conventions:
  - LENGTH_MISMATCH (-2) is returned whenever len(guess) != len(secret);
    it carries no positional information.
  - Otherwise the reply is the number of positions i with guess[i] == secret[i].
  - A reply equal to len(guess) means the guess IS the secret.

SecretOracle wraps a hidden secret behind exactly that contract so the
discovery code can be run offline, deterministically, as many times as needed.
"""

from __future__ import annotations
from typing import Sequence

from .alphabet import Alphabet, DEFAULT_ALPHABET

# Reserved reply for "wrong length"; never a valid match count.
LENGTH_MISMATCH = -2


def score(guess: Sequence[str], secret: Sequence[str]) -> int:
    """
    Compute the oracle reply for `guess` against `secret`.

    Examples:
      score("BAC", "ABC") -> 1
      score("ABC", "ABC") -> 3
      score("AB",  "ABC") -> -2
    """
    if len(guess) != len(secret):
        return LENGTH_MISMATCH
    return sum(1 for g, s in zip(guess, secret) if g == s)


class SecretOracle:
    """Deterministic local oracle holding one hidden secret."""

    def __init__(self, secret: str, alphabet: Alphabet = DEFAULT_ALPHABET):
        for ch in secret:
            if ch not in alphabet:
                raise ValueError(f"secret contains symbol {ch!r} outside alphabet {alphabet}")
        if not secret:
            raise ValueError("secret must not be empty")
        self._secret = secret
        self.alphabet = alphabet
        self.calls = 0

    def evaluate(self, guess: Sequence[str]) -> int:
        for ch in guess:
            if ch not in self.alphabet:
                raise ValueError(f"guess contains symbol {ch!r} outside alphabet {self.alphabet}")
        self.calls += 1
        return score(guess, self._secret)

    __call__ = evaluate
