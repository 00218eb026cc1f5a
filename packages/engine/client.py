"""
Oracle client: the only door to the oracle.

Responsibilities:
  - forward a guess (string or symbol sequence) to the oracle's evaluate()
  - record every (guess, reply) pair in `history`
  - detect the terminal condition (reply == len(guess)) and remember the
    secret in `found`

The client never retries and never second-guesses a reply; every reply is
trusted as ground truth for its exact input.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, Tuple

from .alphabet import Alphabet, DEFAULT_ALPHABET

Evaluate = Callable[[str], int]


class OracleClient:
    def __init__(self, evaluate: Evaluate, alphabet: Alphabet = DEFAULT_ALPHABET):
        # Accept either a bare callable or an object exposing .evaluate
        self._evaluate: Evaluate = getattr(evaluate, "evaluate", evaluate)
        self.alphabet = alphabet
        self.history: List[Tuple[str, int]] = []
        self.found: Optional[str] = None

    @property
    def queries(self) -> int:
        return len(self.history)

    def query(self, guess: Sequence[str]) -> int:
        g = self.alphabet.join(guess)
        reply = self._evaluate(g)
        self.history.append((g, reply))
        if reply == len(g):
            self.found = g
        return reply
