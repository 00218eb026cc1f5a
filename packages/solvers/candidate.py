"""
Initial candidate construction.

Symbols are laid out in blocks, most frequent first: with counts
{A: 3, B: 1, C: 2} the candidate is "AAACCB". The largest block sits on the
lowest indices, so the baseline already matches a good share of positions.
"""

from __future__ import annotations
from typing import Dict, List

from packages.engine import Alphabet


def order_by_counts(counts: Dict[str, int], alphabet: Alphabet) -> List[str]:
    """
    Alphabet symbols sorted by count descending; ties keep alphabet order
    (sorted() is stable).
    """
    return sorted(alphabet.symbols, key=lambda s: -counts.get(s, 0))


def build_candidate(counts: Dict[str, int], alphabet: Alphabet, length: int) -> List[str]:
    cand: List[str] = []
    for sym in order_by_counts(counts, alphabet):
        take = min(counts.get(sym, 0), length - len(cand))
        cand.extend(sym for _ in range(take))
    # Only reachable if the counts fall short of `length`
    while len(cand) < length:
        cand.append(alphabet.first)
    return cand
