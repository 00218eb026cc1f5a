"""
Single-position refinement: the core of the discovery algorithm.

State (RefinementState), owned by one session:
  - candidate : current best guess, one symbol per position
  - remaining : per-symbol count still to be placed on unconfirmed positions
  - masks     : per-symbol PositionMask of positions it may still occupy
  - confirmed : per-position flag, false -> true only
  - baseline  : oracle reply for the current candidate string

Each step either
  1) forced-fills: some symbol's remaining count equals the number of open
     positions, so every open position must hold it (one query to refresh
     the baseline), or
  2) walks the open positions left to right and, at the first one that makes
     progress, swaps in "try" symbols one at a time:
       delta = +1  -> the try symbol is right; adopt the probe as baseline
       delta = -1  -> the original symbol is right; baseline unchanged
       delta =  0  -> neither; the try symbol is ruled out at that position
     Changing a single position moves the match count by at most one, so
     the sign of delta is unambiguous.

Try symbols are ordered by remaining count (highest first, ties in alphabet
order): the most abundant leftover symbol is the likeliest replacement.

Complexity: at most |alphabet| - 1 probes per position, so O(N^2) queries
in the worst case, O(N) memory.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from packages.engine import (
    Alphabet,
    OracleClient,
    Outcome,
    PositionMask,
    StalledRefinementError,
)
from .candidate import order_by_counts


@dataclass
class RefinementState:
    alphabet: Alphabet
    candidate: List[str]
    remaining: Dict[str, int]
    masks: Dict[str, PositionMask]
    confirmed: List[bool]
    baseline: int

    @classmethod
    def start(cls, alphabet: Alphabet, candidate: List[str], counts: Dict[str, int],
              baseline: int) -> "RefinementState":
        n = len(candidate)
        return cls(
            alphabet=alphabet,
            candidate=list(candidate),
            remaining={s: counts.get(s, 0) for s in alphabet},
            masks={s: PositionMask.full(n) for s in alphabet},
            confirmed=[False] * n,
            baseline=baseline,
        )

    @property
    def length(self) -> int:
        return len(self.candidate)

    @property
    def all_confirmed(self) -> bool:
        return all(self.confirmed)

    @property
    def candidate_string(self) -> str:
        return self.alphabet.join(self.candidate)

    def open_positions(self) -> List[int]:
        return [p for p, done in enumerate(self.confirmed) if not done]

    def confirm(self, pos: int, symbol: str) -> None:
        """Lock `symbol` at `pos`; every other symbol loses its claim there."""
        if self.confirmed[pos]:
            raise ValueError(f"position {pos} is already confirmed")
        self.candidate[pos] = symbol
        self.confirmed[pos] = True
        if self.remaining[symbol] > 0:
            self.remaining[symbol] -= 1
        for other, mask in self.masks.items():
            if other != symbol:
                mask.discard(pos)

    def eliminate(self, symbol: str, pos: int) -> None:
        self.masks[symbol].discard(pos)

    def priority(self) -> List[str]:
        return order_by_counts(self.remaining, self.alphabet)

    def try_symbols(self, pos: int) -> List[str]:
        """Replacement symbols worth probing at `pos`, most likely first."""
        current = self.candidate[pos]
        return [
            s for s in self.priority()
            if self.remaining[s] > 0 and pos in self.masks[s] and s != current
        ]


def apply_forced_fill(state: RefinementState) -> Optional[str]:
    """
    Fill every open position with the symbol whose remaining count equals
    the number of open positions. Issues no query.

    Returns:
      the symbol used, or None when no symbol saturates the open positions.
    """
    open_pos = state.open_positions()
    if not open_pos:
        return None
    forced = next((s for s in state.alphabet if state.remaining[s] == len(open_pos)), None)
    if forced is None:
        return None
    for pos in open_pos:
        state.confirm(pos, forced)
    return forced


def refine_position(state: RefinementState, client: OracleClient, pos: int) -> bool:
    """
    Probe try symbols at `pos` until one of them settles the position.

    Returns:
      True if `pos` got confirmed, False if every try came back delta 0
      (or there was nothing to try).
    """
    for sym in state.try_symbols(pos):
        probe = list(state.candidate)
        probe[pos] = sym
        reply = client.query(probe)
        delta = reply - state.baseline

        if delta == 1:
            state.confirm(pos, sym)
            state.baseline = reply
            return True
        if delta == -1:
            # Original symbol was right; candidate unchanged, so is the baseline.
            state.confirm(pos, state.candidate[pos])
            return True
        state.eliminate(sym, pos)
    return False


def refine_step(state: RefinementState, client: OracleClient) -> bool:
    """
    One iteration: a forced fill, or a left-to-right sweep that stops at the
    first position confirmed. Returns False when nothing moved.
    """
    if apply_forced_fill(state) is not None:
        state.baseline = client.query(state.candidate)
        return True
    for pos in state.open_positions():
        if refine_position(state, client, pos):
            return True
    return False


def refine(state: RefinementState, client: OracleClient) -> Outcome:
    while not state.all_confirmed:
        progressed = refine_step(state, client)
        if client.found is not None:
            return Outcome.found(client.found)
        if not progressed:
            err = StalledRefinementError(state.candidate_string, state.confirmed)
            return Outcome.stalled(err, state.candidate_string)

    if client.found is not None:
        return Outcome.found(client.found)
    # Everything confirmed but the oracle never scored the candidate as a full
    # match: its replies contradicted each other.
    err = StalledRefinementError(state.candidate_string, state.confirmed,
                                 detail="all positions confirmed but the oracle rejects the candidate")
    return Outcome.stalled(err, state.candidate_string)
