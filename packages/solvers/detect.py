"""
Length detection and frequency survey (uniform probes only).

Phase 1, detect_length:
  Probe first*1, first*2, ... up to max_length. Every length below the secret's
  gets LENGTH_MISMATCH; the first real reply gives N and, for free, how many
  times the first symbol occurs.

Phase 2, survey_frequencies:
  One probe of N copies per remaining symbol; each reply is that symbol's
  count. The counts must add up to N, else the oracle broke its contract.

Cost: N + (|alphabet| - 1) queries at most.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

from packages.engine import (
    Alphabet,
    FrequencyInconsistencyError,
    LENGTH_MISMATCH,
    LengthExceededError,
    OracleClient,
    Outcome,
)
from packages.engine.alphabet import _assert_max_length


@dataclass
class LengthReading:
    outcome: Outcome
    length: int
    count: int  # occurrences of alphabet.first


@dataclass
class Survey:
    outcome: Outcome
    counts: Dict[str, int] = field(default_factory=dict)


def detect_length(client: OracleClient, alphabet: Alphabet, max_length: int) -> LengthReading:
    """
    Raises:
      LengthExceededError if no probe up to max_length gets a match count.
      FrequencyInconsistencyError if that match count is outside 0..k.
    """
    _assert_max_length(max_length)
    first = alphabet.first
    for k in range(1, max_length + 1):
        reply = client.query(alphabet.repeat(first, k))
        if client.found is not None:
            return LengthReading(Outcome.found(client.found), k, reply)
        if reply != LENGTH_MISMATCH:
            if not 0 <= reply <= k:
                raise FrequencyInconsistencyError(
                    {first: reply}, k, detail=f"reply {reply} to a length-{k} probe is outside 0..{k}")
            return LengthReading(Outcome.proceed(), k, reply)
    raise LengthExceededError(max_length)


def survey_frequencies(client: OracleClient, alphabet: Alphabet, length: int,
                       first_count: int) -> Survey:
    """
    Build the full frequency table (keys in alphabet order).

    Raises:
      FrequencyInconsistencyError if a count falls outside 0..length or the
      counts do not sum to `length`.
    """
    counts: Dict[str, int] = {s: 0 for s in alphabet}
    counts[alphabet.first] = first_count

    for sym in alphabet.symbols[1:]:
        counts[sym] = client.query(alphabet.repeat(sym, length))
        if client.found is not None:
            # A uniform probe matched everywhere; every other count is zero.
            return Survey(Outcome.found(client.found), counts)

    bad = {s: c for s, c in counts.items() if not 0 <= c <= length}
    if bad:
        raise FrequencyInconsistencyError(
            counts, length, detail=f"counts outside 0..{length}: {bad}")
    if sum(counts.values()) != length:
        raise FrequencyInconsistencyError(counts, length)

    present = [s for s, c in counts.items() if c > 0]
    if len(present) == 1:
        return Survey(Outcome.found(alphabet.repeat(present[0], length)), counts)

    return Survey(Outcome.proceed(), counts)
