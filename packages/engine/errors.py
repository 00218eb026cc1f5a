"""
Discovery error taxonomy.

  DiscoveryError
    LengthExceededError          fatal: no valid length up to the maximum
    FrequencyInconsistencyError  fatal: surveyed counts do not sum to N
    StalledRefinementError       unresolved: a full sweep made no progress

None of these are retried; each one means an oracle reply contradicted the
contract or an external bound was hit.
"""

from __future__ import annotations
from typing import Dict, List


class DiscoveryError(Exception):
    """Base class for every way a discovery session can end without a secret."""


class LengthExceededError(DiscoveryError):
    def __init__(self, max_length: int):
        self.max_length = max_length
        super().__init__(f"Secret code length exceeds {max_length}")


class FrequencyInconsistencyError(DiscoveryError):
    def __init__(self, counts: Dict[str, int], length: int, detail: str | None = None):
        self.counts = dict(counts)
        self.length = length
        if detail is None:
            total = sum(counts.values())
            detail = f"counts sum != N (counts sum = {total}, N={length})"
        super().__init__(detail)


class StalledRefinementError(DiscoveryError):
    def __init__(self, candidate: str, confirmed: List[bool], detail: str | None = None):
        self.candidate = candidate
        self.confirmed = list(confirmed)
        open_positions = [i for i, c in enumerate(confirmed) if not c]
        msg = f"refinement stalled with candidate {candidate!r}; unconfirmed positions {open_positions}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)
