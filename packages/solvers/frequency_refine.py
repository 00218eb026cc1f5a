"""
Frequency-ordered refinement solver.

Pipeline (each phase hands back an explicit Outcome):
  1) detect_length       -> N and the first symbol's count
  2) survey_frequencies  -> full frequency table (sanity: sums to N)
  3) build_candidate     -> frequency-descending block layout, one baseline query
  4) refine              -> single-position probes until every position is confirmed

The session stops the moment any reply equals the probe length.
Aborts (length over the maximum, inconsistent counts) come back as
Outcome(status=ABORTED); a refinement that cannot move comes back as
Outcome(status=STALLED). Neither is ever reported as success.
"""

from __future__ import annotations

from packages.engine import DiscoveryError, OracleClient, Outcome
from .base import BaseSolver, register
from .candidate import build_candidate
from .detect import detect_length, survey_frequencies
from .refine import RefinementState, refine


def worst_case_queries(length: int, alphabet_size: int) -> int:
    """
    Deterministic upper bound on queries for a secret of `length` symbols:
    length probes + survey + baseline + (alphabet_size - 1) probes per
    position + one forced-fill refresh.
    """
    return length + (alphabet_size - 1) + 1 + length * (alphabet_size - 1) + 1


@register
class FrequencyRefineSolver(BaseSolver):
    id = "frequency_refine"
    name = "Frequency Blocks + Single-Position Refinement"
    version = "1.0.0"

    def discover(self, client: OracleClient) -> Outcome:
        alphabet = self.alphabet
        try:
            reading = detect_length(client, alphabet, self.max_length)
            if reading.outcome.done:
                return reading.outcome

            survey = survey_frequencies(client, alphabet, reading.length, reading.count)
            if survey.outcome.done:
                return survey.outcome
        except DiscoveryError as e:
            return Outcome.aborted(e)

        candidate = build_candidate(survey.counts, alphabet, reading.length)
        baseline = client.query(candidate)
        if client.found is not None:
            return Outcome.found(client.found)

        state = RefinementState.start(alphabet, candidate, survey.counts, baseline)
        return refine(state, client)
