"""
Experiment harness core primitives.

- run_case:  run one discovery session against one hidden secret.
- run_batch: run many sessions in sequence (optionally a sample prefix).
- Rejects secrets the oracle cannot hold (empty, foreign symbols). A secret
  longer than max_length is allowed so the solver can abort on it.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or a test without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from packages.engine import (
    Alphabet,
    DEFAULT_ALPHABET,
    MAX_SECRET_LENGTH,
    OracleClient,
    SecretOracle,
)


def _assert_secret(secret: str, alphabet: Alphabet) -> None:
    """Guardrail: the harness only hosts secrets the oracle can hold."""
    if not isinstance(secret, str) or not secret or any(ch not in alphabet for ch in secret):
        raise ValueError(f"secret {secret!r} must be one or more symbols drawn from {alphabet}")


def run_case(
        solver,
        secret: str,
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        max_length: int = MAX_SECRET_LENGTH,
) -> Dict:
    """
    Execute one session until the solver finds the secret, aborts, or stalls.

    Args:
        solver:     an object implementing BaseSolver with discover(client)
        secret:     the hidden code for this case
        alphabet:   symbol set the secret is drawn from
        max_length: upper bound the solver probes up to

    Returns:
        dict with keys:
            success (bool), status (str), queries (int), time_ms (float),
            history (list[(guess, reply)]), secret (str),
            discovered (str | None), reason (str | None)
    """
    _assert_secret(secret, alphabet)

    solver.reset(alphabet=alphabet, max_length=max_length)
    client = OracleClient(SecretOracle(secret, alphabet), alphabet)

    t0 = time.perf_counter()
    outcome = solver.discover(client)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "success": outcome.success and outcome.secret == secret,
        "status": outcome.status.value,
        "queries": client.queries,
        "time_ms": dt,
        "history": list(client.history),
        "secret": secret,
        "discovered": outcome.secret,
        "reason": outcome.reason,
    }


def run_batch(
        solver,
        secrets: Iterable[str],
        *,
        alphabet: Alphabet = DEFAULT_ALPHABET,
        max_length: int = MAX_SECRET_LENGTH,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    secrets are used to speed up quick experiments.
    """
    pool = list(secrets)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for s in pool:
        r = run_case(solver, s, alphabet=alphabet, max_length=max_length)
        r["solver_id"] = getattr(solver, "id", "?")
        out.append(r)
    return out
