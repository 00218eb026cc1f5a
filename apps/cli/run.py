# apps/cli/run.py
"""
CLI entry point for a single discovery session.

This script:
  1) Builds the alphabet / length bound from the flags.
  2) Takes the secret from --secret, or draws one with --seed.
  3) Runs the requested solver against a local oracle and prints the result:
       "Secret code is found: ..."  on success
       "ERROR: ..."                 on an aborted session
       "STALLED: ..."               when refinement could not finish
"""

from __future__ import annotations

import argparse
import sys

from packages.codesets import sample_secrets
from packages.engine import Alphabet, DEFAULT_SYMBOLS, MAX_SECRET_LENGTH, LENGTH_MISMATCH
from packages.harness import run_case
from packages.solvers import create_solver, get_solver_ids
from packages.solvers.frequency_refine import worst_case_queries


def _print_trace(history) -> None:
    for i, (guess, reply) in enumerate(history, 1):
        shown = "length mismatch" if reply == LENGTH_MISMATCH else str(reply)
        print(f"  #{i:>3} {guess:<{MAX_SECRET_LENGTH}} -> {shown}")


def main() -> int:
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="secret-code discovery — run one session")
    ap.add_argument("--solver", default="frequency_refine",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--alphabet", default=DEFAULT_SYMBOLS, help="ordered symbol set")
    ap.add_argument("--max-length", type=int, default=MAX_SECRET_LENGTH,
                    help="longest secret the solver will probe for")
    ap.add_argument("--secret", help="hidden code (default: random, drawn with --seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for a random secret")
    ap.add_argument("--verbose", action="store_true", help="print every query and reply")
    args = ap.parse_args()

    try:
        alphabet = Alphabet(args.alphabet)
        secret = args.secret
        if secret is None:
            secret = sample_secrets(1, alphabet=alphabet, max_length=args.max_length, seed=args.seed)[0]
        solver = create_solver(args.solver)
        r = run_case(solver, secret, alphabet=alphabet, max_length=args.max_length)
    except ValueError as e:
        ap.error(str(e))

    if args.verbose:
        _print_trace(r["history"])

    budget = worst_case_queries(len(secret), len(alphabet))
    if r["status"] == "found":
        print(f"Secret code is found: {r['discovered']}")
        print(f"Queries: {r['queries']} (bound {budget}) | {r['time_ms']:.2f} ms")
        return 0 if r["success"] else 1
    if r["status"] == "stalled":
        print(f"STALLED: {r['reason']}")
        return 2
    print(f"ERROR: {r['reason']}. Aborting.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
