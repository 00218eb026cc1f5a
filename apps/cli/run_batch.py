# apps/cli/run_batch.py
"""
Run one or more solvers over many secrets with shared cases and progress.

Cases come from (first match wins):
  --secrets FILE     one secret per line (validated first)
  --exhaustive N     every secret of lengths 1..N
  --sample K         K seeded random secrets up to --max-length

Writes per-solver outputs to: <outdir>/<solver_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, sys, time
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from packages.codesets import (
    all_secrets,
    load_secrets,
    pretty_summary,
    sample_secrets,
    validate_secret_list,
)
from packages.engine import Alphabet, DEFAULT_SYMBOLS, MAX_SECRET_LENGTH
from packages.harness import run_case
from packages.harness.io import write_csv, write_manifest, summarize, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _build_cases(args, alphabet: Alphabet) -> Tuple[List[str], Dict | None]:
    if args.secrets:
        rep = validate_secret_list(args.secrets, alphabet, args.max_length)
        print(pretty_summary(rep))
        if not rep["exists"]:
            raise SystemExit(f"secrets file not found: {args.secrets}")
        return load_secrets(args.secrets), rep
    if args.exhaustive:
        if args.exhaustive > args.max_length:
            raise SystemExit(f"--exhaustive {args.exhaustive} exceeds --max-length {args.max_length}")
        cases: List[str] = []
        for n in range(1, args.exhaustive + 1):
            cases.extend(all_secrets(n, alphabet))
        return cases, None
    return sample_secrets(args.sample, alphabet=alphabet, max_length=args.max_length,
                          seed=args.seed), None


def _run_one_solver(solver_id: str, cases: List[str], *, alphabet: Alphabet, max_length: int,
                    outdir: Path, progress: str, config: Dict,
                    secrets_report: Dict | None) -> Tuple[str, str, Dict]:
    solver = create_solver(solver_id)
    results = []
    total = len(cases)
    mode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=f"{solver_id}", unit="case") if mode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, secret in enumerate(iterator, 1):
        try:
            r = run_case(solver, secret, alphabet=alphabet, max_length=max_length)
        except ValueError as e:
            # secret outside the contract (only possible from a secrets file)
            r = {"success": False, "status": "invalid", "queries": 0, "time_ms": 0.0,
                 "history": [], "secret": secret, "discovered": None, "reason": str(e)}
        r["solver_id"] = solver.id
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)

    # write outputs under <outdir>/<solver_id>/
    run_id = timestamp_id()
    sdir = outdir / solver_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": dict(config, solver=solver_id),
        "secrets": secrets_report,
        "summary": summary,
        "solver_id": solver.id,
        "solver_version": solver.version,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main():
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="secret-code discovery — batch experiments")
    ap.add_argument("--solvers", nargs="+", default=["frequency_refine"],
                    help=f"list of solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--alphabet", default=DEFAULT_SYMBOLS)
    ap.add_argument("--max-length", type=int, default=MAX_SECRET_LENGTH)
    ap.add_argument("--secrets", help="file with one secret per line")
    ap.add_argument("--exhaustive", type=int, help="run every secret of lengths 1..N")
    ap.add_argument("--sample", type=int, default=1000, help="number of random secrets")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--outdir", default="reports/batch")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    args = ap.parse_args()

    alphabet = Alphabet(args.alphabet)
    cases, secrets_report = _build_cases(args, alphabet)

    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = registered
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    for sid in todo:
        if args.progress != "off":
            print(f"\n=== Running {sid} on {len(cases)} cases (alphabet={alphabet}) ===")
        csv_path, manifest_path, summary = _run_one_solver(
            sid, cases, alphabet=alphabet, max_length=args.max_length, outdir=outdir,
            progress=args.progress, config=vars(args), secrets_report=secrets_report,
        )
        print(f"success={summary['success_rate']:.3f} | mean={summary['mean_queries']:.2f} "
              f"| p95={summary['p95_queries']:.1f} | max={summary['max_queries']}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
