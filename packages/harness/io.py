"""
I/O utilities for experiment runs.

Responsibilities:
- write_csv:      flatten per-session results into a tidy CSV (one row per session).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- summarize:      query-count statistics for a batch (numpy).
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Replies are written as plain integers; -2 marks a length mismatch.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

import numpy as np


def write_csv(results: List[Dict], path: str, max_queries: int | None = None) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      solver, N, secret, status, success, queries, time_ms, discovered,
      guess_1, reply_1, ..., guess_K, reply_K

    Args:
      results    : list of dicts returned by the harness per session.
      path       : output CSV path.
      max_queries: number of guess/reply column pairs; defaults to the longest
                   history in `results`.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_queries is None:
        max_queries = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["solver", "N", "secret", "status", "success", "queries", "time_ms", "discovered"]
    for i in range(1, max_queries + 1):
        fields += [f"guess_{i}", f"reply_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "N": len(r["secret"]),
                "secret": r["secret"],
                "status": r["status"],
                "success": r["success"],
                "queries": r["queries"],
                "time_ms": round(float(r["time_ms"]), 3),
                "discovered": r.get("discovered") or "",
            }

            # Expand history into fixed columns; longer histories are truncated
            hist = r.get("history", [])
            for i in range(1, max_queries + 1):
                if i <= len(hist):
                    g, reply = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"reply_{i}"] = reply
                else:
                    row[f"guess_{i}"] = ""
                    row[f"reply_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and secret-list validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, alphabet, max_length, seed, sample, outdir)
      - secrets: output of codesets.validate_secret_list(...) or None
      - summary: output of summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate query counts over a batch.

    Returns plain floats/ints so the dict is JSON-serializable.
    """
    if not results:
        return {"num_cases": 0, "success_rate": 0.0, "mean_queries": 0.0,
                "median_queries": 0.0, "p95_queries": 0.0, "max_queries": 0}
    q = np.array([r["queries"] for r in results], dtype=float)
    ok = np.array([bool(r["success"]) for r in results])
    return {
        "num_cases": int(q.size),
        "success_rate": float(ok.mean()),
        "mean_queries": float(q.mean()),
        "median_queries": float(np.median(q)),
        "p95_queries": float(np.percentile(q, 95)),
        "max_queries": int(q.max()),
    }


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
