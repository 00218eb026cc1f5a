"""
Secret-list validator.

What this module does:
- Validate a text file of secrets (one per line) against an alphabet and a
  maximum length.
- Count invalid lines (foreign symbols, empty, too long) and duplicates;
  compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.codesets import validate_secret_list, pretty_summary
    rep = validate_secret_list("secrets.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine import Alphabet, DEFAULT_ALPHABET, MAX_SECRET_LENGTH, validate_secret


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class SecretListReport:
    """Diagnostics and metadata for one secret list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    alphabet: str        # symbols checked against
    max_length: int      # length bound checked against
    count: int           # number of VALID secrets
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid secrets
    invalid_lines: int   # number of invalid lines encountered
    min_len: int         # shortest valid secret (0 if none)
    max_len: int         # longest valid secret (0 if none)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, alphabet: Alphabet, max_length: int) -> Tuple[List[str], int]:
    """
    Returns:
      (valid_secrets, invalid_count); blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            s = raw.strip()
            if validate_secret(s, alphabet, max_length):
                valid.append(s)
            else:
                invalid += 1
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_secret_list(path: str, alphabet: Alphabet = DEFAULT_ALPHABET,
                         max_length: int = MAX_SECRET_LENGTH) -> Dict:
    """
    Validate a secret list file.

    Returns
    -------
    Dict
        JSON-serializable SecretListReport; `passed` is strict: non-empty,
        no invalid lines, no duplicates.
    """
    p = Path(path)
    if not p.exists():
        rep = SecretListReport(path, False, str(alphabet), max_length, 0, "", 0, 0, 0, 0,
                               False, [f"secrets file not found: {path}"])
        return asdict(rep)

    secrets, invalid = _load_and_check(p, alphabet, max_length)
    unique = set(secrets)
    lengths = [len(s) for s in secrets]

    issues: List[str] = []
    if not secrets:
        issues.append("secrets file contains 0 valid secrets")
    if invalid:
        issues.append(f"secrets has {invalid} invalid line(s)")
    if len(unique) != len(secrets):
        issues.append("secrets contains duplicate lines")

    rep = SecretListReport(
        path=str(p),
        exists=True,
        alphabet=str(alphabet),
        max_length=max_length,
        count=len(secrets),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
        min_len=min(lengths, default=0),
        max_len=max(lengths, default=0),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        secrets=200 (uniq=198, len=1..18, sha=abc123...) | alphabet=BACXIU max=18 | FAIL
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"secrets={report['count']} (uniq={report['unique_count']}, "
        f"len={report['min_len']}..{report['max_len']}, sha={sha}) "
        f"| alphabet={report['alphabet']} max={report['max_length']} | {status}"
    )
