"""
Secret list files: UTF-8 text, one secret per line.

Blank lines and surrounding whitespace are not part of a secret; content is
not validated here (see validator.validate_secret_list).
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def load_secrets(p: Path | str) -> List[str]:
    """
    Secrets in file order, stripped, blank lines dropped.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [s for s in (ln.strip() for ln in p.read_text(encoding="utf-8").splitlines()) if s]


def write_secrets(secrets: Iterable[str], p: Path | str) -> str:
    """
    Write one secret per line (trailing newline included), creating parent
    directories. Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    lines = [s.strip() for s in secrets if s.strip()]
    p.write_text("".join(s + "\n" for s in lines), encoding="utf-8")
    return str(p)
