"""
Write a list of secrets, one per line.

Features:
- Random secrets (seeded) with lengths in [--min-length, --max-length].
- Or every secret of one length with --all-of-length.
- Optional stable dedupe of the random draw.

Usage:
    python -m script.make_secrets --out data/secrets.txt --count 500 --seed 7
"""

import argparse

from packages.codesets import all_secrets, sample_secrets, write_secrets
from packages.engine import Alphabet, DEFAULT_SYMBOLS, MAX_SECRET_LENGTH


def unique_preserve_order(lines: list[str]) -> list[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def main():
    ap = argparse.ArgumentParser(description="Write a secret list file.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--alphabet", default=DEFAULT_SYMBOLS)
    ap.add_argument("--count", type=int, default=100, help="number of random secrets")
    ap.add_argument("--min-length", type=int, default=1)
    ap.add_argument("--max-length", type=int, default=MAX_SECRET_LENGTH)
    ap.add_argument("--all-of-length", type=int, help="write every secret of this length instead")
    ap.add_argument("--seed", type=int, default=123)
    ap.add_argument("--dedupe", action="store_true", help="drop repeated secrets (keeps first)")
    args = ap.parse_args()

    alphabet = Alphabet(args.alphabet)
    if args.all_of_length:
        out = list(all_secrets(args.all_of_length, alphabet))
    else:
        out = sample_secrets(args.count, alphabet=alphabet, min_length=args.min_length,
                             max_length=args.max_length, seed=args.seed)
        if args.dedupe:
            out = unique_preserve_order(out)

    path = write_secrets(out, args.out)
    print(f"Wrote {len(out)} secrets -> {path}")


if __name__ == "__main__":
    main()
