"""
Lightweight guess / secret validation.

A guess is valid iff:
  - it is a string
  - it is made only of alphabet symbols
  - its length is between 1 and max_length

A secret follows the same rules; the oracle itself enforces the symbol rule
but not the length bound, so the harness checks secrets up front.
"""

from .alphabet import Alphabet, DEFAULT_ALPHABET, MAX_SECRET_LENGTH


def validate_guess(word: str, alphabet: Alphabet = DEFAULT_ALPHABET,
                   max_length: int = MAX_SECRET_LENGTH) -> bool:
    """
    Return True if `word` is an acceptable probe.

    Notes:
      - No case folding: symbols are compared exactly as the alphabet
        declares them.
    """
    if not isinstance(word, str):
        return False
    if not 1 <= len(word) <= max_length:
        return False
    return all(ch in alphabet for ch in word)


def validate_secret(secret: str, alphabet: Alphabet = DEFAULT_ALPHABET,
                    max_length: int = MAX_SECRET_LENGTH) -> bool:
    return validate_guess(secret, alphabet, max_length)
