from __future__ import annotations
from typing import Dict, Type

from packages.engine import Alphabet, DEFAULT_ALPHABET, MAX_SECRET_LENGTH, OracleClient, Outcome
from packages.engine.alphabet import _assert_max_length

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.alphabet: Alphabet = DEFAULT_ALPHABET
        self.max_length: int = MAX_SECRET_LENGTH

    def reset(self, *, alphabet: Alphabet = DEFAULT_ALPHABET,
              max_length: int = MAX_SECRET_LENGTH) -> None:
        _assert_max_length(max_length)
        self.alphabet = alphabet
        self.max_length = int(max_length)

    def discover(self, client: OracleClient) -> Outcome:
        raise NotImplementedError("Override in subclass")
