from .alphabet import Alphabet, DEFAULT_ALPHABET, DEFAULT_SYMBOLS, MAX_SECRET_LENGTH
from .oracle import score, SecretOracle, LENGTH_MISMATCH
from .client import OracleClient
from .positions import PositionMask
from .errors import (
    DiscoveryError,
    LengthExceededError,
    FrequencyInconsistencyError,
    StalledRefinementError,
)
from .outcome import Outcome, Status
from .validation import validate_guess, validate_secret

__all__ = [
    "Alphabet", "DEFAULT_ALPHABET", "DEFAULT_SYMBOLS", "MAX_SECRET_LENGTH",
    "score", "SecretOracle", "LENGTH_MISMATCH",
    "OracleClient", "PositionMask",
    "DiscoveryError", "LengthExceededError", "FrequencyInconsistencyError",
    "StalledRefinementError",
    "Outcome", "Status",
    "validate_guess", "validate_secret",
]
