from .validator import validate_secret_list, pretty_summary
from .generator import all_secrets, sample_secrets
from .io import load_secrets, write_secrets

__all__ = [
    "validate_secret_list", "pretty_summary",
    "all_secrets", "sample_secrets",
    "load_secrets", "write_secrets",
]
