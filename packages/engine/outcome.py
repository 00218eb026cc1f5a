"""
Explicit terminal result of a discovery phase or session.

Every phase hands back an Outcome instead of toggling a shared flag:
  - CONTINUE: nothing decided yet, run the next phase
  - FOUND:    the secret is known (`secret` is set)
  - ABORTED:  a fatal DiscoveryError was hit (`error`, `reason` set)
  - STALLED:  refinement stopped without confirming everything
              (`partial` holds the last candidate)
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import DiscoveryError


class Status(str, Enum):
    CONTINUE = "continue"
    FOUND = "found"
    ABORTED = "aborted"
    STALLED = "stalled"


@dataclass(frozen=True)
class Outcome:
    status: Status
    secret: Optional[str] = None
    partial: Optional[str] = None
    reason: Optional[str] = None
    error: Optional[DiscoveryError] = None

    @classmethod
    def proceed(cls) -> "Outcome":
        return cls(Status.CONTINUE)

    @classmethod
    def found(cls, secret: str) -> "Outcome":
        return cls(Status.FOUND, secret=secret)

    @classmethod
    def aborted(cls, error: DiscoveryError) -> "Outcome":
        return cls(Status.ABORTED, reason=str(error), error=error)

    @classmethod
    def stalled(cls, error: DiscoveryError, partial: str) -> "Outcome":
        return cls(Status.STALLED, partial=partial, reason=str(error), error=error)

    @property
    def done(self) -> bool:
        return self.status is not Status.CONTINUE

    @property
    def success(self) -> bool:
        return self.status is Status.FOUND

    def raise_for_status(self) -> None:
        """Re-raise the carried error for callers that prefer exceptions."""
        if self.error is not None:
            raise self.error
