"""Per-artist reconciliation policy and its outcome contracts."""

from __future__ import annotations

from .contracts import (
    ErrorOutcome,
    FlaggedOutcome,
    MatchOutcome,
    NotFoundOutcome,
    SkippedOutcome,
    UpdatedOutcome,
)
from .policy import MissingCandidateError, reconcile_artist

__all__ = [
    "ErrorOutcome",
    "FlaggedOutcome",
    "MatchOutcome",
    "MissingCandidateError",
    "NotFoundOutcome",
    "SkippedOutcome",
    "UpdatedOutcome",
    "reconcile_artist",
]
