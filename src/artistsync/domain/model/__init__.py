"""Public domain model surface."""

from __future__ import annotations

from .artist import ArtistRecord, ArtistUpdate, CatalogCandidate, MatchResult
from .enums import MatchConfidence, OutcomeStatus, ReconciliationState

__all__ = [
    "ArtistRecord",
    "ArtistUpdate",
    "CatalogCandidate",
    "MatchConfidence",
    "MatchResult",
    "OutcomeStatus",
    "ReconciliationState",
]
