"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class MatchConfidence(StrEnum):
    """How strongly the best catalog candidate matches a queried name."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class ReconciliationState(StrEnum):
    """Terminal state reached by one artist during a sync run."""

    SKIPPED = "skipped"
    UPDATED = "updated"
    FLAGGED = "flagged"
    NOT_FOUND = "not_found"
    ERROR = "error"


class OutcomeStatus(StrEnum):
    """Status reported to callers for one artist."""

    UPDATED = "updated"
    SKIPPED = "skipped"
    NOT_FOUND = "not_found"
    ERROR = "error"
