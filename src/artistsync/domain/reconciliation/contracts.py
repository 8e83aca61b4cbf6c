"""Per-artist reconciliation outcomes.

Every artist processed in a run produces exactly one outcome variant. Variants
are tagged with the terminal :class:`ReconciliationState` they represent and
expose the coarser :class:`OutcomeStatus` reported to callers (``Flagged`` and
``NotFound`` both surface as ``not_found``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Literal

from artistsync.domain.model import MatchConfidence, OutcomeStatus, ReconciliationState

if TYPE_CHECKING:
    from uuid import UUID

    from artistsync.domain.model import CatalogCandidate


@dataclass(frozen=True, slots=True, kw_only=True)
class SkippedOutcome:
    """Artist already carries a catalog id; nothing was searched or written."""

    artist_id: UUID
    artist_name: str
    state: Literal[ReconciliationState.SKIPPED] = ReconciliationState.SKIPPED
    status: ClassVar[OutcomeStatus] = OutcomeStatus.SKIPPED


@dataclass(frozen=True, slots=True, kw_only=True)
class UpdatedOutcome:
    """High-confidence match written to the store."""

    artist_id: UUID
    artist_name: str
    candidate: CatalogCandidate
    confidence: Literal[MatchConfidence.HIGH] = MatchConfidence.HIGH
    state: Literal[ReconciliationState.UPDATED] = ReconciliationState.UPDATED
    status: ClassVar[OutcomeStatus] = OutcomeStatus.UPDATED


@dataclass(frozen=True, slots=True, kw_only=True)
class FlaggedOutcome:
    """Plausible match held back for manual review; candidate kept for follow-up."""

    artist_id: UUID
    artist_name: str
    candidate: CatalogCandidate
    confidence: Literal[MatchConfidence.MEDIUM] = MatchConfidence.MEDIUM
    state: Literal[ReconciliationState.FLAGGED] = ReconciliationState.FLAGGED
    status: ClassVar[OutcomeStatus] = OutcomeStatus.NOT_FOUND


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundOutcome:
    """No candidate cleared the minimum similarity bar."""

    artist_id: UUID
    artist_name: str
    confidence: Literal[MatchConfidence.LOW, MatchConfidence.NONE] = MatchConfidence.NONE
    state: Literal[ReconciliationState.NOT_FOUND] = ReconciliationState.NOT_FOUND
    status: ClassVar[OutcomeStatus] = OutcomeStatus.NOT_FOUND


@dataclass(frozen=True, slots=True, kw_only=True)
class ErrorOutcome:
    """Search, scoring or the store write failed for this artist only."""

    artist_id: UUID
    artist_name: str
    error: Exception
    state: Literal[ReconciliationState.ERROR] = ReconciliationState.ERROR
    status: ClassVar[OutcomeStatus] = OutcomeStatus.ERROR

    @property
    def error_message(self) -> str:
        return f"{type(self.error).__name__}: {self.error}"


type MatchOutcome = (
    SkippedOutcome | UpdatedOutcome | FlaggedOutcome | NotFoundOutcome | ErrorOutcome
)
