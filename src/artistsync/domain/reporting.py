"""Aggregate per-artist outcomes into a batch summary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, assert_never

from artistsync.domain.model import OutcomeStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artistsync.domain.reconciliation import MatchOutcome


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Status counts for one run; ``updated + skipped + failed == total``."""

    total: int = 0
    updated: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass(frozen=True, slots=True)
class BatchReport:
    summary: BatchSummary
    outcomes: tuple[MatchOutcome, ...]

    @classmethod
    def from_outcomes(cls, outcomes: Iterable[MatchOutcome]) -> BatchReport:
        ordered = tuple(outcomes)
        updated = skipped = failed = 0
        for outcome in ordered:
            match outcome.status:
                case OutcomeStatus.UPDATED:
                    updated += 1
                case OutcomeStatus.SKIPPED:
                    skipped += 1
                # flagged medium matches count as failed
                case OutcomeStatus.NOT_FOUND | OutcomeStatus.ERROR:
                    failed += 1
                case _:
                    assert_never(outcome.status)
        summary = BatchSummary(
            total=len(ordered),
            updated=updated,
            skipped=skipped,
            failed=failed,
        )
        return cls(summary=summary, outcomes=ordered)
