"""Reconciliation policy: map one artist's match result to a write, skip or flag.

Transitions, evaluated in order:
1. artist already has a catalog id -> skipped (no search, no write)
2. high confidence -> write catalog id/url (and image when missing) -> updated
3. medium confidence -> flagged for review, no write
4. low/no confidence -> not found
Any exception while doing so becomes an error outcome for that artist only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from artistsync.domain.model import ArtistUpdate, MatchConfidence

from .contracts import (
    ErrorOutcome,
    FlaggedOutcome,
    MatchOutcome,
    NotFoundOutcome,
    SkippedOutcome,
    UpdatedOutcome,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from artistsync.domain.model import ArtistRecord, CatalogCandidate, MatchResult
    from artistsync.domain.ports.catalog import ArtistMatchEngine
    from artistsync.domain.ports.observing import SyncObserver
    from artistsync.domain.ports.unit_of_work import ArtistUnitOfWork


class MissingCandidateError(ValueError):
    """A positive confidence class arrived without a candidate."""


def reconcile_artist(
    record: ArtistRecord,
    *,
    matcher: ArtistMatchEngine,
    unit_of_work_factory: Callable[[], ArtistUnitOfWork],
    observer: SyncObserver,
) -> MatchOutcome:
    """Drive one artist to a terminal state. Never raises for per-artist failures."""

    try:
        return _reconcile(
            record,
            matcher=matcher,
            unit_of_work_factory=unit_of_work_factory,
            observer=observer,
        )
    except Exception as exc:  # noqa: BLE001
        observer.artist_failed(record, exc)
        return ErrorOutcome(artist_id=record.id, artist_name=record.name, error=exc)


def _reconcile(
    record: ArtistRecord,
    *,
    matcher: ArtistMatchEngine,
    unit_of_work_factory: Callable[[], ArtistUnitOfWork],
    observer: SyncObserver,
) -> MatchOutcome:
    if record.is_synced:
        observer.artist_skipped(record)
        return SkippedOutcome(artist_id=record.id, artist_name=record.name)

    observer.artist_searching(record)
    result = matcher.match_artist(record.name)

    match result.confidence:
        case MatchConfidence.HIGH:
            candidate = _require_candidate(record, result)
            update = ArtistUpdate.for_candidate(record, candidate)
            _apply_update(record, update, unit_of_work_factory)
            observer.artist_updated(record, candidate)
            return UpdatedOutcome(artist_id=record.id, artist_name=record.name, candidate=candidate)
        case MatchConfidence.MEDIUM:
            candidate = _require_candidate(record, result)
            observer.artist_flagged(record, candidate)
            return FlaggedOutcome(artist_id=record.id, artist_name=record.name, candidate=candidate)
        case MatchConfidence.LOW | MatchConfidence.NONE:
            observer.artist_not_found(record, result.confidence)
            return NotFoundOutcome(
                artist_id=record.id,
                artist_name=record.name,
                confidence=result.confidence,
            )
        case _:
            assert_never(result.confidence)


def _require_candidate(record: ArtistRecord, result: MatchResult) -> CatalogCandidate:
    if result.candidate is None:
        raise MissingCandidateError(
            f"Match for {record.name!r} has confidence {result.confidence} but no candidate"
        )
    return result.candidate


def _apply_update(
    record: ArtistRecord,
    update: ArtistUpdate,
    unit_of_work_factory: Callable[[], ArtistUnitOfWork],
) -> None:
    # single-record transaction
    with unit_of_work_factory() as uow:
        uow.repositories.artists.apply_update(record.id, update)
        uow.commit()
