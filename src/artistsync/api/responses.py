"""Shape batch reports and failures into :class:`SyncResponse` payloads."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, assert_never

from artistsync.domain.reconciliation import (
    ErrorOutcome,
    FlaggedOutcome,
    NotFoundOutcome,
    SkippedOutcome,
    UpdatedOutcome,
)

from .schemas import CatalogArtistData, SyncResponse, SyncResultItem, SyncSummary

if TYPE_CHECKING:
    from artistsync.domain.errors import ArtistSyncError, AuthError, DataAccessError
    from artistsync.domain.model import CatalogCandidate
    from artistsync.domain.reconciliation import MatchOutcome
    from artistsync.domain.reporting import BatchReport


def success_response(report: BatchReport) -> SyncResponse:
    summary = report.summary
    return SyncResponse(
        success=True,
        status_code=HTTPStatus.OK,
        summary=SyncSummary(
            total=summary.total,
            updated=summary.updated,
            skipped=summary.skipped,
            failed=summary.failed,
        ),
        results=[result_item(outcome) for outcome in report.outcomes],
    )


def auth_failure_response(error: AuthError) -> SyncResponse:
    return SyncResponse(success=False, status_code=error.status_code, error=str(error))


def store_failure_response(error: DataAccessError) -> SyncResponse:
    return SyncResponse(success=False, status_code=error.status_code, error=str(error))


def unexpected_failure_response(error: ArtistSyncError, *, cause: Exception) -> SyncResponse:
    return SyncResponse(
        success=False,
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        error=str(error),
        details={"type": type(cause).__name__, "message": str(cause)},
    )


def result_item(outcome: MatchOutcome) -> SyncResultItem:
    match outcome:
        case SkippedOutcome():
            return SyncResultItem(artist=outcome.artist_name, status=outcome.status)
        case UpdatedOutcome() | FlaggedOutcome():
            return SyncResultItem(
                artist=outcome.artist_name,
                status=outcome.status,
                spotify_data=catalog_artist_data(outcome.candidate),
                confidence=outcome.confidence,
            )
        case NotFoundOutcome():
            return SyncResultItem(
                artist=outcome.artist_name,
                status=outcome.status,
                confidence=outcome.confidence,
            )
        case ErrorOutcome():
            return SyncResultItem(
                artist=outcome.artist_name,
                status=outcome.status,
                error=outcome.error_message,
            )
        case _:
            assert_never(outcome)


def catalog_artist_data(candidate: CatalogCandidate) -> CatalogArtistData:
    return CatalogArtistData(
        id=candidate.id,
        name=candidate.name,
        image_url=candidate.image_url,
        spotify_url=candidate.url,
        followers=candidate.follower_count,
        popularity=candidate.popularity,
    )
