"""Observer port notified as a sync run progresses.

The domain never logs directly; adapters decide where progress goes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from artistsync.domain.model import ArtistRecord, CatalogCandidate, MatchConfidence
    from artistsync.domain.reporting import BatchSummary


class SyncObserver(Protocol):
    def batch_started(self, total: int, *, principal: str | None) -> None: ...

    def artist_skipped(self, record: ArtistRecord) -> None: ...

    def artist_searching(self, record: ArtistRecord) -> None: ...

    def artist_updated(self, record: ArtistRecord, candidate: CatalogCandidate) -> None: ...

    def artist_flagged(self, record: ArtistRecord, candidate: CatalogCandidate) -> None: ...

    def artist_not_found(self, record: ArtistRecord, confidence: MatchConfidence) -> None: ...

    def artist_failed(self, record: ArtistRecord, error: Exception) -> None: ...

    def batch_finished(self, summary: BatchSummary, *, principal: str | None) -> None: ...


class NullSyncObserver:
    """Observer that ignores every notification."""

    def batch_started(self, total: int, *, principal: str | None) -> None:
        del total, principal

    def artist_skipped(self, record: ArtistRecord) -> None:
        del record

    def artist_searching(self, record: ArtistRecord) -> None:
        del record

    def artist_updated(self, record: ArtistRecord, candidate: CatalogCandidate) -> None:
        del record, candidate

    def artist_flagged(self, record: ArtistRecord, candidate: CatalogCandidate) -> None:
        del record, candidate

    def artist_not_found(self, record: ArtistRecord, confidence: MatchConfidence) -> None:
        del record, confidence

    def artist_failed(self, record: ArtistRecord, error: Exception) -> None:
        del record, error

    def batch_finished(self, summary: BatchSummary, *, principal: str | None) -> None:
        del summary, principal


if TYPE_CHECKING:
    _observer_check: SyncObserver = NullSyncObserver()
