"""Sync observer that reports progress through the standard logging module."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artistsync.domain.model import ArtistRecord, CatalogCandidate, MatchConfidence
    from artistsync.domain.reporting import BatchSummary

log = getLogger(__name__)


class LoggingSyncObserver:
    def batch_started(self, total: int, *, principal: str | None) -> None:
        log.info("[%s] Starting catalog sync for %s artists", principal or "anonymous", total)

    def artist_skipped(self, record: ArtistRecord) -> None:
        log.info("Skipping %s: already has catalog id %s", record.name, record.catalog_id)

    def artist_searching(self, record: ArtistRecord) -> None:
        log.debug("Searching catalog for %s", record.name)

    def artist_updated(self, record: ArtistRecord, candidate: CatalogCandidate) -> None:
        log.info("Updated %s with catalog id %s (%s)", record.name, candidate.id, candidate.name)

    def artist_flagged(self, record: ArtistRecord, candidate: CatalogCandidate) -> None:
        log.warning(
            "Medium confidence match for %s -> %s (%s), needs review",
            record.name,
            candidate.name,
            candidate.id,
        )

    def artist_not_found(self, record: ArtistRecord, confidence: MatchConfidence) -> None:
        log.info("No high-confidence catalog match for %s (confidence=%s)", record.name, confidence)

    def artist_failed(self, record: ArtistRecord, error: Exception) -> None:
        log.error("Error processing %s: %s", record.name, error, exc_info=error)

    def batch_finished(self, summary: BatchSummary, *, principal: str | None) -> None:
        log.info(
            "[%s] Sync completed: %s updated, %s skipped, %s failed (of %s)",
            principal or "anonymous",
            summary.updated,
            summary.skipped,
            summary.failed,
            summary.total,
        )


if TYPE_CHECKING:
    from artistsync.domain.ports.observing import SyncObserver

    _observer_check: SyncObserver = LoggingSyncObserver()
