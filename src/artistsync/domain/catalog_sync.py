"""Application service synchronising local artists with an external catalog."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from artistsync.domain.ports.observing import NullSyncObserver
from artistsync.domain.reconciliation import reconcile_artist
from artistsync.domain.reporting import BatchReport

if TYPE_CHECKING:
    from collections.abc import Callable

    from artistsync.domain.model import ArtistRecord
    from artistsync.domain.ports.catalog import ArtistMatchEngine
    from artistsync.domain.ports.observing import SyncObserver
    from artistsync.domain.ports.unit_of_work import ArtistUnitOfWork
    from artistsync.domain.reconciliation import MatchOutcome

DEFAULT_PACING_DELAY_MS = 150
DEFAULT_PACING_DELAY_SECONDS = DEFAULT_PACING_DELAY_MS / 1000


@dataclass(slots=True, kw_only=True)
class CatalogSyncRequest:
    """Parameters for one sync run."""

    pacing_delay_seconds: float = DEFAULT_PACING_DELAY_SECONDS
    principal: str | None = None


def load_artists(unit_of_work_factory: Callable[[], ArtistUnitOfWork]) -> list[ArtistRecord]:
    """Return every artist ordered by name; store failures propagate as ``DataAccessError``."""

    with unit_of_work_factory() as uow:
        return list(uow.repositories.artists.list_ordered_by_name())


class CatalogSync:
    """Match every artist against the catalog, one at a time, and report the outcomes."""

    def __init__(
        self,
        *,
        matcher: ArtistMatchEngine,
        unit_of_work_factory: Callable[[], ArtistUnitOfWork],
        observer: SyncObserver | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._matcher = matcher
        self._unit_of_work_factory = unit_of_work_factory
        self._observer = observer or NullSyncObserver()
        self._sleep = sleep

    def run(self, request: CatalogSyncRequest | None = None) -> BatchReport:
        active_request = request or CatalogSyncRequest()
        if active_request.pacing_delay_seconds < 0:
            raise ValueError("pacing_delay_seconds must be non-negative")

        artists = load_artists(self._unit_of_work_factory)
        self._observer.batch_started(len(artists), principal=active_request.principal)

        outcomes: list[MatchOutcome] = []
        for record in artists:
            outcomes.append(
                reconcile_artist(
                    record,
                    matcher=self._matcher,
                    unit_of_work_factory=self._unit_of_work_factory,
                    observer=self._observer,
                )
            )
            # paced after every artist, skipped and failed ones included
            self._pause(active_request.pacing_delay_seconds)

        report = BatchReport.from_outcomes(outcomes)
        self._observer.batch_finished(report.summary, principal=active_request.principal)
        return report

    def _pause(self, seconds: float) -> None:
        if seconds > 0:
            self._sleep(seconds)
