"""Application orchestration entry points."""

from __future__ import annotations

import time
from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from artistsync.adapters.auth import StaticTokenAuthorizer
from artistsync.adapters.logging_observer import LoggingSyncObserver
from artistsync.adapters.spotify import SpotifyArtistCatalog
from artistsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyArtistUnitOfWork,
    is_started,
    startup,
)
from artistsync.api import (
    auth_failure_response,
    store_failure_response,
    success_response,
    unexpected_failure_response,
)
from artistsync.config import get_auth_config, get_spotify_config, get_sync_config
from artistsync.domain.catalog_sync import CatalogSync, CatalogSyncRequest
from artistsync.domain.errors import AuthError, DataAccessError, UnexpectedError
from artistsync.domain.matching import ArtistMatcher, MatchThresholds
from artistsync.domain.model import ArtistRecord
from artistsync.domain.ports.unit_of_work import ArtistUnitOfWork

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artistsync.api import SyncResponse
    from artistsync.config import SyncConfig
    from artistsync.domain.ports.auth import Authorizer, Principal
    from artistsync.domain.ports.catalog import ArtistMatchEngine
    from artistsync.domain.ports.observing import SyncObserver

UnitOfWorkFactory = Callable[[], ArtistUnitOfWork]

AUTHENTICATION_FAILED = "Authentication failed"
SYNC_FAILED = "Failed to sync Spotify artists"


log = getLogger(__name__)


def sync_spotify_artists(
    authorization: str | None,
    *,
    authorizer: Authorizer | None = None,
    matcher: ArtistMatchEngine | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    observer: SyncObserver | None = None,
    sleep: Callable[[float], None] = time.sleep,
    sync_config: SyncConfig | None = None,
) -> SyncResponse:
    """Authorise the caller, match every stored artist against Spotify and report.

    Never raises for run-level failures; they are shaped into the response with the
    matching status code instead.
    """

    try:
        principal = _authorize(authorizer, authorization)
    except AuthError as exc:
        log.warning("Sync rejected: %s", exc)
        return auth_failure_response(exc)

    try:
        config = sync_config or get_sync_config()
        effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
        effective_matcher = matcher or _build_matcher(config)
        log.info(
            "Starting Spotify artist sync: principal=%s, pacing_ms=%s, search_limit=%s",
            principal.email,
            config.pacing_delay_ms,
            config.search_limit,
        )
        sync = CatalogSync(
            matcher=effective_matcher,
            unit_of_work_factory=effective_uow,
            observer=observer or LoggingSyncObserver(),
            sleep=sleep,
        )
        report = sync.run(
            CatalogSyncRequest(
                pacing_delay_seconds=config.pacing_delay_seconds,
                principal=principal.email,
            )
        )
    except DataAccessError as exc:
        log.exception("Artist store unavailable, sync aborted")
        return store_failure_response(exc)
    except Exception as exc:
        log.exception("Fatal error during artist sync")
        return unexpected_failure_response(UnexpectedError(SYNC_FAILED), cause=exc)

    summary = report.summary
    log.info(
        "Finished Spotify artist sync: total=%s, updated=%s, skipped=%s, failed=%s",
        summary.total,
        summary.updated,
        summary.skipped,
        summary.failed,
    )
    return success_response(report)


def add_artists(
    names: Iterable[str],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[ArtistRecord]:
    """Store new artist records by name; names already present are left untouched."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    created: list[ArtistRecord] = []
    with effective_uow() as uow:
        repository = uow.repositories.artists
        seen: set[str] = set()
        for raw_name in names:
            name = raw_name.strip()
            if not name or name in seen:
                continue
            seen.add(name)
            if repository.get_by_name(name) is not None:
                log.info("Artist %r already stored, skipping", name)
                continue
            record = ArtistRecord(name=name)
            repository.add(record)
            created.append(record)
        uow.commit()
    log.info("Added %s artist(s)", len(created))
    return created


def _authorize(authorizer: Authorizer | None, authorization: str | None) -> Principal:
    try:
        effective = authorizer or StaticTokenAuthorizer.from_config(get_auth_config())
        result = effective.verify(authorization)
    except Exception as exc:
        log.exception("Authorizer failed")
        raise AuthError(AUTHENTICATION_FAILED) from exc
    if not result.authorized or result.principal is None:
        raise AuthError(result.reason or AUTHENTICATION_FAILED)
    return result.principal


def _build_matcher(config: SyncConfig) -> ArtistMatcher:
    catalog = SpotifyArtistCatalog(config=get_spotify_config())
    thresholds = MatchThresholds(high=config.high_threshold, medium=config.medium_threshold)
    return ArtistMatcher(catalog, thresholds=thresholds, search_limit=config.search_limit)


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyArtistUnitOfWork
