"""Reusable fakes and helpers for artist sync tests."""

from __future__ import annotations

from dataclasses import replace
from http import HTTPStatus
from typing import TYPE_CHECKING, Literal

from artistsync.domain.errors import DataAccessError
from artistsync.domain.model import ArtistRecord, CatalogCandidate
from artistsync.domain.ports.unit_of_work import ArtistRepositories

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence
    from types import TracebackType
    from uuid import UUID

    from artistsync.domain.model import ArtistUpdate, MatchConfidence
    from artistsync.domain.reporting import BatchSummary


def make_artist(
    name: str = "Example Artist",
    *,
    catalog_id: str | None = None,
    catalog_url: str | None = None,
    image_url: str | None = None,
) -> ArtistRecord:
    return ArtistRecord(
        name=name,
        catalog_id=catalog_id,
        catalog_url=catalog_url,
        image_url=image_url,
    )


def make_candidate(
    name: str = "Example Artist",
    *,
    candidate_id: str | None = None,
    image_url: str | None = "https://i.scdn.co/image/example",
    follower_count: int = 1000,
    popularity: int = 50,
) -> CatalogCandidate:
    identifier = candidate_id or f"id-{name.lower().replace(' ', '-')}"
    return CatalogCandidate(
        id=identifier,
        name=name,
        url=f"https://open.spotify.com/artist/{identifier}",
        image_url=image_url,
        follower_count=follower_count,
        popularity=popularity,
    )


class FakeArtistRepository:
    """In-memory artist store; hands out copies the way a session would."""

    def __init__(self, artists: Iterable[ArtistRecord] = ()) -> None:
        self.rows: dict[UUID, ArtistRecord] = {artist.id: artist for artist in artists}
        self.updates: list[tuple[UUID, ArtistUpdate]] = []
        self.fail_list = False
        self.fail_update_for: set[str] = set()

    def add(self, entity: ArtistRecord) -> None:
        self.rows[entity.id] = entity

    def get_by_name(self, name: str) -> ArtistRecord | None:
        for row in self.rows.values():
            if row.name == name:
                return replace(row)
        return None

    def list_ordered_by_name(self) -> Sequence[ArtistRecord]:
        if self.fail_list:
            raise DataAccessError(
                "fetch artists: database is locked",
                status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            )
        ordered = sorted(self.rows.values(), key=lambda row: row.name)
        return [replace(row) for row in ordered]

    def apply_update(self, artist_id: UUID, update: ArtistUpdate) -> None:
        row = self.rows.get(artist_id)
        if row is None:
            raise DataAccessError(
                f"update artist: no artist with id {artist_id}",
                status_code=HTTPStatus.NOT_FOUND,
            )
        if row.name in self.fail_update_for:
            raise DataAccessError("update artist: constraint failed", status_code=409)
        self.updates.append((artist_id, update))
        for field_name, value in update.changes().items():
            setattr(row, field_name, value)


class FakeArtistUnitOfWork:
    def __init__(self, repository: FakeArtistRepository) -> None:
        self._repositories = ArtistRepositories(artists=repository)
        self.committed = False
        self.rolled_back = False

    @property
    def repositories(self) -> ArtistRepositories:
        return self._repositories

    def __enter__(self) -> FakeArtistUnitOfWork:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        return False

    def commit(self) -> None:
        self.committed = True

    def rollback(self) -> None:
        self.rolled_back = True


class FakeUnitOfWorkFactory:
    """Callable producing units of work over one shared in-memory repository."""

    def __init__(self, artists: Iterable[ArtistRecord] = ()) -> None:
        self.repository = FakeArtistRepository(artists)
        self.created: list[FakeArtistUnitOfWork] = []

    def __call__(self) -> FakeArtistUnitOfWork:
        uow = FakeArtistUnitOfWork(self.repository)
        self.created.append(uow)
        return uow

    def stored(self, name: str) -> ArtistRecord:
        for row in self.repository.rows.values():
            if row.name == name:
                return row
        raise KeyError(name)


class FakeArtistCatalog:
    """Catalog search port returning canned candidates per query."""

    def __init__(
        self,
        results: Mapping[str, Sequence[CatalogCandidate]] | None = None,
        *,
        failures: Mapping[str, Exception] | None = None,
    ) -> None:
        self._results = dict(results or {})
        self._failures = dict(failures or {})
        self.queries: list[tuple[str, int]] = []

    def search_artists(self, query: str, *, limit: int = 10) -> list[CatalogCandidate]:
        self.queries.append((query, limit))
        failure = self._failures.get(query)
        if failure is not None:
            raise failure
        return list(self._results.get(query, ()))[:limit]


class RecordingSleep:
    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


class RecordingObserver:
    """Observer collecting notifications as ``(event, artist name)`` pairs."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []
        self.summaries: list[BatchSummary] = []
        self.errors: list[Exception] = []

    def batch_started(self, total: int, *, principal: str | None) -> None:
        self.events.append(("batch_started", str(total)))

    def artist_skipped(self, record: ArtistRecord) -> None:
        self.events.append(("skipped", record.name))

    def artist_searching(self, record: ArtistRecord) -> None:
        self.events.append(("searching", record.name))

    def artist_updated(self, record: ArtistRecord, candidate: CatalogCandidate) -> None:
        self.events.append(("updated", record.name))

    def artist_flagged(self, record: ArtistRecord, candidate: CatalogCandidate) -> None:
        self.events.append(("flagged", record.name))

    def artist_not_found(self, record: ArtistRecord, confidence: MatchConfidence) -> None:
        self.events.append(("not_found", record.name))

    def artist_failed(self, record: ArtistRecord, error: Exception) -> None:
        self.events.append(("failed", record.name))
        self.errors.append(error)

    def batch_finished(self, summary: BatchSummary, *, principal: str | None) -> None:
        self.events.append(("batch_finished", str(summary.total)))
        self.summaries.append(summary)
