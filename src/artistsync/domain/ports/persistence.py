"""Ports for persisting artist records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from uuid import UUID

    from artistsync.domain.model import ArtistRecord, ArtistUpdate


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent aggregate store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ArtistRepository(Repository["ArtistRecord"], Protocol):
    """Persistence contract for artist records."""

    def get_by_name(self, name: str) -> ArtistRecord | None: ...

    def list_ordered_by_name(self) -> Sequence[ArtistRecord]: ...

    def apply_update(self, artist_id: UUID, update: ArtistUpdate) -> None: ...
