"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from http import HTTPStatus
from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from artistsync.adapters.sqlalchemy.errors import translate_errors
from artistsync.adapters.sqlalchemy.mappings import artist_table
from artistsync.domain.errors import DataAccessError
from artistsync.domain.model import ArtistRecord

if TYPE_CHECKING:
    from uuid import UUID

    from sqlalchemy.orm import Session

    from artistsync.domain.model import ArtistUpdate


class SqlAlchemyArtistRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: ArtistRecord) -> None:
        self.session.add(entity)

    def get_by_name(self, name: str) -> ArtistRecord | None:
        stmt = select(ArtistRecord).where(artist_table.c.name == name).limit(1)
        with translate_errors("fetch artist by name"):
            return self.session.execute(stmt).scalar_one_or_none()

    def list_ordered_by_name(self) -> list[ArtistRecord]:
        stmt = select(ArtistRecord).order_by(artist_table.c.name.asc(), artist_table.c.id.asc())
        with translate_errors("fetch artists"):
            return list(self.session.execute(stmt).scalars())

    def apply_update(self, artist_id: UUID, update: ArtistUpdate) -> None:
        with translate_errors("update artist"):
            record = self.session.get(ArtistRecord, artist_id)
            if record is None:
                raise DataAccessError(
                    f"update artist: no artist with id {artist_id}",
                    status_code=HTTPStatus.NOT_FOUND,
                )
            for field_name, value in update.changes().items():
                setattr(record, field_name, value)
            self.session.flush()


if TYPE_CHECKING:
    from artistsync.domain.ports.persistence import ArtistRepository

    _session_stub = cast("Session", object())
    _artist_repo: ArtistRepository = SqlAlchemyArtistRepository(_session_stub)
