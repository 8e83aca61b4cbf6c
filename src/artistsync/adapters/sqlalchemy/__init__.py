"""SQLAlchemy adapter package for artistsync."""

from __future__ import annotations

from .errors import translate_errors
from .mappings import artist_table, create_all_tables, mapper_registry, start_mappers
from .repositories import SqlAlchemyArtistRepository
from .unit_of_work import (
    SqlAlchemyArtistUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemyArtistRepository",
    "SqlAlchemyArtistUnitOfWork",
    "StartupError",
    "artist_table",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "translate_errors",
]
