"""Domain port definitions for adapters."""

from __future__ import annotations

from .auth import AuthResult, Authorizer, Principal
from .catalog import ArtistCatalog, ArtistMatchEngine
from .observing import NullSyncObserver, SyncObserver
from .persistence import ArtistRepository, Repository
from .unit_of_work import (
    ArtistRepositories,
    ArtistUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ArtistCatalog",
    "ArtistMatchEngine",
    "ArtistRepositories",
    "ArtistRepository",
    "ArtistUnitOfWork",
    "AuthResult",
    "Authorizer",
    "NullSyncObserver",
    "Principal",
    "Repository",
    "RepositoryCollection",
    "SyncObserver",
    "UnitOfWork",
]
