"""Ports for searching an external artist catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from artistsync.domain.model import CatalogCandidate, MatchResult


@runtime_checkable
class ArtistCatalog(Protocol):
    """Raw catalog search. Owns its own retries, backoff and timeout."""

    def search_artists(self, query: str, *, limit: int = 10) -> Sequence[CatalogCandidate]: ...


@runtime_checkable
class ArtistMatchEngine(Protocol):
    """Scores catalog candidates for a name and classifies the best one."""

    def match_artist(self, name: str) -> MatchResult: ...


__all__ = ["ArtistCatalog", "ArtistMatchEngine"]
