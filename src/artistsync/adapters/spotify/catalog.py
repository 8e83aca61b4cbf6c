"""Spotify implementation of the artist catalog search port."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .client import SpotifyClient
from .translator import translate_artist

if TYPE_CHECKING:
    from artistsync.config.spotify import SpotifyConfig
    from artistsync.domain.model import CatalogCandidate


class SpotifyArtistCatalog:
    """Search Spotify for artists and translate the results into catalog candidates."""

    def __init__(self, *, config: SpotifyConfig, client: SpotifyClient | None = None) -> None:
        self._client = client or SpotifyClient(config=config)

    def search_artists(self, query: str, *, limit: int = 10) -> list[CatalogCandidate]:
        artists = self._client.search_artists(query, limit=limit)
        return [translate_artist(artist) for artist in artists]


if TYPE_CHECKING:
    from artistsync.domain.ports.catalog import ArtistCatalog

    _catalog_check: ArtistCatalog = SpotifyArtistCatalog(config=cast("SpotifyConfig", object()))
