"""Spotipy-based client wrapper for Spotify Web API artist search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import spotipy
from spotipy.oauth2 import SpotifyClientCredentials

from artistsync.config.spotify import SPOTIFY_MAX_SEARCH_LIMIT

from .schema import ArtistSearchResponse

if TYPE_CHECKING:
    from artistsync.config.spotify import SpotifyConfig

    from .schema import SpotifyArtist


def build_spotipy_client(config: SpotifyConfig) -> spotipy.Spotify:
    """Create a client-credentials spotipy client; spotipy owns retries and timeouts."""

    auth_manager = SpotifyClientCredentials(
        client_id=config.client_id,
        client_secret=config.client_secret,
    )
    retry = config.resilience.retry
    return spotipy.Spotify(
        auth_manager=auth_manager,
        requests_timeout=config.resilience.timeout_seconds,
        retries=retry.total,
        status_retries=retry.status_retries,
        backoff_factor=retry.backoff_factor,
        status_forcelist=tuple(sorted(retry.status_forcelist)),
    )


class SpotifyClient:
    """Small wrapper around spotipy.Spotify returning validated payloads."""

    def __init__(self, *, config: SpotifyConfig, client: spotipy.Spotify | None = None) -> None:
        self._client = client if client is not None else build_spotipy_client(config)
        self._market = config.market

    def search_artists(self, query: str, *, limit: int = 10) -> list[SpotifyArtist]:
        bounded_limit = max(1, min(limit, SPOTIFY_MAX_SEARCH_LIMIT))
        raw_payload = self._client.search(  # pyright: ignore[reportUnknownMemberType]
            q=query,
            limit=bounded_limit,
            type="artist",
            market=self._market,
        )
        payload = ArtistSearchResponse.model_validate(raw_payload or {})
        return payload.artists.items
