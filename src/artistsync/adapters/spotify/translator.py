"""Translate Spotify payloads into domain values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from artistsync.domain.model import CatalogCandidate

if TYPE_CHECKING:
    from .schema import SpotifyArtist

SPOTIFY_ARTIST_URL = "https://open.spotify.com/artist/{id}"


def translate_artist(artist: SpotifyArtist) -> CatalogCandidate:
    return CatalogCandidate(
        id=artist.id,
        name=artist.name,
        url=artist.external_urls.spotify or SPOTIFY_ARTIST_URL.format(id=artist.id),
        image_url=_primary_image_url(artist),
        follower_count=artist.followers.total or 0,
        popularity=artist.popularity or 0,
    )


def _primary_image_url(artist: SpotifyArtist) -> str | None:
    # Spotify lists images widest first
    if not artist.images:
        return None
    return artist.images[0].url
