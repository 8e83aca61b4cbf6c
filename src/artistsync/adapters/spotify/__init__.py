"""Spotify adapter package."""

from __future__ import annotations

from .catalog import SpotifyArtistCatalog
from .client import SpotifyClient, build_spotipy_client
from .schema import ArtistSearchPage, ArtistSearchResponse, SpotifyArtist
from .translator import translate_artist

__all__ = [
    "ArtistSearchPage",
    "ArtistSearchResponse",
    "SpotifyArtist",
    "SpotifyArtistCatalog",
    "SpotifyClient",
    "build_spotipy_client",
    "translate_artist",
]
