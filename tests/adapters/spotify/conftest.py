"""Shared fixtures for Spotify adapter tests."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

import pytest

from artistsync.adapters.spotify.client import SpotifyClient
from artistsync.config.spotify import SpotifyConfig
from tests.helpers.spotify import FakeSpotipyClient, SpotifyPayload

if TYPE_CHECKING:
    import spotipy


@pytest.fixture
def fake_spotify_client(spotify_search_payload: SpotifyPayload) -> FakeSpotipyClient:
    return FakeSpotipyClient(spotify_search_payload)


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(
        client_id="x",
        client_secret="y",  # noqa: S106
        market="DE",
    )


@pytest.fixture
def spotipy_client(
    spotify_config: SpotifyConfig, fake_spotify_client: FakeSpotipyClient
) -> SpotifyClient:
    return SpotifyClient(
        config=spotify_config,
        client=cast("spotipy.Spotify", fake_spotify_client),
    )
