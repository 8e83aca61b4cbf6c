"""Spotify configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_number, optional_env_var, require_env_vars
from .http_resilience import DEFAULT_MAX_RETRIES, ResilienceConfig, RetryPolicy

SPOTIFY_TIMEOUT_SECONDS = 10.0
SPOTIFY_MAX_SEARCH_LIMIT = 50


def _default_resilience() -> ResilienceConfig:
    return ResilienceConfig(name="spotify", timeout_seconds=SPOTIFY_TIMEOUT_SECONDS)


@dataclass(frozen=True)
class SpotifyConfig:
    """Client-credentials settings for catalog search (no user scopes needed)."""

    client_id: str
    client_secret: str
    market: str | None = None
    resilience: ResilienceConfig = field(default_factory=_default_resilience)


def get_spotify_config(*, resilience: ResilienceConfig | None = None) -> SpotifyConfig:
    values = require_env_vars(("SPOTIFY_CLIENT_ID", "SPOTIFY_CLIENT_SECRET"))
    return SpotifyConfig(
        client_id=values["SPOTIFY_CLIENT_ID"],
        client_secret=values["SPOTIFY_CLIENT_SECRET"],
        market=optional_env_var("SPOTIFY_MARKET"),
        resilience=resilience
        or ResilienceConfig(
            name="spotify",
            timeout_seconds=env_number(
                "SPOTIFY_TIMEOUT_SECONDS",
                SPOTIFY_TIMEOUT_SECONDS,
                parse=float,
                minimum=0.0,
            ),
            retry=RetryPolicy(
                total=env_number(
                    "SPOTIFY_MAX_RETRIES", DEFAULT_MAX_RETRIES, parse=int, minimum=0
                ),
            ),
        ),
    )
