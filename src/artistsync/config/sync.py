"""Defaults for the catalog synchronisation batch."""

from __future__ import annotations

from dataclasses import dataclass

from artistsync.domain.catalog_sync import DEFAULT_PACING_DELAY_MS
from artistsync.domain.matching import (
    DEFAULT_HIGH_THRESHOLD,
    DEFAULT_MEDIUM_THRESHOLD,
    DEFAULT_SEARCH_LIMIT,
)

from .env import env_number
from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class SyncConfig:
    pacing_delay_ms: int = DEFAULT_PACING_DELAY_MS
    search_limit: int = DEFAULT_SEARCH_LIMIT
    high_threshold: float = DEFAULT_HIGH_THRESHOLD
    medium_threshold: float = DEFAULT_MEDIUM_THRESHOLD

    def __post_init__(self) -> None:
        if not 0 <= self.medium_threshold <= self.high_threshold <= 100:  # noqa: PLR2004
            raise ConfigurationError(
                "Match thresholds must satisfy 0 <= medium <= high <= 100 "
                f"(got medium={self.medium_threshold}, high={self.high_threshold})"
            )

    @property
    def pacing_delay_seconds(self) -> float:
        return self.pacing_delay_ms / 1000


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        pacing_delay_ms=env_number(
            "ARTISTSYNC_PACING_MS", DEFAULT_PACING_DELAY_MS, parse=int, minimum=0
        ),
        search_limit=env_number(
            "ARTISTSYNC_SEARCH_LIMIT", DEFAULT_SEARCH_LIMIT, parse=int, minimum=1
        ),
        high_threshold=env_number(
            "ARTISTSYNC_HIGH_THRESHOLD", DEFAULT_HIGH_THRESHOLD, parse=float
        ),
        medium_threshold=env_number(
            "ARTISTSYNC_MEDIUM_THRESHOLD", DEFAULT_MEDIUM_THRESHOLD, parse=float
        ),
    )
