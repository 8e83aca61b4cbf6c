"""Retry and timeout settings handed to third-party catalog clients."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_MAX_RETRIES = 3


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    total: int = DEFAULT_MAX_RETRIES
    status_retries: int = 3
    backoff_factor: float = 0.3
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 500, 502, 503, 504})
    )


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    timeout_seconds: float = 10.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
