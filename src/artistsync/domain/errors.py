"""Error taxonomy for catalog synchronisation runs.

Each error carries the HTTP-equivalent status a caller should report when the
error aborts a run. Per-artist failures never abort a run; they are recorded as
that artist's outcome instead.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import ClassVar


class ArtistSyncError(RuntimeError):
    """Base class for failures raised by the sync pipeline."""

    default_status: ClassVar[int] = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code if status_code is not None else self.default_status


class AuthError(ArtistSyncError):
    """Caller is not allowed to start a sync run."""

    default_status = HTTPStatus.UNAUTHORIZED


class DataAccessError(ArtistSyncError):
    """The artist store could not be read or written."""


class MatchError(ArtistSyncError):
    """Searching or scoring catalog candidates failed for one artist."""

    default_status = HTTPStatus.BAD_GATEWAY

    def __init__(self, message: str, *, artist_name: str) -> None:
        super().__init__(message)
        self.artist_name = artist_name


class UnexpectedError(ArtistSyncError):
    """Anything that escaped the per-artist guard and aborted the run."""
