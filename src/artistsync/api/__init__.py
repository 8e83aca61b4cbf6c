"""Response contract for catalog sync runs."""

from __future__ import annotations

from .responses import (
    auth_failure_response,
    result_item,
    store_failure_response,
    success_response,
    unexpected_failure_response,
)
from .schemas import CatalogArtistData, SyncResponse, SyncResultItem, SyncSummary

__all__ = [
    "CatalogArtistData",
    "SyncResponse",
    "SyncResultItem",
    "SyncSummary",
    "auth_failure_response",
    "result_item",
    "store_failure_response",
    "success_response",
    "unexpected_failure_response",
]
