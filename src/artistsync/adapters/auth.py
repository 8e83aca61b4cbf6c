"""Bearer-token authorizer backed by the configured API token registry."""

from __future__ import annotations

import hmac
from typing import TYPE_CHECKING

from artistsync.config.auth import ADMIN_ROLE
from artistsync.domain.ports.auth import AuthResult, Principal

if TYPE_CHECKING:
    from collections.abc import Iterable

    from artistsync.config.auth import ApiToken, AuthConfig

BEARER_PREFIX = "Bearer "

MISSING_HEADER = "Missing or invalid authorization header"
INVALID_TOKEN = "Invalid or expired token"  # noqa: S105
INSUFFICIENT_PRIVILEGES = "Insufficient privileges"


class StaticTokenAuthorizer:
    """Authorise ``Authorization: Bearer <token>`` headers against known tokens."""

    def __init__(self, tokens: Iterable[ApiToken], *, required_role: str = ADMIN_ROLE) -> None:
        self._tokens = tuple(tokens)
        self._required_role = required_role

    @classmethod
    def from_config(cls, config: AuthConfig) -> StaticTokenAuthorizer:
        return cls(config.tokens, required_role=config.required_role)

    def verify(self, authorization: str | None) -> AuthResult:
        if not authorization or not authorization.startswith(BEARER_PREFIX):
            return AuthResult.denied(MISSING_HEADER)

        token = authorization.removeprefix(BEARER_PREFIX).strip()
        entry = self._lookup(token) if token else None
        if entry is None:
            return AuthResult.denied(INVALID_TOKEN)
        if entry.role != self._required_role:
            return AuthResult.denied(INSUFFICIENT_PRIVILEGES)
        return AuthResult.granted(Principal(email=entry.email, role=entry.role))

    def _lookup(self, token: str) -> ApiToken | None:
        match: ApiToken | None = None
        for entry in self._tokens:
            # constant-time compare against every entry
            if hmac.compare_digest(entry.token.encode(), token.encode()):
                match = entry
        return match


if TYPE_CHECKING:
    from artistsync.domain.ports.auth import Authorizer

    _authorizer_check: Authorizer = StaticTokenAuthorizer(())
