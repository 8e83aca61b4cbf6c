"""API token registry used to authorise sync runs."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_var
from .errors import InvalidConfigurationError

ADMIN_ROLE = "admin"
API_TOKENS_ENV = "ARTISTSYNC_API_TOKENS"


@dataclass(frozen=True, slots=True)
class ApiToken:
    email: str
    role: str
    token: str


@dataclass(frozen=True, slots=True)
class AuthConfig:
    tokens: tuple[ApiToken, ...]
    required_role: str = ADMIN_ROLE


def parse_api_tokens(raw: str) -> tuple[ApiToken, ...]:
    """Parse ``email:role:token`` entries separated by commas."""

    tokens: list[ApiToken] = []
    for entry in (part.strip() for part in raw.split(",")):
        if not entry:
            continue
        parts = [part.strip() for part in entry.split(":", 2)]
        if len(parts) != 3 or not all(parts):  # noqa: PLR2004
            raise InvalidConfigurationError(API_TOKENS_ENV, entry, "expected email:role:token")
        email, role, token = parts
        tokens.append(ApiToken(email=email, role=role, token=token))
    return tuple(tokens)


def get_auth_config() -> AuthConfig:
    return AuthConfig(tokens=parse_api_tokens(require_env_var(API_TOKENS_ENV)))
