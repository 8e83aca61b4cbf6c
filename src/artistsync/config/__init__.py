"""Application configuration helpers."""

from __future__ import annotations

from .auth import ADMIN_ROLE, ApiToken, AuthConfig, get_auth_config, parse_api_tokens
from .env import env_number, optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging, log_level
from .spotify import SPOTIFY_MAX_SEARCH_LIMIT, SpotifyConfig, get_spotify_config
from .storage import DatabaseConfig, StorageConfig, get_database_config, get_storage_config
from .sync import SyncConfig, get_sync_config

__all__ = [
    "ADMIN_ROLE",
    "SPOTIFY_MAX_SEARCH_LIMIT",
    "ApiToken",
    "AuthConfig",
    "ConfigurationError",
    "DatabaseConfig",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "ResilienceConfig",
    "RetryPolicy",
    "SpotifyConfig",
    "StorageConfig",
    "SyncConfig",
    "configure_logging",
    "env_number",
    "get_auth_config",
    "get_database_config",
    "get_spotify_config",
    "get_storage_config",
    "get_sync_config",
    "log_level",
    "optional_env_var",
    "parse_api_tokens",
    "require_env_var",
    "require_env_vars",
]
