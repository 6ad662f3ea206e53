"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import TokensoftClientConfig
from .core.errors import TokensoftConfigurationError
from .core.time_sync import ServerTimeCache


def validate_client_config(config: TokensoftClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise TokensoftConfigurationError(str(exc)) from exc


def resolve_time_cache(
    *,
    config: TokensoftClientConfig,
    time_cache: ServerTimeCache | None,
) -> ServerTimeCache:
    if time_cache is not None:
        return time_cache
    return ServerTimeCache(config.max_timecache_age_ms)


__all__ = [
    "validate_client_config",
    "resolve_time_cache",
]
