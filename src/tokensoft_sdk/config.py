"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from .core.time_sync import DEFAULT_MAX_TIMECACHE_AGE_MS


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class TokensoftClientConfig:
    """Runtime configuration for Tokensoft client."""

    api_url: str
    key_id: str
    secret_key: str = field(repr=False)
    max_timecache_age_ms: int = DEFAULT_MAX_TIMECACHE_AGE_MS
    user_agent: str = "tokensoft-sdk/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if not self.api_url:
            raise ValueError("missing api_url argument")
        if not self.key_id:
            raise ValueError("missing key_id argument")
        if not self.secret_key:
            raise ValueError("missing secret_key argument")
        if self.max_timecache_age_ms < 0:
            raise ValueError("max_timecache_age_ms must be >= 0")
        self.transport.validate()


__all__ = [
    "TransportConfig",
    "TokensoftClientConfig",
]
