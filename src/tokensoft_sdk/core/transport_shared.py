"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import TokensoftClientConfig
from .signing import build_signed_headers, sign_request


def build_default_headers(config: TokensoftClientConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: TokensoftClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_request_signature(
    *,
    config: TokensoftClientConfig,
    timestamp: str,
    body: str,
) -> dict[str, str]:
    """Headers for a signed call whose signature covers ``timestamp + body``."""

    signature = sign_request(config.secret_key, timestamp, body)
    return build_signed_headers(
        key_id=config.key_id,
        signature=signature,
        timestamp=timestamp,
    )


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "build_request_signature",
]
