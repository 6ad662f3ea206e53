"""Async HTTP transport with request signing and server time sync."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import TokensoftClientConfig
from .errors import TokensoftTransportError
from .models import ResponseEnvelope
from .response_parsing import parse_json_payload, parse_server_time
from .signing import TIME_PROBE_BODY, build_unsigned_headers
from .time_sync import ServerTimeCache
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    build_request_signature,
)

logger = logging.getLogger("tokensoft_sdk")


class AsyncTransportClient(Protocol):
    async def post(self, url: str, *, content: str, headers: Mapping[str, str]) -> object: ...
    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous signed transport for the Tokensoft API."""

    def __init__(
        self,
        config: TokensoftClientConfig,
        *,
        client: AsyncTransportClient | None = None,
        time_cache: ServerTimeCache | None = None,
    ) -> None:
        self._config = config
        self._time_cache = time_cache or ServerTimeCache(config.max_timecache_age_ms)
        self._closed = False

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def time_cache(self) -> ServerTimeCache:
        return self._time_cache

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def server_time(self) -> str:
        """Adjusted server time, probing the server only when the cache is cold."""

        if not self._time_cache.is_warm():
            logger.debug("server time cache cold; probing url=%s", self._config.api_url)
            payload = await self._post(TIME_PROBE_BODY, build_unsigned_headers())
            entry = self._time_cache.store(parse_server_time(payload))
            logger.debug(
                "server time cached server_ms=%s local_ms=%s",
                entry.server_ms,
                entry.local_ms,
            )
        return self._time_cache.adjusted()

    async def send_signed(self, body: str) -> ResponseEnvelope:
        """Sign ``body`` with the adjusted server time and POST it."""

        timestamp = await self.server_time()
        headers = build_request_signature(config=self._config, timestamp=timestamp, body=body)
        payload = await self._post(body, headers)
        envelope = ResponseEnvelope.from_payload(payload)
        logger.info(
            "signed request complete url=%s errors=%s",
            self._config.api_url,
            len(envelope.errors),
        )
        return envelope

    async def _post(self, body: str, headers: Mapping[str, str]) -> dict[str, object]:
        if self._closed:
            raise TokensoftTransportError("transport is already closed")

        logger.debug("request start url=%s", self._config.api_url)
        try:
            response = await self._client.post(
                self._config.api_url,
                content=body,
                headers=headers,
            )
        except Exception as exc:
            logger.error(
                "error sending request to Tokensoft API url=%s error=%s",
                self._config.api_url,
                exc.__class__.__name__,
            )
            raise

        http_status = getattr(response, "status_code", None)
        logger.debug(
            "response received url=%s http_status=%s",
            self._config.api_url,
            http_status,
        )
        try:
            return parse_json_payload(response, http_status=http_status)
        except Exception:
            logger.error(
                "response parse error url=%s http_status=%s",
                self._config.api_url,
                http_status,
            )
            raise


__all__ = [
    "AsyncTransport",
]
