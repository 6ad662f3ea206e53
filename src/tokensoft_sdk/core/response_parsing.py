"""Shared response parsing helpers for sync/async transports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Protocol

from .errors import TokensoftApiError, TokensoftProtocolError, format_api_errors
from .models import ResponseEnvelope


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def parse_json_payload(
    response: JsonPayloadResponse,
    *,
    http_status: int | None,
) -> dict[str, object]:
    """Parse response JSON payload.

    Decode failures propagate unchanged; a decoded root that is not an
    object raises ``TokensoftProtocolError``.
    """

    payload = response.json()
    if not isinstance(payload, dict):
        raise TokensoftProtocolError(
            "response JSON root must be an object",
            http_status=http_status,
        )
    return payload


def parse_server_time(payload: Mapping[str, object]) -> int:
    """Extract ``data.time`` (numeric string, milliseconds) from a time probe reply."""

    data = payload.get("data")
    value = data.get("time") if isinstance(data, Mapping) else None
    if isinstance(value, bool) or value is None:
        raise TokensoftProtocolError("time probe response is missing data.time")
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise TokensoftProtocolError(f"time probe returned non-numeric time {value!r}") from exc


def unwrap_envelope(
    envelope: ResponseEnvelope,
    *,
    expected: Iterable[str] = (),
) -> Mapping[str, object]:
    """Return ``envelope.data`` or raise the aggregated API errors.

    Errors are fatal only when the data object is missing or when an
    invoked (or ``expected``) function result is null or absent.
    Errors next to complete data are left on the envelope for callers that
    inspect it.
    """

    data = envelope.data
    incomplete = (
        data is None
        or any(value is None for value in data.values())
        or any(data.get(name) is None for name in expected)
    )
    if incomplete and envelope.has_errors:
        raise TokensoftApiError(
            format_api_errors(envelope.errors),
            errors=envelope.errors,
            data=data,
        )
    if data is None:
        raise TokensoftProtocolError("response carries neither data nor errors")
    return data


__all__ = [
    "parse_json_payload",
    "parse_server_time",
    "unwrap_envelope",
]
