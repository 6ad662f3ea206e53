"""Error types and envelope error formatting."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import ApiError


class TokensoftError(Exception):
    """Base exception for this package."""


class TokensoftConfigurationError(TokensoftError):
    """Missing/empty required setting, or a required capability is absent."""


class TokensoftTransportError(TokensoftError):
    """Network/transport-level failure."""

    def __init__(self, message: str, *, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class TokensoftProtocolError(TokensoftTransportError):
    """Response body is not a decodable envelope."""


class TokensoftClientClosedError(TokensoftError):
    """Raised when client is used after close."""


class TokensoftProjectionError(TokensoftError, ValueError):
    """Projection does not conform to the record it projects."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class TokensoftApiError(TokensoftError):
    """Aggregated errors reported by the API envelope."""

    def __init__(
        self,
        message: str,
        *,
        errors: Sequence["ApiError"] = (),
        data: Mapping[str, object] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = tuple(errors)
        self.data = data


def format_api_errors(errors: Sequence["ApiError"]) -> str:
    """Render envelope errors as ``Errors: name: message - {data}; ...``."""

    parts: list[str] = []
    for error in errors:
        text = f"{error.name}: {error.message}"
        if error.data:
            text += f" - {json.dumps(error.data)}"
        parts.append(text)
    return "Errors: " + "; ".join(parts)


__all__ = [
    "TokensoftError",
    "TokensoftConfigurationError",
    "TokensoftTransportError",
    "TokensoftProtocolError",
    "TokensoftClientClosedError",
    "TokensoftProjectionError",
    "TokensoftApiError",
    "format_api_errors",
]
