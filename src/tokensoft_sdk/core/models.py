"""Core response models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .errors import TokensoftProtocolError


@dataclass(slots=True, frozen=True)
class ApiError:
    message: str
    name: str
    time_thrown: str | None
    data: object = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ApiError":
        message = payload.get("message")
        name = payload.get("name")
        time_thrown = payload.get("time_thrown")
        return cls(
            message=str(message) if message is not None else "",
            name=str(name) if name is not None else "Error",
            time_thrown=str(time_thrown) if time_thrown is not None else None,
            data=payload.get("data"),
        )


@dataclass(slots=True, frozen=True)
class ResponseEnvelope:
    """Errors plus per-function data returned by every signed call.

    ``data`` keys are the names of the functions invoked in the call; each
    value is that function's (possibly null) result.
    """

    data: Mapping[str, object] | None
    errors: tuple[ApiError, ...] | list[ApiError] = ()

    def __post_init__(self) -> None:
        if isinstance(self.errors, tuple):
            return
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def has_errors(self) -> bool:
        return len(self.errors) > 0

    @classmethod
    def from_payload(cls, payload: Mapping[str, object]) -> "ResponseEnvelope":
        data = payload.get("data")
        if data is not None and not isinstance(data, Mapping):
            raise TokensoftProtocolError("response 'data' must be an object or null")

        raw_errors = payload.get("errors")
        if raw_errors is None:
            raw_errors = []
        if not isinstance(raw_errors, list):
            raise TokensoftProtocolError("response 'errors' must be a list")

        errors: list[ApiError] = []
        for item in raw_errors:
            if not isinstance(item, Mapping):
                raise TokensoftProtocolError("response 'errors' entries must be objects")
            errors.append(ApiError.from_payload(item))
        return cls(data=data, errors=errors)


__all__ = [
    "ApiError",
    "ResponseEnvelope",
]
