"""Request signing."""

from __future__ import annotations

import hashlib
import hmac
import json
from collections.abc import Mapping

CONTENT_TYPE_JSON = "application/json"
HEADER_ACCESS_KEY = "access-key"
HEADER_ACCESS_SIGN = "access-sign"
HEADER_ACCESS_TIMESTAMP = "access-timestamp"


def sign_request(secret_key: str, timestamp: str, body: str) -> str:
    """Hex HMAC-SHA256 of ``timestamp + body`` keyed by ``secret_key``."""

    message = (timestamp + body).encode("utf-8")
    return hmac.new(secret_key.encode("utf-8"), message, hashlib.sha256).hexdigest()


def build_signed_headers(*, key_id: str, signature: str, timestamp: str) -> dict[str, str]:
    return {
        HEADER_ACCESS_KEY: key_id,
        HEADER_ACCESS_SIGN: signature,
        HEADER_ACCESS_TIMESTAMP: timestamp,
        "Content-Type": CONTENT_TYPE_JSON,
    }


def build_unsigned_headers() -> dict[str, str]:
    return {"Content-Type": CONTENT_TYPE_JSON}


def serialize_request(query: str, variables: Mapping[str, object] | None = None) -> str:
    """Serialize a query/mutation into the JSON body that gets signed and sent."""

    request: dict[str, object] = {"query": query}
    if variables is not None:
        request["variables"] = dict(variables)
    return json.dumps(request)


TIME_PROBE_BODY = serialize_request("{ time }")


__all__ = [
    "CONTENT_TYPE_JSON",
    "HEADER_ACCESS_KEY",
    "HEADER_ACCESS_SIGN",
    "HEADER_ACCESS_TIMESTAMP",
    "TIME_PROBE_BODY",
    "sign_request",
    "build_signed_headers",
    "build_unsigned_headers",
    "serialize_request",
]
