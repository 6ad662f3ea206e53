from __future__ import annotations

import hashlib
import hmac
import json

from tokensoft_sdk.core.signing import (
    TIME_PROBE_BODY,
    build_signed_headers,
    serialize_request,
    sign_request,
)


def test_sign_request_matches_independent_hmac_sha256():
    body = '{"query": "{ currentUser {id email } }"}'
    timestamp = "1700000000123"
    expected = hmac.new(
        b"secret-1",
        (timestamp + body).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()

    assert sign_request("secret-1", timestamp, body) == expected


def test_sign_request_is_deterministic():
    first = sign_request("k", "1", "{}")
    second = sign_request("k", "1", "{}")
    assert first == second
    assert len(first) == 64


def test_sign_request_covers_timestamp():
    assert sign_request("k", "1", "{}") != sign_request("k", "2", "{}")


def test_build_signed_headers():
    headers = build_signed_headers(key_id="key-1", signature="abc", timestamp="42")
    assert headers == {
        "access-key": "key-1",
        "access-sign": "abc",
        "access-timestamp": "42",
        "Content-Type": "application/json",
    }


def test_serialize_request_omits_variables_when_absent():
    assert json.loads(serialize_request("{ time }")) == {"query": "{ time }"}
    assert json.loads(TIME_PROBE_BODY) == {"query": "{ time }"}


def test_serialize_request_includes_variables():
    body = serialize_request("query ($id: String!) { user (id: $id) { id } }", {"id": "u1"})
    assert json.loads(body)["variables"] == {"id": "u1"}
