from __future__ import annotations

import json
import logging

import pytest

from tokensoft_sdk.core.errors import TokensoftProtocolError, TokensoftTransportError
from tokensoft_sdk.core.signing import sign_request
from tokensoft_sdk.core.time_sync import ServerTimeCache
from tokensoft_sdk.core.transport import SyncTransport
from tests.shared.payloads import make_envelope_payload, make_time_payload
from tests.shared.transport import FakeClock, Response, SyncSequencedClient


def _transport(config, steps, *, max_age_ms: int = 60_000, clock: FakeClock | None = None):
    client = SyncSequencedClient(steps)
    cache = ServerTimeCache(max_age_ms, clock_ms=clock or FakeClock())
    return SyncTransport(config, client=client, time_cache=cache), client


def test_send_signed_probes_time_then_signs_and_posts(config):
    body = json.dumps({"query": "{ currentUser {id email } }"})
    transport, client = _transport(
        config,
        [
            Response(200, make_time_payload(1_700_000_000_000)),
            Response(200, make_envelope_payload({"currentUser": {"id": "u1"}})),
        ],
    )

    envelope = transport.send_signed(body)

    assert envelope.data == {"currentUser": {"id": "u1"}}
    probe, signed = client.calls
    assert json.loads(probe.content) == {"query": "{ time }"}
    assert "access-sign" not in probe.headers
    assert signed.url == config.api_url
    assert signed.content == body
    assert signed.headers["access-key"] == "key-1"
    assert signed.headers["access-timestamp"] == "1700000000000"
    assert signed.headers["access-sign"] == sign_request("secret-1", "1700000000000", body)
    assert signed.headers["Content-Type"] == "application/json"


def test_send_signed_returns_envelope_with_errors_unmodified(config):
    transport, _ = _transport(
        config,
        [
            Response(200, make_time_payload()),
            Response(200, {"data": None, "errors": [{"message": "m", "name": "N"}]}),
        ],
    )
    envelope = transport.send_signed("{}")
    assert envelope.data is None
    assert envelope.errors[0].message == "m"


def test_warm_cache_skips_probe_and_reflects_elapsed_local_time(config):
    clock = FakeClock(start_ms=500)
    transport, client = _transport(
        config,
        [
            Response(200, make_time_payload(9_000)),
            Response(200, make_envelope_payload({"a": 1})),
            Response(200, make_envelope_payload({"a": 2})),
        ],
        max_age_ms=10**12,
        clock=clock,
    )

    transport.send_signed("{}")
    clock.advance(250)
    transport.send_signed("{}")

    assert len(client.calls) == 3
    assert client.calls[1].headers["access-timestamp"] == "9000"
    assert client.calls[2].headers["access-timestamp"] == "9250"


def test_zero_max_age_probes_before_every_signed_call(config):
    transport, client = _transport(
        config,
        [
            Response(200, make_time_payload(1)),
            Response(200, make_envelope_payload({"a": 1})),
            Response(200, make_time_payload(2)),
            Response(200, make_envelope_payload({"a": 2})),
        ],
        max_age_ms=0,
    )

    transport.send_signed("{}")
    transport.send_signed("{}")

    probes = [call for call in client.calls if json.loads(call.content) == {"query": "{ time }"}]
    assert len(probes) == 2
    assert client.calls[3].headers["access-timestamp"] == "2"


def test_stale_cache_is_refreshed(config):
    clock = FakeClock()
    transport, client = _transport(
        config,
        [Response(200, make_time_payload(100)), Response(200, make_time_payload(5_000))],
        max_age_ms=1_000,
        clock=clock,
    )

    assert transport.server_time() == "100"
    clock.advance(1_000)
    assert transport.server_time() == "5000"
    assert len(client.calls) == 2


def test_network_error_is_logged_and_reraised_unchanged(config, caplog):
    error = ConnectionError("network down")
    transport, _ = _transport(config, [Response(200, make_time_payload()), error])

    with caplog.at_level(logging.ERROR, logger="tokensoft_sdk"):
        with pytest.raises(ConnectionError) as exc_info:
            transport.send_signed("{}")

    assert exc_info.value is error
    assert "error sending request to Tokensoft API" in caplog.text
    assert "secret-1" not in caplog.text


def test_network_error_during_time_probe_propagates(config):
    transport, client = _transport(config, [RuntimeError("down")])
    with pytest.raises(RuntimeError):
        transport.send_signed("{}")
    assert len(client.calls) == 1


def test_non_json_response_is_logged_and_reraised_unchanged(config, caplog):
    decode_error = json.JSONDecodeError("Expecting value", "<html>", 0)
    transport, _ = _transport(
        config,
        [Response(200, make_time_payload()), Response(502, decode_error)],
    )
    with caplog.at_level(logging.ERROR, logger="tokensoft_sdk"):
        with pytest.raises(json.JSONDecodeError) as exc_info:
            transport.send_signed("{}")
    assert exc_info.value is decode_error
    assert "response parse error" in caplog.text
    assert "http_status=502" in caplog.text


def test_non_object_json_response_raises_protocol_error(config):
    transport, _ = _transport(
        config,
        [Response(200, make_time_payload()), Response(200, [1, 2])],
    )
    with pytest.raises(TokensoftProtocolError) as exc_info:
        transport.send_signed("{}")
    assert exc_info.value.http_status == 200


def test_closed_transport_rejects_requests(config):
    transport, client = _transport(config, [])
    transport.close()
    with pytest.raises(TokensoftTransportError):
        transport.send_signed("{}")
    assert client.closed is False


def test_transport_can_initialize_and_close_with_real_httpx_client(config):
    transport = SyncTransport(config)
    transport.close()
