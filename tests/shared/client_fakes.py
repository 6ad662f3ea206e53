from __future__ import annotations

import json
from collections.abc import Mapping, Sequence

from tokensoft_sdk.core.models import ResponseEnvelope


class DummyTransport:
    """Records signed bodies and replies with canned envelope payloads."""

    def __init__(self, payloads: Sequence[Mapping[str, object]] = ()):
        self.payloads = list(payloads)
        self.bodies: list[str] = []
        self.closed = False

    @property
    def requests(self) -> list[dict[str, object]]:
        return [json.loads(body) for body in self.bodies]

    def close(self):
        self.closed = True

    def server_time(self) -> str:
        return "1700000000000"

    def send_signed(self, body: str) -> ResponseEnvelope:
        self.bodies.append(body)
        return ResponseEnvelope.from_payload(self.payloads.pop(0))


class DummyAsyncTransport:
    def __init__(self, payloads: Sequence[Mapping[str, object]] = ()):
        self.payloads = list(payloads)
        self.bodies: list[str] = []
        self.closed = False

    @property
    def requests(self) -> list[dict[str, object]]:
        return [json.loads(body) for body in self.bodies]

    async def close(self):
        self.closed = True

    async def server_time(self) -> str:
        return "1700000000000"

    async def send_signed(self, body: str) -> ResponseEnvelope:
        self.bodies.append(body)
        return ResponseEnvelope.from_payload(self.payloads.pop(0))
