from __future__ import annotations


def make_time_payload(server_ms: int | str = 1_700_000_000_000) -> dict[str, object]:
    return {"data": {"time": str(server_ms)}}


def make_error(
    message: str = "boom",
    *,
    name: str = "ValidationError",
    data: object = None,
) -> dict[str, object]:
    return {
        "message": message,
        "name": name,
        "time_thrown": "2024-01-01T00:00:00.000Z",
        "data": data,
    }


def make_envelope_payload(
    data: dict[str, object] | None,
    *,
    errors: list[dict[str, object]] | None = None,
) -> dict[str, object]:
    payload: dict[str, object] = {"data": data}
    if errors is not None:
        payload["errors"] = errors
    return payload
