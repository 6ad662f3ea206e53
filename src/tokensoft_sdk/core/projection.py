"""GraphQL projections over dataclass records.

A projection mirrors the shape of a record: each key is a wire (GraphQL)
field name mapped to ``True`` to request a scalar, or to a nested projection
for an object-valued field. List-valued fields are projected with the
element's projection, never with a list of projections::

    {"email": True, "address": {"country": True}, "kycUploadFiles": {"link": True}}

Falsy values (``False``, ``None``, ``0``, ``""``) request nothing.
"""

from __future__ import annotations

import dataclasses
import enum
import functools
import types
import typing
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from .errors import TokensoftProjectionError

Projection = Mapping[str, Union[bool, "Projection"]]


class FieldKind(enum.Enum):
    SCALAR = "scalar"
    SCALAR_LIST = "scalar_list"
    RECORD = "record"
    RECORD_LIST = "record_list"


@dataclass(slots=True, frozen=True)
class FieldSchema:
    name: str
    wire_name: str
    kind: FieldKind
    record_type: type | None = None

    @property
    def is_record(self) -> bool:
        return self.kind in (FieldKind.RECORD, FieldKind.RECORD_LIST)


def wire_field(wire: str, **kwargs: Any) -> Any:
    """``dataclasses.field`` carrying an explicit wire name."""

    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata["wire"] = wire
    return dataclasses.field(metadata=metadata, **kwargs)


def to_camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _strip_optional(annotation: object) -> object:
    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _classify(annotation: object) -> tuple[FieldKind, type | None]:
    annotation = _strip_optional(annotation)
    origin = typing.get_origin(annotation)
    if origin in (list, tuple, Sequence):
        args = typing.get_args(annotation)
        element = _strip_optional(args[0]) if args else object
        if isinstance(element, type) and dataclasses.is_dataclass(element):
            return FieldKind.RECORD_LIST, element
        return FieldKind.SCALAR_LIST, None
    if isinstance(annotation, type) and dataclasses.is_dataclass(annotation):
        return FieldKind.RECORD, annotation
    return FieldKind.SCALAR, None


@functools.cache
def record_schema(record_type: type) -> Mapping[str, FieldSchema]:
    """Wire name -> field schema for a dataclass record type."""

    if not dataclasses.is_dataclass(record_type):
        raise TypeError(f"{record_type!r} is not a dataclass record")
    hints = typing.get_type_hints(record_type)
    schema: dict[str, FieldSchema] = {}
    for item in dataclasses.fields(record_type):
        wire_name = item.metadata.get("wire") or to_camel_case(item.name)
        kind, nested = _classify(hints[item.name])
        schema[wire_name] = FieldSchema(
            name=item.name,
            wire_name=wire_name,
            kind=kind,
            record_type=nested,
        )
    return types.MappingProxyType(schema)


def render_projection(projection: Projection) -> str:
    """Render a projection as a GraphQL selection set, e.g. ``{ id,address { city } }``."""

    collection: list[str] = []
    for key, value in projection.items():
        if not value:
            continue
        if value is True:
            collection.append(key)
        elif isinstance(value, Mapping):
            collection.append(f"{key} {render_projection(value)}")
        else:
            raise TokensoftProjectionError(
                f"projection value for {key!r} must be True or a mapping, "
                f"got {type(value).__name__}",
                path=key,
            )
    return "{ " + ",".join(collection) + " }"


def validate_projection(record_type: type, projection: Projection, *, path: str = "") -> None:
    """Check that every key of ``projection`` names a field of ``record_type``."""

    if not isinstance(projection, Mapping):
        raise TokensoftProjectionError(
            f"projection for {record_type.__name__} must be a mapping, "
            f"got {type(projection).__name__}",
            path=path or None,
        )
    schema = record_schema(record_type)
    for key, value in projection.items():
        key_path = f"{path}.{key}" if path else key
        field_schema = schema.get(key)
        if field_schema is None:
            raise TokensoftProjectionError(
                f"{record_type.__name__} has no field {key!r}",
                path=key_path,
            )
        if not value or value is True:
            continue
        if not isinstance(value, Mapping):
            raise TokensoftProjectionError(
                f"projection value at {key_path!r} must be a bool or a mapping",
                path=key_path,
            )
        if not field_schema.is_record:
            raise TokensoftProjectionError(
                f"{record_type.__name__}.{key} is a scalar field and takes only a bool",
                path=key_path,
            )
        validate_projection(field_schema.record_type, value, path=key_path)


def to_wire(value: object, *, drop_none: bool = True) -> Any:
    """Convert records (and containers of them) to wire-named plain data."""

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result: dict[str, Any] = {}
        schema = record_schema(type(value))
        for wire_name, field_schema in schema.items():
            item = getattr(value, field_schema.name)
            if item is None and drop_none:
                continue
            result[wire_name] = to_wire(item, drop_none=drop_none)
        return result
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, Mapping):
        return {key: to_wire(item, drop_none=drop_none) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_wire(item, drop_none=drop_none) for item in value]
    return value


def apply_projection(projection: Projection, value: object) -> Any:
    """Shape ``value`` like ``projection``.

    ``True`` keys carry the source value, nested keys recurse (element-wise
    for lists) and falsy keys are dropped. Keys missing from the source are
    left out rather than filled with ``None``.
    """

    if value is None:
        return None
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = to_wire(value, drop_none=False)
    if not isinstance(value, Mapping):
        raise TokensoftProjectionError(
            f"cannot project a value of type {type(value).__name__}",
        )

    result: dict[str, Any] = {}
    for key, selection in projection.items():
        if not selection or key not in value:
            continue
        item = value[key]
        if selection is True or item is None:
            result[key] = item
        elif isinstance(item, (list, tuple)):
            result[key] = [apply_projection(selection, element) for element in item]
        else:
            result[key] = apply_projection(selection, item)
    return result


def project_record(record_type: type, projection: Projection, value: object) -> Any:
    validate_projection(record_type, projection)
    return apply_projection(projection, value)


__all__ = [
    "Projection",
    "FieldKind",
    "FieldSchema",
    "wire_field",
    "to_camel_case",
    "record_schema",
    "render_projection",
    "validate_projection",
    "to_wire",
    "apply_projection",
    "project_record",
]
