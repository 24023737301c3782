"""Decode TMDb JSON payloads into attrs records.

Record field names are the API's snake_case keys, so decoding is a walk
over ``attrs.fields`` that checks each value against the field's type.
Unknown keys are ignored; missing or mistyped required values raise
``DecodeError``.
"""

import json
import types
import typing
from typing import Any, TypeVar

import attrs

from ..errors import DecodeError

T = TypeVar("T")

_NONE_TYPE = type(None)


def decode_json(cls: type[T], body: bytes) -> T:
    """Parse a raw response body and decode it into ``cls``."""
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(cls.__name__, f"invalid JSON ({exc})") from exc
    return decode(cls, payload)


def decode(cls: type[T], payload: Any) -> T:
    """Decode an already parsed JSON value into the attrs class ``cls``."""
    return _decode_record(cls, payload, cls.__name__)


def _decode_record(cls: type[T], payload: Any, path: str) -> T:
    if not isinstance(payload, dict):
        raise DecodeError(path, f"expected an object, got {type(payload).__name__}")

    attrs.resolve_types(cls)
    kwargs = {}
    for f in attrs.fields(cls):
        value = payload.get(f.name)
        field_path = f"{path}.{f.name}"
        if value is None:
            if _is_optional(f.type):
                kwargs[f.name] = None
            elif f.default is attrs.NOTHING:
                raise DecodeError(field_path, "missing required field")
            # otherwise leave it to the attrs default
            continue
        kwargs[f.name] = _decode_value(f.type, value, field_path)
    return cls(**kwargs)


def _is_optional(tp: Any) -> bool:
    return _is_union(tp) and _NONE_TYPE in typing.get_args(tp)


def _is_union(tp: Any) -> bool:
    origin = typing.get_origin(tp)
    return origin is typing.Union or origin is types.UnionType


def _decode_value(tp: Any, value: Any, path: str) -> Any:
    if _is_union(tp):
        members = [arg for arg in typing.get_args(tp) if arg is not _NONE_TYPE]
        if len(members) != 1:
            raise TypeError(f"unsupported union type at {path}: {tp!r}")
        return _decode_value(members[0], value, path)

    if typing.get_origin(tp) is list:
        if not isinstance(value, list):
            raise DecodeError(path, f"expected a list, got {type(value).__name__}")
        (item_type,) = typing.get_args(tp)
        return [
            _decode_value(item_type, item, f"{path}[{i}]")
            for i, item in enumerate(value)
        ]

    if attrs.has(tp):
        return _decode_record(tp, value, path)

    if tp is bool:
        if isinstance(value, bool):
            return value
    elif tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif tp is float:
        # JSON has a single number type; 8 and 8.0 are the same rating
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif tp is str:
        if isinstance(value, str):
            return value
    else:
        raise TypeError(f"unsupported field type at {path}: {tp!r}")

    raise DecodeError(
        path, f"expected {tp.__name__}, got {type(value).__name__}"
    )
