"""Splits fixture file content into individual JSON documents.

A fixture file holds either a single JSON object or an array of objects.
Every object is decoded and re-encoded on its own, which validates it and
normalises whitespace and key order before anything is sent over the wire.

Usage:
    from esfixtures.engines.content_parser import parse_documents

    parse_documents(b'[{"b": 2, "a": 1}, {"a": 3}]')
    # [b'{"a":1,"b":2}', b'{"a":3}']
"""

import json
import math
from typing import Any, List

from esfixtures.exceptions import InvalidFixtureData


def encode_document(document: dict) -> bytes:
    """Canonical encoding: compact, sorted keys, UTF-8.

    Raises ValueError for NaN or infinite floats, which JSON cannot represent.
    """
    return json.dumps(
        document,
        separators=(",", ":"),
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    ).encode("utf-8")


def parse_documents(raw: bytes) -> List[bytes]:
    """Return the documents held in *raw*, in order of appearance.

    Args:
        raw: File content, a JSON object or an array of JSON objects.

    Returns:
        One canonical byte string per object. A top-level ``null`` yields
        an empty list.

    Raises:
        InvalidFixtureData: If *raw* is not valid JSON or holds anything
            other than an object or an array of objects. The literals
            ``NaN``, ``Infinity`` and ``-Infinity`` and numbers too large
            for a float are rejected too.
    """
    try:
        decoded = json.loads(
            raw, parse_constant=_reject_constant, parse_float=_finite_float
        )
    except ValueError as exc:
        raise InvalidFixtureData(raw, exc) from exc

    if decoded is None:
        return []
    if isinstance(decoded, list):
        _check_objects(raw, decoded)
        return [encode_document(item) for item in decoded]
    if isinstance(decoded, dict):
        return [encode_document(decoded)]

    exc = TypeError(
        f"expected a JSON object or an array of objects, got {_json_type(decoded)}"
    )
    raise InvalidFixtureData(raw, exc) from exc


def _reject_constant(token: str) -> float:
    raise ValueError(f"non-standard JSON literal {token}")


def _finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"number {token} is out of range")
    return value


def _check_objects(raw: bytes, items: list) -> None:
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            exc = TypeError(
                f"array element {position} is {_json_type(item)}, expected an object"
            )
            raise InvalidFixtureData(raw, exc) from exc


def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, list):
        return "an array"
    if value is None:
        return "null"
    return type(value).__name__
