"""Decoded response documents.

A document is the top-level JSON object of a response body. Its values form a
closed tree of JSON types; anything else never reaches a ``Document``. The tree
is frozen on construction: arrays are stored as tuples and nested objects as
``Document`` instances.
"""

from __future__ import annotations
import json
import math
from collections.abc import Mapping
from typing import Any, Dict, Iterator, Tuple, Union

from .errors import InvalidDecode
from .outcome import Failure, Outcome, Success

JSONValue = Union[str, int, float, bool, None, Tuple["JSONValue", ...], "Document"]


class Document(Mapping):
    """Immutable string-keyed view over a decoded JSON object."""

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, Any]):
        if not isinstance(fields, Mapping):
            raise TypeError(f"Document expects a mapping, got {type(fields).__name__}")
        frozen = {}
        for key, value in fields.items():
            if not isinstance(key, str):
                raise TypeError(f"Document keys must be str, got {type(key).__name__}")
            frozen[key] = _freeze(value)
        self._fields = frozen

    def __getitem__(self, key: str) -> JSONValue:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other):
        if isinstance(other, Document):
            return self._fields == other._fields
        if isinstance(other, Mapping):
            try:
                return self._fields == Document(other)._fields
            except (TypeError, ValueError):
                return False
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"Document({self._fields!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Return a mutable copy as plain dicts and lists."""
        return {key: _thaw(value) for key, value in self._fields.items()}


def _freeze(value: Any) -> JSONValue:
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Non-finite number {value!r} is not valid JSON")
        return value
    if isinstance(value, Document):
        return value
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, Mapping):
        return Document(value)
    raise TypeError(f"{type(value).__name__} is not a JSON value")


def _thaw(value: JSONValue) -> Any:
    if isinstance(value, Document):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def decode_document(data: bytes) -> Outcome[Document, InvalidDecode]:
    """Parse ``data`` as a JSON object."""
    try:
        # json.loads detects UTF-8/16/32 from the leading bytes
        parsed = json.loads(data, parse_constant=_reject_constant)
    except RecursionError:
        return Failure(InvalidDecode("nesting too deep"))
    except (ValueError, UnicodeDecodeError) as e:
        return Failure(InvalidDecode(f"not JSON ({e})"))

    if not isinstance(parsed, dict):
        return Failure(InvalidDecode(f"top-level value is {type(parsed).__name__}, expected object"))
    try:
        return Success(Document(parsed))
    except RecursionError:
        # json accepted a depth that freezing cannot walk
        return Failure(InvalidDecode("nesting too deep"))
