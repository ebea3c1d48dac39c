"""Request body encodings.

Each body knows its Content-Type tag and how to encode itself to bytes. Field
order follows mapping insertion order, so the same body always encodes to the
same bytes.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Union
from urllib.parse import urlencode

from networking.domain.errors import DataNotEncodable, EncodingFailed

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def textual(value: Any) -> str:
    """Default textual representation used for query and form values."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def present_items(values: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Drop None-valued keys and render the rest with textual()."""
    return [(key, textual(value)) for key, value in values.items() if value is not None]


@dataclass(frozen=True)
class RawBody:
    data: bytes

    @property
    def content_type(self) -> str | None:
        return None

    def encode(self) -> bytes:
        return self.data


@dataclass(frozen=True)
class JsonBody:
    """JSON object body. None values are kept as JSON null.

    Unlike form bodies, JSON can express absence, so nulls are not dropped
    (see "JSON null policy" in DESIGN.md).
    """

    payload: Mapping[str, Any] = field(default_factory=dict)

    @property
    def content_type(self) -> str | None:
        return JSON_CONTENT_TYPE

    def encode(self) -> bytes:
        try:
            return json.dumps(dict(self.payload), separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise EncodingFailed(exc) from exc


@dataclass(frozen=True)
class UrlEncodedBody:
    """Form body. Keys whose value is None are dropped."""

    fields: Mapping[str, Any] = field(default_factory=dict)

    @property
    def content_type(self) -> str | None:
        return FORM_CONTENT_TYPE

    def encode(self) -> bytes:
        if not self.fields:
            return b""
        try:
            return urlencode(present_items(self.fields)).encode("ascii")
        except (TypeError, ValueError) as exc:
            raise DataNotEncodable(dict(self.fields)) from exc


RequestBody = Union[RawBody, JsonBody, UrlEncodedBody]
