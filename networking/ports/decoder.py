"""Decoder port: turns response bytes into a typed value.

Resources depend on this port; infrastructure (pydantic) implements it.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


class KeyDecodingStrategy(str, Enum):
    USE_DEFAULT_KEYS = "use_default_keys"
    CONVERT_FROM_CAMEL_CASE = "convert_from_camel_case"


@runtime_checkable
class Decoder(Protocol):
    def decode(self, data: bytes, type_: Any) -> Any:
        """Decode `data` into an instance of `type_`; raise ValueError (or a subclass) on failure."""
        ...
