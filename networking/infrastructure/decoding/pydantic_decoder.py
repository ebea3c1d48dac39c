"""Decoder implementation backed by pydantic TypeAdapter."""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from pydantic.alias_generators import to_snake

from networking.ports.decoder import Decoder, KeyDecodingStrategy


def _convert_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_snake(k) if isinstance(k, str) else k: _convert_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_convert_keys(item) for item in value]
    return value


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class PydanticDecoder(Decoder):
    """Parses JSON and validates it into `type_`.

    Dates follow pydantic's parsing rules (ISO 8601 strings and unix timestamps).
    """

    def __init__(self, key_strategy: KeyDecodingStrategy = KeyDecodingStrategy.USE_DEFAULT_KEYS) -> None:
        self._key_strategy = key_strategy

    @property
    def key_strategy(self) -> KeyDecodingStrategy:
        return self._key_strategy

    def decode(self, data: bytes, type_: Any) -> Any:
        adapter = _adapter(type_)
        if self._key_strategy is KeyDecodingStrategy.USE_DEFAULT_KEYS:
            return adapter.validate_json(data)
        payload = json.loads(data)
        return adapter.validate_python(_convert_keys(payload))
