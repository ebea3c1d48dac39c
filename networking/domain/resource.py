"""Resources: a request paired with a function that parses its response body."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from networking.domain.errors import DecodingFailed
from networking.domain.request import Request
from networking.domain.result import Failure, Result, Success
from networking.ports.decoder import Decoder

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Resource(Generic[T]):
    """Typed pairing of a Request and a pure `bytes -> Result[T]` parse function.

    `decoded_type` records the type the parse function produces when it is known
    (decodable and empty resources); `map` drops it.
    """

    request: Request
    parse: Callable[[bytes], Result[T]]
    decoded_type: Any = None

    @classmethod
    def decodable(cls, request: Request, type_: Any, decoder: Decoder) -> "Resource[Any]":
        """Resource whose body is decoded into `type_`; decoder errors become DecodingFailed."""

        def parse(data: bytes) -> Result[Any]:
            try:
                return Success(decoder.decode(data, type_))
            except ValueError as exc:
                return Failure(DecodingFailed(exc))

        return cls(request=request, parse=parse, decoded_type=type_)

    @classmethod
    def empty(cls, request: Request) -> "Resource[None]":
        """Resource for responses without a meaningful body."""
        return cls(request=request, parse=lambda _data: Success(None), decoded_type=type(None))

    def map(self, transform: Callable[[T], U]) -> "Resource[U]":
        parse = self.parse
        return Resource(request=self.request, parse=lambda data: parse(data).map(transform))
