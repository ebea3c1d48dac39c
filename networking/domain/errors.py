"""Closed error taxonomy for request construction and response handling.

Two families: CodingError (body encoding / response decoding) and RequestError
(URL resolution, transport, HTTP status). Both are carried inside Failure
results. ContractViolation is deliberately outside the taxonomy: it signals a
programming or test-fixture error and is raised, never returned.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class NetworkingError(Exception):
    """Base for every error that can appear inside a Failure result."""


class CodingError(NetworkingError):
    """Body encoding or response decoding failed."""


@dataclass(eq=True)
class EncodingFailed(CodingError):
    cause: BaseException | None = None

    def __str__(self) -> str:
        return f"encoding failed: {self.cause}"


@dataclass(eq=True)
class DecodingFailed(CodingError):
    cause: BaseException | None = None

    def __str__(self) -> str:
        return f"decoding failed: {self.cause}"


@dataclass(eq=True)
class DataNotEncodable(CodingError):
    value: Any

    def __str__(self) -> str:
        return f"data is not encodable: {self.value!r}"


class RequestError(NetworkingError):
    """The request could not be built, sent, or was answered with an error status."""


@dataclass(eq=True)
class TransportError(RequestError):
    cause: BaseException

    def __str__(self) -> str:
        return f"transport error: {self.cause}"


@dataclass(eq=True)
class ApiError(RequestError):
    status_code: int

    def __str__(self) -> str:
        return f"api error: http status {self.status_code}"


@dataclass(eq=True)
class NoResponse(RequestError):
    def __str__(self) -> str:
        return "no http response"


@dataclass(eq=True)
class InvalidURL(RequestError):
    url: str

    def __str__(self) -> str:
        return f"invalid url: {self.url}"


class ContractViolation(AssertionError):
    """Unrecoverable misuse: impossible transport state, missing or mistyped test fixture."""
