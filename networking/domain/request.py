"""Request descriptors and the transport request they materialise into.

A Request says what to fetch; build_transport_request resolves it against a
service (base path plus service behaviors) into a TransportRequest that is
ready to hand to a transport. Nothing here performs I/O.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol

import httpx

from networking.domain.behavior import (
    CombinedBehavior,
    HeadersBehavior,
    ParametersBehavior,
    RequestBehavior,
)
from networking.domain.body import RequestBody
from networking.domain.configuration import Configuration
from networking.domain.errors import InvalidURL
from networking.domain.path import Endpoint


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class ServiceContext(Protocol):
    """What a request needs from a service to materialise itself."""

    @property
    def configuration(self) -> Configuration: ...

    @property
    def behavior(self) -> CombinedBehavior: ...


@dataclass(frozen=True)
class TransportRequest:
    """Fully resolved request. Equality covers method, url (with query), headers and body."""

    method: str
    url: httpx.URL
    headers: httpx.Headers
    body: bytes | None = None

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


@dataclass(frozen=True)
class Request:
    """Immutable description of an HTTP request relative to a service's base path.

    `headers` and `parameters` are request-level values: they are applied after the
    service's and the request's own behaviors, so they win every key collision.
    Parameters whose value is None are skipped.
    """

    endpoint: Endpoint
    method: HttpMethod | None = None
    body: RequestBody | None = None
    headers: Mapping[str, str] | None = None
    parameters: Mapping[str, Any] | None = None
    behavior: CombinedBehavior = field(default_factory=CombinedBehavior)

    def __post_init__(self) -> None:
        if not isinstance(self.behavior, CombinedBehavior):
            object.__setattr__(self, "behavior", CombinedBehavior([self.behavior]))

    def with_behavior(self, behavior: RequestBehavior) -> "Request":
        return Request(
            endpoint=self.endpoint,
            method=self.method,
            body=self.body,
            headers=self.headers,
            parameters=self.parameters,
            behavior=self.behavior.appending(behavior),
        )

    def behavior_in(self, service: ServiceContext) -> CombinedBehavior:
        """Service behaviors first, then this request's behaviors and explicit values."""
        explicit: list[RequestBehavior] = []
        if self.parameters:
            explicit.append(ParametersBehavior(self.parameters))
        if self.headers:
            explicit.append(HeadersBehavior(self.headers))
        return service.behavior.appending(self.behavior).appending(CombinedBehavior(explicit))

    def url_in(self, service: ServiceContext) -> httpx.URL:
        base = service.configuration.base_path
        endpoint = str(self.endpoint)
        joined = f"{base.rstrip('/')}/{endpoint.lstrip('/')}" if endpoint else base
        try:
            url = httpx.URL(joined)
        except httpx.InvalidURL as exc:
            raise InvalidURL(joined) from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURL(joined)
        return url

    def build_transport_request(self, service: ServiceContext) -> TransportRequest:
        """Raise InvalidURL, EncodingFailed or DataNotEncodable if the request cannot be built."""
        behavior = self.behavior_in(service)
        url = behavior.apply_parameters(self.url_in(service))
        method = (self.method or HttpMethod.GET).value

        headers = httpx.Headers()
        behavior.apply_headers(headers)

        content: bytes | None = None
        if self.body is not None:
            content = self.body.encode()
            content_type = self.body.content_type
            if content_type and "Content-Type" not in headers:
                headers["Content-Type"] = content_type

        return TransportRequest(method=method, url=url, headers=headers, body=content)
