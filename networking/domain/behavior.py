"""Request behaviors: pluggable side effects attached to a request or a service.

A behavior contributes headers and query parameters to the outgoing request and
observes the send/receive events of a dispatch. Behaviors are composed with
CombinedBehavior; the composition broadcasts every hook to its members in list
order and merges their header/parameter maps with last-writer-wins. Parameters
are always appended after the query the endpoint already carries.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping
from urllib.parse import quote, urlencode

import httpx
from loguru import logger

from networking.core import SERVICE_NAME
from networking.domain.body import present_items
from networking.domain.result import Result


class RequestBehavior:
    """Base behavior; every hook defaults to a no-op."""

    @property
    def additional_headers(self) -> Mapping[str, str]:
        return {}

    @property
    def additional_parameters(self) -> Mapping[str, Any]:
        return {}

    def apply_headers(self, headers: httpx.Headers) -> None:
        for key, value in self.additional_headers.items():
            headers[key] = value

    def apply_parameters(self, url: httpx.URL) -> httpx.URL:
        """Append non-None parameters after the query items already on the url.

        Existing items are left exactly as they are, repeated keys and valueless
        items included.
        """
        items = present_items(self.additional_parameters)
        if not items:
            return url
        added = urlencode(items, quote_via=quote).encode("ascii")
        query = url.query + b"&" + added if url.query else added
        return url.copy_with(query=query)

    def before_send(self) -> None:
        return None

    def after_receive(self, result: Result[Any]) -> None:
        return None


class CombinedBehavior(RequestBehavior):
    """Ordered, immutable composition of behaviors.

    Parameters are applied once from the merged map, so a collision between
    members resolves to the last one and the url's own query is never rewritten.
    """

    def __init__(self, behaviors: Iterable[RequestBehavior] = ()) -> None:
        self._behaviors: tuple[RequestBehavior, ...] = tuple(behaviors)

    @property
    def behaviors(self) -> tuple[RequestBehavior, ...]:
        return self._behaviors

    @property
    def additional_headers(self) -> dict[str, str]:
        merged: dict[str, str] = {}
        for behavior in self._behaviors:
            merged.update(behavior.additional_headers)
        return merged

    @property
    def additional_parameters(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for behavior in self._behaviors:
            merged.update(behavior.additional_parameters)
        return merged

    def apply_headers(self, headers: httpx.Headers) -> None:
        for behavior in self._behaviors:
            behavior.apply_headers(headers)

    def before_send(self) -> None:
        for behavior in self._behaviors:
            behavior.before_send()

    def after_receive(self, result: Result[Any]) -> None:
        for behavior in self._behaviors:
            behavior.after_receive(result)

    def appending(self, behavior: RequestBehavior) -> "CombinedBehavior":
        """Return a new composition with `behavior` (or its members) at the end."""
        if isinstance(behavior, CombinedBehavior):
            return CombinedBehavior(self._behaviors + behavior.behaviors)
        return CombinedBehavior(self._behaviors + (behavior,))

    def __add__(self, other: RequestBehavior) -> "CombinedBehavior":
        return self.appending(other)

    def __len__(self) -> int:
        return len(self._behaviors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CombinedBehavior):
            return NotImplemented
        return self._behaviors == other._behaviors

    def __hash__(self) -> int:
        return hash(self._behaviors)

    def __repr__(self) -> str:
        return f"CombinedBehavior({list(self._behaviors)!r})"


class HeadersBehavior(RequestBehavior):
    """Static headers."""

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        self._headers = dict(headers or {})

    @property
    def additional_headers(self) -> dict[str, str]:
        return dict(self._headers)

    def __repr__(self) -> str:
        return f"HeadersBehavior({self._headers!r})"


class ParametersBehavior(RequestBehavior):
    """Static query parameters; None values are skipped."""

    def __init__(self, parameters: Mapping[str, Any] | None = None) -> None:
        self._parameters = dict(parameters or {})

    @property
    def additional_parameters(self) -> dict[str, Any]:
        return dict(self._parameters)

    def __repr__(self) -> str:
        return f"ParametersBehavior({self._parameters!r})"


class AuthTokenBehavior(RequestBehavior):
    """Adds an auth header whenever the provider currently has a token."""

    def __init__(
        self,
        token_provider: Callable[[], str | None],
        *,
        header: str = "Authorization",
        scheme: str | None = "Bearer",
    ) -> None:
        self._token_provider = token_provider
        self._header = header
        self._scheme = scheme

    @property
    def additional_headers(self) -> dict[str, str]:
        token = self._token_provider()
        if not token:
            return {}
        value = f"{self._scheme} {token}" if self._scheme else token
        return {self._header: value}


class LoggingBehavior(RequestBehavior):
    """Logs the send/receive events of every dispatch it is attached to."""

    def __init__(self, name: str = "request") -> None:
        self._name = name

    def before_send(self) -> None:
        logger.bind(service_name=SERVICE_NAME, event="behavior_before_send", name=self._name).debug("")

    def after_receive(self, result: Result[Any]) -> None:
        if result.is_success:
            logger.bind(
                service_name=SERVICE_NAME, event="behavior_after_receive", name=self._name, outcome="success"
            ).debug("")
        else:
            logger.bind(
                service_name=SERVICE_NAME,
                event="behavior_after_receive",
                name=self._name,
                outcome="failure",
                error=str(result.error),
            ).debug("")
