"""Service configuration: base path, fixed headers and transport settings."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

import httpx

if TYPE_CHECKING:
    from networking.config.settings import Settings


@dataclass(frozen=True)
class TransportSettings:
    """Connect and read timeouts in seconds, plus redirect policy."""

    connect_seconds: float = 5.0
    read_seconds: float = 15.0
    follow_redirects: bool = True


def _is_absolute_http_url(value: str) -> bool:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL:
        return False
    return url.scheme in ("http", "https") and bool(url.host)


class Configuration:
    """Where a service sends its requests.

    Two configurations are equal when their base paths match case-insensitively;
    headers and transport settings do not take part in the comparison.
    """

    def __init__(
        self,
        base: str,
        api: str | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        transport: TransportSettings | None = None,
    ) -> None:
        if not _is_absolute_http_url(base):
            raise ValueError(f"invalid base url: {base!r}")
        self._base_path = f"{base.rstrip('/')}/{api.lstrip('/')}" if api else base
        self._headers = dict(headers or {})
        self._transport = transport or TransportSettings()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Configuration":
        headers = dict(settings.headers)
        if settings.user_agent:
            headers.setdefault("User-Agent", settings.user_agent)
        return cls(
            settings.base_url,
            settings.api,
            headers=headers,
            transport=TransportSettings(
                connect_seconds=settings.connect_timeout_seconds,
                read_seconds=settings.read_timeout_seconds,
                follow_redirects=settings.follow_redirects,
            ),
        )

    @property
    def base_path(self) -> str:
        return self._base_path

    @property
    def headers(self) -> dict[str, str]:
        return dict(self._headers)

    @property
    def transport(self) -> TransportSettings:
        return self._transport

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._base_path.lower() == other._base_path.lower()

    def __hash__(self) -> int:
        return hash(self._base_path.lower())

    def __str__(self) -> str:
        return self._base_path

    def __repr__(self) -> str:
        return f"Configuration({self._base_path!r})"
