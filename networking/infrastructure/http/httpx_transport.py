"""Concrete transport implementation using httpx (injected where AbstractTransport is needed)."""
from __future__ import annotations

import httpx

from networking.domain.configuration import TransportSettings
from networking.domain.request import TransportRequest
from networking.ports.transport import AbstractTransport, TransportOutcome


class HttpxTransport(AbstractTransport):
    """AbstractTransport implementation using httpx.AsyncClient."""

    def __init__(self, client: httpx.AsyncClient, settings: TransportSettings | None = None) -> None:
        self._client = client
        self._settings = settings or TransportSettings()

    @property
    def settings(self) -> TransportSettings:
        return self._settings

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self._settings.connect_seconds,
            read=self._settings.read_seconds,
            write=self._settings.read_seconds,
            pool=self._settings.connect_seconds,
        )

    async def send(self, request: TransportRequest) -> TransportOutcome:
        httpx_request = self._client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            content=request.body,
            timeout=self._timeout(),
        )
        try:
            response = await self._client.send(
                httpx_request,
                follow_redirects=self._settings.follow_redirects,
            )
        except httpx.HTTPStatusError as exc:
            return TransportOutcome(status_code=exc.response.status_code, error=exc)
        except httpx.HTTPError as exc:
            return TransportOutcome(error=exc)
        return TransportOutcome(body=response.content, status_code=response.status_code)

    async def close(self) -> None:
        await self._client.aclose()
