"""Transport factory: builds AbstractTransport from configuration (no provider logic in composition)."""
from __future__ import annotations

import httpx

from networking.domain.configuration import Configuration
from networking.infrastructure.http.httpx_transport import HttpxTransport
from networking.ports.transport import AbstractTransport


def create_transport(configuration: Configuration) -> AbstractTransport:
    """Build a transport for `configuration`. Timeouts are applied per-request by the adapter."""
    async_client = httpx.AsyncClient()
    return HttpxTransport(async_client, configuration.transport)
