"""Transport port: contract for sending a materialised request.

The service depends on this port; infrastructure (e.g. httpx) implements it.
Implementations report failures through the outcome instead of raising, and
fill exactly one of (body and status_code) or error. A status_code may
accompany an error when the server answered but the exchange still failed.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from networking.domain.request import TransportRequest


@dataclass(frozen=True)
class TransportOutcome:
    body: bytes | None = None
    status_code: int | None = None
    error: BaseException | None = None


@runtime_checkable
class AbstractTransport(Protocol):
    """Port: send transport requests. Implementations live in infrastructure."""

    async def send(self, request: TransportRequest) -> TransportOutcome:
        """Send the request; never raise for network or HTTP failures."""
        ...

    async def close(self) -> None:
        """Release resources (e.g. connection pool). No-op allowed if nothing to close."""
        ...
