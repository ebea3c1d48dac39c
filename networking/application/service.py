"""Service: dispatches resources through a transport and delivers typed results.

For one dispatch the hooks fire strictly in the order before_send, transport
call, after_receive, completion callback. Request construction failures never
reach the transport: they complete synchronously with a Failure.
"""
from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Generator, TypeVar

from loguru import logger

from networking.core import SERVICE_NAME
from networking.domain.behavior import CombinedBehavior, HeadersBehavior, RequestBehavior
from networking.domain.configuration import Configuration
from networking.domain.errors import (
    ApiError,
    ContractViolation,
    NetworkingError,
    NoResponse,
    TransportError,
)
from networking.domain.request import TransportRequest
from networking.domain.resource import Resource
from networking.domain.result import Failure, Result
from networking.ports.transport import AbstractTransport, TransportOutcome

T = TypeVar("T")

Completion = Callable[[Result[T]], None]


def _log(event: str, **kwargs: Any) -> None:
    logger.bind(service_name=SERVICE_NAME, event=event, **kwargs).info("")


def _report_failure(task: asyncio.Task[None]) -> None:
    """Log a dispatch task that died with an exception, awaited or not."""
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.opt(exception=exc).bind(service_name=SERVICE_NAME, event="dispatch_failed").error(
            "dispatch task failed: {}", exc
        )


class DispatchTask:
    """Cancellable, awaitable handle for one dispatch.

    A handle without an underlying task is already finished (the dispatch completed
    synchronously). Cancelling before the transport settles suppresses the callback.
    """

    def __init__(self, task: asyncio.Task[None] | None = None) -> None:
        self._task = task

    def cancel(self) -> bool:
        if self._task is None:
            return False
        return self._task.cancel()

    def cancelled(self) -> bool:
        return self._task is not None and self._task.cancelled()

    def done(self) -> bool:
        return self._task is None or self._task.done()

    def __await__(self) -> Generator[Any, None, None]:
        if self._task is not None:
            yield from self._task.__await__()


def classify_outcome(resource: Resource[T], outcome: TransportOutcome) -> Result[T]:
    """Map a transport outcome to a result; raise ContractViolation for impossible outcomes."""
    if outcome.error is not None:
        if outcome.status_code is not None:
            return Failure(ApiError(outcome.status_code))
        return Failure(TransportError(outcome.error))
    if outcome.status_code is not None:
        if 200 <= outcome.status_code < 300:
            return resource.parse(outcome.body or b"")
        return Failure(ApiError(outcome.status_code))
    if outcome.body is not None:
        return Failure(NoResponse())
    raise ContractViolation(f"transport returned neither a response nor an error: {outcome!r}")


class BaseService(ABC):
    """Configuration, behavior and the coroutine conveniences shared by every service."""

    def __init__(self, configuration: Configuration, behavior: RequestBehavior | None = None) -> None:
        self._configuration = configuration
        combined = CombinedBehavior()
        if configuration.headers:
            combined = combined.appending(HeadersBehavior(configuration.headers))
        if behavior is not None:
            combined = combined.appending(behavior)
        self._behavior = combined

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def behavior(self) -> CombinedBehavior:
        return self._behavior

    @abstractmethod
    def dispatch(self, resource: Resource[T], on_complete: Completion[T]) -> DispatchTask:
        raise NotImplementedError

    async def fetch(self, resource: Resource[T]) -> Result[T]:
        """Dispatch `resource` and wait for its result."""
        results: list[Result[T]] = []
        await self.dispatch(resource, results.append)
        return results[0]

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> "BaseService":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


class Service(BaseService):
    """Live service backed by an AbstractTransport. Dispatch requires a running event loop."""

    def __init__(
        self,
        configuration: Configuration,
        transport: AbstractTransport,
        behavior: RequestBehavior | None = None,
    ) -> None:
        super().__init__(configuration, behavior)
        self._transport = transport

    @property
    def transport(self) -> AbstractTransport:
        return self._transport

    def dispatch(self, resource: Resource[T], on_complete: Completion[T]) -> DispatchTask:
        try:
            request = resource.request.build_transport_request(self)
        except NetworkingError as exc:
            _log("request_build_failed", endpoint=str(resource.request.endpoint), error=str(exc))
            on_complete(Failure(exc))
            return DispatchTask()

        # Raises RuntimeError outside a running loop, before any hook fires.
        loop = asyncio.get_running_loop()
        behavior = resource.request.behavior_in(self)
        _log("request_built", method=request.method, url=str(request.url))
        behavior.before_send()
        task = loop.create_task(self._perform(resource, request, behavior, on_complete))
        task.add_done_callback(_report_failure)
        return DispatchTask(task)

    async def _perform(
        self,
        resource: Resource[T],
        request: TransportRequest,
        behavior: CombinedBehavior,
        on_complete: Completion[T],
    ) -> None:
        _log("request_sent", method=request.method, url=str(request.url))
        try:
            outcome = await self._transport.send(request)
        except asyncio.CancelledError:
            _log("request_cancelled", method=request.method, url=str(request.url))
            raise
        result = classify_outcome(resource, outcome)
        _log(
            "response_received",
            method=request.method,
            url=str(request.url),
            status_code=outcome.status_code,
            success=result.is_success,
        )
        behavior.after_receive(result)
        on_complete(result)

    async def close(self) -> None:
        try:
            await self._transport.close()
        except Exception as exc:
            logger.warning("transport close failed: {}", exc)
            return
        _log("transport_closed")
