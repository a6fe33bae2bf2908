"""Transport capability and the default httpx-backed transport."""

from collections.abc import Callable
from typing import Protocol

import httpx

from request_worker._version import __version__
from request_worker.models import PreparedRequest, TransportResponse

USER_AGENT = f"request-worker/{__version__}"


class Transport(Protocol):
    """Sends one prepared request and yields its status and body exactly once."""

    async def send(self, request: PreparedRequest) -> TransportResponse: ...


TransportFactory = Callable[[], Transport]


class HttpxTransport:
    """Default transport backed by httpx.

    Each send opens and closes its own client with no timeout, so a request
    runs to completion and no connection state is shared between requests.
    Transport errors from httpx propagate unchanged.
    """

    async def send(self, request: PreparedRequest) -> TransportResponse:
        async with httpx.AsyncClient(timeout=None, headers={"User-Agent": USER_AGENT}) as client:
            response = await client.request(
                request.method,
                request.url,
                headers=request.headers,
                content=request.body,
            )
        return TransportResponse(status=response.status_code, body=response.text)
