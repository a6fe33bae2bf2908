"""Asynchronous GET/POST dispatcher built on the parameter codec."""

import os
import sys
from typing import Any

from request_worker import codec
from request_worker._internal.http import HttpxTransport, TransportFactory
from request_worker.codec import AddressProvider, ParameterMapping, address_from_env
from request_worker.exceptions import RequestFailedError
from request_worker.models import (
    FORM_CONTENT_TYPE,
    SUCCESS_STATUS,
    PreparedRequest,
    TransportResponse,
)


class RequestWorker:
    """Sends GET and POST requests built from a base URL and a parameter mapping.

    Every request gets a fresh transport from the factory and settles exactly
    once: it returns the response body for status 200, and raises
    RequestFailedError for anything else.

    Use `RequestWorker.from_env()` to create a worker from environment variables.
    """

    def __init__(
        self,
        *,
        transport_factory: TransportFactory | None = None,
        address_provider: AddressProvider | None = None,
        debug: bool = False,
    ) -> None:
        """Initialize the request worker.

        Args:
            transport_factory: Returns a new transport per request.
                Defaults to the httpx-backed transport.
            address_provider: Supplies the current address for `parse()`.
                Defaults to the REQUEST_WORKER_LOCATION env var.
            debug: Enable debug logging to stderr.
        """
        self._transport_factory = transport_factory or HttpxTransport
        self._address_provider = address_provider or address_from_env
        self._debug = debug

    @classmethod
    def from_env(cls) -> "RequestWorker":
        """Create a request worker from environment variables.

        Optional environment variables:
            REQUEST_WORKER_DEBUG: Set to "1" to enable debug logging.
            REQUEST_WORKER_LOCATION: Current address consulted by `parse()`.

        Returns:
            A RequestWorker using the default httpx transport.
        """
        debug = os.environ.get("REQUEST_WORKER_DEBUG", "") == "1"
        return cls(debug=debug)

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            print(f"[request-worker] {message}", file=sys.stderr)

    # =========================================================================
    # Codec
    # =========================================================================

    @staticmethod
    def serialize(data: Any) -> str:
        """Serialize a parameter mapping into a query string."""
        return codec.serialize(data)

    def parse(self, source: str | None = None) -> ParameterMapping:
        """Parse a query string, falling back to this worker's current address."""
        return codec.parse(source, address_provider=self._address_provider)

    # =========================================================================
    # Requests
    # =========================================================================

    async def request(self, url: str, data: Any = None, method: str | None = None) -> str:
        """Send a request, POST if method is exactly "POST" and GET otherwise.

        Args:
            url: Target URL.
            data: Optional parameter mapping.
            method: "POST" for a form-encoded POST; any other value means GET.

        Returns:
            The response body, "" if the response had none.

        Raises:
            RequestFailedError: If the response status is not 200.
        """
        if method == "POST":
            return await self.request_post(url, data)
        return await self.request_get(url, data)

    async def request_get(self, url: str, data: Any = None) -> str:
        """Send a GET with the serialized mapping appended to the URL."""
        prepared = PreparedRequest(method="GET", url=url + codec.serialize(data))
        return await self._send(prepared)

    async def request_post(self, url: str, data: Any = None) -> str:
        """Send a form-encoded POST with the serialized mapping as its body."""
        prepared = PreparedRequest(
            method="POST",
            url=url,
            headers={"Content-Type": FORM_CONTENT_TYPE},
            body=codec.serialize(data).removeprefix("?"),
        )
        return await self._send(prepared)

    async def _send(self, prepared: PreparedRequest) -> str:
        """Send the request on a fresh transport and settle the outcome."""
        self._log_debug(f"Sending {prepared.method} {prepared.url}")
        transport = self._transport_factory()
        response = await transport.send(prepared)
        return self._settle(response)

    def _settle(self, response: TransportResponse) -> str:
        if response.status == SUCCESS_STATUS:
            self._log_debug("Request succeeded")
            return response.body or ""

        self._log_debug(f"Request failed with status {response.status}")
        raise RequestFailedError(response.status, response.body)


def get_request_worker() -> RequestWorker:
    """Get a request worker configured from environment variables.

    Returns:
        A configured RequestWorker instance.
    """
    return RequestWorker.from_env()


async def request(url: str, data: Any = None, method: str | None = None) -> str:
    """Send a request with a worker configured from environment variables."""
    return await get_request_worker().request(url, data, method)
