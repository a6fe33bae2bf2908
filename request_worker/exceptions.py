"""Public exceptions for request-worker."""

from request_worker.models import RequestFailure


class RequestWorkerError(Exception):
    """Base exception for all request-worker errors."""


class RequestFailedError(RequestWorkerError):
    """Request settled with a status other than 200.

    The failure carries the returned status and the raw response body.
    """

    def __init__(self, status: int, response_text: str | None = None) -> None:
        super().__init__(f"Request failed with status {status}")
        self.failure = RequestFailure(status=status, response_text=response_text)

    @property
    def status(self) -> int:
        return self.failure.status

    @property
    def response_text(self) -> str | None:
        return self.failure.response_text
