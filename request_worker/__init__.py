"""request-worker for Python.

Serializes parameter mappings into query strings, parses them back, and sends
asynchronous GET and POST requests built from them.

Public API:
    serialize - Parameter mapping to query string
    parse - Query string (or the current address) to parameter mapping
    request - Send a GET or form-encoded POST and return the response body
    RequestWorker - Dispatcher with injectable transport and address source
"""

from request_worker._version import __version__
from request_worker.client import RequestWorker, get_request_worker, request
from request_worker.codec import parse, serialize
from request_worker.exceptions import RequestFailedError, RequestWorkerError
from request_worker.models import PreparedRequest, RequestFailure, TransportResponse

__all__ = [
    "__version__",
    "serialize",
    "parse",
    "request",
    "RequestWorker",
    "get_request_worker",
    "RequestFailedError",
    "RequestWorkerError",
    "RequestFailure",
    "PreparedRequest",
    "TransportResponse",
]
