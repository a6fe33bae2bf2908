"""Pydantic models exchanged between the dispatcher and its transport."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Constants
# =============================================================================

SUCCESS_STATUS = 200
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

Method = Literal["GET", "POST"]

# =============================================================================
# Transport Models
# =============================================================================


class PreparedRequest(BaseModel):
    """Request handed to a transport.

    Fields:
        method: Either "GET" or "POST"
        url: Full target URL (query string already appended for GET)
        headers: Extra request headers
        body: Form-encoded body for POST, None for GET
    """

    method: Method
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: str | None = None


class TransportResponse(BaseModel):
    """What a transport yields once the exchange has completed."""

    status: int
    body: str | None = None


# =============================================================================
# Outcome Models
# =============================================================================


class RequestFailure(BaseModel):
    """Structured failure for a request that did not settle with 200.

    Serialized with the `responseText` alias, e.g.
    ``{"status": 404, "responseText": "not found"}``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    status: int
    response_text: str | None = Field(default=None, alias="responseText")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
