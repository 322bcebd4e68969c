"""
Failure classification for TCGdex requests.

Every failed request surfaces as exactly one of three exceptions:

- TransportError: the request or its decoding failed (network, timeout,
  body that is not JSON or does not match the expected record). The library
  cannot recover from these.
- ApiError: the API answered with a problem-detail payload explaining what
  went wrong (unknown id, bad filter...). The payload is kept intact.
- EmptyResultError: the API answered with a well-formed but empty payload,
  its way of saying "nothing here" without an error.

All three derive from TcgdexError, so callers can catch the family at once
and branch on ``kind``.

ApiError and EmptyResultError compare by value so tests can assert on them
directly; TransportError compares by identity.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Classification of request failures."""

    TRANSPORT = "transport"
    API = "api"
    EMPTY_RESULT = "empty_result"


class ApiErrorPayload(BaseModel):
    """
    Problem-detail body returned by TCGdex on a failed request.

    Example:
        {
            "type": "https://tcgdex.dev/errors/not-found",
            "title": "The resource you are trying to reach does not exists",
            "status": 404,
            "endpoint": "/en/cards/sih3-136",
            "method": "GET"
        }

    Older API revisions answered with ``{"message": "..."}`` or
    ``{"error": {...}}`` instead. Those bodies do not validate here; they
    decode as data and end up as EmptyResultError or TransportError.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    problem_type: str = Field(
        ...,
        alias="type",
        description="URL identifying the problem type",
    )
    title: str = Field(
        ...,
        description="Summary of the problem",
    )
    status: int = Field(
        ...,
        description="HTTP status code",
    )
    endpoint: str = Field(
        ...,
        description="Endpoint that caused the problem",
    )
    method: str = Field(
        ...,
        description="HTTP method used",
    )
    lang: str = Field(
        default="",
        description="Language of the request",
    )
    details: str = Field(
        default="",
        description="Additional details about the problem",
    )


class TcgdexError(Exception):
    """
    Base class for every failure raised by this library.

    Attributes:
        kind: Failure classification
        message: Human-readable explanation
        url: URL of the request that failed, when known
    """

    kind: ErrorKind

    def __init__(self, message: str, url: str | None = None) -> None:
        self.message = message
        self.url = url
        super().__init__(message)

    @property
    def is_transport(self) -> bool:
        return self.kind == ErrorKind.TRANSPORT

    @property
    def is_api(self) -> bool:
        return self.kind == ErrorKind.API

    @property
    def is_empty_result(self) -> bool:
        return self.kind == ErrorKind.EMPTY_RESULT

    def __str__(self) -> str:
        return self.message


class TransportError(TcgdexError):
    """
    The request could not be completed or its response could not be decoded.

    The underlying httpx or pydantic exception is chained as ``__cause__``.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self.status_code = status_code
        super().__init__(message, url)


class ApiError(TcgdexError):
    """The API reported a problem with the request."""

    kind = ErrorKind.API

    def __init__(self, payload: ApiErrorPayload, url: str | None = None) -> None:
        self.payload = payload
        super().__init__(f"Tcgdex error : {payload.title}", url)

    @property
    def status(self) -> int:
        return self.payload.status

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ApiError):
            return NotImplemented
        return self.payload == other.payload

    def __hash__(self) -> int:
        return hash((self.kind, self.payload))


class EmptyResultError(TcgdexError):
    """The API answered with an empty payload where a resource was expected."""

    kind = ErrorKind.EMPTY_RESULT

    def __init__(self, url: str | None = None) -> None:
        super().__init__("Response is empty", url)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmptyResultError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(self.kind)
