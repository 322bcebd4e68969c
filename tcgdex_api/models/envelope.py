"""
Response envelopes.

A TCGdex body carries no discriminant: it is either a problem-detail error
or the requested payload itself. Decoding picks the variant by shape and
wraps the result so the resolver can branch on type.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from tcgdex_api.models.failure import ApiErrorPayload

T = TypeVar("T")


@dataclass(frozen=True)
class ErrorEnvelope:
    """The API answered with an error payload."""

    error: ApiErrorPayload


@dataclass(frozen=True)
class DataEnvelope(Generic[T]):
    """The API answered with the requested payload."""

    data: T


Envelope = ErrorEnvelope | DataEnvelope[T]
