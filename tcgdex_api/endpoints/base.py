"""
Request pipeline shared by every accessor.

    build_url -> GET -> decode_envelope -> resolve_envelope

fetch_resource runs the whole pipeline for any resource and response type,
so accessors only decide the resource name and the type to decode into.
"""

import logging
from functools import lru_cache
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from tcgdex_api.models.envelope import DataEnvelope, Envelope, ErrorEnvelope
from tcgdex_api.models.failure import (
    ApiError,
    ApiErrorPayload,
    EmptyResultError,
    TransportError,
)
from tcgdex_api.models.lang import Lang
from tcgdex_api.query import ByFilter, ById, Query, QuerySpec

logger = logging.getLogger(__name__)

T = TypeVar("T")

QueryLike = Query | ById | ByFilter | str | None


def normalize_query(query: QueryLike) -> QuerySpec | str | None:
    """
    Reduce any accepted query form to a QuerySpec, a raw string, or None.

    Empty queries of any form become None.
    """
    if isinstance(query, Query):
        query = query.spec
    if isinstance(query, ById | ByFilter):
        return query if query.render() else None
    return query or None


def build_url(base_url: str, lang: Lang | str, resource: str, query: QueryLike = None) -> str:
    """
    Compose the request URL for a resource.

    An id is appended as a path segment; filtering, pagination and sorting
    go in the query string:

        build_url(base, "en", "sets", ById("swsh3"))  -> base + "en/sets/swsh3"
        build_url(base, "en", "sets", ByFilter("name=furret"))
                                                      -> base + "en/sets?name=furret"

    Raw string queries are classified by content: a string containing "&" or
    "=" is a query string, anything else an id. An id that itself contains
    one of those characters is misclassified; pass a ById to avoid that.

    Args:
        base_url: API root, with or without a trailing slash
        lang: Language segment
        resource: Resource name (e.g. "cards")
        query: Query, QuerySpec, raw string or None

    Returns:
        Absolute request URL
    """
    url = f"{base_url.rstrip('/')}/{Lang.parse(lang).value}/{resource}"
    spec = normalize_query(query)

    if spec is None:
        return url
    if isinstance(spec, ById):
        return f"{url}/{quote(spec.id, safe='')}"
    if isinstance(spec, ByFilter):
        return f"{url}?{spec.render()}"
    if "&" in spec or "=" in spec:
        return f"{url}?{spec}"
    return f"{url}/{spec}"


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(response_type)


_ERROR_ADAPTER = TypeAdapter(ApiErrorPayload)


def decode_envelope(body: Any, response_type: Any, url: str | None = None) -> Envelope[Any]:
    """
    Decode a JSON body into an error or data envelope.

    The error shape is tried first: an object that validates as a
    problem-detail payload is an error, anything else must validate as
    ``response_type``.

    Args:
        body: Parsed JSON body
        response_type: Type to decode data into (e.g. Card, list[CardBrief])
        url: Request URL, for error reporting

    Raises:
        TransportError: If the body matches neither shape
    """
    if isinstance(body, dict):
        try:
            return ErrorEnvelope(_ERROR_ADAPTER.validate_python(body))
        except ValidationError:
            pass

    try:
        return DataEnvelope(_adapter(response_type).validate_python(body))
    except ValidationError as e:
        raise TransportError(
            f"Unexpected response shape from {url}: {e.error_count()} validation error(s)",
            url=url,
        ) from e


def is_empty(payload: Any) -> bool:
    """True for records without id and name, and for empty lists."""
    check = getattr(payload, "is_empty", None)
    if callable(check):
        return bool(check())
    if isinstance(payload, list | tuple | dict):
        return len(payload) == 0
    return False


def resolve_envelope(envelope: Envelope[T], url: str | None = None, check_empty: bool = True) -> T:
    """
    Turn an envelope into its payload or the matching exception.

    Args:
        envelope: Decoded envelope
        url: Request URL, attached to raised errors
        check_empty: Treat an empty payload as EmptyResultError

    Returns:
        The payload of a data envelope

    Raises:
        ApiError: If the envelope is an error
        EmptyResultError: If the payload is empty and check_empty is set
    """
    if isinstance(envelope, ErrorEnvelope):
        raise ApiError(envelope.error, url=url)
    if check_empty and is_empty(envelope.data):
        raise EmptyResultError(url=url)
    return envelope.data


def fetch_resource(
    http: httpx.Client,
    base_url: str,
    lang: Lang | str,
    resource: str,
    response_type: Any,
    query: QueryLike = None,
    check_empty: bool = True,
) -> Any:
    """
    GET a resource and decode it into ``response_type``.

    Issues exactly one request; nothing is retried or cached.

    Args:
        http: Shared httpx client
        base_url: API root
        lang: Language segment
        resource: Resource path below the language (e.g. "cards", "sets/swsh3")
        response_type: Type to decode into
        query: Optional query
        check_empty: Raise EmptyResultError on an empty payload

    Returns:
        The decoded payload

    Raises:
        TransportError: On network failure or undecodable response
        ApiError: If the API reports an error
        EmptyResultError: If the payload is empty and check_empty is set
    """
    url = build_url(base_url, lang, resource, query)
    logger.debug("GET %s", url)

    try:
        response = http.get(url)
    except httpx.HTTPError as e:
        raise TransportError(f"Request to {url} failed: {e}", url=url) from e

    logger.debug("GET %s -> HTTP %d", url, response.status_code)

    try:
        body = response.json()
    except ValueError as e:
        raise TransportError(
            f"Response from {url} is not JSON (HTTP {response.status_code})",
            url=url,
            status_code=response.status_code,
        ) from e

    try:
        envelope = decode_envelope(body, response_type, url=url)
    except TransportError as e:
        e.status_code = response.status_code
        raise

    if isinstance(envelope, ErrorEnvelope):
        logger.warning(
            "TCGdex reported %s (%d) for %s",
            envelope.error.title,
            envelope.error.status,
            envelope.error.endpoint,
        )
    elif response.is_error:
        raise TransportError(
            f"Request to {url} failed: HTTP {response.status_code}",
            url=url,
            status_code=response.status_code,
        )

    return resolve_envelope(envelope, url=url, check_empty=check_empty)


def targets_single(query: QueryLike) -> bool:
    """True when the query addresses one resource by id rather than a list."""
    spec = normalize_query(query)
    if isinstance(spec, str):
        return "&" not in spec and "=" not in spec
    return isinstance(spec, ById)
