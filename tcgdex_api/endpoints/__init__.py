from tcgdex_api.endpoints.base import (
    QueryLike,
    build_url,
    decode_envelope,
    fetch_resource,
    is_empty,
    normalize_query,
    resolve_envelope,
    targets_single,
)
from tcgdex_api.endpoints.listings import LISTING_RESOURCES, ListingApi
from tcgdex_api.endpoints.resources import CardApi, ResourceApi, SerieApi
from tcgdex_api.endpoints.sets import SetApi

__all__ = [
    "CardApi",
    "LISTING_RESOURCES",
    "ListingApi",
    "QueryLike",
    "ResourceApi",
    "SerieApi",
    "SetApi",
    "build_url",
    "decode_envelope",
    "fetch_resource",
    "is_empty",
    "normalize_query",
    "resolve_envelope",
    "targets_single",
]
