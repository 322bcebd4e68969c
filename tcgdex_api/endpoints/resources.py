"""
Accessors for the queryable resources: cards, sets and series.

Each resource has a list endpoint returning brief records and a detail
endpoint returning one full record:

    GET /{lang}/cards                -> list[CardBrief]
    GET /{lang}/cards?name=furret    -> list[CardBrief]
    GET /{lang}/cards/swsh3-136      -> Card
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from tcgdex_api.endpoints.base import QueryLike, fetch_resource, targets_single
from tcgdex_api.models.brief import CardBrief, SerieBrief
from tcgdex_api.models.card import Card
from tcgdex_api.models.lang import Lang
from tcgdex_api.models.serie import Serie
from tcgdex_api.query import ById

D = TypeVar("D")
B = TypeVar("B")


@dataclass(frozen=True)
class ResourceApi(Generic[D, B]):
    """
    Access to one queryable resource in one language.

    Attributes:
        http: Shared httpx client
        base_url: API root
        lang: Language of returned data
        resource: Resource name in the URL (e.g. "cards")
        detail_type: Record returned for an id lookup
        brief_type: Record listed by the list endpoint
    """

    http: httpx.Client
    base_url: str
    lang: Lang
    resource: str
    detail_type: type[D]
    brief_type: type[B]

    def fetch(self, query: QueryLike = None) -> D | list[B]:
        """
        Fetch a list or a single record, depending on the query.

        Args:
            query: None for the full list, a filtering/sorting/pagination
                query for a narrowed list, an id query for one record

        Returns:
            The detailed record for an id query, otherwise the brief list

        Raises:
            TransportError: On network failure or undecodable response
            ApiError: If the API reports an error (e.g. unknown id)
            EmptyResultError: If nothing was found
        """
        if targets_single(query):
            return self._fetch(self.detail_type, query)
        return self._fetch(list[self.brief_type], query)

    def get(self, resource_id: str) -> D:
        """Fetch one record by id."""
        if not resource_id:
            raise ValueError(f"{self.resource} id must not be empty")
        return self._fetch(self.detail_type, ById(resource_id))

    def search(self, query: QueryLike = None) -> list[B]:
        """Fetch the brief list, optionally filtered, sorted or paginated."""
        if targets_single(query):
            raise ValueError(f"search() takes a filter query, use get() to fetch {self.resource} by id")
        return self._fetch(list[self.brief_type], query)

    def _fetch(self, response_type: object, query: QueryLike) -> Any:
        return fetch_resource(
            self.http,
            self.base_url,
            self.lang,
            self.resource,
            response_type,
            query,
        )


CardApi = ResourceApi[Card, CardBrief]
SerieApi = ResourceApi[Serie, SerieBrief]
