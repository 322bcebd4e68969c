"""
Accessors for list-style resources.

These resources list plain values rather than records:

    GET /{lang}/types         -> ["Colorless", "Darkness", ...]
    GET /{lang}/hp            -> [30, 40, 50, ...]
    GET /{lang}/types/Fire    -> {"name": "Fire", "cards": [...]}
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx

from tcgdex_api.endpoints.base import fetch_resource
from tcgdex_api.models.lang import Lang
from tcgdex_api.models.listing import ListingEntry
from tcgdex_api.query import ById

V = TypeVar("V", str, int)

# resource name -> type of listed values
LISTING_RESOURCES: dict[str, type] = {
    "types": str,
    "categories": str,
    "hp": int,
    "illustrators": str,
    "rarities": str,
    "retreats": int,
}


@dataclass(frozen=True)
class ListingApi(Generic[V]):
    """
    Access to one list-style resource in one language.

    Attributes:
        http: Shared httpx client
        base_url: API root
        lang: Language of returned data
        resource: Resource name in the URL (e.g. "types")
        value_type: Type of the listed values
    """

    http: httpx.Client
    base_url: str
    lang: Lang
    resource: str
    value_type: type[V]

    def fetch(self) -> list[V]:
        """
        Fetch every existing value.

        An empty list is returned as is.

        Raises:
            TransportError: On network failure or undecodable response
            ApiError: If the API reports an error
        """
        return fetch_resource(
            self.http,
            self.base_url,
            self.lang,
            self.resource,
            list[self.value_type],
            check_empty=False,
        )

    def get(self, value: V) -> ListingEntry:
        """
        Fetch the cards carrying one value (e.g. every Fire card).

        Raises:
            TransportError: On network failure or undecodable response
            ApiError: If the value does not exist
            EmptyResultError: If the API answers with an empty entry
        """
        if value == "":
            raise ValueError(f"{self.resource} value must not be empty")
        return fetch_resource(
            self.http,
            self.base_url,
            self.lang,
            self.resource,
            ListingEntry,
            ById(str(value)),
        )
