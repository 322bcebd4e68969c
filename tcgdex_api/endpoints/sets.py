from dataclasses import dataclass
from urllib.parse import quote

from tcgdex_api.endpoints.base import fetch_resource
from tcgdex_api.endpoints.resources import ResourceApi
from tcgdex_api.models.brief import SetBrief
from tcgdex_api.models.card import Card
from tcgdex_api.models.card_set import Set
from tcgdex_api.query import ById


@dataclass(frozen=True)
class SetApi(ResourceApi[Set, SetBrief]):
    """Access to sets, plus card lookup by position within a set."""

    def fetch_card(self, set_id: str, local_id: str) -> Card:
        """
        Fetch a card by its set and its number within the set.

        GET /{lang}/sets/{set_id}/{local_id}

        Args:
            set_id: Set id (e.g. "swsh3")
            local_id: Card number in the set (e.g. "136")

        Returns:
            The card

        Raises:
            TransportError: On network failure or undecodable response
            ApiError: If the set or card does not exist
            EmptyResultError: If the API answers with an empty card
        """
        if not set_id or not local_id:
            raise ValueError("set_id and local_id must not be empty")
        return fetch_resource(
            self.http,
            self.base_url,
            self.lang,
            f"{self.resource}/{quote(set_id, safe='')}",
            Card,
            ById(local_id),
        )
