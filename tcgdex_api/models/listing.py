from pydantic import Field

from tcgdex_api.models.base import Record
from tcgdex_api.models.brief import CardBrief


class ListingEntry(Record):
    """
    One value of a list-style resource with the cards carrying it.

    Returned by e.g. /types/Fire, /hp/60 or /illustrators/Ken Sugimori.
    """

    name: str | int = ""
    cards: list[CardBrief] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return self.name == "" and not self.cards
