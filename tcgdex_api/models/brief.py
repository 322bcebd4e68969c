"""
Brief records.

List endpoints return these reduced projections; detailed records embed
them to reference related resources (a Card embeds its SetBrief, a Set its
SerieBrief).
"""

from pydantic import Field

from tcgdex_api.models.base import IdentifiedRecord, Record


class CardCountBrief(Record):
    """Card counts as embedded in a brief set."""

    total: int = 0  # including secret cards
    official: int = 0  # as printed on the cards


class CardBrief(IdentifiedRecord):
    """
    A card as listed by /cards and embedded in sets.

    Attributes:
        id: Global card id (e.g. "swsh3-136")
        local_id: Number within its set (e.g. "136")
        name: Card name
        image: Base URL of the card image, when available
    """

    local_id: str = ""
    image: str = ""


class SetBrief(IdentifiedRecord):
    """A set as listed by /sets and embedded in cards and series."""

    logo: str = ""
    symbol: str = ""
    card_count: CardCountBrief = Field(default_factory=CardCountBrief)


class SerieBrief(IdentifiedRecord):
    """A serie as listed by /series and embedded in sets."""

    logo: str = ""
