from pydantic import Field

from tcgdex_api.models.base import IdentifiedRecord, Record
from tcgdex_api.models.brief import CardBrief, SerieBrief


class CardCount(Record):
    """
    Card counts of a set.

    Attributes:
        total: All cards including secret ones
        official: Cards numbered on the printed cards
        reverse: Cards available in reverse holo
        holo: Cards available in holo
        first_ed: Cards available with the 1st edition stamp
    """

    total: int = 0
    official: int = 0
    reverse: int = 0
    holo: int = 0
    first_ed: int = 0


class Legal(Record):
    """Tournament legality of a set."""

    standard: bool = False
    expanded: bool = False


class Set(IdentifiedRecord):
    """A set with full details, as returned by /sets/{id}."""

    logo: str = ""
    symbol: str = ""
    card_count: CardCount = Field(default_factory=CardCount)
    serie: SerieBrief = Field(default_factory=SerieBrief)
    tcg_online: str = ""  # Pokémon TCG Online set code
    release_date: str = ""  # yyyy-mm-dd
    legal: Legal = Field(default_factory=Legal)
    cards: list[CardBrief] = Field(default_factory=list)
