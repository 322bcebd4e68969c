from tcgdex_api.models.brief import CardBrief, CardCountBrief, SerieBrief, SetBrief
from tcgdex_api.models.card import Ability, Attack, Card, Item, Variants, Weakness
from tcgdex_api.models.card_set import CardCount, Legal, Set
from tcgdex_api.models.envelope import DataEnvelope, Envelope, ErrorEnvelope
from tcgdex_api.models.failure import (
    ApiError,
    ApiErrorPayload,
    EmptyResultError,
    ErrorKind,
    TcgdexError,
    TransportError,
)
from tcgdex_api.models.lang import Lang
from tcgdex_api.models.listing import ListingEntry
from tcgdex_api.models.serie import Serie

__all__ = [
    "Ability",
    "ApiError",
    "ApiErrorPayload",
    "Attack",
    "Card",
    "CardBrief",
    "CardCount",
    "CardCountBrief",
    "DataEnvelope",
    "EmptyResultError",
    "Envelope",
    "ErrorEnvelope",
    "ErrorKind",
    "Item",
    "Lang",
    "Legal",
    "ListingEntry",
    "Serie",
    "SerieBrief",
    "Set",
    "SetBrief",
    "TcgdexError",
    "TransportError",
    "Variants",
    "Weakness",
]
