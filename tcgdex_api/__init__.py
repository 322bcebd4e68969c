"""
Typed client for the TCGdex Pokémon TCG API (https://tcgdex.dev).

Cards, sets and series can be listed, filtered, sorted, paginated or
fetched by id. Types, categories, HP values, illustrators, rarities and
retreat costs can be listed.
"""

from tcgdex_api.client import TcgdexClient
from tcgdex_api.models import (
    Ability,
    ApiError,
    ApiErrorPayload,
    Attack,
    Card,
    CardBrief,
    CardCount,
    CardCountBrief,
    EmptyResultError,
    ErrorKind,
    Item,
    Lang,
    Legal,
    ListingEntry,
    Serie,
    SerieBrief,
    Set,
    SetBrief,
    TcgdexError,
    TransportError,
    Variants,
    Weakness,
)
from tcgdex_api.query import ByFilter, ById, Order, Query, QuerySpec

__all__ = [
    "Ability",
    "ApiError",
    "ApiErrorPayload",
    "Attack",
    "ByFilter",
    "ById",
    "Card",
    "CardBrief",
    "CardCount",
    "CardCountBrief",
    "EmptyResultError",
    "ErrorKind",
    "Item",
    "Lang",
    "Legal",
    "ListingEntry",
    "Order",
    "Query",
    "QuerySpec",
    "Serie",
    "SerieBrief",
    "Set",
    "SetBrief",
    "TcgdexClient",
    "TcgdexError",
    "TransportError",
    "Variants",
    "Weakness",
]
