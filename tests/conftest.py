from collections.abc import Iterator
from typing import Any

import pytest

from tcgdex_api import TcgdexClient

BASE_URL = "https://api.tcgdex.test/v2/"


@pytest.fixture
def client() -> Iterator[TcgdexClient]:
    """English client pointed at a mocked API root."""
    tcgdex = TcgdexClient("en", base_url=BASE_URL)
    yield tcgdex
    tcgdex.close()


@pytest.fixture
def not_found_payload() -> dict[str, Any]:
    """Problem-detail body TCGdex returns for an unknown card."""
    return {
        "type": "https://tcgdex.dev/errors/not-found",
        "title": "The resource you are trying to reach does not exists",
        "status": 404,
        "endpoint": "/en/cards/sih3-136",
        "method": "GET",
    }


@pytest.fixture
def furret_payload() -> dict[str, Any]:
    """Abridged /en/cards/swsh3-136 body."""
    return {
        "category": "Pokemon",
        "id": "swsh3-136",
        "illustrator": "tetsuya koizumi",
        "image": "https://assets.tcgdex.net/en/swsh/swsh3/136",
        "localId": "136",
        "name": "Furret",
        "rarity": "Uncommon",
        "set": {
            "cardCount": {"official": 189, "total": 201},
            "id": "swsh3",
            "logo": "https://assets.tcgdex.net/en/swsh/swsh3/logo",
            "name": "Darkness Ablaze",
            "symbol": "https://assets.tcgdex.net/univ/swsh/swsh3/symbol",
        },
        "variants": {"firstEdition": False, "holo": False, "normal": True, "reverse": True},
        "dexId": [162],
        "hp": 110,
        "types": ["Colorless"],
        "evolveFrom": "Sentret",
        "stage": "Stage1",
        "abilities": [
            {
                "type": "Ability",
                "name": "Adventurous Tail",
                "effect": "Once during your turn, you may look at the top 5 cards of your deck.",
            }
        ],
        "attacks": [
            {"cost": ["Colorless", "Colorless"], "name": "Slam", "damage": 50},
            {"cost": ["Colorless", "Colorless", "Colorless"], "name": "Fury Swipes", "damage": "30×"},
        ],
        "weaknesses": [{"type": "Fighting", "value": "×2"}],
        "retreat": 1,
        "regulationMark": "D",
        "legal": {"standard": False, "expanded": True},
        "updated": "2024-06-18T00:34:39+02:00",
    }


@pytest.fixture
def darkness_ablaze_payload() -> dict[str, Any]:
    """Abridged /en/sets/swsh3 body."""
    return {
        "cardCount": {"firstEd": 0, "holo": 45, "normal": 144, "official": 189, "reverse": 152, "total": 201},
        "cards": [
            {"id": "swsh3-1", "image": "https://assets.tcgdex.net/en/swsh/swsh3/1", "localId": "1", "name": "Butterfree V"},
            {"id": "swsh3-136", "image": "https://assets.tcgdex.net/en/swsh/swsh3/136", "localId": "136", "name": "Furret"},
        ],
        "id": "swsh3",
        "legal": {"expanded": True, "standard": False},
        "logo": "https://assets.tcgdex.net/en/swsh/swsh3/logo",
        "name": "Darkness Ablaze",
        "releaseDate": "2020-08-14",
        "serie": {"id": "swsh", "name": "Sword & Shield"},
        "symbol": "https://assets.tcgdex.net/univ/swsh/swsh3/symbol",
        "tcgOnline": "DAA",
    }


@pytest.fixture
def card_briefs_payload() -> list[dict[str, Any]]:
    """Abridged /en/cards?name=furret body."""
    return [
        {"id": "ex7-22", "localId": "22", "name": "Furret", "image": "https://assets.tcgdex.net/en/ex/ex7/22"},
        {"id": "ex12-33", "localId": "33", "name": "Furret"},
    ]
