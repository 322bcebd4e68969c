from pydantic import Field

from tcgdex_api.models.base import IdentifiedRecord, Record
from tcgdex_api.models.brief import SetBrief


class Variants(Record):
    """Print variants a card exists in."""

    normal: bool = False
    reverse: bool = False
    holo: bool = False
    first_edition: bool = False


class Ability(Record):
    """A Pokémon ability (e.g. "Pokémon Power", "Ability")."""

    type: str = ""
    name: str = ""
    effect: str = ""


class Attack(Record):
    """
    A Pokémon attack.

    Attributes:
        name: Attack name
        effect: Rules text, empty for vanilla attacks
        damage: Printed damage; a string when modified (e.g. "30+", "20×")
        cost: Energy types paid to use the attack
    """

    name: str = ""
    effect: str = ""
    damage: int | str = 0
    cost: list[str] = Field(default_factory=list)


class Item(Record):
    """A held Pokémon Tool printed on old cards."""

    name: str = ""
    effect: str = ""


class Weakness(Record):
    """A weakness or resistance: energy type and modifier (e.g. "×2", "-30")."""

    type: str = ""
    value: str = ""


class Card(IdentifiedRecord):
    """
    A card with full details, as returned by /cards/{id}.

    Pokémon-only fields (hp, types, attacks...), Trainer-only fields
    (effect, trainer_type) and Energy-only fields (energy_type) keep their
    defaults on other categories.
    """

    local_id: str = ""
    image: str = ""
    category: str = ""  # Pokemon, Trainer or Energy
    illustrator: str = ""
    rarity: str = ""
    variants: Variants = Field(default_factory=Variants)
    set: SetBrief = Field(default_factory=SetBrief)

    # Pokémon
    dex_id: list[int] = Field(default_factory=list)
    hp: int = 0
    types: list[str] = Field(default_factory=list)
    evolve_from: str = ""
    description: str = ""
    level: str = ""  # X for a "LV.X" card
    stage: str = ""
    suffix: str = ""
    item: Item = Field(default_factory=Item)
    abilities: list[Ability] = Field(default_factory=list)
    attacks: list[Attack] = Field(default_factory=list)
    weaknesses: list[Weakness] = Field(default_factory=list)
    resistances: list[Weakness] = Field(default_factory=list)
    retreat: int = 0
    regulation_mark: str = ""

    # Trainer
    effect: str = ""
    trainer_type: str = ""

    # Energy
    energy_type: str = ""
