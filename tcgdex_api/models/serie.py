from pydantic import Field

from tcgdex_api.models.base import IdentifiedRecord
from tcgdex_api.models.brief import SetBrief


class Serie(IdentifiedRecord):
    """A serie (group of sets) with full details, as returned by /series/{id}."""

    logo: str = ""
    sets: list[SetBrief] = Field(default_factory=list)
