from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """
    Base for every record decoded from a TCGdex response.

    JSON keys are camelCase; fields are snake_case. Keys the API adds over
    time are ignored rather than rejected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class IdentifiedRecord(Record):
    """A record addressed by ``id`` and carrying a display ``name``."""

    id: str = ""
    name: str = ""

    def is_empty(self) -> bool:
        """
        True when neither id nor name is set.

        TCGdex sometimes answers an unknown id with a default object rather
        than a 404; such a payload decodes into an empty record.
        """
        return not self.id and not self.name
