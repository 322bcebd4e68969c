from enum import Enum


class Lang(str, Enum):
    """Languages served by the TCGdex API."""

    EN = "en"
    FR = "fr"
    DE = "de"
    IT = "it"
    PT = "pt"
    ES = "es"

    @classmethod
    def parse(cls, value: "Lang | str") -> "Lang":
        """
        Coerce a language code to a Lang, ignoring case.

        Raises:
            ValueError: If the code is not a supported language
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value.strip().lower())
        except ValueError:
            supported = ", ".join(lang.value for lang in cls)
            raise ValueError(f"Unsupported language: {value!r}. Must be one of {supported}") from None

    def __str__(self) -> str:
        return self.value
