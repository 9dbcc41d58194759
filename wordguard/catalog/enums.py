"""
Catalog Enums — Language tags selecting banned-word lists.
"""

from enum import Enum
from typing import Union


class Language(str, Enum):
    """
    Language whose banned-word list a check consults.

    Values are lower-case ISO 639-1 codes.
    """

    PL = "pl"
    EN = "en"
    DE = "de"

    @classmethod
    def parse(cls, value: Union["Language", str]) -> "Language":
        """
        Resolve a language tag from an enum member, code or name.

        Raises:
            ValueError: If the tag is not a known language
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        known = ", ".join(lang.value for lang in cls)
        raise ValueError(f"Unknown language tag: {value!r} (expected one of: {known})")


# Used when a check site declares no languages
DEFAULT_LANGUAGE = Language.PL
