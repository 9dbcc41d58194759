"""
Validation Models — Check configuration and per-value results.
"""

from dataclasses import dataclass
from typing import Optional

from wordguard.catalog.enums import Language

DEFAULT_MESSAGE = "Contains bad words"


@dataclass(frozen=True)
class CheckConfiguration:
    """
    Immutable settings for one declared check site.

    Built once by ``ContentValidator.configure`` and reused for every
    value checked at that site.
    """
    languages: frozenset[Language]
    message: str = DEFAULT_MESSAGE


@dataclass(frozen=True)
class CheckResult:
    """Outcome of checking one value."""
    valid: bool
    message: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid


@dataclass(frozen=True)
class BadWordHit:
    """A catalog word found in a checked value."""
    language: Language
    word: str
