"""
Catalog — Language tags and their banned-word lists.
"""

from wordguard.catalog.enums import DEFAULT_LANGUAGE, Language
from wordguard.catalog.words import BAD_WORDS, BadWordCatalog, get_catalog

__all__ = [
    "BAD_WORDS",
    "BadWordCatalog",
    "DEFAULT_LANGUAGE",
    "Language",
    "get_catalog",
]
