"""
Bad Word Catalog — Per-language banned substrings and containment queries.

The catalog is built once at import time and never changes afterwards.
Matching is lexical: a banned word embedded inside a longer word still
matches ("stupidity" contains "stupid"). There is no word-boundary check.
Both sides are compared with str.lower(); no other Unicode folding is done.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from wordguard.catalog.enums import Language
from wordguard.core.logging import LogChannel, get_logger

log = get_logger(LogChannel.CATALOG)

# Stored lower-case, in lookup order
BAD_WORDS: Mapping[Language, tuple[str, ...]] = MappingProxyType({
    Language.PL: (
        "kurka",
        "wariat",
        "głupek",
        "cholera",
        "debil",
        "kretyn",
        "idiota",
    ),
    Language.EN: (
        "badword",
        "stupid",
        "idiot",
        "moron",
        "jerk",
        "dumbass",
    ),
    Language.DE: (
        "dummkopf",
        "blödmann",
        "idiot",
        "mistkerl",
        "arschloch",
    ),
})


class BadWordCatalog:
    """
    Read-only mapping from Language to its banned-word tuple.

    Words are lower-cased on construction. Every Language gets an entry;
    a language missing from ``words`` maps to an empty tuple.
    """

    def __init__(self, words: Mapping[Language, Iterable[str]] = BAD_WORDS) -> None:
        table = {}
        for language in Language:
            table[language] = tuple(w.lower() for w in words.get(language, ()) if w)
        self._words = MappingProxyType(table)

        log.debug(
            "catalog_built",
            languages=[lang.value for lang in Language],
            word_counts={lang.value: len(ws) for lang, ws in table.items()},
        )

    def languages(self) -> tuple[Language, ...]:
        return tuple(self._words)

    def words_for(self, language: Union[Language, str]) -> tuple[str, ...]:
        """Return the banned words for a language, in catalog order."""
        return self._words[Language.parse(language)]

    def matches(self, text: Optional[str], language: Union[Language, str]) -> bool:
        """
        Check whether text contains any banned word of a language.

        None and empty text never match.
        """
        if not text:
            return False
        lowered = text.lower()
        return any(word in lowered for word in self.words_for(language))

    def find(self, text: Optional[str], language: Union[Language, str]) -> list[str]:
        """Return the banned words of a language present in text."""
        if not text:
            return []
        lowered = text.lower()
        return [word for word in self.words_for(language) if word in lowered]


_default_catalog = BadWordCatalog()


def get_catalog() -> BadWordCatalog:
    """Get the process-wide catalog built from BAD_WORDS."""
    return _default_catalog
