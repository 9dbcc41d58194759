"""
NotBadWord Validator — Rejects text containing banned words.

A value is invalid when it contains a banned word of ANY selected
language (logical OR across languages). The result does not depend on
the order in which languages were declared.
"""

from typing import Iterable, Optional, Union

from wordguard.catalog.enums import DEFAULT_LANGUAGE, Language
from wordguard.catalog.words import BadWordCatalog, get_catalog
from wordguard.core.contracts import ConstraintValidator
from wordguard.core.logging import LogChannel, get_logger
from wordguard.validate.models import (
    DEFAULT_MESSAGE,
    BadWordHit,
    CheckConfiguration,
    CheckResult,
)

log = get_logger(LogChannel.VALIDATE)

LanguageArg = Union[Language, str]


class ContentValidator(ConstraintValidator[CheckConfiguration]):
    """Validates text values against the bad word catalog."""

    def __init__(self, catalog: Optional[BadWordCatalog] = None) -> None:
        """
        Initialize the validator.

        Args:
            catalog: Catalog to consult (process-wide catalog if None)
        """
        self._catalog = catalog or get_catalog()

    @property
    def name(self) -> str:
        return "not_bad_word"

    @property
    def catalog(self) -> BadWordCatalog:
        return self._catalog

    def configure(
        self,
        languages: Union[LanguageArg, Iterable[LanguageArg], None] = (),
        message: str = DEFAULT_MESSAGE,
    ) -> CheckConfiguration:
        """
        Build the configuration for one check site.

        Args:
            languages: Language tags to check (DEFAULT_LANGUAGE if empty)
            message: Failure message reported for invalid values

        Raises:
            ValueError: On an unknown language tag or an empty message
        """
        if languages is None:
            languages = ()
        elif isinstance(languages, (Language, str)):
            languages = (languages,)

        selection = frozenset(Language.parse(lang) for lang in languages)
        if not selection:
            selection = frozenset({DEFAULT_LANGUAGE})

        if not isinstance(message, str) or not message.strip():
            raise ValueError(f"Check message must be a non-empty string, got {message!r}")

        config = CheckConfiguration(languages=selection, message=message)
        log.verbose(
            "configuration_created",
            languages=sorted(lang.value for lang in selection),
        )
        return config

    def is_valid(self, value: Optional[str], config: CheckConfiguration) -> bool:
        """Return False if value contains a banned word of any configured language."""
        return not any(
            self._catalog.matches(value, language) for language in config.languages
        )

    def evaluate(self, value: Optional[str], config: CheckConfiguration) -> CheckResult:
        """
        Check a value and attach the configured message on failure.

        The message is static; it never names the matched word.
        """
        if self.is_valid(value, config):
            return CheckResult(valid=True)

        log.verbose(
            "content_rejected",
            languages=sorted(lang.value for lang in config.languages),
            message=config.message,
        )
        return CheckResult(valid=False, message=config.message)

    def explain(self, value: Optional[str], config: CheckConfiguration) -> list[BadWordHit]:
        """
        List every banned word found in value.

        Hits are ordered by language code, then catalog order.
        """
        hits: list[BadWordHit] = []
        for language in sorted(config.languages, key=lambda lang: lang.value):
            for word in self._catalog.find(value, language):
                hits.append(BadWordHit(language=language, word=word))
        return hits


_default_validator = ContentValidator()


def get_validator() -> ContentValidator:
    """Get the validator bound to the process-wide catalog."""
    return _default_validator


def configure(
    languages: Union[LanguageArg, Iterable[LanguageArg], None] = (),
    message: str = DEFAULT_MESSAGE,
) -> CheckConfiguration:
    return _default_validator.configure(languages, message=message)


def is_valid(value: Optional[str], config: CheckConfiguration) -> bool:
    return _default_validator.is_valid(value, config)


def evaluate(value: Optional[str], config: CheckConfiguration) -> CheckResult:
    return _default_validator.evaluate(value, config)
