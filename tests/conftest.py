import pytest

from wordguard.catalog.enums import Language
from wordguard.catalog.words import BadWordCatalog
from wordguard.core.logging import configure_logging
from wordguard.validate.not_bad_word import ContentValidator


@pytest.fixture(autouse=True, scope="session")
def silent_logging():
    """Keep test output free of log lines."""
    configure_logging(level="silent", format="console", force=True)


@pytest.fixture
def scenario_catalog():
    """A catalog with one word per language: EN 'badword', PL 'głupek'."""
    return BadWordCatalog({
        Language.EN: ["badword"],
        Language.PL: ["głupek"],
    })


@pytest.fixture
def scenario_validator(scenario_catalog):
    return ContentValidator(catalog=scenario_catalog)


@pytest.fixture
def validator():
    """Validator over the built-in catalog."""
    return ContentValidator()
