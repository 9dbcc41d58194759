"""
Unit tests for the NotBadWord content validator.
"""

import itertools
from concurrent.futures import ThreadPoolExecutor
from dataclasses import FrozenInstanceError

import pytest

from wordguard.catalog.enums import DEFAULT_LANGUAGE, Language
from wordguard.validate import not_bad_word
from wordguard.validate.models import DEFAULT_MESSAGE, BadWordHit, CheckConfiguration, CheckResult
from wordguard.validate.not_bad_word import ContentValidator

SAMPLE_TEXTS = [
    "",
    "hello world",
    "this is a BadWord example",
    "to jest głupek",
    "Du bist ein Dummkopf",
    "Hejo! Co tam kurka u Ciebie słychać?",
    "such stupidity",
]


# =============================================================================
# Configuration
# =============================================================================

class TestConfigure:
    """Tests for building check configurations."""

    def test_selected_languages(self, validator):
        config = validator.configure([Language.EN, Language.PL])
        assert config.languages == frozenset({Language.EN, Language.PL})

    def test_empty_selection_uses_default(self, validator):
        assert validator.configure([]).languages == frozenset({DEFAULT_LANGUAGE})
        assert validator.configure().languages == frozenset({DEFAULT_LANGUAGE})
        assert validator.configure(None).languages == frozenset({DEFAULT_LANGUAGE})

    def test_single_language(self, validator):
        assert validator.configure(Language.EN).languages == frozenset({Language.EN})
        assert validator.configure("de").languages == frozenset({Language.DE})

    def test_duplicates_collapse(self, validator):
        config = validator.configure([Language.EN, "en", "EN"])
        assert config.languages == frozenset({Language.EN})

    def test_default_message(self, validator):
        assert validator.configure().message == DEFAULT_MESSAGE == "Contains bad words"

    def test_custom_message(self, validator):
        assert validator.configure(message="Mind your language").message == "Mind your language"

    def test_unknown_language_fails_fast(self, validator):
        with pytest.raises(ValueError, match="Unknown language tag"):
            validator.configure([Language.EN, "klingon"])

    @pytest.mark.parametrize("message", ["", "   ", None])
    def test_empty_message_rejected(self, validator, message):
        with pytest.raises(ValueError):
            validator.configure(message=message)

    def test_configuration_is_immutable(self, validator):
        config = validator.configure([Language.EN])
        with pytest.raises(FrozenInstanceError):
            config.message = "changed"

    def test_configurations_compare_by_value(self, validator):
        assert validator.configure(["en", "pl"]) == validator.configure(["pl", "en"])


# =============================================================================
# Evaluation
# =============================================================================

class TestIsValid:
    """Tests for the OR-across-languages rule."""

    def test_concrete_scenario(self, scenario_validator):
        config = scenario_validator.configure([Language.EN, Language.PL])

        assert scenario_validator.is_valid("this is a BadWord example", config) is False
        assert scenario_validator.is_valid("to jest głupek", config) is False
        assert scenario_validator.is_valid("hello world", config) is True

    def test_word_of_unselected_language_is_allowed(self, scenario_validator):
        config = scenario_validator.configure([Language.EN])
        assert scenario_validator.is_valid("to jest głupek", config)

    def test_any_language_invalidates_mixed_text(self, scenario_validator):
        config = scenario_validator.configure([Language.EN, Language.PL])
        assert not scenario_validator.is_valid("hello głupek", config)

    def test_substring_of_longer_token(self, scenario_validator):
        config = scenario_validator.configure([Language.EN])
        assert not scenario_validator.is_valid("so many badwordsss here", config)

    def test_empty_text_always_valid(self, validator):
        for size in range(1, len(Language) + 1):
            for combo in itertools.combinations(Language, size):
                assert validator.is_valid("", validator.configure(combo))

    def test_none_is_valid(self, validator):
        assert validator.is_valid(None, validator.configure([Language.EN]))

    def test_clean_text_valid_for_all_languages(self, validator):
        config = validator.configure(list(Language))
        assert validator.is_valid("The vehicle was parked on the street.", config)

    def test_empty_selection_behaves_like_default(self, validator):
        empty = validator.configure([])
        default = validator.configure([DEFAULT_LANGUAGE])
        for text in SAMPLE_TEXTS:
            assert validator.is_valid(text, empty) == validator.is_valid(text, default)

    def test_order_independence(self, validator):
        results = set()
        for order in itertools.permutations(Language):
            config = validator.configure(order)
            results.add(tuple(validator.is_valid(text, config) for text in SAMPLE_TEXTS))
        assert len(results) == 1

    def test_default_catalog_used_when_none_given(self):
        assert ContentValidator().catalog is not None


class TestEvaluate:
    """Tests for the evaluation hook."""

    def test_valid_has_no_message(self, scenario_validator):
        result = scenario_validator.evaluate("hello world", scenario_validator.configure(["en"]))
        assert result == CheckResult(valid=True)
        assert bool(result) is True

    def test_invalid_carries_static_message(self, scenario_validator):
        config = scenario_validator.configure(["en"], message="No bad words, please")
        result = scenario_validator.evaluate("BADWORD", config)

        assert result.valid is False
        assert bool(result) is False
        assert result.message == "No bad words, please"
        assert "badword" not in result.message.lower()


class TestExplain:
    """Tests for listing hits."""

    def test_hits_ordered_by_language_code(self, scenario_validator):
        config = scenario_validator.configure(["pl", "en"])
        hits = scenario_validator.explain("badword i głupek", config)
        assert hits == [
            BadWordHit(language=Language.EN, word="badword"),
            BadWordHit(language=Language.PL, word="głupek"),
        ]

    def test_no_hits_for_clean_text(self, scenario_validator):
        assert scenario_validator.explain("hello world", scenario_validator.configure(["en", "pl"])) == []


class TestModuleFunctions:
    """Tests for the process-wide convenience functions."""

    def test_round_trip(self):
        config = not_bad_word.configure(["en"])
        assert isinstance(config, CheckConfiguration)
        assert not not_bad_word.is_valid("you idiot", config)
        assert not_bad_word.evaluate("hello", config).valid

    def test_shared_validator(self):
        assert not_bad_word.get_validator() is not_bad_word.get_validator()

    def test_concurrent_callers(self):
        config = not_bad_word.configure(list(Language))
        texts = SAMPLE_TEXTS * 50
        expected = [not_bad_word.is_valid(t, config) for t in texts]

        with ThreadPoolExecutor(max_workers=8) as pool:
            actual = list(pool.map(lambda t: not_bad_word.is_valid(t, config), texts))

        assert actual == expected
