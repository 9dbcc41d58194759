"""
Check Report — Structured output for a single checked text.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from wordguard.validate.models import CheckConfiguration, CheckResult
from wordguard.validate.not_bad_word import ContentValidator


class HitReport(BaseModel):
    """A banned word found in the checked text."""

    language: str = Field(..., description="Language code whose list matched")
    word: str = Field(..., description="Banned word as stored in the catalog")


class CheckReport(BaseModel):
    """Result of checking one text against one configuration."""

    text: str = Field(..., description="Text that was checked")
    valid: bool = Field(..., description="True if no banned word was found")
    message: Optional[str] = Field(None, description="Failure message (invalid only)")
    languages: list[str] = Field(default_factory=list, description="Language codes checked")
    hits: list[HitReport] = Field(default_factory=list, description="Matched words (explain only)")


def build_report(
    text: str,
    config: CheckConfiguration,
    result: CheckResult,
    validator: Optional[ContentValidator] = None,
) -> CheckReport:
    """
    Build a report from an evaluated check.

    Hits are filled in only when a validator is given.
    """
    hits = []
    if validator is not None:
        hits = [
            HitReport(language=hit.language.value, word=hit.word)
            for hit in validator.explain(text, config)
        ]

    return CheckReport(
        text=text,
        valid=result.valid,
        message=result.message,
        languages=sorted(lang.value for lang in config.languages),
        hits=hits,
    )
