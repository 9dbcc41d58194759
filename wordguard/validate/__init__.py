"""
Validate — Configure and evaluate the bad word check.
"""

from wordguard.validate.models import (
    DEFAULT_MESSAGE,
    BadWordHit,
    CheckConfiguration,
    CheckResult,
)
from wordguard.validate.not_bad_word import (
    ContentValidator,
    configure,
    evaluate,
    get_validator,
    is_valid,
)

__all__ = [
    "DEFAULT_MESSAGE",
    "BadWordHit",
    "CheckConfiguration",
    "CheckResult",
    "ContentValidator",
    "configure",
    "evaluate",
    "get_validator",
    "is_valid",
]
