"""
Pydantic Constraints — Declare the bad word check on model fields.

Usage:

    class EmailMessage(BaseModel):
        sender: str
        body: Annotated[str, NotBadWord(Language.PL, Language.EN)]

Pydantic finds the marker, runs the field's own validation first and then
the bad word check. A failing value is reported as a ``not_bad_word``
error carrying the configured message.
"""

import types
from typing import Annotated, Any, Optional, Union, get_args, get_origin

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from wordguard.catalog.enums import Language
from wordguard.core.logging import LogChannel, get_logger
from wordguard.validate.models import DEFAULT_MESSAGE, CheckConfiguration
from wordguard.validate.not_bad_word import ContentValidator, get_validator

log = get_logger(LogChannel.INTEGRATION)

ERROR_TYPE = "not_bad_word"

_UNION_ORIGINS = (Union, getattr(types, "UnionType", Union))


def _is_text_type(source_type: Any) -> bool:
    """True for str (or a subclass), optionally wrapped in Optional or Annotated."""
    origin = get_origin(source_type)
    if origin is Annotated:
        return _is_text_type(get_args(source_type)[0])
    if origin in _UNION_ORIGINS:
        members = [arg for arg in get_args(source_type) if arg is not type(None)]
        return bool(members) and all(_is_text_type(arg) for arg in members)
    if origin is not None:
        return False
    return isinstance(source_type, type) and issubclass(source_type, str)


class NotBadWord:
    """
    Field marker binding a CheckConfiguration to a pydantic field.

    The configuration is built when the marker is created, so an unknown
    language tag fails at model definition time. So does placing the
    marker on a field that is not a (possibly optional) str.
    """

    __slots__ = ("config", "_validator")

    def __init__(
        self,
        *languages: Union[Language, str],
        message: str = DEFAULT_MESSAGE,
        validator: Optional[ContentValidator] = None,
    ) -> None:
        self._validator = validator or get_validator()
        self.config: CheckConfiguration = self._validator.configure(languages, message=message)

    def __repr__(self) -> str:
        langs = ", ".join(sorted(lang.value for lang in self.config.languages))
        return f"NotBadWord({langs}, message={self.config.message!r})"

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        if not _is_text_type(source_type):
            raise TypeError(f"NotBadWord only applies to str fields, not {source_type!r}")
        return core_schema.no_info_after_validator_function(self._check, handler(source_type))

    def _check(self, value: Any) -> Any:
        result = self._validator.evaluate(value, self.config)
        if not result.valid:
            log.debug("field_rejected", message=result.message)
            raise PydanticCustomError(ERROR_TYPE, result.message)
        return value
