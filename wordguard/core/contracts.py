"""
Contracts — Interfaces a constraint exposes to its host framework.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

ConfigT = TypeVar("ConfigT")


class ConstraintValidator(ABC, Generic[ConfigT]):
    """
    Abstract base for constraint validators.

    A host framework calls ``configure`` once per declared check site and
    ``is_valid`` once per value checked against that site.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Constraint name for diagnostics."""
        ...

    @abstractmethod
    def configure(self, *args: Any, **kwargs: Any) -> ConfigT:
        """Build the immutable configuration for one check site."""
        ...

    @abstractmethod
    def is_valid(self, value: Optional[str], config: ConfigT) -> bool:
        """
        Validate a single value.

        Returns:
            True if the value satisfies the constraint
        """
        ...
