"""Abstract base validator class.

Provides a generic base class for creating validators for any value type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from baubit_validation.core.errors import BaubitError
from baubit_validation.core.results import ValidationResult

T = TypeVar("T")


class BaseValidator(ABC, Generic[T]):
    """Abstract base class for validators.

    Generic over T, the type of value being validated. Subclass this to
    create validators for specific value types.

    Example:
        class PositiveValidator(BaseValidator[int]):
            @property
            def name(self) -> str:
                return "positive"

            def run(self, value: int) -> ValidationResult:
                if value <= 0:
                    return self.failure("must be positive", value)
                return ValidationResult.ok()
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...

    @abstractmethod
    def run(self, value: T) -> ValidationResult:
        """Validate a value.

        Ordinary validation failure is reported in the returned result.
        Implementations raise only for input they cannot process at all.

        Args:
            value: Value to validate.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        ...

    def is_valid(self, value: T) -> bool:
        """Shortcut for ``run(value).is_valid``."""
        return self.run(value).is_valid

    def failure(
        self,
        message: str,
        value: Any = None,
        code: str = "invalid",
        field: str = "value",
    ) -> ValidationResult:
        """Build a failed result attributed to this validator."""
        return ValidationResult.fail(
            message,
            field=field,
            value=value,
            code=code,
            validator=self.name,
        )

    def missing(self, field: str = "value") -> ValidationResult:
        """Build the failed result for a missing (None) value."""
        return self.failure(f"{field} is required", None, code="required", field=field)

    def _require_type(self, value: Any, expected: type | tuple[type, ...], label: str) -> None:
        """Raise BaubitError if value is not an instance of expected."""
        if not isinstance(value, expected):
            raise BaubitError.invalid_type(self.name, label, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
