"""Built-in validator implementations.

Every built-in except PredicateValidator treats ``None`` as a validation
failure with code ``required``, unless OneOfValidator lists ``None`` among
its choices. A value of a type the rule cannot inspect raises
BaubitError(``invalid_type``); inconsistent constructor arguments raise
BaubitError(``invalid_config``).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sized
from typing import Any

from baubit_validation.core.errors import BaubitError
from baubit_validation.core.results import ValidationResult
from baubit_validation.validation.base import BaseValidator


class NotNoneValidator(BaseValidator[Any]):
    """Fails when the value is ``None``."""

    def __init__(self, field: str = "value") -> None:
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "not_none"

    def run(self, value: Any) -> ValidationResult:
        if value is None:
            return self.missing(self._field)
        return ValidationResult.ok()


class NonEmptyStringValidator(BaseValidator[str | None]):
    """Validates that a string is present and not empty.

    ``"abc"`` passes, ``""`` fails with code ``empty`` and ``None`` fails with
    code ``required``. Whitespace-only strings pass unless ``strip`` is set.
    """

    def __init__(self, strip: bool = False, field: str = "value") -> None:
        """Initialize the validator.

        Args:
            strip: If True, strip surrounding whitespace before checking.
            field: Field name used in error entries.
        """
        self._strip = strip
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "non_empty"

    def run(self, value: str | None) -> ValidationResult:
        """Validate that value is a non-empty string.

        Args:
            value: String to validate.

        Returns:
            ValidationResult with a ``required`` or ``empty`` error on failure.

        Raises:
            BaubitError: If value is neither a string nor None.
        """
        if value is None:
            return self.missing(self._field)
        self._require_type(value, str, "str")

        checked = value.strip() if self._strip else value
        if not checked:
            return self.failure(
                f"{self._field} must not be empty", value, code="empty", field=self._field
            )
        return ValidationResult.ok()


class LengthValidator(BaseValidator[Any]):
    """Validates ``len(value)`` against inclusive bounds."""

    def __init__(
        self,
        min_length: int = 0,
        max_length: int | None = None,
        field: str = "value",
    ) -> None:
        """Initialize the validator.

        Args:
            min_length: Smallest accepted length.
            max_length: Largest accepted length, or None for no upper bound.
            field: Field name used in error entries.

        Raises:
            BaubitError: If the bounds are negative or inverted.
        """
        if min_length < 0:
            raise BaubitError.invalid_config(self.name, "min_length must not be negative")
        if max_length is not None and max_length < min_length:
            raise BaubitError.invalid_config(self.name, "max_length is smaller than min_length")
        self._min_length = min_length
        self._max_length = max_length
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "length"

    def run(self, value: Any) -> ValidationResult:
        if value is None:
            return self.missing(self._field)
        self._require_type(value, Sized, "a sized value")

        length = len(value)
        if length < self._min_length:
            return self.failure(
                f"{self._field} must have length of at least {self._min_length}",
                value,
                code="too_short",
                field=self._field,
            )
        if self._max_length is not None and length > self._max_length:
            return self.failure(
                f"{self._field} must have length of at most {self._max_length}",
                value,
                code="too_long",
                field=self._field,
            )
        return ValidationResult.ok()


class RegexValidator(BaseValidator[str | None]):
    """Validates that a whole string matches a regular expression."""

    def __init__(
        self,
        pattern: str,
        message: str | None = None,
        flags: int = 0,
        field: str = "value",
    ) -> None:
        """Initialize the validator.

        Args:
            pattern: Regular expression the entire value must match.
            message: Custom failure message.
            flags: ``re`` flags used to compile the pattern.
            field: Field name used in error entries.

        Raises:
            BaubitError: If the pattern does not compile.
        """
        try:
            self._regex = re.compile(pattern, flags)
        except re.error as e:
            raise BaubitError.invalid_config(self.name, f"bad pattern ({e})") from e
        self._message = message or f"{field} does not match pattern {pattern!r}"
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "regex"

    @property
    def pattern(self) -> str:
        return self._regex.pattern

    def run(self, value: str | None) -> ValidationResult:
        if value is None:
            return self.missing(self._field)
        self._require_type(value, str, "str")

        if self._regex.fullmatch(value) is None:
            return self.failure(self._message, value, code="pattern_mismatch", field=self._field)
        return ValidationResult.ok()


class RangeValidator(BaseValidator[Any]):
    """Validates that a comparable value lies within inclusive bounds."""

    def __init__(
        self,
        minimum: Any = None,
        maximum: Any = None,
        field: str = "value",
    ) -> None:
        if minimum is None and maximum is None:
            raise BaubitError.invalid_config(self.name, "at least one bound is required")
        if minimum is not None and maximum is not None and maximum < minimum:
            raise BaubitError.invalid_config(self.name, "maximum is smaller than minimum")
        self._minimum = minimum
        self._maximum = maximum
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "range"

    def run(self, value: Any) -> ValidationResult:
        if value is None:
            return self.missing(self._field)

        try:
            if self._minimum is not None and value < self._minimum:
                return self.failure(
                    f"{self._field} must be greater than or equal to {self._minimum}",
                    value,
                    code="below_minimum",
                    field=self._field,
                )
            if self._maximum is not None and value > self._maximum:
                return self.failure(
                    f"{self._field} must be less than or equal to {self._maximum}",
                    value,
                    code="above_maximum",
                    field=self._field,
                )
        except TypeError as e:
            raise BaubitError.invalid_type(self.name, "a comparable value", value) from e
        return ValidationResult.ok()


class OneOfValidator(BaseValidator[Any]):
    """Validates membership in a fixed collection of allowed values."""

    def __init__(self, choices: Iterable[Any], field: str = "value") -> None:
        self._choices = tuple(choices)
        if not self._choices:
            raise BaubitError.invalid_config(self.name, "choices must not be empty")
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "one_of"

    @property
    def choices(self) -> tuple[Any, ...]:
        return self._choices

    def run(self, value: Any) -> ValidationResult:
        if value in self._choices:
            return ValidationResult.ok()
        if value is None:
            return self.missing(self._field)
        allowed = ", ".join(repr(c) for c in self._choices)
        return self.failure(
            f"{self._field} must be one of: {allowed}",
            value,
            code="not_allowed",
            field=self._field,
        )


class PredicateValidator(BaseValidator[Any]):
    """Wraps a callable returning a truthy value for valid input.

    The predicate receives the value unchanged, ``None`` included. It should
    be free of side effects so the validator can be reused.

    Example:
        >>> even = PredicateValidator(lambda n: n % 2 == 0, "must be even", name="even")
        >>> even.run(3).messages
        ['must be even']
    """

    def __init__(
        self,
        predicate: Callable[[Any], Any],
        message: str = "value is invalid",
        name: str = "predicate",
        code: str = "invalid",
        field: str = "value",
    ) -> None:
        self._predicate = predicate
        self._message = message
        self._name = name
        self._code = code
        self._field = field

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    def run(self, value: Any) -> ValidationResult:
        if self._predicate(value):
            return ValidationResult.ok()
        return self.failure(self._message, value, code=self._code, field=self._field)
