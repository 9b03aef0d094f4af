"""Result models returned by validators.

A ValidationResult is either successful (no errors) or failed (one or more
ValidationError entries). The two states are kept consistent by model
validation, so a failed result always explains itself.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ValidationError(BaseModel):
    """A single failure reason produced by a validator."""

    field: str
    message: str
    value: Any = None
    code: str = "invalid"
    validator: str | None = None

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationResult(BaseModel):
    """Outcome of running a validator against a value.

    Example:
        >>> result = ValidationResult(is_valid=True)
        >>> result.add_error("name", "must not be empty", "")
        >>> result.is_valid
        False
        >>> result.messages
        ['must not be empty']
    """

    is_valid: bool = True
    errors: list[ValidationError] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_consistency(self) -> ValidationResult:
        if self.is_valid and self.errors:
            raise ValueError("a valid result cannot carry errors")
        if not self.is_valid and not self.errors:
            raise ValueError("a failed result must carry at least one error")
        return self

    @classmethod
    def ok(cls) -> ValidationResult:
        """Create a successful result."""
        return cls(is_valid=True)

    @classmethod
    def fail(
        cls,
        message: str,
        field: str = "value",
        value: Any = None,
        code: str = "invalid",
        validator: str | None = None,
    ) -> ValidationResult:
        """Create a failed result with a single error."""
        result = cls(is_valid=True)
        result.add_error(field, message, value, code=code, validator=validator)
        return result

    def add_error(
        self,
        field: str,
        message: str,
        value: Any = None,
        code: str = "invalid",
        validator: str | None = None,
    ) -> None:
        """Record a failure and mark the result as failed.

        Args:
            field: Name of the field (or "value") the failure refers to.
            message: Human-readable failure reason.
            value: The offending value (optional).
            code: Machine-readable failure category.
            validator: Name of the validator reporting the failure.
        """
        self.errors.append(
            ValidationError(
                field=field,
                message=message,
                value=value,
                code=code,
                validator=validator,
            )
        )
        self.is_valid = False

    def merge(self, other: ValidationResult) -> None:
        """Append another result's errors to this one."""
        if other.errors:
            self.errors.extend(other.errors)
            self.is_valid = False

    @property
    def messages(self) -> list[str]:
        """Failure messages in the order they were recorded."""
        return [error.message for error in self.errors]

    @property
    def codes(self) -> list[str]:
        """Failure codes in the order they were recorded."""
        return [error.code for error in self.errors]

    def raise_for_errors(self) -> ValidationResult:
        """Raise BaubitValidationError if this result failed.

        Returns:
            This result, unchanged, when it is valid.

        Raises:
            BaubitValidationError: If the result carries errors.
        """
        if not self.is_valid:
            from baubit_validation.core.errors import BaubitValidationError

            raise BaubitValidationError(self)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view, suitable for JSON output."""
        return {
            "is_valid": self.is_valid,
            "errors": [
                {
                    "field": e.field,
                    "message": e.message,
                    "code": e.code,
                    "validator": e.validator,
                }
                for e in self.errors
            ],
        }

    def __bool__(self) -> bool:
        return self.is_valid
