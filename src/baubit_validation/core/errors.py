"""Error classes with package identification.

Ordinary validation failures are returned as ValidationResult objects and
never raised. The classes here cover the two exceptional paths:

- BaubitError: a validator was handed input it cannot process at all,
  or was constructed with inconsistent arguments.
- BaubitValidationError: a caller explicitly asked to turn a failed
  result into an exception (ValidationResult.raise_for_errors()).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic_core import PydanticCustomError

if TYPE_CHECKING:
    from baubit_validation.core.results import ValidationResult

# Package identifier for error context
PACKAGE_NAME = "baubit_validation"


class BaubitError(PydanticCustomError):
    """Pydantic custom error raised on validator contract misuse.

    Inherits from PydanticCustomError (and therefore ValueError), so it can
    be raised from inside pydantic validators as well as plain code.

    Known error types:
        invalid_type: The value has a type the validator cannot inspect.
        invalid_config: The validator was constructed with bad arguments.
    """

    @classmethod
    def create(
        cls,
        error_type: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> BaubitError:
        """Create an error tagged with the package name.

        Args:
            error_type: Type/category of the error.
            message: Error message (can include {placeholders} from context).
            context: Additional context dict merged into error context.

        Returns:
            BaubitError instance.
        """
        return cls(error_type, message, {"package": PACKAGE_NAME, **(context or {})})

    @classmethod
    def invalid_type(cls, validator: str, expected: str, value: Any) -> BaubitError:
        """Build the error raised when a validator receives an unsupported type."""
        return cls.create(
            "invalid_type",
            "{validator} expects {expected}, got {actual}",
            {"validator": validator, "expected": expected, "actual": type(value).__name__},
        )

    @classmethod
    def invalid_config(cls, validator: str, message: str) -> BaubitError:
        """Build the error raised for inconsistent validator arguments."""
        return cls.create(
            "invalid_config",
            "{validator}: " + message,
            {"validator": validator},
        )

    @classmethod
    def from_pydantic_error(cls, error: PydanticCustomError) -> BaubitError:
        """Wrap a PydanticCustomError as BaubitError."""
        return cls.create(error.type, error.message_template, error.context)


class BaubitValidationError(Exception):
    """Exception carrying validation failures with package identification.

    Wraps either a failed ValidationResult or a pydantic.ValidationError,
    keeping access to the original object.
    """

    def __init__(
        self,
        source: ValidationResult | Exception,
        context: dict | None = None,
    ):
        """Initialize BaubitValidationError.

        Args:
            source: Failed ValidationResult, or pydantic.ValidationError to wrap.
            context: Optional additional context to include.
        """
        from pydantic import ValidationError as PydanticValidationError

        from baubit_validation.core.results import ValidationResult

        self.context = {"package": PACKAGE_NAME, **(context or {})}
        self.result: ValidationResult | None = None
        self.original_error: Exception | None = None

        if isinstance(source, ValidationResult):
            self.result = source
            self.errors_list = [error.model_dump() for error in source.errors]
            error_messages = "; ".join(source.messages)
        elif isinstance(source, PydanticValidationError):
            self.original_error = source
            self.errors_list = source.errors()
            error_messages = "; ".join(e.get("msg", str(e)) for e in self.errors_list)
        else:
            self.original_error = source
            self.errors_list = []
            error_messages = str(source)

        super().__init__(error_messages)

    @classmethod
    def from_validation_error(
        cls, error: Exception, context: dict | None = None
    ) -> BaubitValidationError:
        """Wrap a pydantic.ValidationError with package context."""
        return cls(error, context)

    def errors(self) -> list:
        """Get the list of validation errors as dicts."""
        return self.errors_list

    def __repr__(self) -> str:
        source = self.result if self.result is not None else self.original_error
        return f"BaubitValidationError({source!r}, context={self.context})"
