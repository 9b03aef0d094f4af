from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from baubit_validation.core.results import ValidationResult

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class ValidatorProtocol(Protocol[T_contra]):
    """Protocol for validation rules.

    Any object with a ``name`` and a ``run`` method returning a
    ValidationResult satisfies it; subclassing BaseValidator is optional.
    Ordinary validation failure must be returned, not raised.
    """

    @property
    def name(self) -> str:
        """Name of this validator for error reporting."""
        ...

    def run(self, value: T_contra) -> ValidationResult:
        """Validate a value.

        Args:
            value: Value to validate.

        Returns:
            ValidationResult containing validation status and any errors.
        """
        ...
