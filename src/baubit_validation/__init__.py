"""baubit-validation: a small, composable validator contract.

A validator takes one value and returns a ValidationResult that is either
successful or carries one or more failure entries. Failures are returned,
never raised; exceptions are reserved for input a validator cannot process.

Quick Start:
    >>> from baubit_validation import NonEmptyStringValidator
    >>> validator = NonEmptyStringValidator()
    >>> validator.run("abc").is_valid
    True
    >>> validator.run("").messages
    ['value must not be empty']

    # Combine rules
    >>> from baubit_validation import LengthValidator, ValidatorPipelineBuilder
    >>> username = (
    ...     ValidatorPipelineBuilder("username")
    ...     .add(NonEmptyStringValidator())
    ...     .add(LengthValidator(max_length=16))
    ...     .build()
    ... )

    # Validate many values
    >>> from baubit_validation import ValidationRunner
    >>> runner = ValidationRunner(username)
    >>> rows = runner.run(["alice", "", None])
"""

from __future__ import annotations  # noqa: I001

from baubit_validation.core import (
    PACKAGE_NAME,
    BaubitError,
    BaubitValidationError,
    PluginFactory,
    ValidationError,
    ValidationResult,
)
from baubit_validation.protocols import ValidatorProtocol
from baubit_validation.validation import (
    BaseValidator,
    CompositeValidator,
    LengthValidator,
    NonEmptyStringValidator,
    NotNoneValidator,
    OneOfValidator,
    PredicateValidator,
    RangeValidator,
    RegexValidator,
    ValidatorFactory,
    ValidatorPipelineBuilder,
)
from baubit_validation.runner import RowResult, RunnerStats, ValidationRunner
from baubit_validation.pandas_ext import (
    register_accessor,
    validate_dataframe,
    validate_series,
)

__version__ = "1.0.0"
__package_name__ = "baubit-validation"

__all__ = [
    # Version
    "__version__",
    # Results
    "ValidationError",
    "ValidationResult",
    # Errors
    "PACKAGE_NAME",
    "BaubitError",
    "BaubitValidationError",
    # Contract
    "BaseValidator",
    "ValidatorProtocol",
    # Composition
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    # Built-in validators
    "NotNoneValidator",
    "NonEmptyStringValidator",
    "LengthValidator",
    "RegexValidator",
    "RangeValidator",
    "OneOfValidator",
    "PredicateValidator",
    # Registry
    "PluginFactory",
    "ValidatorFactory",
    # Batch running
    "ValidationRunner",
    "RowResult",
    "RunnerStats",
    # Pandas integration
    "validate_series",
    "validate_dataframe",
    "register_accessor",
    # Convenience
    "validate",
]


def validate(value: object, validator: str | None = None, **kwargs: object) -> ValidationResult:
    """Validate a value with a registered validator.

    Args:
        value: Value to validate.
        validator: Registered validator name (default: "non_empty").
        **kwargs: Arguments for the validator constructor.

    Returns:
        ValidationResult from the validator.
    """
    return ValidatorFactory.create(validator, **kwargs).run(value)
