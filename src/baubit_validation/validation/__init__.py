"""Validator contract, composition and built-in rules."""

from baubit_validation.validation.base import BaseValidator
from baubit_validation.validation.composite import CompositeValidator, ValidatorPipelineBuilder
from baubit_validation.validation.factory import ValidatorFactory
from baubit_validation.validation.validators import (
    LengthValidator,
    NonEmptyStringValidator,
    NotNoneValidator,
    OneOfValidator,
    PredicateValidator,
    RangeValidator,
    RegexValidator,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ValidatorPipelineBuilder",
    "ValidatorFactory",
    "NotNoneValidator",
    "NonEmptyStringValidator",
    "LengthValidator",
    "RegexValidator",
    "RangeValidator",
    "OneOfValidator",
    "PredicateValidator",
]
