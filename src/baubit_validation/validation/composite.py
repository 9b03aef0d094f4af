"""Composite validator for combining multiple validators.

Provides a generic composite validator that runs multiple validators
against one value and aggregates their results, plus a fluent builder
for assembling pipelines.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from baubit_validation.core.results import ValidationResult
from baubit_validation.validation.base import BaseValidator

T = TypeVar("T")

logger = logging.getLogger(__name__)


class CompositeValidator(BaseValidator[T], Generic[T]):
    """Validator that combines multiple validators.

    Runs validators in order and merges their results. The composite is
    valid only if every member is valid. With ``fail_fast`` it stops at the
    first failing member.
    """

    def __init__(
        self,
        validators: list[BaseValidator[T]] | None = None,
        name: str = "composite",
        fail_fast: bool = False,
    ) -> None:
        """Initialize composite validator.

        Args:
            validators: List of validators to run.
            name: Name reported for this composite.
            fail_fast: If True, stop after the first failing validator.
        """
        self._validators = list(validators or [])
        self._name = name
        self._fail_fast = fail_fast

    @property
    def name(self) -> str:
        """Name of this validator."""
        return self._name

    @property
    def fail_fast(self) -> bool:
        return self._fail_fast

    def run(self, value: T) -> ValidationResult:
        """Run all validators and combine results."""
        result = ValidationResult.ok()

        for validator in self._validators:
            validator_result = validator.run(value)
            result.merge(validator_result)
            if self._fail_fast and not validator_result.is_valid:
                logger.debug("%s: stopping after failure in %s", self._name, validator.name)
                break

        return result

    def add_validator(self, validator: BaseValidator[T]) -> None:
        """Add a validator to the composite."""
        self._validators.append(validator)

    def remove_validator(self, name: str) -> bool:
        """Remove a validator by name. Returns True if removed."""
        for i, v in enumerate(self._validators):
            if v.name == name:
                self._validators.pop(i)
                return True
        return False

    @property
    def validators(self) -> list[BaseValidator[T]]:
        """Get copy of validators list."""
        return self._validators.copy()


class ValidatorPipelineBuilder(Generic[T]):
    """Fluent builder for CompositeValidator pipelines.

    Example:
        >>> validator = (
        ...     ValidatorPipelineBuilder("username")
        ...     .add(NonEmptyStringValidator())
        ...     .add(LengthValidator(max_length=32))
        ...     .fail_fast()
        ...     .build()
        ... )
    """

    def __init__(self, name: str = "pipeline") -> None:
        self._name = name
        self._validators: list[BaseValidator[T]] = []
        self._fail_fast = False

    def add(self, validator: BaseValidator[T]) -> ValidatorPipelineBuilder[T]:
        """Append a validator to the pipeline."""
        self._validators.append(validator)
        return self

    def add_if(self, condition: bool, validator: BaseValidator[T]) -> ValidatorPipelineBuilder[T]:
        """Append a validator only when condition is true."""
        if condition:
            self._validators.append(validator)
        return self

    def fail_fast(self, enabled: bool = True) -> ValidatorPipelineBuilder[T]:
        """Stop the built pipeline at the first failing validator."""
        self._fail_fast = enabled
        return self

    def build(self) -> CompositeValidator[T]:
        """Build the CompositeValidator."""
        return CompositeValidator(
            list(self._validators),
            name=self._name,
            fail_fast=self._fail_fast,
        )
