from __future__ import annotations

from typing import Any, ClassVar

from baubit_validation.core.factory import PluginFactory
from baubit_validation.protocols import ValidatorProtocol


class ValidatorFactory(PluginFactory[ValidatorProtocol]):
    """Factory for creating validator instances by name.

    Supports registration of custom validator types and creation
    of validators by type name.

    Example:
        >>> validator = ValidatorFactory.create("length", max_length=10)

        # Register custom validator
        >>> ValidatorFactory.register("email", EmailValidator)
        >>> validator = ValidatorFactory.create("email")
    """

    _registry: ClassVar[dict[str, type[ValidatorProtocol]]] = {}
    _default_type: ClassVar[str] = "non_empty"
    _entity_name: ClassVar[str] = "validator"
    _required_attributes: ClassVar[tuple[str, ...]] = ("name", "run")

    @classmethod
    def _default_registrations(cls) -> dict[str, type[ValidatorProtocol]]:
        """Built-in validators, registered on first registry access."""
        from baubit_validation.validation.validators import (
            LengthValidator,
            NonEmptyStringValidator,
            NotNoneValidator,
            OneOfValidator,
            RangeValidator,
            RegexValidator,
        )

        return {
            "not_none": NotNoneValidator,
            "non_empty": NonEmptyStringValidator,
            "length": LengthValidator,
            "regex": RegexValidator,
            "range": RangeValidator,
            "one_of": OneOfValidator,
        }

    @classmethod
    def create(  # type: ignore[override]
        cls,
        validator_type: str | None = None,
        **kwargs: Any,
    ) -> ValidatorProtocol:
        """Create a validator instance.

        Args:
            validator_type: Registered validator name. Defaults to "non_empty".
            **kwargs: Arguments to pass to the validator constructor.

        Returns:
            Validator instance.

        Raises:
            ValueError: If the validator type is not registered.
            BaubitError: If the constructor rejects the arguments.
        """
        return super().create(validator_type, **kwargs)
