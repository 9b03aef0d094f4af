"""Class-level registry of named implementation types.

A subclass names the attributes every registered type must expose and the
built-in types it ships with. Built-ins are loaded once, on first access,
and never overwrite a type the caller registered under the same name.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

T = TypeVar("T")


class PluginFactory(Generic[T]):
    """Generic factory for creating instances from a registry of types.

    Subclasses define:
        - _registry: Class-level dict mapping names to implementation classes
        - _default_type: Name used when create() gets no name
        - _entity_name: Human-readable name for error messages
        - _required_attributes: Attributes a class needs to be registered
        - _default_registrations(): Built-in name -> class mapping

    Example subclass:
        class ValidatorFactory(PluginFactory[ValidatorProtocol]):
            _registry: ClassVar[dict[str, type[ValidatorProtocol]]] = {}
            _default_type: ClassVar[str] = "non_empty"
            _entity_name: ClassVar[str] = "validator"
            _required_attributes: ClassVar[tuple[str, ...]] = ("name", "run")

            @classmethod
            def _default_registrations(cls) -> dict[str, type[ValidatorProtocol]]:
                return {"non_empty": NonEmptyStringValidator}
    """

    _registry: ClassVar[dict[str, type[Any]]]
    _default_type: ClassVar[str]
    _entity_name: ClassVar[str]
    _required_attributes: ClassVar[tuple[str, ...]] = ()
    _defaults_loaded: ClassVar[bool] = False

    @classmethod
    def _default_registrations(cls) -> dict[str, type[Any]]:
        return {}

    @classmethod
    def _ensure_defaults_registered(cls) -> None:
        if cls._defaults_loaded:
            return
        for name, impl_class in cls._default_registrations().items():
            cls._registry.setdefault(name, impl_class)
        cls._defaults_loaded = True

    @classmethod
    def register(cls, name: str, impl_class: type[T]) -> None:
        """Register an implementation type under a name.

        Registering an existing name replaces it, including built-ins.

        Raises:
            TypeError: If impl_class is not a class or lacks a required attribute.
        """
        cls._ensure_defaults_registered()
        if not isinstance(impl_class, type):
            raise TypeError(f"{cls._entity_name} {name!r} must be a class, got {impl_class!r}")
        missing = [attr for attr in cls._required_attributes if not hasattr(impl_class, attr)]
        if missing:
            raise TypeError(
                f"{impl_class.__name__} cannot be registered as a {cls._entity_name}: "
                f"missing {', '.join(missing)}"
            )
        cls._registry[name] = impl_class

    @classmethod
    def unregister(cls, name: str) -> None:
        """Unregister an implementation type. Unknown names are ignored."""
        cls._ensure_defaults_registered()
        cls._registry.pop(name, None)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        cls._ensure_defaults_registered()
        return name in cls._registry

    @classmethod
    def create(cls, name: str | None = None, **kwargs: Any) -> T:
        """Create an instance of the specified type.

        Args:
            name: Type name to create. If None, uses the default type.
            **kwargs: Arguments to pass to the constructor.

        Returns:
            Instance of the requested type.

        Raises:
            ValueError: If the type name is not registered.
        """
        type_name = name if name is not None else cls._default_type
        if not cls.is_registered(type_name):
            available = ", ".join(cls.available_types())
            raise ValueError(
                f"Unknown {cls._entity_name} type: {type_name}. Available types: {available}"
            )
        return cls._registry[type_name](**kwargs)  # type: ignore[no-any-return]

    @classmethod
    def available_types(cls) -> list[str]:
        """Get sorted list of registered type names."""
        cls._ensure_defaults_registered()
        return sorted(cls._registry)

    @classmethod
    def clear_registry(cls) -> None:
        """Remove every registration; built-ins come back on next access."""
        cls._registry.clear()
        cls._defaults_loaded = False
