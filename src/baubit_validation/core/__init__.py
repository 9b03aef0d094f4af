"""Domain-agnostic building blocks: results, errors and the plugin factory.

Usage:
    from baubit_validation.core import (
        ValidationError,
        ValidationResult,
        BaubitError,
        BaubitValidationError,
        PluginFactory,
    )
"""

from __future__ import annotations

from baubit_validation.core.errors import PACKAGE_NAME, BaubitError, BaubitValidationError
from baubit_validation.core.factory import PluginFactory
from baubit_validation.core.results import ValidationError, ValidationResult

__all__ = [
    # Errors
    "PACKAGE_NAME",
    "BaubitError",
    "BaubitValidationError",
    # Results
    "ValidationError",
    "ValidationResult",
    # Factory
    "PluginFactory",
]
