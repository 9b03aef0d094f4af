from __future__ import annotations

import logging
import os
from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from baubit_validation.core.results import ValidationResult
from baubit_validation.protocols import ValidatorProtocol

logger = logging.getLogger(__name__)

T = TypeVar("T")

_ERRORS_ENV = "BAUBIT_VALIDATION_ERRORS"
_ERROR_MODES = ("raise", "coerce")


def _env_error_mode() -> str:
    mode = os.getenv(_ERRORS_ENV, "raise").lower()
    return mode if mode in _ERROR_MODES else "raise"


@dataclass
class RowResult(Generic[T]):
    """Outcome of validating one value in a batch."""

    index: int
    value: T
    result: ValidationResult
    exception: Exception | None = None

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid


@dataclass
class RunnerStats:
    """Counters accumulated by a ValidationRunner."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    exceptions: int = 0
    error_counts: Counter[str] = field(default_factory=Counter)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "exceptions": self.exceptions,
            "error_counts": dict(self.error_counts),
        }


class ValidationRunner(Generic[T]):
    """Applies one validator to a sequence of values.

    Validation failures are collected, never raised. Exceptions raised by
    the validator itself (contract misuse) are handled according to
    ``errors``:

    - "raise": propagate the exception (default).
    - "coerce": record the row as failed with code ``exception``.

    The default can be set with the BAUBIT_VALIDATION_ERRORS environment
    variable. Only rows that produce a result are counted in ``total``, so
    ``passed + failed == total`` holds even after a propagated exception.

    Example:
        >>> runner = ValidationRunner(NonEmptyStringValidator())
        >>> rows = runner.run(["a", "", None])
        >>> [row.is_valid for row in rows]
        [True, False, False]
        >>> runner.stats.failed
        2
    """

    def __init__(
        self,
        validator: ValidatorProtocol[T],
        errors: str | None = None,
        keep_failures: bool = True,
    ) -> None:
        """Initialize the runner.

        Args:
            validator: Validator applied to every value.
            errors: "raise" or "coerce"; defaults to BAUBIT_VALIDATION_ERRORS.
            keep_failures: Retain failed rows for audit_log(). Disable for
                long streams where only the counters are needed.

        Raises:
            ValueError: If errors is not a known mode.
        """
        mode = errors if errors is not None else _env_error_mode()
        if mode not in _ERROR_MODES:
            raise ValueError(f"errors must be one of {_ERROR_MODES}, got {mode!r}")
        self._validator = validator
        self._errors = mode
        self._keep_failures = keep_failures
        self._stats = RunnerStats()
        self._failures: list[RowResult[T]] = []

    @property
    def validator(self) -> ValidatorProtocol[T]:
        return self._validator

    @property
    def errors(self) -> str:
        return self._errors

    def validate_one(self, value: T, index: int = 0) -> RowResult[T]:
        """Validate a single value and update statistics."""
        try:
            result = self._validator.run(value)
        except Exception as e:
            self._stats.exceptions += 1
            if self._errors == "raise":
                raise
            logger.warning(
                "Validator %s raised on row %d: %s",
                self._validator.name,
                index,
                str(e),
            )
            result = ValidationResult.fail(
                str(e),
                value=value,
                code="exception",
                validator=self._validator.name,
            )
            row = RowResult(index=index, value=value, result=result, exception=e)
        else:
            row = RowResult(index=index, value=value, result=result)

        self._stats.total += 1
        if row.is_valid:
            self._stats.passed += 1
            logger.debug("Row %d passed %s", index, self._validator.name)
        else:
            self._stats.failed += 1
            self._stats.error_counts.update(row.result.codes)
            if self._keep_failures:
                self._failures.append(row)
            logger.debug("Row %d failed %s: %s", index, self._validator.name, row.result.messages)
        return row

    def iter_results(self, values: Iterable[T]) -> Iterator[RowResult[T]]:
        """Lazily validate values, yielding one RowResult per value."""
        for index, value in enumerate(values):
            yield self.validate_one(value, index)

    def run(self, values: Iterable[T]) -> list[RowResult[T]]:
        """Validate all values and return their RowResults in order."""
        return list(self.iter_results(values))

    @property
    def stats(self) -> RunnerStats:
        """Statistics accumulated since creation or the last reset."""
        return self._stats

    def reset_stats(self) -> None:
        """Reset statistics and the recorded failures."""
        self._stats = RunnerStats()
        self._failures = []

    def audit_log(self) -> list[dict[str, Any]]:
        """Export one dict per failure entry, suitable for pd.DataFrame()."""
        entries: list[dict[str, Any]] = []
        for row in self._failures:
            for error in row.result.errors:
                entries.append(
                    {
                        "index": row.index,
                        "value": row.value,
                        "field": error.field,
                        "message": error.message,
                        "code": error.code,
                        "validator": error.validator,
                    }
                )
        return entries
