from __future__ import annotations

from typing import TYPE_CHECKING, Any

from baubit_validation.runner import ValidationRunner

if TYPE_CHECKING:
    import pandas as pd

    from baubit_validation.protocols import ValidatorProtocol

RESULT_COLUMNS = ("is_valid", "error_count", "errors")


def _row_to_record(row: Any) -> dict[str, Any]:
    return {
        "is_valid": row.is_valid,
        "error_count": len(row.result.errors),
        "errors": "; ".join(row.result.messages) or None,
    }


class ValidationAccessor:
    """Pandas accessor for running validators on a Series.

    Usage:
        >>> from baubit_validation.pandas_ext import register_accessor
        >>> register_accessor()
        >>> s = pd.Series(["abc", ""])
        >>> s.valid.run(NonEmptyStringValidator())
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj

    def run(self, validator: ValidatorProtocol[Any], *, errors: str = "coerce") -> pd.DataFrame:
        """Validate every value in the Series.

        Args:
            validator: Validator to apply.
            errors: How to handle validator exceptions ("raise", "coerce").

        Returns:
            DataFrame with is_valid, error_count and errors columns.
        """
        return validate_series(self._obj, validator, errors=errors)

    def mask(self, validator: ValidatorProtocol[Any]) -> pd.Series:
        """Boolean Series, True where the value passes the validator."""
        return self.run(validator)["is_valid"]


def register_accessor(name: str = "valid") -> None:
    """Register the validation accessor on pandas Series.

    After calling this, you can use:
        >>> series.valid.run(validator)

    Args:
        name: Name for the accessor (default: "valid").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(ValidationAccessor)


def validate_series(
    series: pd.Series,
    validator: ValidatorProtocol[Any],
    errors: str = "coerce",
) -> pd.DataFrame:
    """Validate a Series and return one result row per value.

    Missing values (NaN/NA) are passed to the validator as None.

    Args:
        series: Values to validate.
        validator: Validator to apply.
        errors: How to handle validator exceptions ("raise", "coerce").

    Returns:
        DataFrame indexed like ``series`` with is_valid, error_count and
        errors (messages joined with "; ") columns.
    """
    import pandas as pd

    runner: ValidationRunner[Any] = ValidationRunner(validator, errors=errors)
    values = [None if _is_missing(v) else v for v in series.tolist()]
    records = [_row_to_record(row) for row in runner.iter_results(values)]
    return pd.DataFrame(records, index=series.index, columns=list(RESULT_COLUMNS))


def validate_dataframe(
    df: pd.DataFrame,
    column: str,
    validator: ValidatorProtocol[Any],
    errors: str = "coerce",
    prefix: str = "",
    inplace: bool = False,
) -> pd.DataFrame:
    """Validate a DataFrame column and add result columns.

    Args:
        df: Input DataFrame.
        column: Name of the column to validate.
        validator: Validator to apply.
        errors: How to handle validator exceptions ("raise", "coerce").
        prefix: Prefix to add to the new column names.
        inplace: If True, modify DataFrame in place.

    Returns:
        DataFrame with is_valid, error_count and errors columns added.

    Raises:
        KeyError: If column is not in the DataFrame.
    """
    if column not in df.columns:
        raise KeyError(f"Column {column!r} not found in DataFrame")

    target = df if inplace else df.copy()
    results = validate_series(target[column], validator, errors=errors)
    for name in RESULT_COLUMNS:
        target[f"{prefix}{name}"] = results[name]
    return target


def _is_missing(value: Any) -> bool:
    import pandas as pd

    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        # list-like values make isna return an array
        return False
