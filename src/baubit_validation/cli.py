from __future__ import annotations

import json
import logging
import os
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Optional

import typer

from baubit_validation.core.errors import BaubitError
from baubit_validation.runner import ValidationRunner
from baubit_validation.validation.factory import ValidatorFactory

logger = logging.getLogger(__name__)

_VALIDATOR_ENV = "BAUBIT_VALIDATION_VALIDATOR"
_LOG_LEVEL_ENV = "BAUBIT_VALIDATION_LOG_LEVEL"

app = typer.Typer(help="Run validators against values from the command line.")


def _default_validator() -> str:
    return os.getenv(_VALIDATOR_ENV, "non_empty")


# Constructor arguments that are always text, even when they look like JSON.
_STRING_OPTIONS = frozenset({"pattern", "message", "field"})


def decode_value(raw: str) -> Any:
    """Decode a command-line string as JSON, keeping it as text if that fails."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _split_option(option: str, param_hint: str) -> tuple[str, str]:
    key, sep, raw = option.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"expected KEY=VALUE, got {option!r}", param_hint=param_hint)
    return key, raw


def parse_options(
    options: list[str], raw_options: Optional[list[str]] = None
) -> dict[str, Any]:
    """Turn KEY=VALUE pairs into constructor keyword arguments.

    Values are decoded as JSON when possible (so ``max_length=5`` gives an
    int and ``choices=["a","b"]`` a list), otherwise kept as strings.
    ``pattern``, ``message`` and ``field`` are never decoded, and neither is
    anything passed through ``raw_options``.

    Raises:
        typer.BadParameter: If an option has no ``=``.
    """
    kwargs: dict[str, Any] = {}
    for option in options:
        key, raw = _split_option(option, "--option")
        kwargs[key] = raw if key in _STRING_OPTIONS else decode_value(raw)
    for option in raw_options or []:
        key, raw = _split_option(option, "--raw-option")
        kwargs[key] = raw
    return kwargs


def _read_values(values: Optional[list[str]], file: Optional[Path]) -> Iterator[str]:
    if values:
        yield from values
    elif file is not None:
        with file.open(encoding="utf-8") as handle:
            for line in handle:
                yield line.rstrip("\r\n")
    else:
        for line in sys.stdin:
            yield line.rstrip("\r\n")



@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--log-level",
        help=f"Logging level (default: ${_LOG_LEVEL_ENV}; unset leaves logging unconfigured).",
    ),
) -> None:
    """Configure logging for all commands."""
    level_name = log_level or os.getenv(_LOG_LEVEL_ENV)
    if not level_name:
        return
    level_name = level_name.upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("check")
def check(
    values: Optional[list[str]] = typer.Argument(  # noqa: B008
        None,
        help="Values to validate. Falls back to --file, then stdin (one per line).",
    ),
    validator: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--validator",
        "-v",
        help=f"Registered validator name (default: ${_VALIDATOR_ENV} or non_empty).",
    ),
    option: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--option",
        "-o",
        help="Validator argument as KEY=VALUE, VALUE decoded as JSON when possible; repeatable.",
    ),
    raw_option: Optional[list[str]] = typer.Option(  # noqa: B008
        None,
        "--raw-option",
        "-r",
        help="Validator argument as KEY=VALUE, VALUE always kept as text; repeatable.",
    ),
    file: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        help="Read values from this file, one per line.",
    ),
    parse_values: bool = typer.Option(  # noqa: B008
        False,
        "--parse-values",
        help="Decode each value as JSON (numbers, lists, null) before validating.",
    ),
    fail_fast: bool = typer.Option(  # noqa: B008
        False,
        "--fail-fast",
        help="Stop at the first failing value.",
    ),
    as_json: bool = typer.Option(  # noqa: B008
        False,
        "--json",
        help="Print results as a JSON array.",
    ),
) -> None:
    """Validate values and exit 1 if any of them fails."""
    validator_name = validator or _default_validator()
    kwargs = parse_options(option or [], raw_option)

    try:
        rule = ValidatorFactory.create(validator_name, **kwargs)
    except (ValueError, TypeError) as e:
        typer.echo(f"Cannot create validator {validator_name!r}: {e}", err=True)
        raise typer.Exit(code=2) from e

    runner: ValidationRunner[Any] = ValidationRunner(rule, errors="raise", keep_failures=False)
    source: Iterator[Any] = _read_values(values, file)
    if parse_values:
        source = (decode_value(raw) for raw in source)

    records: list[dict[str, Any]] = []
    try:
        for row in runner.iter_results(source):
            if as_json:
                records.append({"value": row.value, **row.result.to_dict()})
            elif row.is_valid:
                typer.echo(f"OK\t{row.value}")
            else:
                typer.echo(f"FAIL\t{row.value}\t{'; '.join(row.result.messages)}")
            if fail_fast and not row.is_valid:
                break
    except BaubitError as e:
        typer.echo(f"Validator {rule.name!r} cannot process input: {e}", err=True)
        raise typer.Exit(code=2) from e

    if as_json:
        typer.echo(json.dumps(records, indent=2, default=str))

    stats = runner.stats
    logger.info("Checked %d values: %d passed, %d failed", stats.total, stats.passed, stats.failed)
    raise typer.Exit(code=1 if stats.failed else 0)


@app.command("list")
def list_validators() -> None:
    """List registered validator names."""
    for name in ValidatorFactory.available_types():
        typer.echo(name)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
