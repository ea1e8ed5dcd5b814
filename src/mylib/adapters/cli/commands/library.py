"""CLI commands exposing the library functions.

Contents:
    * :func:`cli_greet` - Print a greeting.
    * :func:`cli_add` - Print the wrapped sum of two integers.
    * :func:`cli_factorial` - Print a factorial.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from mylib.adapters.config.settings import load_app_settings
from mylib.domain.behaviors import INT_MAX, INT_MIN, add, factorial, greet
from mylib.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS, NUMERIC_ARGS_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name", required=False, default=None)
@click.pass_context
def cli_greet(ctx: click.Context, name: str | None) -> None:
    """Print a greeting for NAME.

    Without NAME, the ``mylib.default_name`` setting is greeted.
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet"}):
        if name is None:
            try:
                name = load_app_settings(cli_ctx.config).default_name
            except ConfigurationError as exc:
                logger.error("Invalid application configuration", extra={"error": str(exc)})
                click.echo(f"\nError: {exc}", err=True)
                raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        logger.info("Executing greet command", extra={"name": name})
        click.echo(greet(name))


@click.command("add", context_settings=NUMERIC_ARGS_CONTEXT_SETTINGS)
@click.argument("a", type=click.IntRange(INT_MIN, INT_MAX))
@click.argument("b", type=click.IntRange(INT_MIN, INT_MAX))
def cli_add(a: int, b: int) -> None:
    """Print A + B, wrapped into the signed 32-bit range.

    Both operands must themselves fit in a signed 32-bit integer.
    """
    with lib_log_rich.runtime.bind(job_id="cli-add", extra={"command": "add"}):
        result = add(a, b)
        if result != a + b:
            logger.warning("Sum wrapped around", extra={"a": a, "b": b, "result": result})
        click.echo(result)


@click.command("factorial", context_settings=NUMERIC_ARGS_CONTEXT_SETTINGS)
@click.argument("n", type=int)
def cli_factorial(n: int) -> None:
    """Print N! modulo 2**64. Any N <= 1, negatives included, prints 1."""
    with lib_log_rich.runtime.bind(job_id="cli-factorial", extra={"command": "factorial"}):
        logger.info("Computing factorial", extra={"n": n})
        click.echo(factorial(n))


__all__ = ["cli_add", "cli_factorial", "cli_greet"]
