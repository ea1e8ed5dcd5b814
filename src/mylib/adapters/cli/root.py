"""The ``mylib`` command group."""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from mylib import __init__conf__
from mylib.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext, apply_traceback_preferences

if TYPE_CHECKING:
    from mylib.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    try:
        return apply_overrides(services.get_config(profile=profile), set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Show full Python traceback on errors")
@click.option("--profile", default=None, help="Read configuration from profile/<NAME>/ in every layer")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable, last one wins).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration, start logging, then run the subcommand.

    ``ctx.obj`` must be a callable returning ``AppServices``; it is replaced
    by a :class:`~mylib.adapters.cli.context.CLIContext`.

    >>> from click.testing import CliRunner
    >>> from mylib.composition import build_production
    >>> CliRunner().invoke(cli, ["add", "2", "3"], obj=build_production).stdout
    '5\\n'
    """
    services: AppServices = ctx.obj()
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    ctx.obj = CLIContext(config=config, services=services, profile=profile)
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported here: the command modules import package ancestors of ``cli``.
    from .commands import cli_add, cli_config, cli_factorial, cli_greet, cli_info

    for command in (cli_info, cli_greet, cli_add, cli_factorial, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
