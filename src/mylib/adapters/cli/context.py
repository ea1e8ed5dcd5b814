"""State shared between the root group and its subcommands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from mylib.composition import AppServices


class TracebackState(NamedTuple):
    """The two ``lib_cli_exit_tools.config`` flags ``--traceback`` controls."""

    enabled: bool
    force_color: bool

    @classmethod
    def capture(cls) -> TracebackState:
        settings = lib_cli_exit_tools.config
        return cls(bool(settings.traceback), bool(settings.traceback_force_color))

    def apply(self) -> None:
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full (colored) tracebacks on or off for this process."""
    TracebackState(enabled, enabled).apply()


@dataclass(slots=True)
class CLIContext:
    """What the root group leaves in ``ctx.obj`` for subcommands."""

    config: Config
    services: AppServices
    profile: str | None = None


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group."""
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context missing: subcommand invoked without the root group")
    return ctx.obj


__all__ = ["CLIContext", "TracebackState", "apply_traceback_preferences", "get_cli_context"]
