"""Command-line interface for mylib."""

from __future__ import annotations

from .commands import cli_add, cli_config, cli_factorial, cli_greet, cli_info
from .context import CLIContext, TracebackState, apply_traceback_preferences
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_add",
    "cli_config",
    "cli_factorial",
    "cli_greet",
    "cli_info",
    "main",
]
