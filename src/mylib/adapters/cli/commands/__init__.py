"""CLI command implementations.

Contents:
    * Info command from :mod:`.info`
    * Library commands from :mod:`.library`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .library import cli_add, cli_factorial, cli_greet

__all__ = [
    "cli_add",
    "cli_config",
    "cli_factorial",
    "cli_greet",
    "cli_info",
]
