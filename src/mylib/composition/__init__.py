"""Composition root: the adapters the CLI runs against."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import DisplayConfig, GetConfig, InitLogging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Side-effecting collaborators of the CLI, swappable in tests."""

    get_config: GetConfig
    display_config: DisplayConfig
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services backed by lib_layered_config and lib_log_rich."""
    return AppServices(get_config=get_config, display_config=display_config, init_logging=init_logging)


__all__ = [
    "AppServices",
    "build_production",
    "display_config",
    "get_config",
    "init_logging",
]
