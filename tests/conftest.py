"""Fixtures shared by the CLI, config and entry-point tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from typing import Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from mylib.adapters.config import loader
from mylib.composition import AppServices, build_production

ServicesFactory = Callable[[], AppServices]

_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Fresh runner; ``result.stdout`` holds command output, logs go to stderr."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from lib_cli_exit_tools defaults with tracebacks off; reset afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    yield
    lib_cli_exit_tools.reset_config()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Make the next ``get_config`` call read the layers again."""
    get_config = loader.get_config
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config straight from a dict, with no provenance."""
    return lambda data: Config(data, {})


@pytest.fixture
def services_for() -> Callable[..., ServicesFactory]:
    """Return ``services_for(config, profiles=None)`` -> a services factory.

    Only configuration loading is replaced; the returned ``get_config``
    yields ``config`` and appends each requested profile to ``profiles``.
    Display and logging stay the production adapters.
    """
    production = build_production()

    def _services_for(config: Config, profiles: list[str | None] | None = None) -> ServicesFactory:
        def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
            if profiles is not None:
                profiles.append(profile)
            return config

        services = AppServices(
            get_config=_get_config,
            display_config=production.display_config,
            init_logging=production.init_logging,
        )
        return lambda: services

    return _services_for
