"""Composition root: production wiring and swapping single adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import FrozenInstanceError
from typing import Any

import pytest
from click.testing import CliRunner
from lib_layered_config import Config

from mylib.adapters import cli as cli_mod
from mylib.adapters.config.display import display_config
from mylib.adapters.config.loader import get_config
from mylib.adapters.logging.setup import init_logging
from mylib.composition import AppServices, build_production
from mylib.domain.enums import OutputFormat


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    services = build_production()

    assert services.get_config is get_config
    assert services.display_config is display_config
    assert services.init_logging is init_logging


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    services = build_production()

    with pytest.raises(FrozenInstanceError):
        services.get_config = get_config  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_config_command_goes_through_the_display_service(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    config = config_factory({"mylib": {"default_name": "Ada"}})
    shown: list[tuple[Config, OutputFormat, str | None, str | None]] = []

    def _record(
        config: Config,
        *,
        output_format: OutputFormat = OutputFormat.HUMAN,
        section: str | None = None,
        profile: str | None = None,
    ) -> None:
        shown.append((config, output_format, section, profile))

    services = AppServices(
        get_config=lambda **_kwargs: config,
        display_config=_record,
        init_logging=lambda _config: None,
    )

    result = cli_runner.invoke(
        cli_mod.cli, ["--profile", "test", "config", "--format", "JSON", "--section", "mylib"], obj=lambda: services
    )

    assert result.exit_code == 0
    assert shown == [(config, OutputFormat.JSON, "mylib", "test")]


@pytest.mark.os_agnostic
def test_logging_service_receives_config_with_overrides_applied(
    cli_runner: CliRunner,
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    seen: list[Config] = []
    production = build_production()
    services = AppServices(
        get_config=lambda **_kwargs: config_factory({}),
        display_config=production.display_config,
        init_logging=seen.append,
    )

    result = cli_runner.invoke(
        cli_mod.cli, ["--set", "lib_log_rich.console_level=DEBUG", "add", "1", "2"], obj=lambda: services
    )

    assert result.exit_code == 0
    assert [config.get("lib_log_rich.console_level") for config in seen] == ["DEBUG"]
