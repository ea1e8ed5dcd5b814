"""Callable Protocols for the I/O the CLI depends on.

``Config`` is only imported for type checking so this layer never pulls in
lib_layered_config at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Return the merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Print a configuration, or one section of it."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime from a configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["DisplayConfig", "GetConfig", "InitLogging"]
