"""Start lib_log_rich for the CLI.

Every CLI run calls :func:`init_logging` from the root group; the runtime is
set up once per process and shut down again by ``mylib.adapters.cli.main``.
"""

from __future__ import annotations

from collections.abc import Mapping

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from mylib import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Only ``service`` and ``environment`` are interpreted here; any other key
    (``console_level``, ``payload_limits``...) is kept and handed to
    ``RuntimeConfig`` as is.

    >>> LoggingConfigModel(console_level="DEBUG").runtime_options()
    {'service': 'mylib', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")

    def runtime_options(self) -> dict[str, object]:
        options: dict[str, object] = {"service": self.service or __init__conf__.name, "environment": self.environment}
        options.update(self.model_extra or {})
        return options


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section = config.get("lib_log_rich", default={})
    model = LoggingConfigModel.model_validate(dict(section) if isinstance(section, Mapping) else {})
    return lib_log_rich.runtime.RuntimeConfig(**model.runtime_options())


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich from ``config`` unless it is already running.

    ``.env`` is honoured for ``LOG_*`` variables, and the stdlib ``logging``
    bridge is attached so ``logging.getLogger(__name__)`` records reach the
    lib_log_rich consoles.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
