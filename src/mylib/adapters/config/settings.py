"""Typed view of the ``[mylib]`` configuration section."""

from __future__ import annotations

from collections.abc import Mapping

import orjson
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from mylib.domain.errors import ConfigurationError

#: Name used by ``greet`` when the configuration section is absent.
DEFAULT_NAME = "World"


class AppSettingsModel(BaseModel):
    """Pydantic model for the [mylib] config section.

    ``--set`` values and environment variables reach this model already
    coerced, so a name such as ``2024`` or ``true`` arrives as a number or a
    bool. Scalars are turned back into their textual form; tables and arrays
    are still rejected.

    Example:
        >>> AppSettingsModel().default_name
        'World'
        >>> AppSettingsModel(default_name=42).default_name
        '42'
        >>> AppSettingsModel(default_name=True).default_name
        'true'
    """

    default_name: str = DEFAULT_NAME

    model_config = ConfigDict(extra="ignore")

    @field_validator("default_name", mode="before")
    @classmethod
    def _scalar_to_text(cls, value: object) -> object:
        if value is None or isinstance(value, (bool, int, float)):
            return orjson.dumps(value).decode()
        return value


def load_app_settings(config: Config) -> AppSettingsModel:
    """Parse the ``[mylib]`` section of ``config``.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Validated settings; missing keys fall back to model defaults.

    Raises:
        ConfigurationError: If the section is not a table or holds values of
            the wrong type.

    Example:
        >>> load_app_settings(Config({"mylib": {"default_name": "Ada"}}, {})).default_name
        'Ada'
    """
    raw: object = config.get("mylib", default={})
    if not isinstance(raw, Mapping):
        raise ConfigurationError(f"[mylib] must be a table, got {type(raw).__name__}")
    try:
        return AppSettingsModel.model_validate(dict(raw))
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [mylib] configuration: {exc}") from exc


__all__ = [
    "DEFAULT_NAME",
    "AppSettingsModel",
    "load_app_settings",
]
