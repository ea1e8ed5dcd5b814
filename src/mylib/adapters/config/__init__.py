"""Configuration adapter built on lib_layered_config.

Contents:
    * :mod:`.loader` - cached layered loading
    * :mod:`.settings` - typed ``[mylib]`` section
    * :mod:`.display` - human/JSON display
    * :mod:`.overrides` - ``--set`` parsing and merging
"""

from __future__ import annotations

from .display import display_config
from .loader import DEFAULT_CONFIG_FILE, get_config
from .overrides import apply_overrides
from .settings import AppSettingsModel, load_app_settings

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "AppSettingsModel",
    "apply_overrides",
    "display_config",
    "get_config",
    "load_app_settings",
]
