"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocols implemented by the adapters
"""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging

__all__ = ["DisplayConfig", "GetConfig", "InitLogging"]
