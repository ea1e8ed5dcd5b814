"""Public package surface exposing greeting, arithmetic, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Core library functions (greet, add, factorial)
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    add,
    factorial,
    greet,
)

__all__ = [
    "add",
    "factorial",
    "get_config",
    "greet",
    "print_info",
]
