"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting, addition, and factorial
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import add, factorial, greet
from .enums import OutputFormat
from .errors import ConfigurationError

__all__ = [
    # Behaviors
    "add",
    "factorial",
    "greet",
    # Enums
    "OutputFormat",
    # Errors
    "ConfigurationError",
]
