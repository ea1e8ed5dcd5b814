"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[mylib]`` configuration section holds values of the
    wrong shape. Caught at CLI boundaries to provide user-friendly error
    messages.

    Example:
        >>> from mylib.domain.errors import ConfigurationError
        >>> err = ConfigurationError("mylib.default_name must be a string")
        >>> str(err)
        'mylib.default_name must be a string'
    """


__all__ = ["ConfigurationError"]
