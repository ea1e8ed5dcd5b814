"""Exit codes raised by mylib commands."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """sysexits/errno style exit codes.

    Click usage errors keep Click's own code 2; unexpected exceptions are
    mapped by ``lib_cli_exit_tools``.

    >>> int(ExitCode.CONFIG_ERROR)
    78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22  # EINVAL
    CONFIG_ERROR = 78  # EX_CONFIG


__all__ = ["ExitCode"]
