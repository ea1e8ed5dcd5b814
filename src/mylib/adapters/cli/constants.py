"""Click settings and traceback budgets shared by the CLI modules."""

from __future__ import annotations

from typing import Any, Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, Any]] = {"help_option_names": ["-h", "--help"]}

#: ``mylib add -5 -3`` must read ``-5`` as an operand, not an option.
NUMERIC_ARGS_CONTEXT_SETTINGS: Final[dict[str, Any]] = {**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True}

#: Characters of traceback text printed without and with ``--traceback``.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "NUMERIC_ARGS_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
