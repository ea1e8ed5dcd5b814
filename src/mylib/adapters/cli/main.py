"""Run the CLI and turn its outcome into a process exit code."""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from mylib import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import TracebackState

if TYPE_CHECKING:
    from mylib.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt included
        return _report_failure(exc)
    return 0


def main(argv: Sequence[str] | None = None, *, services_factory: Callable[[], AppServices]) -> int:
    """Run ``mylib`` with ``argv`` (default ``sys.argv[1:]``) and return the exit code.

    ``services_factory`` is handed to the root group through ``ctx.obj``;
    the console script passes ``build_production``. Traceback flags changed by
    ``--traceback`` are put back afterwards, and the logging runtime is shut
    down when running on the main thread.
    """
    previous = TracebackState.capture()
    try:
        return _invoke(list(sys.argv[1:] if argv is None else argv), services_factory)
    finally:
        previous.apply()
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
