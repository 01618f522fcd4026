"""Process boundary: turn program outcomes into a final exit status.

This is the only place in the package with an observable side effect.
Everything upstream produces :class:`ExitCode` values; the functions here
translate whatever the program did (returned, raised) into one of them and
hand it to the interpreter.

Contents:
    * :func:`terminate_process` - End the process with an exit code.
    * :func:`exit_with` - Terminate from an ExitCode, Result, or integer.
    * :func:`run_main` - Run a callable and map its outcome to an ExitCode.
    * :func:`exit_code_of` - Map a returned value to an ExitCode.
    * :func:`apply_traceback_preferences` / :func:`snapshot_traceback_state` /
      :func:`restore_traceback_state` - lib_cli_exit_tools traceback flags.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Final, NoReturn, SupportsIndex, Union

import lib_cli_exit_tools

from ...domain.error_kind import ErrorKindTable, from_io_error
from ...domain.errors import ExitCodeError, ExitCodeRangeError
from ...domain.exit_code import ExitCode
from ...domain.result import Failure, Result, Success, collapse
from ..logging.setup import shutdown_logging

logger = logging.getLogger(__name__)

#: Character budget used when printing truncated tracebacks.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Character budget used when verbose tracebacks are enabled.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

#: Exit code for failures whose numeric status is not a ``<sysexits.h>`` value.
UNMAPPED_FAILURE: Final[ExitCode] = ExitCode.SOFTWARE

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""

ExitValue = Union[ExitCode, Result[object], SupportsIndex]
"""Anything :func:`exit_with` accepts."""


def apply_traceback_preferences(enabled: bool) -> None:
    """Synchronise lib_cli_exit_tools traceback flags with ``enabled``."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for later restoration."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback = state[0]
    lib_cli_exit_tools.config.traceback_force_color = state[1]


def terminate_process(code: ExitCode) -> NoReturn:
    """End the current process with ``code`` as its exit status.

    Logging is flushed and shut down first (main thread only); the process
    then exits through ``SystemExit`` so ``finally`` blocks and ``atexit``
    handlers still run.

    Example:
        >>> terminate_process(ExitCode.USAGE)  # doctest: +SKIP
    """
    logger.debug("Terminating with exit code %s (%d)", code.name, code)
    shutdown_logging()
    raise SystemExit(int(code))


def exit_with(value: ExitValue) -> NoReturn:
    """Terminate the process from an ExitCode, a Result, or an integer.

    Raises:
        ExitCodeRangeError: ``value`` is an integer outside ``0`` and
            ``64..=78``; the process is not terminated.
    """
    if isinstance(value, (Success, Failure)):
        terminate_process(collapse(value))
    terminate_process(ExitCode.try_from(value))


def exit_code_of(outcome: object) -> ExitCode:
    """Map the return value of a main function to an exit code.

    * :class:`ExitCode` passes through;
    * :class:`Success` / :class:`Failure` are collapsed;
    * integers are validated, and illegal values become ``SOFTWARE``;
    * anything else (including ``None``) means success.

    Example:
        >>> exit_code_of(None)
        <ExitCode.OK: 0>
        >>> exit_code_of(Failure(ExitCode.NOPERM))
        <ExitCode.NOPERM: 77>
        >>> exit_code_of(3)
        <ExitCode.SOFTWARE: 70>
    """
    if isinstance(outcome, ExitCode):
        return outcome
    if isinstance(outcome, (Success, Failure)):
        return collapse(outcome)
    if isinstance(outcome, int) and not isinstance(outcome, bool):
        return _legal_or_unmapped(outcome)
    return ExitCode.OK


def _legal_or_unmapped(number: int) -> ExitCode:
    try:
        return ExitCode.try_from(number)
    except ExitCodeRangeError:
        logger.warning("Exit status %d is not a sysexits code, using %s", number, UNMAPPED_FAILURE.name)
        return UNMAPPED_FAILURE


def _exit_code_of_system_exit(exc: SystemExit) -> ExitCode:
    # Mirrors the interpreter: None is success, a message is a failure.
    status = exc.code
    if status is None:
        return ExitCode.OK
    if isinstance(status, int) and not isinstance(status, bool):
        return _legal_or_unmapped(status)
    return UNMAPPED_FAILURE


def _print_active_exception(trace_back: bool) -> None:
    previous = snapshot_traceback_state()
    apply_traceback_preferences(trace_back)
    try:
        length_limit = TRACEBACK_VERBOSE_LIMIT if trace_back else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=trace_back, length_limit=length_limit)
    finally:
        restore_traceback_state(previous)


def run_main(
    func: Callable[[], object],
    *,
    error_kind_table: ErrorKindTable | None = None,
    trace_back: bool = False,
) -> ExitCode:
    """Run ``func`` and return the exit code describing its outcome.

    Return values are mapped by :func:`exit_code_of`. Exceptions are mapped
    as follows:

    * :class:`ExitCodeError` - its code;
    * :class:`OSError` - classified through ``error_kind_table``;
    * ``SystemExit`` - ``OK`` for ``None``, its status when that is a
      sysexits code, ``SOFTWARE`` otherwise;
    * anything else - the status ``lib_cli_exit_tools`` derives for it when
      that is a sysexits code, ``SOFTWARE`` otherwise.

    Every exception except ``SystemExit`` is printed to stderr, with a full
    traceback when ``trace_back`` is set.

    Args:
        func: Zero-argument main function.
        error_kind_table: Table for classifying ``OSError``; ``None`` uses the
            pinned default.
        trace_back: Print full tracebacks instead of a one-line summary.

    Example:
        >>> run_main(lambda: None)
        <ExitCode.OK: 0>
    """
    try:
        outcome = func()
    except ExitCodeError as exc:
        _print_active_exception(trace_back)
        logger.info("Main function reported %s (%d)", exc.code.name, exc.code)
        return exc.code
    except OSError as exc:
        _print_active_exception(trace_back)
        code = from_io_error(exc, error_kind_table)
        logger.info("I/O failure %s classified as %s (%d)", type(exc).__name__, code.name, code)
        return code
    except SystemExit as exc:
        return _exit_code_of_system_exit(exc)
    except BaseException as exc:
        # Catch BaseException so KeyboardInterrupt and friends still end in a
        # sysexits code instead of escaping the boundary.
        _print_active_exception(trace_back)
        logger.error("Unhandled %s in main function", type(exc).__name__)
        return _legal_or_unmapped(lib_cli_exit_tools.get_system_exit_code(exc))
    return exit_code_of(outcome)


__all__ = [
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "UNMAPPED_FAILURE",
    "ExitValue",
    "apply_traceback_preferences",
    "exit_code_of",
    "exit_with",
    "restore_traceback_state",
    "run_main",
    "snapshot_traceback_state",
    "terminate_process",
]
