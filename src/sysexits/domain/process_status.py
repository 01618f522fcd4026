"""Decode process-completion statuses into exit codes.

A completion status is modelled as an optional exit code: an integer when the
process returned one, ``None`` when it terminated some other way (typically
killed by a signal). Decoding distinguishes the two failure modes through
:attr:`ExitStatusError.code`.
"""

from __future__ import annotations

import os
from typing import Protocol

from .errors import ExitCodeRangeError, ExitStatusError
from .exit_code import ExitCode


class HasReturncode(Protocol):
    """Anything exposing a ``subprocess``-style ``returncode``."""

    @property
    def returncode(self) -> int | None: ...


def from_exit_status(code: int | None) -> ExitCode:
    """Convert an optional exit code into an :class:`ExitCode`.

    Args:
        code: Exit code reported by the process, or ``None`` when it
            terminated without one.

    Returns:
        The matching member for ``0`` and ``64..=78``.

    Raises:
        ExitStatusError: ``code`` is outside the ``<sysexits.h>`` set (the
            error carries ``code``) or is ``None`` (the error carries
            ``None``).

    Example:
        >>> from_exit_status(64)
        <ExitCode.USAGE: 64>
        >>> from_exit_status(None)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ExitStatusError: exit code is unknown
    """
    if code is None:
        raise ExitStatusError(None)
    try:
        return ExitCode.try_from(code)
    except ExitCodeRangeError:
        raise ExitStatusError(code) from None


def exit_code_of_returncode(returncode: int | None) -> int | None:
    """Return the numeric exit code carried by a ``subprocess`` return code.

    ``subprocess`` reports a process killed by signal ``N`` as ``-N`` and a
    process that has not terminated yet as ``None``; neither carries an exit
    code.
    """
    if returncode is None or returncode < 0:
        return None
    return returncode


def from_returncode(returncode: int | None) -> ExitCode:
    """Convert a ``subprocess`` return code into an :class:`ExitCode`.

    Example:
        >>> from_returncode(0)
        <ExitCode.OK: 0>
        >>> from_returncode(-9)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ExitStatusError: exit code is unknown
    """
    return from_exit_status(exit_code_of_returncode(returncode))


def from_process(process: HasReturncode) -> ExitCode:
    """Convert a finished process into an :class:`ExitCode`.

    Accepts :class:`subprocess.CompletedProcess`, :class:`subprocess.Popen`
    after ``wait()``, and :class:`subprocess.CalledProcessError`.
    """
    return from_returncode(process.returncode)


def from_wait_status(status: int) -> ExitCode:
    """Convert a raw status from ``os.wait()``/``os.waitpid()``.

    Raises:
        ExitStatusError: The process was signalled or stopped, or exited with
            a code outside the ``<sysexits.h>`` set.
    """
    try:
        returncode = os.waitstatus_to_exitcode(status)
    except ValueError as exc:
        # Stopped processes have not terminated.
        raise ExitStatusError(None) from exc
    return from_returncode(returncode)


__all__ = [
    "HasReturncode",
    "exit_code_of_returncode",
    "from_exit_status",
    "from_process",
    "from_returncode",
    "from_wait_status",
]
