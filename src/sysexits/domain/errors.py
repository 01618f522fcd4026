"""Domain-specific exceptions for typed error handling at boundaries.

Every exception raised by this package derives from :class:`SysexitsError`.
The two conversion errors also derive from :class:`ValueError` so callers that
already guard integer parsing with ``except ValueError`` keep working.

Contents:
    * :class:`SysexitsError` - Package base exception.
    * :class:`ExitCodeRangeError` - Integer outside ``0`` and ``64..=78``.
    * :class:`ExitStatusError` - Process status without a usable exit code.
    * :class:`ExitCodeError` - Failure reported directly as an exit code.
    * :class:`ConfigurationError` - Malformed ``[sysexits]`` configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .exit_code import ExitCode


class SysexitsError(Exception):
    """Base class for all errors raised by this package."""


class ExitCodeRangeError(SysexitsError, ValueError):
    """An integer is neither ``0`` nor within ``64..=78``.

    The error carries no payload: every instance means the same thing and
    instances compare equal to each other.

    Example:
        >>> str(ExitCodeRangeError())
        'value is out of range'
        >>> ExitCodeRangeError() == ExitCodeRangeError()
        True
    """

    def __init__(self) -> None:
        super().__init__("value is out of range")

    def __reduce__(self) -> tuple[type[ExitCodeRangeError], tuple[()]]:
        return (type(self), ())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExitCodeRangeError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(ExitCodeRangeError)


class ExitStatusError(SysexitsError, ValueError):
    """A process-completion status could not be turned into an exit code.

    ``code`` distinguishes the two failure modes:

    * an integer: the process exited with that code, but it is not one of the
      ``<sysexits.h>`` values;
    * ``None``: the process never produced a numeric exit code (for example it
      was killed by a signal).

    Example:
        >>> str(ExitStatusError(1))
        'invalid exit code `1`'
        >>> str(ExitStatusError(None))
        'exit code is unknown'
        >>> ExitStatusError(79) == ExitStatusError(79)
        True
    """

    def __init__(self, code: int | None) -> None:
        super().__init__(code)

    @property
    def code(self) -> int | None:
        """Offending exit code, or ``None`` when the status carried none."""
        code: int | None = self.args[0]
        return code

    @property
    def is_unknown(self) -> bool:
        """``True`` when the process terminated without a numeric code."""
        return self.code is None

    def __str__(self) -> str:
        if self.code is None:
            return "exit code is unknown"
        return f"invalid exit code `{self.code}`"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExitStatusError):
            return NotImplemented
        return self.code == other.code

    def __hash__(self) -> int:
        return hash((ExitStatusError, self.code))


class ExitCodeError(SysexitsError):
    """Report a failure directly as an :class:`~sysexits.ExitCode`.

    Raised by application code that wants the process boundary to exit with a
    specific code instead of a generic software error.

    Example:
        >>> from sysexits import ExitCode
        >>> err = ExitCodeError(ExitCode.NOINPUT, "config.toml not found")
        >>> err.code
        <ExitCode.NOINPUT: 66>
        >>> str(err)
        'config.toml not found'
    """

    def __init__(self, code: ExitCode, message: str | None = None) -> None:
        super().__init__(code, message)

    @property
    def code(self) -> ExitCode:
        code: ExitCode = self.args[0]
        return code

    @property
    def message(self) -> str | None:
        message: str | None = self.args[1]
        return message

    def __str__(self) -> str:
        if self.message is not None:
            return self.message
        return f"exit code {self.code.name} ({int(self.code)})"


class ConfigurationError(SysexitsError):
    """Missing, invalid, or inconsistent configuration.

    Raised when the ``[sysexits]`` section of the layered configuration
    cannot be parsed into typed settings.

    Example:
        >>> err = ConfigurationError("unknown error kind 'brokn_pipe'")
        >>> str(err)
        "unknown error kind 'brokn_pipe'"
    """


__all__ = [
    "ConfigurationError",
    "ExitCodeError",
    "ExitCodeRangeError",
    "ExitStatusError",
    "SysexitsError",
]
