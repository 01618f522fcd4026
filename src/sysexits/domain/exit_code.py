"""The system exit codes as defined by ``<sysexits.h>``.

Provides a single :class:`ExitCode` enum whose members are the sixteen
conventional exit statuses (``0`` and ``64..=78``). Converting an arbitrary
integer back into an :class:`ExitCode` goes through an explicit lookup table,
so values in the ``1..=63`` gap, negative values, and values above ``78`` are
rejected instead of being truncated.

Contents:
    * :class:`ExitCode` - IntEnum of the ``<sysexits.h>`` exit codes.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping
from enum import EnumMeta, IntEnum
from types import MappingProxyType
from typing import Any, Final, SupportsIndex

from .errors import ExitCodeRangeError


class _ExitCodeType(EnumMeta):
    """Route value lookups through ``operator.index``.

    Plain enum lookup is hash based, so ``64.0`` or ``Decimal(64)`` would
    find ``USAGE``. Only single-argument calls are value lookups; the
    functional API keeps its stock behaviour.
    """

    def __call__(cls, value: Any, *args: Any, **kwargs: Any) -> Any:
        if args or kwargs:
            return super().__call__(value, *args, **kwargs)
        return super().__call__(operator.index(value))


class ExitCode(IntEnum, metaclass=_ExitCodeType):
    """System exit codes as defined by ``<sysexits.h>``.

    Members behave like plain integers, so an :class:`ExitCode` can be passed
    anywhere the host expects a numeric exit status. ``str()`` and ``format()``
    render the underlying integer.

    ``BASE`` and ``MAX`` are aliases of the lowest non-zero code (``USAGE``)
    and the highest code (``CONFIG``); iteration yields the sixteen canonical
    members only.

    ``ExitCode(value)`` validates exactly like :meth:`try_from`: integers
    outside the table raise :class:`ExitCodeRangeError` and non-integral
    values such as ``64.0`` raise ``TypeError``.

    Example:
        >>> ExitCode.USAGE
        <ExitCode.USAGE: 64>
        >>> int(ExitCode.CONFIG)
        78
        >>> str(ExitCode.OK)
        '0'
        >>> f"{ExitCode.USAGE:#x}"
        '0x40'
        >>> ExitCode.BASE is ExitCode.USAGE
        True
    """

    #: Successful termination.
    OK = 0
    #: The command was used incorrectly: wrong number of arguments, a bad
    #: flag, bad syntax in a parameter.
    USAGE = 64
    #: The input data was incorrect in some way. Only for user data, not
    #: system files.
    DATAERR = 65
    #: An input file (not a system file) did not exist or was not readable.
    NOINPUT = 66
    #: The user specified did not exist.
    NOUSER = 67
    #: The host specified did not exist.
    NOHOST = 68
    #: A service is unavailable, or a support program or file does not exist.
    UNAVAILABLE = 69
    #: An internal software error has been detected.
    SOFTWARE = 70
    #: An operating system error: cannot fork, cannot create pipe, and so on.
    OSERR = 71
    #: Some system file does not exist, cannot be opened, or is malformed.
    OSFILE = 72
    #: A (user specified) output file cannot be created.
    CANTCREAT = 73
    #: An error occurred while doing I/O on some file.
    IOERR = 74
    #: Temporary failure; the request should be reattempted later.
    TEMPFAIL = 75
    #: The remote system returned something impossible during a protocol
    #: exchange.
    PROTOCOL = 76
    #: Insufficient permission to perform the operation.
    NOPERM = 77
    #: Something was found in an unconfigured or misconfigured state.
    CONFIG = 78

    # Aliases, not members: ``len(ExitCode) == 16``.
    BASE = 64
    MAX = 78

    @classmethod
    def default(cls) -> ExitCode:
        """Return the designated default exit code, :attr:`OK`."""
        return cls.OK

    @classmethod
    def try_from(cls, value: SupportsIndex) -> ExitCode:
        """Convert an integer into an :class:`ExitCode`.

        Args:
            value: Any object supporting ``__index__`` (``int``, numpy
                integers, another :class:`ExitCode`).

        Returns:
            The member whose value equals ``value``.

        Raises:
            ExitCodeRangeError: ``value`` is neither ``0`` nor in ``64..=78``.
            TypeError: ``value`` is not an integer.

        Example:
            >>> ExitCode.try_from(65)
            <ExitCode.DATAERR: 65>
            >>> ExitCode.try_from(1)  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ExitCodeRangeError: value is out of range
        """
        number = operator.index(value)
        try:
            return _BY_VALUE[number]
        except KeyError:
            raise ExitCodeRangeError from None

    @classmethod
    def _missing_(cls, value: object) -> ExitCode | None:
        # Lookups arrive here as plain integers.
        if isinstance(value, int):
            raise ExitCodeRangeError
        return None

    def is_success(self) -> bool:
        """Return ``True`` if this code represents successful termination.

        Example:
            >>> ExitCode.OK.is_success()
            True
            >>> ExitCode.USAGE.is_success()
            False
        """
        return self is ExitCode.OK

    def is_failure(self) -> bool:
        """Return ``True`` if this code represents unsuccessful termination.

        Example:
            >>> ExitCode.OK.is_failure()
            False
            >>> ExitCode.USAGE.is_failure()
            True
        """
        return not self.is_success()

    def __str__(self) -> str:
        return str(int(self))

    def __format__(self, format_spec: str) -> str:
        return format(int(self), format_spec)


# One entry per member; the gap between 0 and 64 is intentional.
_BY_VALUE: Final[Mapping[int, ExitCode]] = MappingProxyType(
    {
        0: ExitCode.OK,
        64: ExitCode.USAGE,
        65: ExitCode.DATAERR,
        66: ExitCode.NOINPUT,
        67: ExitCode.NOUSER,
        68: ExitCode.NOHOST,
        69: ExitCode.UNAVAILABLE,
        70: ExitCode.SOFTWARE,
        71: ExitCode.OSERR,
        72: ExitCode.OSFILE,
        73: ExitCode.CANTCREAT,
        74: ExitCode.IOERR,
        75: ExitCode.TEMPFAIL,
        76: ExitCode.PROTOCOL,
        77: ExitCode.NOPERM,
        78: ExitCode.CONFIG,
    }
)


__all__ = ["ExitCode"]
