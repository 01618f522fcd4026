"""Classify operating-system I/O failures into exit codes.

The host's error taxonomy is open-ended while ``<sysexits.h>`` is closed, so
the mapping is many-to-one and lossy: :func:`classify_error_kind` returns the
best approximation and falls back to :attr:`ExitCode.IOERR` for every category
without an explicit entry.

The category of a concrete exception is derived by :func:`error_kind_of`,
which consults ``errno`` first and the exception class second. The
assignments in :data:`DEFAULT_ERROR_KIND_TABLE` are pinned; deployments that
need a different table pass their own mapping (see
:func:`build_error_kind_table`).

Contents:
    * :class:`IoErrorKind` - Abstract I/O error categories.
    * :data:`DEFAULT_ERROR_KIND_TABLE` - Pinned category to exit code table.
    * :func:`classify_error_kind` - Total category to exit code mapping.
    * :func:`error_kind_of` - Category of an exception.
    * :func:`from_io_error` - Exit code of an exception.
    * :func:`build_error_kind_table` - Default table with overrides applied.
"""

from __future__ import annotations

import errno
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from .exit_code import ExitCode


class IoErrorKind(str, Enum):
    """Coarse categories of failed I/O operations.

    Inherits from str so configuration files can name a category by its
    value (``"broken_pipe"``).

    Example:
        >>> IoErrorKind("not_found")
        <IoErrorKind.NOT_FOUND: 'not_found'>
        >>> IoErrorKind.BROKEN_PIPE == "broken_pipe"
        True
    """

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    CONNECTION_REFUSED = "connection_refused"
    CONNECTION_RESET = "connection_reset"
    HOST_UNREACHABLE = "host_unreachable"
    NETWORK_UNREACHABLE = "network_unreachable"
    CONNECTION_ABORTED = "connection_aborted"
    NOT_CONNECTED = "not_connected"
    ADDR_IN_USE = "addr_in_use"
    ADDR_NOT_AVAILABLE = "addr_not_available"
    NETWORK_DOWN = "network_down"
    BROKEN_PIPE = "broken_pipe"
    ALREADY_EXISTS = "already_exists"
    WOULD_BLOCK = "would_block"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    DIRECTORY_NOT_EMPTY = "directory_not_empty"
    READ_ONLY_FILESYSTEM = "read_only_filesystem"
    STALE_NETWORK_FILE_HANDLE = "stale_network_file_handle"
    INVALID_INPUT = "invalid_input"
    INVALID_DATA = "invalid_data"
    TIMED_OUT = "timed_out"
    WRITE_ZERO = "write_zero"
    STORAGE_FULL = "storage_full"
    NOT_SEEKABLE = "not_seekable"
    QUOTA_EXCEEDED = "quota_exceeded"
    FILE_TOO_LARGE = "file_too_large"
    RESOURCE_BUSY = "resource_busy"
    EXECUTABLE_FILE_BUSY = "executable_file_busy"
    DEADLOCK = "deadlock"
    CROSSES_DEVICES = "crosses_devices"
    TOO_MANY_LINKS = "too_many_links"
    INVALID_FILENAME = "invalid_filename"
    ARGUMENT_LIST_TOO_LONG = "argument_list_too_long"
    INTERRUPTED = "interrupted"
    UNSUPPORTED = "unsupported"
    UNEXPECTED_EOF = "unexpected_eof"
    OUT_OF_MEMORY = "out_of_memory"
    OTHER = "other"


ErrorKindTable = Mapping[IoErrorKind, ExitCode]
"""Read-only mapping from I/O error category to exit code."""


DEFAULT_ERROR_KIND_TABLE: Final[ErrorKindTable] = MappingProxyType(
    {
        IoErrorKind.NOT_FOUND: ExitCode.NOINPUT,
        IoErrorKind.PERMISSION_DENIED: ExitCode.NOPERM,
        IoErrorKind.CONNECTION_REFUSED: ExitCode.OSERR,
        IoErrorKind.HOST_UNREACHABLE: ExitCode.OSERR,
        IoErrorKind.NETWORK_UNREACHABLE: ExitCode.OSERR,
        IoErrorKind.OUT_OF_MEMORY: ExitCode.OSERR,
        IoErrorKind.CONNECTION_RESET: ExitCode.TEMPFAIL,
        IoErrorKind.CONNECTION_ABORTED: ExitCode.TEMPFAIL,
        IoErrorKind.NOT_CONNECTED: ExitCode.TEMPFAIL,
        IoErrorKind.BROKEN_PIPE: ExitCode.TEMPFAIL,
        IoErrorKind.TIMED_OUT: ExitCode.TEMPFAIL,
        IoErrorKind.INTERRUPTED: ExitCode.TEMPFAIL,
        IoErrorKind.ADDR_IN_USE: ExitCode.UNAVAILABLE,
        IoErrorKind.ADDR_NOT_AVAILABLE: ExitCode.UNAVAILABLE,
        IoErrorKind.NETWORK_DOWN: ExitCode.UNAVAILABLE,
        IoErrorKind.ALREADY_EXISTS: ExitCode.CANTCREAT,
        IoErrorKind.READ_ONLY_FILESYSTEM: ExitCode.CANTCREAT,
        IoErrorKind.WOULD_BLOCK: ExitCode.PROTOCOL,
        IoErrorKind.UNSUPPORTED: ExitCode.PROTOCOL,
        IoErrorKind.INVALID_INPUT: ExitCode.DATAERR,
        IoErrorKind.INVALID_DATA: ExitCode.DATAERR,
        IoErrorKind.WRITE_ZERO: ExitCode.SOFTWARE,
        IoErrorKind.UNEXPECTED_EOF: ExitCode.SOFTWARE,
    }
)
"""Pinned category to exit code assignments; unlisted kinds map to ``IOERR``."""

#: Fallback for every category without an entry in the active table.
FALLBACK_EXIT_CODE: Final[ExitCode] = ExitCode.IOERR

# errno names that do not exist on the running platform are skipped.
_ERRNO_NAMES: Final[tuple[tuple[str, IoErrorKind], ...]] = (
    ("ENOENT", IoErrorKind.NOT_FOUND),
    ("EPERM", IoErrorKind.PERMISSION_DENIED),
    ("EACCES", IoErrorKind.PERMISSION_DENIED),
    ("ECONNREFUSED", IoErrorKind.CONNECTION_REFUSED),
    ("ECONNRESET", IoErrorKind.CONNECTION_RESET),
    ("EHOSTUNREACH", IoErrorKind.HOST_UNREACHABLE),
    ("ENETUNREACH", IoErrorKind.NETWORK_UNREACHABLE),
    ("ECONNABORTED", IoErrorKind.CONNECTION_ABORTED),
    ("ENOTCONN", IoErrorKind.NOT_CONNECTED),
    ("EADDRINUSE", IoErrorKind.ADDR_IN_USE),
    ("EADDRNOTAVAIL", IoErrorKind.ADDR_NOT_AVAILABLE),
    ("ENETDOWN", IoErrorKind.NETWORK_DOWN),
    ("EPIPE", IoErrorKind.BROKEN_PIPE),
    ("EEXIST", IoErrorKind.ALREADY_EXISTS),
    ("EAGAIN", IoErrorKind.WOULD_BLOCK),
    ("EWOULDBLOCK", IoErrorKind.WOULD_BLOCK),
    ("ENOTDIR", IoErrorKind.NOT_A_DIRECTORY),
    ("EISDIR", IoErrorKind.IS_A_DIRECTORY),
    ("ENOTEMPTY", IoErrorKind.DIRECTORY_NOT_EMPTY),
    ("EROFS", IoErrorKind.READ_ONLY_FILESYSTEM),
    ("ESTALE", IoErrorKind.STALE_NETWORK_FILE_HANDLE),
    ("EINVAL", IoErrorKind.INVALID_INPUT),
    ("ETIMEDOUT", IoErrorKind.TIMED_OUT),
    ("ENOSPC", IoErrorKind.STORAGE_FULL),
    ("ESPIPE", IoErrorKind.NOT_SEEKABLE),
    ("EDQUOT", IoErrorKind.QUOTA_EXCEEDED),
    ("EFBIG", IoErrorKind.FILE_TOO_LARGE),
    ("EBUSY", IoErrorKind.RESOURCE_BUSY),
    ("ETXTBSY", IoErrorKind.EXECUTABLE_FILE_BUSY),
    ("EDEADLK", IoErrorKind.DEADLOCK),
    ("EXDEV", IoErrorKind.CROSSES_DEVICES),
    ("EMLINK", IoErrorKind.TOO_MANY_LINKS),
    ("ENAMETOOLONG", IoErrorKind.INVALID_FILENAME),
    ("E2BIG", IoErrorKind.ARGUMENT_LIST_TOO_LONG),
    ("EINTR", IoErrorKind.INTERRUPTED),
    ("ENOSYS", IoErrorKind.UNSUPPORTED),
    ("EOPNOTSUPP", IoErrorKind.UNSUPPORTED),
    ("ENOTSUP", IoErrorKind.UNSUPPORTED),
    ("ENOMEM", IoErrorKind.OUT_OF_MEMORY),
)

_KIND_BY_ERRNO: Final[Mapping[int, IoErrorKind]] = MappingProxyType(
    {getattr(errno, name): kind for name, kind in _ERRNO_NAMES if hasattr(errno, name)}
)

# Checked in order; the first matching class wins.
_KIND_BY_OS_ERROR_TYPE: Final[tuple[tuple[type[OSError], IoErrorKind], ...]] = (
    (FileNotFoundError, IoErrorKind.NOT_FOUND),
    (PermissionError, IoErrorKind.PERMISSION_DENIED),
    (ConnectionRefusedError, IoErrorKind.CONNECTION_REFUSED),
    (ConnectionResetError, IoErrorKind.CONNECTION_RESET),
    (ConnectionAbortedError, IoErrorKind.CONNECTION_ABORTED),
    (BrokenPipeError, IoErrorKind.BROKEN_PIPE),
    (FileExistsError, IoErrorKind.ALREADY_EXISTS),
    (BlockingIOError, IoErrorKind.WOULD_BLOCK),
    (TimeoutError, IoErrorKind.TIMED_OUT),
    (InterruptedError, IoErrorKind.INTERRUPTED),
    (IsADirectoryError, IoErrorKind.IS_A_DIRECTORY),
    (NotADirectoryError, IoErrorKind.NOT_A_DIRECTORY),
)

# Failures Python raises during I/O that are not OSError subclasses.
_KIND_BY_OTHER_ERROR_TYPE: Final[tuple[tuple[type[BaseException], IoErrorKind], ...]] = (
    (EOFError, IoErrorKind.UNEXPECTED_EOF),
    (MemoryError, IoErrorKind.OUT_OF_MEMORY),
    (UnicodeError, IoErrorKind.INVALID_DATA),
)


def error_kind_of(error: BaseException) -> IoErrorKind:
    """Return the I/O error category of ``error``.

    For :class:`OSError` the ``errno`` attribute decides; when it is absent or
    unknown, the exception class is used. A few non-``OSError`` exceptions
    that Python raises while reading or writing (``EOFError``,
    ``MemoryError``, ``UnicodeError``) are categorised too. Everything else
    is :attr:`IoErrorKind.OTHER`.

    Example:
        >>> import errno
        >>> error_kind_of(OSError(errno.ENOENT, "missing"))
        <IoErrorKind.NOT_FOUND: 'not_found'>
        >>> error_kind_of(BrokenPipeError())
        <IoErrorKind.BROKEN_PIPE: 'broken_pipe'>
        >>> error_kind_of(KeyError("x"))
        <IoErrorKind.OTHER: 'other'>
    """
    if isinstance(error, OSError):
        if error.errno is not None and error.errno in _KIND_BY_ERRNO:
            return _KIND_BY_ERRNO[error.errno]
        for os_error_type, kind in _KIND_BY_OS_ERROR_TYPE:
            if isinstance(error, os_error_type):
                return kind
        return IoErrorKind.OTHER

    for error_type, kind in _KIND_BY_OTHER_ERROR_TYPE:
        if isinstance(error, error_type):
            return kind
    return IoErrorKind.OTHER


def classify_error_kind(kind: IoErrorKind, table: ErrorKindTable | None = None) -> ExitCode:
    """Map an I/O error category to the best-fitting exit code.

    Total: categories without an entry in ``table`` yield
    :data:`FALLBACK_EXIT_CODE` (``IOERR``).

    Args:
        kind: Category to classify.
        table: Mapping to consult instead of :data:`DEFAULT_ERROR_KIND_TABLE`.

    Example:
        >>> classify_error_kind(IoErrorKind.PERMISSION_DENIED)
        <ExitCode.NOPERM: 77>
        >>> classify_error_kind(IoErrorKind.STORAGE_FULL)
        <ExitCode.IOERR: 74>
    """
    active = DEFAULT_ERROR_KIND_TABLE if table is None else table
    return active.get(kind, FALLBACK_EXIT_CODE)


def from_io_error(error: BaseException, table: ErrorKindTable | None = None) -> ExitCode:
    """Convert an I/O error object into an exit code.

    The message and context of ``error`` are discarded; only its category is
    forwarded through :func:`classify_error_kind`.

    Example:
        >>> from_io_error(FileNotFoundError(2, "No such file or directory"))
        <ExitCode.NOINPUT: 66>
    """
    return classify_error_kind(error_kind_of(error), table)


def build_error_kind_table(overrides: Mapping[IoErrorKind, ExitCode] | None = None) -> ErrorKindTable:
    """Return the pinned table with ``overrides`` applied on top.

    Example:
        >>> table = build_error_kind_table({IoErrorKind.BROKEN_PIPE: ExitCode.IOERR})
        >>> table[IoErrorKind.BROKEN_PIPE]
        <ExitCode.IOERR: 74>
        >>> table[IoErrorKind.NOT_FOUND]
        <ExitCode.NOINPUT: 66>
    """
    merged = dict(DEFAULT_ERROR_KIND_TABLE)
    if overrides:
        merged.update(overrides)
    return MappingProxyType(merged)


__all__ = [
    "DEFAULT_ERROR_KIND_TABLE",
    "FALLBACK_EXIT_CODE",
    "ErrorKindTable",
    "IoErrorKind",
    "build_error_kind_table",
    "classify_error_kind",
    "error_kind_of",
    "from_io_error",
]
