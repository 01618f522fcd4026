"""I/O error category classification: pinned table, derivation, and overrides."""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from sysexits import (
    DEFAULT_ERROR_KIND_TABLE,
    FALLBACK_EXIT_CODE,
    ExitCode,
    IoErrorKind,
    build_error_kind_table,
    classify_error_kind,
    error_kind_of,
    from_io_error,
)

PINNED_GROUPS: dict[ExitCode, tuple[IoErrorKind, ...]] = {
    ExitCode.NOINPUT: (IoErrorKind.NOT_FOUND,),
    ExitCode.NOPERM: (IoErrorKind.PERMISSION_DENIED,),
    ExitCode.OSERR: (
        IoErrorKind.CONNECTION_REFUSED,
        IoErrorKind.HOST_UNREACHABLE,
        IoErrorKind.NETWORK_UNREACHABLE,
        IoErrorKind.OUT_OF_MEMORY,
    ),
    ExitCode.TEMPFAIL: (
        IoErrorKind.CONNECTION_RESET,
        IoErrorKind.CONNECTION_ABORTED,
        IoErrorKind.NOT_CONNECTED,
        IoErrorKind.BROKEN_PIPE,
        IoErrorKind.TIMED_OUT,
        IoErrorKind.INTERRUPTED,
    ),
    ExitCode.UNAVAILABLE: (
        IoErrorKind.ADDR_IN_USE,
        IoErrorKind.ADDR_NOT_AVAILABLE,
        IoErrorKind.NETWORK_DOWN,
    ),
    ExitCode.CANTCREAT: (IoErrorKind.ALREADY_EXISTS, IoErrorKind.READ_ONLY_FILESYSTEM),
    ExitCode.PROTOCOL: (IoErrorKind.WOULD_BLOCK, IoErrorKind.UNSUPPORTED),
    ExitCode.DATAERR: (IoErrorKind.INVALID_INPUT, IoErrorKind.INVALID_DATA),
    ExitCode.SOFTWARE: (IoErrorKind.WRITE_ZERO, IoErrorKind.UNEXPECTED_EOF),
}

PINNED_CASES: list[tuple[IoErrorKind, ExitCode]] = [
    (kind, code) for code, kinds in PINNED_GROUPS.items() for kind in kinds
]

UNLISTED_KINDS: list[IoErrorKind] = [
    kind for kind in IoErrorKind if kind not in {k for k, _ in PINNED_CASES}
]


# ======================== classify_error_kind ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("kind", "expected"), PINNED_CASES, ids=lambda v: getattr(v, "name", str(v)))
def test_pinned_kinds_map_to_their_exit_code(kind: IoErrorKind, expected: ExitCode) -> None:
    """Every listed category has its pinned exit code."""
    assert classify_error_kind(kind) is expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize("kind", UNLISTED_KINDS, ids=lambda v: v.name)
def test_unlisted_kinds_fall_back_to_ioerr(kind: IoErrorKind) -> None:
    """Categories without an entry map to IOERR."""
    assert classify_error_kind(kind) is ExitCode.IOERR


@pytest.mark.os_agnostic
def test_classifier_is_total() -> None:
    """Every category yields a member; the call never raises."""
    assert all(isinstance(classify_error_kind(kind), ExitCode) for kind in IoErrorKind)


@pytest.mark.os_agnostic
def test_pinned_table_covers_exactly_the_grouped_kinds() -> None:
    """The pinned table holds the listed assignments and nothing else."""
    assert dict(DEFAULT_ERROR_KIND_TABLE) == dict(PINNED_CASES)
    assert FALLBACK_EXIT_CODE is ExitCode.IOERR


@pytest.mark.os_agnostic
def test_pinned_table_is_read_only() -> None:
    """Callers cannot mutate the shared default table."""
    with pytest.raises(TypeError):
        DEFAULT_ERROR_KIND_TABLE[IoErrorKind.OTHER] = ExitCode.OK  # type: ignore[index]


@pytest.mark.os_agnostic
def test_custom_table_replaces_the_pinned_one() -> None:
    """A caller-supplied table is consulted instead of the default."""
    table = {IoErrorKind.NOT_FOUND: ExitCode.OSFILE}

    assert classify_error_kind(IoErrorKind.NOT_FOUND, table) is ExitCode.OSFILE
    assert classify_error_kind(IoErrorKind.PERMISSION_DENIED, table) is ExitCode.IOERR


# ======================== error_kind_of ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (FileNotFoundError(), IoErrorKind.NOT_FOUND),
        (PermissionError(), IoErrorKind.PERMISSION_DENIED),
        (ConnectionRefusedError(), IoErrorKind.CONNECTION_REFUSED),
        (ConnectionResetError(), IoErrorKind.CONNECTION_RESET),
        (ConnectionAbortedError(), IoErrorKind.CONNECTION_ABORTED),
        (BrokenPipeError(), IoErrorKind.BROKEN_PIPE),
        (FileExistsError(), IoErrorKind.ALREADY_EXISTS),
        (BlockingIOError(), IoErrorKind.WOULD_BLOCK),
        (TimeoutError(), IoErrorKind.TIMED_OUT),
        (InterruptedError(), IoErrorKind.INTERRUPTED),
        (IsADirectoryError(), IoErrorKind.IS_A_DIRECTORY),
        (NotADirectoryError(), IoErrorKind.NOT_A_DIRECTORY),
    ],
    ids=lambda v: type(v).__name__ if isinstance(v, BaseException) else v.name,
)
def test_os_error_subclass_decides_without_errno(error: OSError, expected: IoErrorKind) -> None:
    """Without an errno the exception class selects the category."""
    assert error_kind_of(error) is expected


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("code", "expected"),
    [
        (errno.ENOENT, IoErrorKind.NOT_FOUND),
        (errno.EACCES, IoErrorKind.PERMISSION_DENIED),
        (errno.EPERM, IoErrorKind.PERMISSION_DENIED),
        (errno.EPIPE, IoErrorKind.BROKEN_PIPE),
        (errno.EEXIST, IoErrorKind.ALREADY_EXISTS),
        (errno.EINVAL, IoErrorKind.INVALID_INPUT),
        (errno.ENOSPC, IoErrorKind.STORAGE_FULL),
        (errno.EINTR, IoErrorKind.INTERRUPTED),
        (errno.ENOMEM, IoErrorKind.OUT_OF_MEMORY),
        (errno.EXDEV, IoErrorKind.CROSSES_DEVICES),
    ],
    ids=lambda v: errno.errorcode.get(v, str(v)) if isinstance(v, int) else v.name,
)
def test_errno_decides_for_plain_os_error(code: int, expected: IoErrorKind) -> None:
    """A plain OSError is categorised by its errno."""
    assert error_kind_of(OSError(code, "boom")) is expected


@pytest.mark.os_agnostic
def test_errno_takes_precedence_over_class() -> None:
    """When both are present, errno wins over the exception class."""
    assert error_kind_of(PermissionError(errno.EROFS, "read-only")) is IoErrorKind.READ_ONLY_FILESYSTEM


@pytest.mark.os_agnostic
def test_unknown_errno_falls_back_to_class() -> None:
    """An errno outside the known set defers to the exception class."""
    assert error_kind_of(FileNotFoundError(99999, "odd")) is IoErrorKind.NOT_FOUND


@pytest.mark.os_agnostic
def test_plain_os_error_without_errno_is_other() -> None:
    """A bare OSError carries no category."""
    assert error_kind_of(OSError("who knows")) is IoErrorKind.OTHER


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (EOFError(), IoErrorKind.UNEXPECTED_EOF),
        (MemoryError(), IoErrorKind.OUT_OF_MEMORY),
        (UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte"), IoErrorKind.INVALID_DATA),
        (KeyError("x"), IoErrorKind.OTHER),
        (RuntimeError("x"), IoErrorKind.OTHER),
    ],
    ids=lambda v: type(v).__name__ if isinstance(v, BaseException) else v.name,
)
def test_non_os_errors_raised_during_io(error: BaseException, expected: IoErrorKind) -> None:
    """A few non-OSError exceptions have an I/O category; the rest are OTHER."""
    assert error_kind_of(error) is expected


# ======================== from_io_error ========================


@pytest.mark.os_agnostic
def test_from_io_error_discards_the_message() -> None:
    """Only the category reaches the exit code."""
    first = from_io_error(FileNotFoundError(errno.ENOENT, "a.txt"))
    second = from_io_error(FileNotFoundError(errno.ENOENT, "b.txt"))

    assert first is second is ExitCode.NOINPUT


@pytest.mark.os_agnostic
def test_from_io_error_uses_the_supplied_table() -> None:
    """The historical BROKEN_PIPE -> IOERR assignment can be restored."""
    table = build_error_kind_table({IoErrorKind.BROKEN_PIPE: ExitCode.IOERR})

    assert from_io_error(BrokenPipeError()) is ExitCode.TEMPFAIL
    assert from_io_error(BrokenPipeError(), table) is ExitCode.IOERR


@pytest.mark.os_agnostic
def test_real_missing_file_maps_to_noinput(tmp_path: Path) -> None:
    """Opening a missing file produces NOINPUT end to end."""
    missing = tmp_path / "absent.txt"

    with pytest.raises(OSError) as exc_info:
        missing.open()

    assert from_io_error(exc_info.value) is ExitCode.NOINPUT


# ======================== build_error_kind_table ========================


@pytest.mark.os_agnostic
def test_build_without_overrides_equals_default() -> None:
    """No overrides yields a copy of the pinned table."""
    assert dict(build_error_kind_table()) == dict(DEFAULT_ERROR_KIND_TABLE)
    assert dict(build_error_kind_table({})) == dict(DEFAULT_ERROR_KIND_TABLE)


@pytest.mark.os_agnostic
def test_build_merges_overrides_over_default() -> None:
    """Overrides replace single entries and may add unlisted kinds."""
    table = build_error_kind_table(
        {
            IoErrorKind.CONNECTION_RESET: ExitCode.PROTOCOL,
            IoErrorKind.STORAGE_FULL: ExitCode.CANTCREAT,
        }
    )

    assert table[IoErrorKind.CONNECTION_RESET] is ExitCode.PROTOCOL
    assert table[IoErrorKind.STORAGE_FULL] is ExitCode.CANTCREAT
    assert table[IoErrorKind.NOT_FOUND] is ExitCode.NOINPUT


@pytest.mark.os_agnostic
def test_build_leaves_the_default_untouched() -> None:
    """Merging never mutates the shared pinned table."""
    build_error_kind_table({IoErrorKind.NOT_FOUND: ExitCode.OSFILE})

    assert DEFAULT_ERROR_KIND_TABLE[IoErrorKind.NOT_FOUND] is ExitCode.NOINPUT


@pytest.mark.os_agnostic
def test_kind_values_are_lowercase_names() -> None:
    """Configuration refers to categories by their lowercase member name."""
    assert all(kind.value == kind.name.lower() for kind in IoErrorKind)
