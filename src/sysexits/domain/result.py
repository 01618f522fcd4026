"""Result type whose error channel is an :class:`ExitCode`.

Fallible application code returns :class:`Success` or :class:`Failure`
instead of inventing its own error type, and the program boundary collapses
the outcome into a final exit code with :func:`collapse`.

Contents:
    * :class:`Success` - Successful outcome carrying a payload.
    * :class:`Failure` - Failed outcome carrying an exit code.
    * :data:`Result` - ``Success[T] | Failure``.
    * :func:`collapse` - Result to exit code.
    * :func:`capture` - Run a callable and return its Result.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .error_kind import ErrorKindTable, from_io_error
from .errors import ExitCodeError
from .exit_code import ExitCode

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome; ``value`` only proves that success occurred.

    Example:
        >>> collapse(Success(42))
        <ExitCode.OK: 0>
    """

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome reported as an exit code.

    Plain integers are validated with :meth:`ExitCode.try_from`.

    Example:
        >>> Failure(66).code
        <ExitCode.NOINPUT: 66>
    """

    code: ExitCode

    def __post_init__(self) -> None:
        if not isinstance(self.code, ExitCode):
            object.__setattr__(self, "code", ExitCode.try_from(self.code))

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]
"""Outcome of a fallible operation with :class:`ExitCode` as the error."""


def collapse(result: Result[Any]) -> ExitCode:
    """Collapse a result into its exit code.

    :class:`Success` becomes :attr:`ExitCode.OK` (the payload is discarded);
    :class:`Failure` passes its code through unchanged.

    Raises:
        TypeError: ``result`` is neither a Success nor a Failure.

    Example:
        >>> collapse(Success(None))
        <ExitCode.OK: 0>
        >>> collapse(Failure(ExitCode.USAGE))
        <ExitCode.USAGE: 64>
    """
    if isinstance(result, Failure):
        return result.code
    if isinstance(result, Success):
        return ExitCode.OK
    raise TypeError(f"expected Success or Failure, got {type(result).__name__}")


def capture(
    func: Callable[..., T],
    *args: Any,
    error_kind_table: ErrorKindTable | None = None,
    **kwargs: Any,
) -> Result[T]:
    """Call ``func(*args, **kwargs)`` and wrap its outcome in a :data:`Result`.

    :class:`ExitCodeError` becomes a Failure with its code; :class:`OSError`
    becomes a Failure with the classified exit code. Other exceptions
    propagate.

    Args:
        func: Callable to run.
        *args: Positional arguments for ``func``.
        error_kind_table: Table forwarded to :func:`from_io_error`. Keyword
            only and never forwarded to ``func``.
        **kwargs: Keyword arguments for ``func``.

    Example:
        >>> capture(lambda: 1 + 1)
        Success(value=2)
        >>> capture(int, "ff", base=16)
        Success(value=255)
        >>> def missing() -> str:
        ...     raise FileNotFoundError(2, "No such file or directory")
        >>> capture(missing)
        Failure(code=<ExitCode.NOINPUT: 66>)
    """
    try:
        return Success(func(*args, **kwargs))
    except ExitCodeError as exc:
        return Failure(exc.code)
    except OSError as exc:
        return Failure(from_io_error(exc, error_kind_table))


__all__ = [
    "Failure",
    "Result",
    "Success",
    "capture",
    "collapse",
]
