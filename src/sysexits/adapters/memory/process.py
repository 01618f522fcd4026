"""In-memory process adapter for testing.

Contents:
    * :class:`TerminationSpy` - Records exit codes instead of shutting down logging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NoReturn

from ...domain.exit_code import ExitCode


def _empty_code_list() -> list[ExitCode]:
    return []


@dataclass
class TerminationSpy:
    """Captures termination requests for test assertions.

    ``terminate_process`` still raises ``SystemExit`` so control flow matches
    production, but leaves the logging runtime alone.

    Example:
        >>> spy = TerminationSpy()
        >>> try:
        ...     spy.terminate_process(ExitCode.CONFIG)
        ... except SystemExit as exc:
        ...     exc.code
        78
        >>> spy.last_code
        <ExitCode.CONFIG: 78>
    """

    codes: list[ExitCode] = field(default_factory=_empty_code_list)

    @property
    def last_code(self) -> ExitCode | None:
        """Most recent exit code, or ``None`` when nothing terminated."""
        return self.codes[-1] if self.codes else None

    def clear(self) -> None:
        """Reset captured codes for the next test."""
        self.codes.clear()

    def terminate_process(self, code: ExitCode) -> NoReturn:
        """Record ``code`` and raise ``SystemExit`` with its value."""
        self.codes.append(code)
        raise SystemExit(int(code))


__all__ = ["TerminationSpy"]
