"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol defines a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions satisfy them
structurally (PEP 544).

System Role:
    Sits between domain and adapters. ``Config`` is imported under
    ``TYPE_CHECKING`` only so the layer stays free of infrastructure imports
    at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn, Protocol

from ..domain.exit_code import ExitCode

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import SysexitsConfigModel


class GetConfig(Protocol):
    """Load layered configuration; failures raise ``ConfigurationError``."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize logging; a malformed section raises ``ConfigurationError``."""

    def __call__(self, config: Config) -> None: ...


class LoadSysexitsSettings(Protocol):
    """Parse the ``[sysexits]`` section into typed settings."""

    def __call__(self, config: Config) -> SysexitsConfigModel: ...


class TerminateProcess(Protocol):
    """End the current process with the given exit code."""

    def __call__(self, code: ExitCode) -> NoReturn: ...


__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadSysexitsSettings",
    "TerminateProcess",
]
