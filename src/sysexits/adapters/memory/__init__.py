"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no logging runtime, no process exit side effects.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.process` - Termination spy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .process import TerminationSpy

# Static conformance assertions
if TYPE_CHECKING:
    from sysexits.application.ports import GetConfig, InitLogging, TerminateProcess

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_terminate_process: TerminateProcess = TerminationSpy().terminate_process

__all__ = [
    "TerminationSpy",
    "get_config_in_memory",
    "init_logging_in_memory",
]
