"""Application layer - port definitions.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    GetConfig,
    InitLogging,
    LoadSysexitsSettings,
    TerminateProcess,
)

__all__ = [
    "GetConfig",
    "InitLogging",
    "LoadSysexitsSettings",
    "TerminateProcess",
]
