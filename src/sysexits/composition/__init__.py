"""Composition root: the services `run` needs, wired for production or tests.

Production wiring reads layered configuration and really ends the process;
testing wiring uses in-memory adapters and a termination spy instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_sysexits_settings

# Logging services
from ..adapters.logging.setup import init_logging

# Process services
from ..adapters.process.boundary import terminate_process

# Static conformance assertions: pyright verifies each adapter function
# structurally satisfies its Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.process import TerminationSpy
    from ..application.ports import (
        GetConfig,
        InitLogging,
        LoadSysexitsSettings,
        TerminateProcess,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_sysexits_settings: LoadSysexitsSettings = load_sysexits_settings
    _assert_terminate_process: TerminateProcess = terminate_process


@dataclass(frozen=True, slots=True)
class AppServices:
    """Services used by :func:`sysexits.run`, one per application port."""

    get_config: GetConfig
    init_logging: InitLogging
    load_sysexits_settings: LoadSysexitsSettings
    terminate_process: TerminateProcess


def build_production() -> AppServices:
    """Services that read real configuration and terminate the process."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_sysexits_settings=load_sysexits_settings,
        terminate_process=terminate_process,
    )


def build_testing(*, spy: TerminationSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional TerminationSpy to assert on recorded exit codes. A fresh
            spy is created when None.

    Returns:
        AppServices container with in-memory adapters. Settings parsing stays
        the production implementation since it is pure.
    """
    from ..adapters.memory import (
        TerminationSpy,
        get_config_in_memory,
        init_logging_in_memory,
    )

    termination_spy = spy if spy is not None else TerminationSpy()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        load_sysexits_settings=load_sysexits_settings,
        terminate_process=termination_spy.terminate_process,
    )


__all__ = [
    # Configuration
    "get_config",
    "load_sysexits_settings",
    # Logging
    "init_logging",
    # Process
    "terminate_process",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
