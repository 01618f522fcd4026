"""The system exit codes as defined by ``<sysexits.h>``.

This module is the stable public API, routing imports through the
architectural layers:

- Domain exports: the :class:`ExitCode` enum, conversions, error kinds,
  the Result alias and error types
- Process boundary: termination and main-function wrappers
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info, version

# Process boundary
from .adapters.process import exit_code_of, exit_with, run_main, terminate_process

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    DEFAULT_ERROR_KIND_TABLE,
    FALLBACK_EXIT_CODE,
    ConfigurationError,
    ErrorKindTable,
    ExitCode,
    ExitCodeError,
    ExitCodeRangeError,
    ExitStatusError,
    Failure,
    IoErrorKind,
    Result,
    Success,
    SysexitsError,
    build_error_kind_table,
    capture,
    classify_error_kind,
    collapse,
    error_kind_of,
    from_exit_status,
    from_io_error,
    from_process,
    from_returncode,
    from_wait_status,
)
from .entry import run

__version__ = version

__all__ = [
    "DEFAULT_ERROR_KIND_TABLE",
    "FALLBACK_EXIT_CODE",
    "ConfigurationError",
    "ErrorKindTable",
    "ExitCode",
    "ExitCodeError",
    "ExitCodeRangeError",
    "ExitStatusError",
    "Failure",
    "IoErrorKind",
    "Result",
    "Success",
    "SysexitsError",
    "__version__",
    "build_error_kind_table",
    "capture",
    "classify_error_kind",
    "collapse",
    "error_kind_of",
    "exit_code_of",
    "exit_with",
    "from_exit_status",
    "from_io_error",
    "from_process",
    "from_returncode",
    "from_wait_status",
    "get_config",
    "print_info",
    "run",
    "run_main",
    "terminate_process",
]
