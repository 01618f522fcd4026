"""Domain layer - pure exit-code logic with no I/O or framework dependencies.

Contents:
    * :mod:`.exit_code` - The ``<sysexits.h>`` enum and integer conversion
    * :mod:`.errors` - Domain exception types
    * :mod:`.error_kind` - I/O error category classification
    * :mod:`.process_status` - Process-completion status decoding
    * :mod:`.result` - Result type with an exit-code error channel
"""

from __future__ import annotations

from .error_kind import (
    DEFAULT_ERROR_KIND_TABLE,
    FALLBACK_EXIT_CODE,
    ErrorKindTable,
    IoErrorKind,
    build_error_kind_table,
    classify_error_kind,
    error_kind_of,
    from_io_error,
)
from .errors import (
    ConfigurationError,
    ExitCodeError,
    ExitCodeRangeError,
    ExitStatusError,
    SysexitsError,
)
from .exit_code import ExitCode
from .process_status import (
    from_exit_status,
    from_process,
    from_returncode,
    from_wait_status,
)
from .result import Failure, Result, Success, capture, collapse

__all__ = [
    # Exit codes
    "ExitCode",
    # Errors
    "ConfigurationError",
    "ExitCodeError",
    "ExitCodeRangeError",
    "ExitStatusError",
    "SysexitsError",
    # Error kinds
    "DEFAULT_ERROR_KIND_TABLE",
    "FALLBACK_EXIT_CODE",
    "ErrorKindTable",
    "IoErrorKind",
    "build_error_kind_table",
    "classify_error_kind",
    "error_kind_of",
    "from_io_error",
    # Process status
    "from_exit_status",
    "from_process",
    "from_returncode",
    "from_wait_status",
    # Result
    "Failure",
    "Result",
    "Success",
    "capture",
    "collapse",
]
