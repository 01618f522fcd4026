"""Process adapter - the exit-status boundary.

Contents:
    * :func:`.boundary.terminate_process` - End the process with an exit code
    * :func:`.boundary.exit_with` - Terminate from an ExitCode, Result, or integer
    * :func:`.boundary.run_main` - Map a main function's outcome to an exit code
"""

from __future__ import annotations

from .boundary import exit_code_of, exit_with, run_main, terminate_process

__all__ = [
    "exit_code_of",
    "exit_with",
    "run_main",
    "terminate_process",
]
