"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.config` - Layered configuration loading and typed settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.process` - Exit-status boundary with lib_cli_exit_tools
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
