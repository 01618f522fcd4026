"""Configuration adapter - layered loading and typed settings.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.settings` - ``[sysexits]`` section model and error-kind table
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path
from .settings import (
    SysexitsConfigModel,
    error_kind_table_from_settings,
    load_error_kind_table,
    load_sysexits_settings,
)

__all__ = [
    "SysexitsConfigModel",
    "error_kind_table_from_settings",
    "get_config",
    "get_default_config_path",
    "load_error_kind_table",
    "load_sysexits_settings",
]
