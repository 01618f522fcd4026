"""Typed ``[sysexits]`` configuration section.

Parses the raw section into :class:`SysexitsConfigModel` with Pydantic and
turns validation failures into :class:`ConfigurationError` at the boundary.

Contents:
    * :class:`SysexitsConfigModel` - Pydantic model for ``[sysexits]``.
    * :func:`load_sysexits_settings` - Parse the section from a Config.
    * :func:`error_kind_table_from_settings` - Pinned table plus parsed overrides.
    * :func:`load_error_kind_table` - Same, straight from a Config.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...domain.error_kind import ErrorKindTable, IoErrorKind, build_error_kind_table
from ...domain.errors import ConfigurationError, ExitCodeRangeError
from ...domain.exit_code import ExitCode

logger = logging.getLogger(__name__)


def _parse_exit_code(raw: object) -> ExitCode:
    """Accept an exit code name (any case) or its integer value."""
    if isinstance(raw, ExitCode):
        return raw
    if isinstance(raw, str):
        try:
            return ExitCode[raw.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown exit code name {raw!r}") from None
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"exit code must be a name or an integer, got {raw!r}")
    try:
        return ExitCode.try_from(raw)
    except ExitCodeRangeError:
        raise ValueError(f"exit code {raw} is not 0 or in 64..=78") from None


def _normalise_kind(raw: object) -> object:
    if isinstance(raw, IoErrorKind):
        return raw
    if isinstance(raw, str):
        return raw.strip().lower()
    return raw


class SysexitsConfigModel(BaseModel):
    """Pydantic model for the ``[sysexits]`` config section.

    Example:
        >>> model = SysexitsConfigModel.model_validate({"error_kinds": {"broken_pipe": "ioerr"}})
        >>> model.error_kinds[IoErrorKind.BROKEN_PIPE]
        <ExitCode.IOERR: 74>
        >>> SysexitsConfigModel().traceback
        False
    """

    traceback: bool = False
    error_kinds: dict[IoErrorKind, ExitCode] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("error_kinds", mode="before")
    @classmethod
    def _coerce_error_kinds(cls, value: object) -> object:
        if not isinstance(value, Mapping):
            return value
        entries = cast("Mapping[object, object]", value)
        return {_normalise_kind(kind): _parse_exit_code(code) for kind, code in entries.items()}


def load_sysexits_settings(config: Config) -> SysexitsConfigModel:
    """Parse the ``[sysexits]`` section of ``config``.

    Raises:
        ConfigurationError: The section contains unknown keys, unknown error
            kinds, unknown exit code names, or values of the wrong type.
    """
    raw: object = config.get("sysexits", default={})
    section = dict(cast("Mapping[str, object]", raw)) if isinstance(raw, Mapping) else raw
    try:
        return SysexitsConfigModel.model_validate(section or {})
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [sysexits] configuration: {exc}") from exc


def error_kind_table_from_settings(settings: SysexitsConfigModel) -> ErrorKindTable:
    """Apply the overrides of parsed settings to the pinned table.

    Each override is logged at debug level.
    """
    for kind, code in settings.error_kinds.items():
        logger.debug("Error kind %s overridden to %s (%d)", kind.value, code.name, code)
    return build_error_kind_table(settings.error_kinds)


def load_error_kind_table(config: Config) -> ErrorKindTable:
    """Return the pinned error-kind table with configured overrides applied.

    Example:
        >>> table = load_error_kind_table(Config({"sysexits": {"error_kinds": {"connection_reset": "PROTOCOL"}}}, {}))
        >>> table[IoErrorKind.CONNECTION_RESET]
        <ExitCode.PROTOCOL: 76>
    """
    return error_kind_table_from_settings(load_sysexits_settings(config))


__all__ = [
    "SysexitsConfigModel",
    "error_kind_table_from_settings",
    "load_error_kind_table",
    "load_sysexits_settings",
]
