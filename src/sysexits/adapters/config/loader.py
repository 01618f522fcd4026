"""Layered configuration for the ``[sysexits]`` and ``[lib_log_rich]`` sections.

Configuration is merged by :mod:`lib_layered_config` from the bundled
``defaultconfig.toml`` and the app, host, user, dotenv and environment layers.
Environment overrides use the ``SYSEXITS___<SECTION>__<KEY>`` form, e.g.
``SYSEXITS___SYSEXITS__TRACEBACK=true``.

Failures to load (an unsafe profile name, an unparsable layer file) surface
as :class:`~sysexits.domain.errors.ConfigurationError` so the process
boundary can end with ``EX_CONFIG``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    ConfigError,
    read_config,
    validate_profile_name,
)

from sysexits import __init__conf__
from sysexits.domain.errors import ConfigurationError

#: Name of the bundled defaults file, shipped next to this module.
DEFAULT_CONFIG_NAME = "defaultconfig.toml"


class CachedConfigLoader(Protocol):
    """Config loader callable that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...

    def cache_clear(self) -> None: ...


def validate_profile(profile: str) -> None:
    """Reject profile names that are unsafe as a directory component.

    Raises:
        ValueError: Empty, longer than ``DEFAULT_MAX_PROFILE_LENGTH``, path
            separators or traversal, or a Windows reserved name.

    Example:
        >>> validate_profile("staging")
        >>> validate_profile("..")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: invalid profile
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the location of the bundled defaults file."""
    return Path(__file__).with_name(DEFAULT_CONFIG_NAME)


@lru_cache(maxsize=4)
def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _load_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return the merged configuration, cached per ``(profile, start_dir)``.

    Args:
        profile: Optional profile; configuration is then read from
            ``profile/<name>/`` below every layer directory.
        start_dir: Directory where ``.env`` discovery starts; defaults to the
            working directory.

    Raises:
        ConfigurationError: The profile name is unsafe or a layer could not
            be read.

    Example:
        >>> config = get_config()
        >>> config.get("sysexits", default={}).get("traceback")
        False
    """
    if profile is not None:
        try:
            validate_profile(profile)
        except ValueError as exc:
            raise ConfigurationError(f"invalid configuration profile {profile!r}: {exc}") from exc
    try:
        return _read_layers(profile, start_dir)
    except ConfigError as exc:
        raise ConfigurationError(f"cannot load configuration: {exc}") from exc


_load_config.cache_clear = _read_layers.cache_clear  # type: ignore[attr-defined]
get_config = cast(CachedConfigLoader, _load_config)


__all__ = [
    "CachedConfigLoader",
    "DEFAULT_CONFIG_NAME",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
