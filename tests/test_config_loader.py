"""Layered configuration loader: bundled defaults, caching, and profile validation."""

from __future__ import annotations

from pathlib import Path

import pytest
from lib_layered_config import LayerLoadError

from sysexits import ConfigurationError, get_config
from sysexits.adapters.config import loader
from sysexits.adapters.config.loader import get_default_config_path, validate_profile


@pytest.mark.os_agnostic
def test_default_config_path_points_at_bundled_file() -> None:
    """The bundled defaults live beside the loader module."""
    path = get_default_config_path()

    assert path.name == "defaultconfig.toml"
    assert path.is_file()


@pytest.mark.os_agnostic
def test_get_config_includes_bundled_defaults(clear_config_cache: None, tmp_path: Path) -> None:
    """The [sysexits] and [lib_log_rich] sections come from the defaults layer."""
    config = get_config(start_dir=str(tmp_path))
    data = config.as_dict()

    assert "traceback" in data["sysexits"]
    assert "environment" in data["lib_log_rich"]


@pytest.mark.os_agnostic
def test_get_config_is_cached(clear_config_cache: None, tmp_path: Path) -> None:
    """Identical arguments return the cached Config instance."""
    first = get_config(start_dir=str(tmp_path))
    second = get_config(start_dir=str(tmp_path))

    assert first is second


@pytest.mark.os_agnostic
def test_cache_clear_forces_a_reload(clear_config_cache: None, tmp_path: Path) -> None:
    """cache_clear drops the cached instance."""
    first = get_config(start_dir=str(tmp_path))

    get_config.cache_clear()

    assert get_config(start_dir=str(tmp_path)) is not first


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["production", "staging-eu", "test_1"])
def test_valid_profiles_are_accepted(profile: str) -> None:
    """Ordinary profile names pass validation."""
    validate_profile(profile)


@pytest.mark.os_agnostic
@pytest.mark.parametrize("profile", ["", "../etc/passwd", "a/b", "x" * 200])
def test_invalid_profiles_are_rejected(profile: str) -> None:
    """Empty, traversal, separators, and overlong names are refused."""
    with pytest.raises(ValueError):
        validate_profile(profile)


@pytest.mark.os_agnostic
def test_get_config_reports_an_unsafe_profile_as_configuration_error(
    clear_config_cache: None,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A traversal attempt never reaches the filesystem."""
    reads: list[object] = []
    monkeypatch.setattr(loader, "read_config", lambda **kwargs: reads.append(kwargs))

    with pytest.raises(ConfigurationError, match="invalid configuration profile") as exc_info:
        get_config(profile="../../etc")

    assert isinstance(exc_info.value.__cause__, ValueError)
    assert reads == []


@pytest.mark.os_agnostic
def test_get_config_reports_unreadable_layers_as_configuration_error(
    clear_config_cache: None,
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """A layer lib_layered_config cannot parse becomes a ConfigurationError."""

    def _broken_read_config(**_kwargs: object) -> None:
        raise LayerLoadError("config.toml: expected '=' after a key")

    monkeypatch.setattr(loader, "read_config", _broken_read_config)

    with pytest.raises(ConfigurationError, match="cannot load configuration") as exc_info:
        get_config(start_dir=str(tmp_path))

    assert isinstance(exc_info.value.__cause__, LayerLoadError)
