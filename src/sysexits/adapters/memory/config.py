"""In-memory configuration adapter for testing.

Satisfies the same Protocol as the production loader without touching the
filesystem or lib_layered_config discovery.
"""

from __future__ import annotations

from lib_layered_config import Config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


__all__ = ["get_config_in_memory"]
