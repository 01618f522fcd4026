"""Static package metadata.

The ``version`` line is kept in sync with ``pyproject.toml`` on release.
``LAYEREDCONF_*`` identifiers select the platform-specific configuration
directories searched by :mod:`lib_layered_config`.
"""

from __future__ import annotations

name = "sysexits"
title = "The system exit codes as defined by <sysexits.h>"
version = "0.1.0"
homepage = "https://man.openbsd.org/sysexits"
author = "sysexits contributors"

LAYEREDCONF_VENDOR = "sysexits"
LAYEREDCONF_APP = "sysexits"
LAYEREDCONF_SLUG = "sysexits"


def print_info() -> None:
    """Print the summarised metadata block for this package."""
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
