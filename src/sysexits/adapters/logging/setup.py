"""Centralized lib_log_rich initialization.

Every process boundary that runs with production services calls
:func:`init_logging` before executing user code; the runtime is initialised
at most once per process and standard ``logging`` records are bridged into
it, so library modules only ever use ``logging.getLogger(__name__)``.

Contents:
    * :class:`LoggingConfigModel` - ``[lib_log_rich]`` section model.
    * :func:`init_logging` - Idempotent runtime initialization.
    * :func:`shutdown_logging` - Flush and stop the runtime.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError

from sysexits import __init__conf__
from sysexits.domain.errors import ConfigurationError


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Extra fields pass through untouched to ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="batch").service
        'batch'
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a ``RuntimeConfig``.

    ``service`` falls back to the package name when unset.

    Raises:
        ConfigurationError: The section holds values lib_log_rich rejects.
    """
    raw: object = config.get("lib_log_rich", default={})
    section = dict(cast("Mapping[str, object]", raw)) if isinstance(raw, Mapping) else {}
    try:
        parsed = LoggingConfigModel.model_validate(section)
        extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
        return lib_log_rich.runtime.RuntimeConfig(
            service=parsed.service or __init__conf__.name,
            environment=parsed.environment,
            **extra,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"invalid [lib_log_rich] configuration: {exc}") from exc


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime from ``config``.

    Safe to call repeatedly: the first call enables ``.env`` loading (so
    ``LOG_*`` variables apply), initialises the runtime and attaches the
    standard ``logging`` bridge; later calls return immediately.

    Raises:
        ConfigurationError: ``[lib_log_rich]`` is malformed; the runtime is
            left uninitialised.

    Example:
        >>> from lib_layered_config import Config
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


def shutdown_logging() -> None:
    """Stop the runtime, but only from the main thread.

    Worker threads terminating early must not tear down logging for the rest
    of the process.
    """
    is_main_thread = threading.current_thread() is threading.main_thread()
    if is_main_thread and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
    "shutdown_logging",
]
