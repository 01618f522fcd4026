"""Program entry wrapper with production wiring.

Host programs call :func:`run` as the very last statement of their entry
point; it loads configuration, initialises logging, runs the main function
and terminates the process with the resulting :class:`ExitCode`.

System Role:
    Sits at package level (outside adapters) so it can wire the composition
    root into the adapters without violating layer constraints.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, NoReturn

from .adapters.config.settings import error_kind_table_from_settings
from .adapters.process.boundary import run_main
from .composition import build_production
from .domain.errors import ConfigurationError
from .domain.exit_code import ExitCode

if TYPE_CHECKING:
    from .composition import AppServices

logger = logging.getLogger(__name__)


def run(
    func: Callable[[], object],
    *,
    services_factory: Callable[[], AppServices] | None = None,
    profile: str | None = None,
) -> NoReturn:
    """Run ``func`` and terminate the process with its exit code.

    The ``[sysexits]`` configuration supplies the traceback preference and
    error-kind overrides. Configuration that cannot be loaded (an invalid
    profile, an unreadable layer, a malformed ``[lib_log_rich]`` or
    ``[sysexits]`` section) terminates with :attr:`ExitCode.CONFIG` before
    ``func`` runs.

    Args:
        func: Zero-argument main function. It may return None, an
            :class:`ExitCode`, a :data:`~sysexits.Result`, or raise.
        services_factory: Factory returning AppServices. Defaults to
            :func:`~sysexits.composition.build_production`.
        profile: Optional configuration profile name.

    Example:
        >>> def main() -> None:
        ...     print("hello")
        >>> run(main)  # doctest: +SKIP
    """
    services = (services_factory or build_production)()

    try:
        config = services.get_config(profile=profile)
        services.init_logging(config)
        settings = services.load_sysexits_settings(config)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        services.terminate_process(ExitCode.CONFIG)

    code = run_main(
        func,
        error_kind_table=error_kind_table_from_settings(settings),
        trace_back=settings.traceback,
    )
    services.terminate_process(code)


__all__ = ["run"]
