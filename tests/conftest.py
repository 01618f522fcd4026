"""Shared pytest fixtures for domain, adapter, and process-boundary tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from lib_layered_config import Config

if TYPE_CHECKING:
    from sysexits.adapters.memory import TerminationSpy
    from sysexits.composition import AppServices

CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags, directly or through
    ``run_main``.

    Yields:
        None: Test runs with isolated traceback state.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before each test.

    Only clears before, not after, so a test that monkeypatches the loader
    does not break teardown.
    """
    from sysexits.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_traceback(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"sysexits": {"traceback": True}})
            assert load_sysexits_settings(config).traceback is True
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def termination_spy() -> TerminationSpy:
    """Provide a fresh TerminationSpy recording requested exit codes."""
    from sysexits.adapters.memory import TerminationSpy

    return TerminationSpy()


@pytest.fixture
def testing_services(termination_spy: TerminationSpy) -> Callable[[], AppServices]:
    """Return a services factory wired with in-memory adapters.

    The factory shares ``termination_spy`` so tests can assert on the code
    ``run`` terminated with.

    Example:
        def test_run(testing_services, termination_spy) -> None:
            with pytest.raises(SystemExit):
                run(lambda: None, services_factory=testing_services)
            assert termination_spy.last_code is ExitCode.OK
    """
    from sysexits.composition import build_testing

    services = build_testing(spy=termination_spy)
    return lambda: services


@pytest.fixture
def inject_config(
    termination_spy: TerminationSpy,
) -> Callable[[Config], Callable[[], AppServices]]:
    """Return a factory that provides in-memory services with an injected Config.

    Only the configuration source is replaced; settings parsing stays the
    production implementation.

    Example:
        def test_config_error(inject_config, config_factory, termination_spy) -> None:
            factory = inject_config(config_factory({"sysexits": {"bogus": 1}}))
            with pytest.raises(SystemExit):
                run(lambda: None, services_factory=factory)
            assert termination_spy.last_code is ExitCode.CONFIG
    """
    from sysexits.composition import AppServices, build_testing

    def _inject(config: Config) -> Callable[[], AppServices]:
        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        base = build_testing(spy=termination_spy)
        test_services = AppServices(
            get_config=_fake_get_config,
            init_logging=base.init_logging,
            load_sysexits_settings=base.load_sysexits_settings,
            terminate_process=base.terminate_process,
        )
        return lambda: test_services

    return _inject


@pytest.fixture
def silent_logging_shutdown(monkeypatch: pytest.MonkeyPatch) -> list[bool]:
    """Replace the boundary's logging shutdown with a recorder.

    Returns:
        list[bool]: One entry appended per shutdown request.
    """
    from sysexits.adapters.process import boundary

    calls: list[bool] = []
    monkeypatch.setattr(boundary, "shutdown_logging", lambda: calls.append(True))
    return calls
