"""
Port Injection Tests.

Validates that the application services depend on domain ports:
- Dependency direction (domain and application never import adapters)
- Constructor type hints name interfaces, not concrete adapters
- Services accept any implementation of their ports
"""

import importlib
import inspect
from unittest.mock import MagicMock

import pytest

from envstate.application.polling import PollingEngine
from envstate.application.readiness import ReadinessChecker
from envstate.application.resolver import StateResolver
from envstate.domain.interfaces import (
    ActionExecutorInterface,
    CommandRunnerInterface,
    ExecutionObserverInterface,
    HttpProbeInterface,
)
from envstate.domain.models import ActionOutcome, ActionSpec, StateDefinition


class TestDependencyDirection:
    @pytest.mark.parametrize(
        "module_name",
        [
            "envstate.domain.models",
            "envstate.domain.interfaces",
            "envstate.domain.events",
            "envstate.domain.exceptions",
            "envstate.domain.heuristics",
            "envstate.domain.validation",
        ],
    )
    def test_domain_does_not_import_outer_layers(self, module_name):
        """Domain modules must not import application or infrastructure."""
        source = inspect.getsource(importlib.import_module(module_name))

        for layer in ("application", "infrastructure"):
            assert f"from envstate.{layer}" not in source, (
                f"{module_name} imports {layer}"
            )
            assert f"import envstate.{layer}" not in source, (
                f"{module_name} imports {layer}"
            )

    @pytest.mark.parametrize(
        "module_name",
        [
            "envstate.application.observers",
            "envstate.application.polling",
            "envstate.application.readiness",
            "envstate.application.resolver",
        ],
    )
    def test_application_does_not_import_adapters(self, module_name):
        """Application modules, including lazy imports, stay off infrastructure."""
        source = inspect.getsource(importlib.import_module(module_name))

        assert "envstate.infrastructure" not in source


class TestConstructorHints:
    """Application constructors are typed against ports."""

    @pytest.mark.parametrize(
        ("cls", "param", "interface"),
        [
            (StateResolver, "action_executor", ActionExecutorInterface),
            (StateResolver, "observer", ExecutionObserverInterface),
            (ReadinessChecker, "command_runner", CommandRunnerInterface),
            (ReadinessChecker, "http_probe", HttpProbeInterface),
            (ReadinessChecker, "observer", ExecutionObserverInterface),
            (PollingEngine, "observer", ExecutionObserverInterface),
        ],
    )
    def test_hint_names_interface(self, cls, param, interface):
        hint = str(cls.__init__.__annotations__.get(param, ""))

        assert interface.__name__ in hint, (
            f"{cls.__name__}.{param} should be typed as {interface.__name__}, "
            f"got {hint}"
        )


class TestMockedPorts:
    """Services work with any implementation of their ports."""

    def test_resolver_runs_against_magicmock_ports(self):
        runner = MagicMock(spec=CommandRunnerInterface)
        http = MagicMock(spec=HttpProbeInterface)
        executor = MagicMock(spec=ActionExecutorInterface)
        executor.execute.return_value = ActionOutcome(success=True)
        observer = MagicMock(spec=ExecutionObserverInterface)

        polling = PollingEngine(observer, sleep=lambda _: None)
        checker = ReadinessChecker(runner, http, polling, observer)
        resolver = StateResolver(executor, checker, observer)
        graph = {
            "s": StateDefinition(name="s", actions=(ActionSpec.from_command("x"),))
        }

        assert resolver.resolve("s", graph) is True
        executor.execute.assert_called_once()
        observer.on_state_complete.assert_called_once()
        runner.run.assert_not_called()
        http.probe.assert_not_called()
