"""Shared pytest fixtures for envstate tests."""

import pytest

from envstate.application.resolver import StateResolver, create_resolver
from envstate.domain.models import (
    ActionSpec,
    CommandResult,
    ReadinessConfig,
    StateDefinition,
)
from envstate.infrastructure.execution.mock import (
    MockActionExecutor,
    MockCommandRunner,
)
from envstate.infrastructure.http.mock import MockHttpProbe
from envstate.infrastructure.observers.memory import RecordingObserver


class FakeClock:
    """Monotonic clock whose time only moves when told to.

    `sleep` advances the clock instead of blocking, so polling loops run
    instantly while still observing their configured intervals.
    """

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def ready_runner() -> MockCommandRunner:
    """Command runner whose every command succeeds with clean output."""
    return MockCommandRunner(responses=[CommandResult(exit_code=0, output="ok")])


@pytest.fixture
def failing_runner() -> MockCommandRunner:
    """Command runner whose every command fails."""
    return MockCommandRunner(
        responses=[CommandResult(exit_code=1, output="Cannot connect to the daemon")]
    )


@pytest.fixture
def executor() -> MockActionExecutor:
    return MockActionExecutor()


@pytest.fixture
def http_probe() -> MockHttpProbe:
    return MockHttpProbe(responses=[False])


@pytest.fixture
def make_resolver(fake_clock: FakeClock, recorder: RecordingObserver):
    """Factory wiring a resolver around mock adapters and the fake clock."""

    def _make(
        runner: MockCommandRunner,
        executor: MockActionExecutor,
        http: MockHttpProbe | None = None,
    ) -> StateResolver:
        return create_resolver(
            command_runner=runner,
            http_probe=http or MockHttpProbe(responses=[False]),
            action_executor=executor,
            observer=recorder,
            sleep=fake_clock.sleep,
            clock=fake_clock,
        )

    return _make


@pytest.fixture
def sample_graph() -> dict[str, StateDefinition]:
    """Three-state chain modelled on a docker/API bring-up."""
    return {
        "dockerStartup": StateDefinition(
            name="dockerStartup",
            readiness=ReadinessConfig(
                check_command="docker info", wait_command="docker info"
            ),
            actions=(ActionSpec(command="dockerd", description="Starting Docker"),),
        ),
        "dockerReady": StateDefinition(
            name="dockerReady",
            dependencies=("dockerStartup",),
            readiness=ReadinessConfig(check_command="docker ps"),
            actions=(
                ActionSpec.from_command("docker start postgres"),
                ActionSpec.from_command("docker start rabbitmq"),
            ),
        ),
        "apiReady": StateDefinition(
            name="apiReady",
            dependencies=("dockerReady",),
            readiness=ReadinessConfig(
                check_endpoint="https://localhost:5001/healthcheck",
                wait_endpoint="https://localhost:5001/healthcheck",
            ),
            actions=(ActionSpec(command="dotnet run", description="Starting API"),),
        ),
    }
