"""
envstate: dependency-aware bring-up of development environment states.

Resolves a graph of named states (containers, APIs, frontends), running
readiness checks, actions and readiness waits for each state after its
dependencies.

Example:
    from envstate import create_resolver, load_state_graph
    from envstate.infrastructure import (
        RequestsHttpProbe,
        SubprocessActionExecutor,
        SubprocessCommandRunner,
    )

    graph = load_state_graph("envstate.yml")
    resolver = create_resolver(
        command_runner=SubprocessCommandRunner(),
        http_probe=RequestsHttpProbe(),
        action_executor=SubprocessActionExecutor(),
    )
    ok = resolver.resolve("apiReady", graph)
    for name, result in resolver.results.items():
        print(name, result.status.value, result.error_message)
"""

# Application layer (orchestration)
from envstate.application import (
    NullObserver,
    PollingEngine,
    ReadinessChecker,
    StateResolver,
    create_resolver,
)

# Domain exceptions
from envstate.domain.exceptions import ConfigurationError, UnknownStateError

# Domain interfaces (for type hints and custom implementations)
from envstate.domain.interfaces import (
    ActionExecutorInterface,
    CommandRunnerInterface,
    ExecutionObserverInterface,
    HttpProbeInterface,
)

# Domain models (most commonly used)
from envstate.domain.models import (
    ActionKind,
    ActionOutcome,
    ActionResult,
    ActionSpec,
    CommandResult,
    LaunchMode,
    ProbeKind,
    ReadinessConfig,
    ResolutionRun,
    StateDefinition,
    StateGraph,
    StateResult,
    StateStatus,
)

# Infrastructure (explicit import encouraged for dependency injection)
from envstate.infrastructure.config import load_state_graph, parse_state_graph

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "ActionKind",
    "ActionOutcome",
    "ActionResult",
    "ActionSpec",
    "CommandResult",
    "LaunchMode",
    "ProbeKind",
    "ReadinessConfig",
    "ResolutionRun",
    "StateDefinition",
    "StateGraph",
    "StateResult",
    "StateStatus",
    # Domain interfaces
    "ActionExecutorInterface",
    "CommandRunnerInterface",
    "ExecutionObserverInterface",
    "HttpProbeInterface",
    # Domain exceptions
    "ConfigurationError",
    "UnknownStateError",
    # Application layer
    "NullObserver",
    "PollingEngine",
    "ReadinessChecker",
    "StateResolver",
    "create_resolver",
    # Configuration
    "load_state_graph",
    "parse_state_graph",
]
