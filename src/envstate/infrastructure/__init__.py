"""
Infrastructure layer for the state resolution engine.

Contains adapters for external concerns (processes, HTTP, configuration,
observers).
"""

from envstate.infrastructure.config import load_state_graph, parse_state_graph
from envstate.infrastructure.execution import (
    MockActionExecutor,
    MockCommandRunner,
    SubprocessActionExecutor,
    SubprocessCommandRunner,
    SubprocessConfig,
)
from envstate.infrastructure.http import (
    HttpProbeConfig,
    MockHttpProbe,
    RequestsHttpProbe,
)
from envstate.infrastructure.observers import (
    CompositeObserver,
    ConsoleObserver,
    LoggingObserver,
    RecordingObserver,
)

__all__ = [
    # Configuration
    "load_state_graph",
    "parse_state_graph",
    # Execution
    "SubprocessActionExecutor",
    "SubprocessCommandRunner",
    "SubprocessConfig",
    "MockActionExecutor",
    "MockCommandRunner",
    # HTTP
    "HttpProbeConfig",
    "RequestsHttpProbe",
    "MockHttpProbe",
    # Observers
    "CompositeObserver",
    "ConsoleObserver",
    "LoggingObserver",
    "RecordingObserver",
]
