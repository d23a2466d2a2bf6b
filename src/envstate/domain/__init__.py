"""
Domain layer for the state resolution engine.

Contains state definitions, run bookkeeping, ports and pure rules with no
external dependencies.
"""

from envstate.domain.events import ExecutionEvent, ExecutionEventType
from envstate.domain.exceptions import ConfigurationError, UnknownStateError
from envstate.domain.heuristics import (
    ERROR_PATTERNS,
    command_succeeded,
    output_indicates_error,
)
from envstate.domain.interfaces import (
    ActionExecutorInterface,
    CommandRunnerInterface,
    ExecutionObserverInterface,
    HttpProbeInterface,
)
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
from envstate.domain.validation import validate_state

__all__ = [
    # Models
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
    # Events
    "ExecutionEvent",
    "ExecutionEventType",
    # Interfaces
    "ActionExecutorInterface",
    "CommandRunnerInterface",
    "ExecutionObserverInterface",
    "HttpProbeInterface",
    # Rules
    "ERROR_PATTERNS",
    "command_succeeded",
    "output_indicates_error",
    "validate_state",
    # Exceptions
    "ConfigurationError",
    "UnknownStateError",
]
