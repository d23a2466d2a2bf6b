"""
Domain models for the state resolution engine.

State definitions are immutable (frozen dataclasses) and come from the
configuration layer. Run bookkeeping (ResolutionRun, StateResult) is mutable
and lives only for the duration of one resolve call.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

# =============================================================================
# STATE DEFINITIONS (loaded from configuration)
# =============================================================================

DEFAULT_MAX_RETRIES = 10
DEFAULT_RETRY_INTERVAL_SECONDS = 3.0
DEFAULT_REQUIRED_SUCCESSES = 1
DEFAULT_MAX_TOTAL_SECONDS = 30.0


class ActionKind(Enum):
    """What an action launches."""

    COMMAND = "command"
    APPLICATION = "application"


class LaunchMode(Enum):
    """How an action's process is attached to the current session."""

    CONSOLE = "console"  # Run inline, wait for exit
    NEW_WINDOW = "new_window"  # Detached, keeps running after the action
    WINDOWS_APP = "windows_app"  # Detached GUI application


class ProbeKind(Enum):
    """Readiness probe transport."""

    COMMAND = "command"
    ENDPOINT = "endpoint"


@dataclass(frozen=True)
class ActionSpec:
    """
    One step of work belonging to a state.

    `command` is a shell command line for COMMAND actions and an executable
    path for APPLICATION actions.
    """

    command: str
    kind: ActionKind = ActionKind.COMMAND
    arguments: tuple[str, ...] = ()
    working_directory: str | None = None
    description: str | None = None
    timeout_seconds: float | None = None
    launch_mode: LaunchMode = LaunchMode.CONSOLE

    @classmethod
    def from_command(cls, command: str) -> "ActionSpec":
        """Build a plain console command action from a raw command string."""
        return cls(command=command)

    @property
    def display_name(self) -> str:
        return self.description or self.command


@dataclass(frozen=True)
class ReadinessConfig:
    """Readiness probes and polling parameters for a state."""

    check_command: str | None = None
    check_endpoint: str | None = None
    wait_command: str | None = None
    wait_endpoint: str | None = None
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_interval_seconds: float = DEFAULT_RETRY_INTERVAL_SECONDS
    required_successes: int = DEFAULT_REQUIRED_SUCCESSES
    max_total_seconds: float = DEFAULT_MAX_TOTAL_SECONDS

    @property
    def has_endpoint(self) -> bool:
        return bool(self.check_endpoint or self.wait_endpoint)

    @property
    def has_probe(self) -> bool:
        return bool(
            self.check_command
            or self.check_endpoint
            or self.wait_command
            or self.wait_endpoint
        )

    @property
    def effective_endpoint(self) -> str | None:
        """The wait endpoint is authoritative; fall back to the check endpoint."""
        return self.wait_endpoint or self.check_endpoint


@dataclass(frozen=True)
class StateDefinition:
    """A named unit of setup work with dependencies, probes and actions."""

    name: str
    dependencies: tuple[str, ...] = ()
    readiness: ReadinessConfig | None = None
    actions: tuple[ActionSpec, ...] = ()


StateGraph = Mapping[str, StateDefinition]


# =============================================================================
# COLLABORATOR OUTCOMES
# =============================================================================


@dataclass(frozen=True)
class CommandResult:
    """Exit status and combined stdout/stderr of a finished command."""

    exit_code: int
    output: str = ""


@dataclass(frozen=True)
class ActionOutcome:
    """Result reported by an action executor."""

    success: bool
    error_message: str | None = None
    output: str = ""


# =============================================================================
# RUN STATE
# =============================================================================


class StateStatus(Enum):
    """Lifecycle of a state within one resolution run."""

    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass
class ActionResult:
    """Recorded outcome of one executed action."""

    command: str
    description: str | None
    success: bool
    duration: float
    error_message: str | None = None


@dataclass
class StateResult:
    """Mutable per-state record, owned by a ResolutionRun."""

    name: str
    status: StateStatus = StateStatus.PROCESSING
    success: bool = False
    error_message: str | None = None
    start_time: datetime | None = None
    duration: float = 0.0
    dependencies_satisfied: list[str] = field(default_factory=list)
    actions_executed: list[ActionResult] = field(default_factory=list)

    @property
    def is_terminal(self) -> bool:
        return self.status is not StateStatus.PROCESSING

    def finalize(
        self, success: bool, error_message: str | None, duration: float
    ) -> bool:
        """
        Move to COMPLETED or FAILED.

        Returns False (and changes nothing) if the result is already terminal.
        """
        if self.is_terminal:
            return False
        self.status = StateStatus.COMPLETED if success else StateStatus.FAILED
        self.success = success
        self.error_message = error_message
        self.duration = duration
        return True


@dataclass
class ResolutionRun:
    """Bookkeeping for a single resolve call. Never persisted."""

    target: str
    run_id: str
    processed: set[str] = field(default_factory=set)
    results: dict[str, StateResult] = field(default_factory=dict)

    def begin(self, name: str) -> StateResult:
        """Return the state's result, creating it in PROCESSING if unseen."""
        if name not in self.results:
            self.results[name] = StateResult(name=name)
        return self.results[name]

    def is_processed(self, name: str) -> bool:
        return name in self.processed

    def is_in_progress(self, name: str) -> bool:
        result = self.results.get(name)
        return result is not None and not result.is_terminal

    def mark_started(self, name: str) -> None:
        self.begin(name).start_time = datetime.now(timezone.utc)

    def complete(
        self,
        name: str,
        success: bool,
        error_message: str | None = None,
        duration: float = 0.0,
    ) -> bool:
        """Finalize a state and add it to `processed`. Idempotent."""
        changed = self.begin(name).finalize(success, error_message, duration)
        self.processed.add(name)
        return changed

    def succeeded(self, name: str) -> bool:
        result = self.results.get(name)
        return result is not None and result.success

    @property
    def failed_states(self) -> list[str]:
        return [
            name
            for name, result in self.results.items()
            if result.status is StateStatus.FAILED
        ]
