"""
Domain interfaces (Ports) for the state resolution engine.

These abstract base classes define the contracts that adapters must satisfy.
The engine only ever talks to these ports; it never spawns processes, opens
sockets or renders output itself.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envstate.domain.models import (
        ActionOutcome,
        ActionSpec,
        CommandResult,
        ProbeKind,
    )


class CommandRunnerInterface(ABC):
    """
    Port for synchronous command execution used by readiness probes.

    Implementations capture stdout and stderr combined. Failures to spawn
    the process or to finish within the timeout are raised as exceptions;
    the readiness checker converts them into "not ready".
    """

    @abstractmethod
    def run(self, command: str, timeout: float | None = None) -> "CommandResult":
        """
        Run a command to completion.

        Args:
            command: Shell command line
            timeout: Seconds to wait before giving up (None waits forever)

        Returns:
            CommandResult with exit code and combined output
        """
        pass


class HttpProbeInterface(ABC):
    """Port for endpoint readiness probes."""

    @abstractmethod
    def probe(self, uri: str) -> bool:
        """
        Issue a single GET request.

        Returns:
            True iff the request completed without raising
        """
        pass


class ActionExecutorInterface(ABC):
    """
    Port for running a state's actions.

    The resolver treats execution as opaque: it only inspects the success
    flag and the optional error message of the returned outcome.

    Note (Working Directory):
        Implementations that change the process working directory must
        restore it before returning, including on failure. A sibling state
        resolved later must never inherit a stale directory.
    """

    @abstractmethod
    def execute(self, action: "ActionSpec") -> "ActionOutcome":
        """
        Execute one action.

        Args:
            action: The action to run

        Returns:
            ActionOutcome with success flag and optional error message
        """
        pass


class ExecutionObserverInterface(ABC):
    """
    Port for lifecycle events emitted during resolution.

    Per state, callbacks arrive in this relative order:
    on_state_start, optionally on_check_performed/on_check_result,
    optionally on_actions_start followed by on_action_start/on_action_complete
    pairs, and finally on_state_complete.
    """

    @abstractmethod
    def on_state_start(self, name: str, dependencies: tuple[str, ...]) -> None:
        pass

    @abstractmethod
    def on_check_performed(self, kind: "ProbeKind", details: str) -> None:
        pass

    @abstractmethod
    def on_check_result(self, ready: bool, kind: "ProbeKind", info: str) -> None:
        pass

    @abstractmethod
    def on_actions_start(self, name: str) -> None:
        pass

    @abstractmethod
    def on_action_start(self, state_name: str, description: str) -> None:
        pass

    @abstractmethod
    def on_action_complete(
        self,
        state_name: str,
        description: str,
        success: bool,
        duration: float,
        error: str | None = None,
    ) -> None:
        pass

    @abstractmethod
    def on_state_complete(
        self, name: str, success: bool, error: str | None, duration: float
    ) -> None:
        pass
