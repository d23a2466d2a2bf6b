"""Observer that writes lifecycle events to the standard logging system."""

import logging

from envstate.domain.interfaces import ExecutionObserverInterface
from envstate.domain.models import ProbeKind

logger = logging.getLogger(__name__)


class LoggingObserver(ExecutionObserverInterface):
    """
    Logs state transitions at INFO and per-check detail at DEBUG.

    Failures are logged at ERROR so they remain visible with --quiet.
    """

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def on_state_start(self, name: str, dependencies: tuple[str, ...]) -> None:
        if dependencies:
            self._log.info("Processing %s (needs %s)", name, ", ".join(dependencies))
        else:
            self._log.info("Processing %s", name)

    def on_check_performed(self, kind: ProbeKind, details: str) -> None:
        self._log.debug("Checking %s: %s", kind.value, details)

    def on_check_result(self, ready: bool, kind: ProbeKind, info: str) -> None:
        self._log.info("Check (%s): %s", kind.value, info)

    def on_actions_start(self, name: str) -> None:
        self._log.debug("Running actions for %s", name)

    def on_action_start(self, state_name: str, description: str) -> None:
        self._log.info("[%s] %s", state_name, description)

    def on_action_complete(
        self,
        state_name: str,
        description: str,
        success: bool,
        duration: float,
        error: str | None = None,
    ) -> None:
        if success:
            self._log.debug("[%s] %s done in %.1fs", state_name, description, duration)
        else:
            self._log.error(
                "[%s] %s failed after %.1fs: %s",
                state_name,
                description,
                duration,
                error or "unknown error",
            )

    def on_state_complete(
        self, name: str, success: bool, error: str | None, duration: float
    ) -> None:
        if success:
            self._log.info("%s completed in %.1fs", name, duration)
        else:
            self._log.error("%s failed: %s", name, error or "unknown error")
