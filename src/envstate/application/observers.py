"""Default observer used when none is injected."""

from envstate.domain.interfaces import ExecutionObserverInterface
from envstate.domain.models import ProbeKind


class NullObserver(ExecutionObserverInterface):
    """Silent observer: every lifecycle event is ignored."""

    def on_state_start(self, name: str, dependencies: tuple[str, ...]) -> None:
        return None

    def on_check_performed(self, kind: ProbeKind, details: str) -> None:
        return None

    def on_check_result(self, ready: bool, kind: ProbeKind, info: str) -> None:
        return None

    def on_actions_start(self, name: str) -> None:
        return None

    def on_action_start(self, state_name: str, description: str) -> None:
        return None

    def on_action_complete(
        self,
        state_name: str,
        description: str,
        success: bool,
        duration: float,
        error: str | None = None,
    ) -> None:
        return None

    def on_state_complete(
        self, name: str, success: bool, error: str | None, duration: float
    ) -> None:
        return None
