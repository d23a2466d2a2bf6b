"""
Observer composition.

CompositeObserver implements the Decorator pattern: every callback is
forwarded to each wrapped observer, in order.
"""

from envstate.domain.interfaces import ExecutionObserverInterface
from envstate.domain.models import ProbeKind


class CompositeObserver(ExecutionObserverInterface):
    """Fan-out of lifecycle events to several observers."""

    def __init__(self, *observers: ExecutionObserverInterface):
        """
        Args:
            *observers: Observers to notify (in order)
        """
        self.observers = observers

    def on_state_start(self, name: str, dependencies: tuple[str, ...]) -> None:
        for observer in self.observers:
            observer.on_state_start(name, dependencies)

    def on_check_performed(self, kind: ProbeKind, details: str) -> None:
        for observer in self.observers:
            observer.on_check_performed(kind, details)

    def on_check_result(self, ready: bool, kind: ProbeKind, info: str) -> None:
        for observer in self.observers:
            observer.on_check_result(ready, kind, info)

    def on_actions_start(self, name: str) -> None:
        for observer in self.observers:
            observer.on_actions_start(name)

    def on_action_start(self, state_name: str, description: str) -> None:
        for observer in self.observers:
            observer.on_action_start(state_name, description)

    def on_action_complete(
        self,
        state_name: str,
        description: str,
        success: bool,
        duration: float,
        error: str | None = None,
    ) -> None:
        for observer in self.observers:
            observer.on_action_complete(
                state_name, description, success, duration, error
            )

    def on_state_complete(
        self, name: str, success: bool, error: str | None, duration: float
    ) -> None:
        for observer in self.observers:
            observer.on_state_complete(name, success, error, duration)
