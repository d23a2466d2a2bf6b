"""In-memory observer that records every callback as an ExecutionEvent."""

from datetime import datetime, timezone

from envstate.domain.events import ExecutionEvent, ExecutionEventType
from envstate.domain.interfaces import ExecutionObserverInterface
from envstate.domain.models import ProbeKind


class RecordingObserver(ExecutionObserverInterface):
    """Keeps events in arrival order. Useful for tests and reports."""

    def __init__(self) -> None:
        self._events: list[ExecutionEvent] = []

    def _now(self) -> str:
        return datetime.now(timezone.utc).isoformat()

    @property
    def events(self) -> list[ExecutionEvent]:
        return list(self._events)

    def get_events(
        self,
        event_type: ExecutionEventType | None = None,
        state_name: str | None = None,
    ) -> list[ExecutionEvent]:
        return [
            e
            for e in self._events
            if (event_type is None or e.event_type == event_type)
            and (state_name is None or e.state_name == state_name)
        ]

    def count(self, event_type: ExecutionEventType) -> int:
        return len(self.get_events(event_type))

    def clear(self) -> None:
        self._events.clear()

    # ExecutionObserverInterface

    def on_state_start(self, name: str, dependencies: tuple[str, ...]) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.STATE_START,
                state_name=name,
                dependencies=tuple(dependencies),
                created_at=self._now(),
            )
        )

    def on_check_performed(self, kind: ProbeKind, details: str) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.CHECK_PERFORMED,
                probe_kind=kind.value,
                details=details,
                created_at=self._now(),
            )
        )

    def on_check_result(self, ready: bool, kind: ProbeKind, info: str) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.CHECK_RESULT,
                probe_kind=kind.value,
                success=ready,
                details=info,
                created_at=self._now(),
            )
        )

    def on_actions_start(self, name: str) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.ACTIONS_START,
                state_name=name,
                created_at=self._now(),
            )
        )

    def on_action_start(self, state_name: str, description: str) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.ACTION_START,
                state_name=state_name,
                description=description,
                created_at=self._now(),
            )
        )

    def on_action_complete(
        self,
        state_name: str,
        description: str,
        success: bool,
        duration: float,
        error: str | None = None,
    ) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.ACTION_COMPLETE,
                state_name=state_name,
                description=description,
                success=success,
                duration=duration,
                error=error,
                created_at=self._now(),
            )
        )

    def on_state_complete(
        self, name: str, success: bool, error: str | None, duration: float
    ) -> None:
        self._events.append(
            ExecutionEvent(
                event_type=ExecutionEventType.STATE_COMPLETE,
                state_name=name,
                success=success,
                error=error,
                duration=duration,
                created_at=self._now(),
            )
        )
