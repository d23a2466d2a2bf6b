"""Recorded form of execution observer callbacks."""

from dataclasses import dataclass
from enum import Enum


class ExecutionEventType(str, Enum):
    """Types of resolution lifecycle events."""

    STATE_START = "STATE_START"
    CHECK_PERFORMED = "CHECK_PERFORMED"
    CHECK_RESULT = "CHECK_RESULT"
    ACTIONS_START = "ACTIONS_START"
    ACTION_START = "ACTION_START"
    ACTION_COMPLETE = "ACTION_COMPLETE"
    STATE_COMPLETE = "STATE_COMPLETE"


@dataclass(frozen=True)
class ExecutionEvent:
    """Single observer callback, captured for inspection and reporting.

    Fields not relevant to an event type stay at their defaults.
    """

    event_type: ExecutionEventType
    state_name: str | None = None
    dependencies: tuple[str, ...] = ()
    probe_kind: str | None = None  # "command" or "endpoint"
    details: str = ""
    description: str = ""
    success: bool | None = None
    duration: float | None = None
    error: str | None = None
    created_at: str = ""  # ISO 8601
