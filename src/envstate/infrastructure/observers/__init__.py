"""
Execution observer adapters.
"""

from envstate.infrastructure.observers.composite import CompositeObserver
from envstate.infrastructure.observers.console import ConsoleObserver
from envstate.infrastructure.observers.logging_observer import LoggingObserver
from envstate.infrastructure.observers.memory import RecordingObserver

__all__ = [
    "CompositeObserver",
    "ConsoleObserver",
    "LoggingObserver",
    "RecordingObserver",
]
