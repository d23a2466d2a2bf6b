"""
Application layer for the state resolution engine.

Contains the orchestration logic that drives domain ports: polling,
readiness checks and dependency resolution.
"""

from envstate.application.observers import NullObserver
from envstate.application.polling import PollAttempt, PollingEngine
from envstate.application.readiness import ReadinessChecker
from envstate.application.resolver import StateResolver, create_resolver

__all__ = [
    "NullObserver",
    "PollAttempt",
    "PollingEngine",
    "ReadinessChecker",
    "StateResolver",
    "create_resolver",
]
