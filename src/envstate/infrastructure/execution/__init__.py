"""
Process execution adapters for command probes and state actions.
"""

from envstate.infrastructure.execution.action_executor import SubprocessActionExecutor
from envstate.infrastructure.execution.mock import (
    MockActionExecutor,
    MockCommandRunner,
)
from envstate.infrastructure.execution.subprocess_runner import (
    SubprocessCommandRunner,
    SubprocessConfig,
)
from envstate.infrastructure.execution.workdir import working_directory

__all__ = [
    "MockActionExecutor",
    "MockCommandRunner",
    "SubprocessActionExecutor",
    "SubprocessCommandRunner",
    "SubprocessConfig",
    "working_directory",
]
