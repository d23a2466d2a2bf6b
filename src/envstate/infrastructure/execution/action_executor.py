"""
Subprocess action executor.

Runs console commands to completion, and launches long-running commands
and applications detached from the current session.
"""

import logging
import os
import shlex
import subprocess
from typing import Any

from envstate.domain.interfaces import ActionExecutorInterface
from envstate.domain.models import ActionKind, ActionOutcome, ActionSpec, LaunchMode
from envstate.infrastructure.execution.subprocess_runner import (
    SubprocessConfig,
    run_shell,
)
from envstate.infrastructure.execution.workdir import working_directory

logger = logging.getLogger(__name__)


def _command_line(argv: list[str]) -> str:
    """Quote an argument vector for the platform shell."""
    if os.name == "nt":
        return subprocess.list2cmdline(argv)
    return shlex.join(argv)


def _last_line(output: str) -> str:
    lines = [line for line in output.strip().splitlines() if line.strip()]
    return lines[-1].strip() if lines else ""


class SubprocessActionExecutor(ActionExecutorInterface):
    """
    Executes ActionSpecs with subprocess.

    CONSOLE actions block until the process exits; NEW_WINDOW and
    WINDOWS_APP actions succeed as soon as the process has been spawned.
    Every action runs inside its working directory, which is restored
    afterwards whatever the outcome.
    """

    def __init__(self, config: SubprocessConfig | None = None):
        self._config = config or SubprocessConfig()

    def execute(self, action: ActionSpec) -> ActionOutcome:
        logger.debug(
            "Executing %s action %r (mode=%s, cwd=%s)",
            action.kind.value,
            action.command,
            action.launch_mode.value,
            action.working_directory,
        )
        try:
            with working_directory(action.working_directory):
                if action.launch_mode is LaunchMode.CONSOLE:
                    return self._run_console(action)
                return self._launch_detached(action)
        except OSError as e:
            return ActionOutcome(
                success=False, error_message=f"{type(e).__name__}: {e}"
            )

    def _run_console(self, action: ActionSpec) -> ActionOutcome:
        command = action.command
        if action.kind is ActionKind.APPLICATION:
            command = _command_line([action.command, *action.arguments])

        try:
            result = run_shell(command, action.timeout_seconds, self._config)
        except subprocess.TimeoutExpired:
            return ActionOutcome(
                success=False,
                error_message=f"Timeout after {action.timeout_seconds:g} seconds",
            )

        if result.exit_code != 0:
            message = f"Command exited with code {result.exit_code}"
            detail = _last_line(result.output)
            if detail:
                message += f": {detail}"
            return ActionOutcome(
                success=False, error_message=message, output=result.output
            )
        return ActionOutcome(success=True, output=result.output)

    def _launch_detached(self, action: ActionSpec) -> ActionOutcome:
        kwargs: dict[str, Any] = {"stdin": subprocess.DEVNULL}
        if os.name == "nt":
            if action.launch_mode is LaunchMode.NEW_WINDOW:
                kwargs["creationflags"] = subprocess.CREATE_NEW_CONSOLE  # type: ignore[attr-defined]
            else:
                kwargs["creationflags"] = subprocess.DETACHED_PROCESS  # type: ignore[attr-defined]
        else:
            kwargs["start_new_session"] = True
            kwargs["stdout"] = subprocess.DEVNULL
            kwargs["stderr"] = subprocess.DEVNULL

        if action.kind is ActionKind.APPLICATION:
            process = subprocess.Popen([action.command, *action.arguments], **kwargs)
        else:
            process = subprocess.Popen(
                action.command,
                shell=True,
                executable=self._config.shell_executable,
                **kwargs,
            )
        logger.info("Launched %r (pid %d)", action.display_name, process.pid)
        return ActionOutcome(success=True)
