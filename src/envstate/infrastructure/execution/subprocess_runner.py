"""
Subprocess command runner.

Runs probe commands through the system shell and captures stdout and
stderr combined.
"""

import logging
import os
import signal
import subprocess
from dataclasses import dataclass

from envstate.domain.interfaces import CommandRunnerInterface
from envstate.domain.models import CommandResult

logger = logging.getLogger(__name__)


@dataclass
class SubprocessConfig:
    """Configuration for subprocess-based adapters.

    This typed config ensures unknown fields are rejected at construction time.
    """

    shell_executable: str | None = None  # None uses the platform default shell
    encoding: str = "utf-8"


def kill_process_tree(process: subprocess.Popen[str]) -> None:
    """Kill a shell process and, on POSIX, every process in its session."""
    if os.name != "nt":
        try:
            os.killpg(process.pid, signal.SIGKILL)
        except ProcessLookupError:
            logger.debug("Process group %d already exited", process.pid)
    else:
        process.kill()
    process.wait()


def run_shell(
    command: str,
    timeout: float | None,
    config: SubprocessConfig,
) -> CommandResult:
    """
    Run a shell command to completion.

    Raises:
        subprocess.TimeoutExpired: If the command outlives `timeout`; the
            whole process tree has been killed by then
        OSError: If the shell cannot be spawned
    """
    process = subprocess.Popen(
        command,
        shell=True,
        executable=config.shell_executable,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        encoding=config.encoding,
        errors="replace",
        start_new_session=os.name != "nt",
    )
    try:
        output, _ = process.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        kill_process_tree(process)
        raise
    return CommandResult(exit_code=process.returncode, output=output or "")


class SubprocessCommandRunner(CommandRunnerInterface):
    """Runs probe commands with subprocess."""

    def __init__(self, config: SubprocessConfig | None = None):
        self._config = config or SubprocessConfig()

    def run(self, command: str, timeout: float | None = None) -> CommandResult:
        logger.debug("Running probe command: %s", command)
        return run_shell(command, timeout, self._config)
