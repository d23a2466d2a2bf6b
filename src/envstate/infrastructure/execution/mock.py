"""
Mock execution adapters for testing without spawning processes.

Return predefined results in sequence.
"""

from collections.abc import Sequence

from envstate.domain.interfaces import ActionExecutorInterface, CommandRunnerInterface
from envstate.domain.models import ActionOutcome, ActionSpec, CommandResult


class MockCommandRunner(CommandRunnerInterface):
    """Returns predefined command results; the last one repeats forever."""

    def __init__(self, responses: Sequence[CommandResult | Exception]):
        """
        Args:
            responses: Results (or exceptions to raise) in call order
        """
        if not responses:
            raise ValueError("MockCommandRunner needs at least one response")
        self._responses = list(responses)
        self._call_count = 0
        self.commands: list[str] = []

    def run(self, command: str, timeout: float | None = None) -> CommandResult:
        index = min(self._call_count, len(self._responses) - 1)
        self._call_count += 1
        self.commands.append(command)

        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        """Number of times run() has been called."""
        return self._call_count

    def reset(self) -> None:
        """Reset the call counter to reuse responses."""
        self._call_count = 0
        self.commands.clear()


class MockActionExecutor(ActionExecutorInterface):
    """Returns predefined outcomes in order, then `default`."""

    def __init__(
        self,
        outcomes: Sequence[ActionOutcome] = (),
        default: ActionOutcome | None = None,
    ):
        """
        Args:
            outcomes: Outcomes for the first len(outcomes) calls
            default: Outcome once the sequence is exhausted (success if None)
        """
        self._outcomes = list(outcomes)
        self._default = default or ActionOutcome(success=True)
        self.executed: list[ActionSpec] = []

    def execute(self, action: ActionSpec) -> ActionOutcome:
        index = len(self.executed)
        self.executed.append(action)
        if index < len(self._outcomes):
            return self._outcomes[index]
        return self._default

    @property
    def call_count(self) -> int:
        """Number of times execute() has been called."""
        return len(self.executed)

    @property
    def commands(self) -> list[str]:
        return [action.command for action in self.executed]
