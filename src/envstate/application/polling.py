"""
PollingEngine: bounded retry loop shared by all readiness waits.

The only component in the engine that sleeps.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from envstate.domain.interfaces import ExecutionObserverInterface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PollAttempt:
    """Snapshot of one probe call. Never leaves the polling loop."""

    attempt_number: int
    elapsed_seconds: float
    consecutive_successes: int


class PollingEngine:
    """
    Calls a boolean probe until it reports enough consecutive successes.

    Terminal conditions are evaluated after every attempt, in order:
    success count reached, elapsed time >= max_total_seconds, attempt count
    reached max_retries. Only when none applies does the loop sleep for
    retry_interval before the next attempt.
    """

    def __init__(
        self,
        observer: ExecutionObserverInterface,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            observer: Receives one start and one completion event per poll
            sleep: Blocking sleep function (seconds)
            clock: Monotonic clock used for elapsed-time accounting
        """
        self._observer = observer
        self._sleep = sleep
        self._clock = clock

    def poll(
        self,
        probe: Callable[[], bool],
        max_retries: int,
        retry_interval: float,
        required_successes: int,
        max_total_seconds: float,
        *,
        state_name: str = "",
        description: str = "Waiting for readiness",
    ) -> bool:
        """
        Run the retry loop.

        Args:
            probe: Readiness probe; a raised exception counts as a failure
            max_retries: Maximum number of probe calls
            retry_interval: Seconds to sleep between attempts
            required_successes: Consecutive successes needed to succeed
            max_total_seconds: Wall-clock budget measured from the first attempt
            state_name: State the poll belongs to (for observer events)
            description: Label reported to the observer

        Returns:
            True if the probe became ready within the limits
        """
        self._observer.on_action_start(state_name, description)

        started = self._clock()
        attempt = 0
        consecutive = 0
        success = False
        error: str | None = None

        while True:
            attempt += 1
            if self._call_probe(probe):
                consecutive += 1
            else:
                consecutive = 0

            elapsed = self._clock() - started
            logger.debug(
                "%s: %s",
                description,
                PollAttempt(
                    attempt_number=attempt,
                    elapsed_seconds=elapsed,
                    consecutive_successes=consecutive,
                ),
            )

            if consecutive >= required_successes:
                success = True
                break
            if elapsed >= max_total_seconds:
                error = f"Timed out after {elapsed:.1f}s"
                break
            if attempt >= max_retries:
                error = f"Max retries ({max_retries}) exceeded"
                break

            self._sleep(retry_interval)

        duration = self._clock() - started
        self._observer.on_action_complete(
            state_name, description, success, duration, error
        )
        return success

    @staticmethod
    def _call_probe(probe: Callable[[], bool]) -> bool:
        try:
            return bool(probe())
        except Exception as e:
            logger.debug("Probe raised %s: %s", type(e).__name__, e)
            return False
