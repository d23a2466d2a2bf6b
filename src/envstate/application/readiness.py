"""
ReadinessChecker: decides whether a state is ready.

Two purposes:
- pre_check: a single immediate probe before actions, so they can be skipped
- wait_for_ready: a polled probe after actions, via PollingEngine
"""

import logging

from envstate.application.polling import PollingEngine
from envstate.domain.heuristics import command_succeeded
from envstate.domain.interfaces import (
    CommandRunnerInterface,
    ExecutionObserverInterface,
    HttpProbeInterface,
)
from envstate.domain.models import ProbeKind, ReadinessConfig, StateDefinition

logger = logging.getLogger(__name__)

DEFAULT_PROBE_TIMEOUT_SECONDS = 30.0


class ReadinessChecker:
    """
    Evaluates command and endpoint probes for a state.

    Probe failures of any kind (spawn errors, timeouts, network/TLS/DNS
    errors) are reported as "not ready", never raised.
    """

    def __init__(
        self,
        command_runner: CommandRunnerInterface,
        http_probe: HttpProbeInterface,
        polling_engine: PollingEngine,
        observer: ExecutionObserverInterface,
        probe_timeout: float | None = DEFAULT_PROBE_TIMEOUT_SECONDS,
    ):
        """
        Args:
            command_runner: Runs command probes
            http_probe: Issues endpoint probes
            polling_engine: Retry loop for wait_for_ready
            observer: Receives check events
            probe_timeout: Per-invocation timeout for command probes
        """
        self._runner = command_runner
        self._http = http_probe
        self._poller = polling_engine
        self._observer = observer
        self._probe_timeout = probe_timeout

    # ------------------------------------------------------------------
    # Probes
    # ------------------------------------------------------------------

    def probe_endpoint(self, uri: str) -> bool:
        try:
            return self._http.probe(uri)
        except Exception as e:
            logger.debug("Endpoint probe %s raised %s: %s", uri, type(e).__name__, e)
            return False

    def probe_command(self, command: str) -> bool:
        try:
            result = self._runner.run(command, timeout=self._probe_timeout)
        except Exception as e:
            logger.debug("Command probe %r raised %s: %s", command, type(e).__name__, e)
            return False
        ready = command_succeeded(result.exit_code, result.output)
        if not ready:
            logger.debug(
                "Command probe %r not ready (exit=%d): %s",
                command,
                result.exit_code,
                result.output.strip()[:200],
            )
        return ready

    # ------------------------------------------------------------------
    # Pre-check
    # ------------------------------------------------------------------

    def pre_check(self, state: StateDefinition) -> bool:
        """
        Immediate readiness test, run before any action.

        Endpoint probes take precedence over the check command. Returns
        False without emitting events when no suitable probe is configured.
        """
        readiness = state.readiness
        if readiness is None:
            return False

        endpoint = readiness.effective_endpoint
        if endpoint:
            self._observer.on_check_performed(ProbeKind.ENDPOINT, endpoint)
            ready = self.probe_endpoint(endpoint)
            self._observer.on_check_result(
                ready, ProbeKind.ENDPOINT, self._info(ready, endpoint)
            )
            return ready

        if readiness.check_command:
            command = readiness.check_command
            self._observer.on_check_performed(ProbeKind.COMMAND, command)
            ready = self.probe_command(command)
            self._observer.on_check_result(
                ready, ProbeKind.COMMAND, self._info(ready, command)
            )
            return ready

        return False

    @staticmethod
    def _info(ready: bool, target: str) -> str:
        return f"{target} is ready" if ready else f"{target} is not ready"

    # ------------------------------------------------------------------
    # Wait phase
    # ------------------------------------------------------------------

    @staticmethod
    def wait_probe(readiness: ReadinessConfig | None) -> tuple[ProbeKind, str] | None:
        """Resolve the probe polled after actions, if any."""
        if readiness is None:
            return None
        endpoint = readiness.effective_endpoint
        if endpoint:
            return ProbeKind.ENDPOINT, endpoint
        if readiness.wait_command:
            return ProbeKind.COMMAND, readiness.wait_command
        return None

    def has_wait_probe(self, state: StateDefinition) -> bool:
        return self.wait_probe(state.readiness) is not None

    def wait_for_ready(self, state: StateDefinition) -> bool:
        """Poll the effective wait probe with the state's retry parameters."""
        readiness = state.readiness
        resolved = self.wait_probe(readiness)
        if readiness is None or resolved is None:
            return False

        kind, target = resolved
        if kind is ProbeKind.ENDPOINT:

            def probe() -> bool:
                return self.probe_endpoint(target)

        else:

            def probe() -> bool:
                return self.probe_command(target)

        return self._poller.poll(
            probe,
            max_retries=readiness.max_retries,
            retry_interval=readiness.retry_interval_seconds,
            required_successes=readiness.required_successes,
            max_total_seconds=readiness.max_total_seconds,
            state_name=state.name,
            description=f"Waiting for {target}",
        )
