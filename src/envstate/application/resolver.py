"""
StateResolver: dependency-aware orchestrator.

Resolves a target state depth-first. Each state moves through
Unseen -> Processing -> Completed | Failed within one ResolutionRun, and a
state that already reached a terminal status is never processed twice.
"""

import logging
import time
import uuid
from collections.abc import Callable

from envstate.application.observers import NullObserver
from envstate.application.polling import PollingEngine
from envstate.application.readiness import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    ReadinessChecker,
)
from envstate.domain.interfaces import (
    ActionExecutorInterface,
    CommandRunnerInterface,
    ExecutionObserverInterface,
    HttpProbeInterface,
)
from envstate.domain.models import (
    ActionOutcome,
    ActionResult,
    ActionSpec,
    ResolutionRun,
    StateGraph,
    StateResult,
)
from envstate.domain.validation import validate_state

logger = logging.getLogger(__name__)


class StateResolver:
    """
    Orchestrates pre-check, action and wait phases across a state graph.

    Dependencies are resolved strictly before the dependent's pre-check,
    and resolution fails fast: the first failed dependency or action stops
    the state without attempting anything after it.
    """

    def __init__(
        self,
        action_executor: ActionExecutorInterface,
        readiness_checker: ReadinessChecker,
        observer: ExecutionObserverInterface | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            action_executor: Runs state actions
            readiness_checker: Pre-check and wait-for-ready probes
            observer: Lifecycle event sink (silent if None)
            clock: Monotonic clock used for state durations
        """
        if observer is None:
            observer = NullObserver()

        self._executor = action_executor
        self._checker = readiness_checker
        self._observer = observer
        self._clock = clock
        self._last_run: ResolutionRun | None = None
        self._started: dict[tuple[str, str], float] = {}

    @property
    def last_run(self) -> ResolutionRun | None:
        """The run created by the most recent resolve() call."""
        return self._last_run

    @property
    def results(self) -> dict[str, StateResult]:
        """Per-state results of the most recent run."""
        return self._last_run.results if self._last_run else {}

    def resolve(
        self,
        state_name: str,
        graph: StateGraph,
        run: ResolutionRun | None = None,
    ) -> bool:
        """
        Bring a state and its transitive dependencies to readiness.

        Args:
            state_name: Target state
            graph: State definitions keyed by name
            run: Existing run to continue (a fresh one is created if None)

        Returns:
            True if the target state completed successfully
        """
        if run is None:
            run = ResolutionRun(target=state_name, run_id=str(uuid.uuid4()))
        self._last_run = run
        return self._resolve(state_name, graph, run)

    def complete_state(
        self,
        run: ResolutionRun,
        name: str,
        success: bool,
        error: str | None = None,
    ) -> bool:
        """
        Finalize a state and notify the observer.

        Finalizing an already terminal state changes nothing and emits no
        event; the recorded success is returned either way.
        """
        started = self._started.pop((run.run_id, name), None)
        duration = self._clock() - started if started is not None else 0.0
        if run.complete(name, success, error, duration):
            result = run.results[name]
            if not success:
                logger.debug("State %s failed: %s", name, error)
            self._observer.on_state_complete(
                name, result.success, result.error_message, result.duration
            )
        return run.succeeded(name)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(self, name: str, graph: StateGraph, run: ResolutionRun) -> bool:
        if run.is_processed(name):
            return run.succeeded(name)
        if run.is_in_progress(name):
            logger.warning(
                "State %s is already being resolved (dependency cycle); "
                "treating it as handled",
                name,
            )
            return True

        state = graph.get(name)
        if state is None:
            return self.complete_state(run, name, False, f"Unknown state: {name}")

        result = run.begin(name)

        problem = validate_state(state)
        if problem:
            return self.complete_state(run, name, False, problem)

        for dependency in state.dependencies:
            if not self._resolve(dependency, graph, run):
                return self.complete_state(
                    run, name, False, f"Dependency {dependency} failed"
                )
            result.dependencies_satisfied.append(dependency)

        self._started[(run.run_id, name)] = self._clock()
        run.mark_started(name)
        self._observer.on_state_start(name, state.dependencies)

        if self._checker.pre_check(state):
            return self.complete_state(run, name, True)

        if state.actions:
            self._observer.on_actions_start(name)
            for action in state.actions:
                if not self._run_action(name, action, result):
                    return self.complete_state(
                        run, name, False, f"Action failed in state {name}"
                    )

        if self._checker.has_wait_probe(state):
            if not self._checker.wait_for_ready(state):
                return self.complete_state(
                    run, name, False, f"State {name} failed to become ready"
                )
        elif not state.actions:
            # Only a check probe, and it failed: nothing could change that.
            return self.complete_state(
                run, name, False, f"State {name} failed to become ready"
            )

        return self.complete_state(run, name, True)

    def _run_action(self, name: str, action: ActionSpec, result: StateResult) -> bool:
        description = action.display_name
        self._observer.on_action_start(name, description)

        started = self._clock()
        try:
            outcome = self._executor.execute(action)
        except Exception as e:
            logger.warning(
                "Action %r raised %s: %s", description, type(e).__name__, e
            )
            outcome = ActionOutcome(
                success=False, error_message=f"{type(e).__name__}: {e}"
            )
        duration = self._clock() - started

        result.actions_executed.append(
            ActionResult(
                command=action.command,
                description=action.description,
                success=outcome.success,
                duration=duration,
                error_message=outcome.error_message,
            )
        )
        self._observer.on_action_complete(
            name, description, outcome.success, duration, outcome.error_message
        )
        return outcome.success


def create_resolver(
    command_runner: CommandRunnerInterface,
    http_probe: HttpProbeInterface,
    action_executor: ActionExecutorInterface,
    observer: ExecutionObserverInterface | None = None,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
    probe_timeout: float | None = DEFAULT_PROBE_TIMEOUT_SECONDS,
) -> StateResolver:
    """
    Wire a resolver with its readiness checker and polling engine.

    All three components share the same observer and clock.
    """
    if observer is None:
        observer = NullObserver()

    polling = PollingEngine(observer, sleep=sleep, clock=clock)
    checker = ReadinessChecker(
        command_runner,
        http_probe,
        polling,
        observer,
        probe_timeout=probe_timeout,
    )
    return StateResolver(action_executor, checker, observer, clock=clock)
