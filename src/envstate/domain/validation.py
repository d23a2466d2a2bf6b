"""
Validation of individual state definitions.

Pure checks with no I/O. The resolver runs these before touching a state's
dependencies so that a broken definition fails fast and is never retried.
"""

from envstate.domain.models import ReadinessConfig, StateDefinition


def _validate_readiness(name: str, readiness: ReadinessConfig) -> str | None:
    if readiness.check_command and readiness.check_endpoint:
        return (
            f"State '{name}' declares both a check command and a check endpoint"
        )
    if readiness.wait_command and readiness.wait_endpoint:
        return f"State '{name}' declares both a wait command and a wait endpoint"
    if readiness.max_retries < 1:
        return f"State '{name}' has maxRetries < 1"
    if readiness.required_successes < 1:
        return f"State '{name}' has requiredSuccesses < 1"
    if readiness.retry_interval_seconds < 0:
        return f"State '{name}' has a negative retryInterval"
    if readiness.max_total_seconds <= 0:
        return f"State '{name}' has a non-positive maxTimeSeconds"
    return None


def validate_state(state: StateDefinition) -> str | None:
    """
    Check a definition against the completeness invariant.

    Returns:
        None if the definition is usable, otherwise the validation message
    """
    has_probe = state.readiness is not None and state.readiness.has_probe
    if not state.actions and not has_probe:
        return (
            f"State '{state.name}' must define at least one action "
            "or readiness probe"
        )

    for index, action in enumerate(state.actions, 1):
        if not action.command.strip():
            return f"State '{state.name}' action {index} has no command"
        if action.timeout_seconds is not None and action.timeout_seconds <= 0:
            return f"State '{state.name}' action {index} has a non-positive timeout"

    if state.readiness is not None:
        return _validate_readiness(state.name, state.readiness)
    return None
