"""Tests for state definition validation."""

from envstate.domain.models import ActionSpec, ReadinessConfig, StateDefinition
from envstate.domain.validation import validate_state


class TestCompletenessInvariant:
    def test_state_without_actions_or_probes_is_invalid(self) -> None:
        message = validate_state(StateDefinition(name="empty"))

        assert message is not None
        assert "empty" in message
        assert "at least one action or readiness probe" in message

    def test_readiness_without_probe_is_invalid(self) -> None:
        state = StateDefinition(name="s", readiness=ReadinessConfig(max_retries=3))

        assert validate_state(state) is not None

    def test_actions_only_is_valid(self) -> None:
        state = StateDefinition(name="s", actions=(ActionSpec.from_command("ls"),))

        assert validate_state(state) is None

    def test_probe_only_is_valid(self) -> None:
        state = StateDefinition(
            name="s", readiness=ReadinessConfig(check_command="docker info")
        )

        assert validate_state(state) is None


class TestProbeKindExclusivity:
    def test_check_command_and_endpoint_conflict(self) -> None:
        state = StateDefinition(
            name="s",
            readiness=ReadinessConfig(
                check_command="curl x", check_endpoint="http://x"
            ),
        )

        message = validate_state(state)

        assert message is not None
        assert "check" in message

    def test_wait_command_and_endpoint_conflict(self) -> None:
        state = StateDefinition(
            name="s",
            readiness=ReadinessConfig(wait_command="curl x", wait_endpoint="http://x"),
        )

        assert validate_state(state) is not None

    def test_check_and_wait_endpoints_together_are_valid(self) -> None:
        state = StateDefinition(
            name="s",
            readiness=ReadinessConfig(
                check_endpoint="http://x/health", wait_endpoint="http://x/health"
            ),
        )

        assert validate_state(state) is None


class TestNumericLimits:
    def test_zero_retries_is_invalid(self) -> None:
        state = StateDefinition(
            name="s", readiness=ReadinessConfig(wait_command="x", max_retries=0)
        )

        assert "maxRetries" in (validate_state(state) or "")

    def test_zero_required_successes_is_invalid(self) -> None:
        state = StateDefinition(
            name="s", readiness=ReadinessConfig(wait_command="x", required_successes=0)
        )

        assert validate_state(state) is not None

    def test_non_positive_total_time_is_invalid(self) -> None:
        state = StateDefinition(
            name="s", readiness=ReadinessConfig(wait_command="x", max_total_seconds=0)
        )

        assert validate_state(state) is not None

    def test_blank_action_command_is_invalid(self) -> None:
        state = StateDefinition(name="s", actions=(ActionSpec(command="  "),))

        assert "action 1" in (validate_state(state) or "")

    def test_non_positive_action_timeout_is_invalid(self) -> None:
        state = StateDefinition(
            name="s", actions=(ActionSpec(command="sleep 1", timeout_seconds=0),)
        )

        assert validate_state(state) is not None
