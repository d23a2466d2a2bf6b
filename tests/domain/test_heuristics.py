"""Tests for the command output error heuristic."""

import pytest

from envstate.domain.heuristics import (
    ERROR_PATTERNS,
    command_succeeded,
    output_indicates_error,
)


class TestOutputIndicatesError:
    @pytest.mark.parametrize(
        "output",
        [
            "Error: connection refused",
            "docker: command NOT FOUND",
            "Unable to locate package",
            "Tests FAILED",
            "ls: cannot access 'x': No such file or directory",
            "dial tcp 127.0.0.1:5432: Connection Refused",
        ],
    )
    def test_detects_error_text(self, output: str) -> None:
        assert output_indicates_error(output) is True

    @pytest.mark.parametrize("output", ["", None, "Server Version: 24.0.7", "v22.1.0"])
    def test_clean_output(self, output: str | None) -> None:
        assert output_indicates_error(output) is False

    def test_patterns_are_lowercase(self) -> None:
        assert all(pattern == pattern.lower() for pattern in ERROR_PATTERNS)


class TestCommandSucceeded:
    def test_exit_zero_with_clean_output(self) -> None:
        assert command_succeeded(0, "Containers: 3") is True

    def test_exit_zero_with_error_text_is_failure(self) -> None:
        assert command_succeeded(0, "Error: connection refused") is False

    def test_nonzero_exit_is_failure(self) -> None:
        assert command_succeeded(1, "") is False
