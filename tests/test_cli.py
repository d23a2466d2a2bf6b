"""Tests for the envstate command-line entry point."""

from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from envstate import cli
from envstate.application.resolver import StateResolver

CONFIG = """\
states:
  toolsReady:
    readiness:
      checkCommand: echo ready
  broken:
    readiness:
      checkCommand: exit 1
  build:
    needs: [toolsReady]
    actions:
      - command: echo building
        description: Building
  blocked:
    needs: [broken]
    actions:
      - echo never
"""


@pytest.fixture
def config(tmp_path: Path) -> Path:
    path = tmp_path / "envstate.yml"
    path.write_text(CONFIG, encoding="utf-8")
    return path


def invoke(*args: str) -> Result:
    return CliRunner().invoke(cli.main, list(args))


class TestList:
    def test_lists_states(self, config: Path) -> None:
        result = invoke("--list", "-c", str(config))

        assert result.exit_code == cli.EXIT_OK
        for name in ("toolsReady", "broken", "build", "blocked"):
            assert name in result.output


class TestErrors:
    def test_missing_config(self, tmp_path: Path) -> None:
        result = invoke("toolsReady", "-c", str(tmp_path / "none.yml"))

        assert result.exit_code == cli.EXIT_CONFIG

    def test_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("states:\n  a:\n    bogus: 1\n", encoding="utf-8")

        assert invoke("a", "-c", str(path)).exit_code == cli.EXIT_CONFIG

    def test_unknown_target(self, config: Path) -> None:
        result = invoke("nodeReady", "-c", str(config))

        assert result.exit_code == cli.EXIT_CONFIG
        assert "Unknown state: nodeReady" in result.output
        assert "toolsReady" in result.output

    def test_target_required_without_list(self, config: Path) -> None:
        result = invoke("-c", str(config))

        assert result.exit_code == 2
        assert "target state is required" in result.output

    def test_verbose_and_quiet_are_exclusive(self, config: Path) -> None:
        assert invoke("build", "-v", "-q", "-c", str(config)).exit_code == 2


class TestResolve:
    """End-to-end runs through real subprocesses."""

    def test_ready_state(self, config: Path) -> None:
        result = invoke("toolsReady", "-c", str(config))

        assert result.exit_code == cli.EXIT_OK
        assert "toolsReady" in result.output
        assert "completed" in result.output

    def test_actions_after_dependency(self, config: Path) -> None:
        result = invoke("build", "-c", str(config))

        assert result.exit_code == cli.EXIT_OK
        assert "Building" in result.output

    def test_failing_state(self, config: Path) -> None:
        assert invoke("broken", "-q", "-c", str(config)).exit_code == cli.EXIT_FAILED

    def test_failed_dependency(self, config: Path) -> None:
        result = invoke("blocked", "-c", str(config))

        assert result.exit_code == cli.EXIT_FAILED
        assert "Dependency broken failed" in result.output
        assert "echo never" not in result.output

    def test_interrupt(self, config: Path, monkeypatch) -> None:
        def interrupted(self, state_name, graph, run=None):
            raise KeyboardInterrupt

        monkeypatch.setattr(StateResolver, "resolve", interrupted)

        result = invoke("build", "-c", str(config))

        assert result.exit_code == cli.EXIT_INTERRUPTED
