"""
YAML state graph loader.

Reads a configuration document such as:

    states:
      dockerStartup:
        readiness:
          checkCommand: docker info
          waitCommand: docker info
        actions:
          - type: application
            path: /usr/bin/dockerd
      apiReady:
        needs: [dockerStartup]
        readiness:
          waitEndpoint: https://localhost:5001/healthcheck
        actions:
          - command: dotnet run
            workingDirectory: ~/src/api
            newWindow: true

validates it against the packaged JSON schema and converts it into
immutable StateDefinitions.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from envstate.domain.exceptions import ConfigurationError
from envstate.domain.models import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_MAX_TOTAL_SECONDS,
    DEFAULT_REQUIRED_SUCCESSES,
    DEFAULT_RETRY_INTERVAL_SECONDS,
    ActionKind,
    ActionSpec,
    LaunchMode,
    ReadinessConfig,
    StateDefinition,
)
from envstate.schemas import validate_states

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "envstate.yml"


def _parse_action(raw: str | Mapping[str, Any]) -> ActionSpec:
    if isinstance(raw, str):
        return ActionSpec.from_command(raw)

    kind = ActionKind(raw.get("type", ActionKind.COMMAND.value))
    new_window = raw.get("newWindow")
    if new_window:
        launch_mode = LaunchMode.NEW_WINDOW
    elif kind is ActionKind.APPLICATION and new_window is None:
        launch_mode = LaunchMode.WINDOWS_APP
    else:
        launch_mode = LaunchMode.CONSOLE

    timeout = raw.get("timeout")
    return ActionSpec(
        command=raw.get("command") or raw["path"],
        kind=kind,
        arguments=tuple(raw.get("arguments", ())),
        working_directory=raw.get("workingDirectory"),
        description=raw.get("description"),
        timeout_seconds=float(timeout) if timeout is not None else None,
        launch_mode=launch_mode,
    )


def _parse_readiness(raw: Mapping[str, Any] | None) -> ReadinessConfig | None:
    if raw is None:
        return None
    return ReadinessConfig(
        check_command=raw.get("checkCommand"),
        check_endpoint=raw.get("checkEndpoint"),
        wait_command=raw.get("waitCommand"),
        wait_endpoint=raw.get("waitEndpoint"),
        max_retries=int(raw.get("maxRetries", DEFAULT_MAX_RETRIES)),
        retry_interval_seconds=float(
            raw.get("retryInterval", DEFAULT_RETRY_INTERVAL_SECONDS)
        ),
        required_successes=int(
            raw.get("requiredSuccesses", DEFAULT_REQUIRED_SUCCESSES)
        ),
        max_total_seconds=float(raw.get("maxTimeSeconds", DEFAULT_MAX_TOTAL_SECONDS)),
    )


def parse_state_graph(data: Any) -> dict[str, StateDefinition]:
    """
    Convert a parsed configuration document into state definitions.

    Args:
        data: Document with a top-level `states` mapping

    Returns:
        State definitions keyed by name, in document order

    Raises:
        ConfigurationError: If the document does not match the schema
    """
    try:
        validate_states(data)
    except jsonschema.ValidationError as e:
        location = "/".join(str(part) for part in e.absolute_path) or "<root>"
        raise ConfigurationError(
            f"Invalid configuration at {location}: {e.message}"
        ) from e

    graph: dict[str, StateDefinition] = {}
    for name, raw in data["states"].items():
        graph[name] = StateDefinition(
            name=name,
            dependencies=tuple(raw.get("needs", ())),
            readiness=_parse_readiness(raw.get("readiness")),
            actions=tuple(_parse_action(action) for action in raw.get("actions", ())),
        )

    for state in graph.values():
        missing = [dep for dep in state.dependencies if dep not in graph]
        if missing:
            logger.warning(
                "State %s needs undefined state(s): %s", state.name, ", ".join(missing)
            )
    return graph


def load_state_graph(path: str | Path) -> dict[str, StateDefinition]:
    """
    Load and validate a YAML state graph.

    Raises:
        ConfigurationError: If the file is unreadable, not valid YAML, or
            does not match the schema
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    logger.debug("Loaded configuration from %s", path)
    return parse_state_graph(data)
