"""envstate JSON Schema definitions and validation utilities.

This module provides the JSON Schema for state graph configuration files.

Schemas:
    - states.schema.json: State graph (dependencies, readiness probes, actions)

Usage:
    from envstate.schemas import validate_states

    with open("envstate.yml") as f:
        data = yaml.safe_load(f)
    validate_states(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'states.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("envstate.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_states_schema() -> dict[str, Any]:
    """Get the states configuration schema.

    Returns:
        JSON Schema for state graph configuration
    """
    return _load_schema("states.schema.json")


def validate_states(data: Any) -> None:
    """Validate a state graph configuration against the schema.

    Args:
        data: Parsed configuration document

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_states_schema())


__all__ = [
    "get_states_schema",
    "validate_states",
]
