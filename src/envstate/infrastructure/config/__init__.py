"""
Configuration adapters: YAML state graphs.
"""

from envstate.infrastructure.config.loader import (
    DEFAULT_CONFIG_FILE,
    load_state_graph,
    parse_state_graph,
)

__all__ = [
    "DEFAULT_CONFIG_FILE",
    "load_state_graph",
    "parse_state_graph",
]
