"""
Domain exceptions for the state resolution engine.

The resolver itself records failures in the run instead of raising; these
exceptions surface at the configuration boundary.
"""


class ConfigurationError(Exception):
    """
    Raised when a state graph cannot be loaded or a definition is invalid.

    Configuration errors are never retried.
    """

    def __init__(self, message: str, state_name: str | None = None):
        """
        Args:
            message: Human-readable error message
            state_name: The offending state, if the error is state-specific
        """
        super().__init__(message)
        self.state_name = state_name


class UnknownStateError(ConfigurationError):
    """Raised when a state name is not present in the graph."""

    def __init__(self, state_name: str):
        super().__init__(f"Unknown state: {state_name}", state_name=state_name)
