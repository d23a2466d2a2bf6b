"""
Endpoint probe adapters.
"""

from envstate.infrastructure.http.mock import MockHttpProbe
from envstate.infrastructure.http.probe import HttpProbeConfig, RequestsHttpProbe

__all__ = [
    "HttpProbeConfig",
    "MockHttpProbe",
    "RequestsHttpProbe",
]
