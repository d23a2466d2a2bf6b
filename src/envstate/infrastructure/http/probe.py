"""
HTTP endpoint probe backed by requests.

A probe is "ready" when a GET completes without raising: connection,
DNS, TLS and timeout errors as well as 4xx/5xx responses all count as
not ready.
"""

import logging
from dataclasses import dataclass
from typing import Any

import requests
import urllib3

from envstate.domain.interfaces import HttpProbeInterface

logger = logging.getLogger(__name__)


@dataclass
class HttpProbeConfig:
    """Configuration for RequestsHttpProbe.

    This typed config ensures unknown fields are rejected at construction time.
    """

    timeout: float = 5.0
    verify_tls: bool = True  # Disable for self-signed development certificates


class RequestsHttpProbe(HttpProbeInterface):
    """Single GET request per probe, through a shared session."""

    def __init__(self, config: HttpProbeConfig | None = None, **kwargs: Any):
        """
        Args:
            config: Typed configuration object (preferred)
            **kwargs: Fields of HttpProbeConfig
        """
        if config is None:
            config = HttpProbeConfig(**kwargs)

        self._config = config
        self._session = requests.Session()
        self._session.verify = config.verify_tls
        if not config.verify_tls:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    def probe(self, uri: str) -> bool:
        try:
            response = self._session.get(uri, timeout=self._config.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.debug("GET %s failed: %s", uri, e)
            return False
        logger.debug("GET %s -> %d", uri, response.status_code)
        return True

    def close(self) -> None:
        self._session.close()
