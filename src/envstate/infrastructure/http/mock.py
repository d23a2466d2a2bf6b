"""Mock endpoint probe returning predefined readiness in sequence."""

from collections.abc import Sequence

from envstate.domain.interfaces import HttpProbeInterface


class MockHttpProbe(HttpProbeInterface):
    """Returns predefined probe results; the last one repeats forever."""

    def __init__(self, responses: Sequence[bool | Exception] = (False,)):
        if not responses:
            raise ValueError("MockHttpProbe needs at least one response")
        self._responses = list(responses)
        self.uris: list[str] = []

    def probe(self, uri: str) -> bool:
        index = min(len(self.uris), len(self._responses) - 1)
        self.uris.append(uri)

        response = self._responses[index]
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_count(self) -> int:
        return len(self.uris)
