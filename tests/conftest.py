from typing import Any, Dict, List, Optional

import pytest


ENDPOINT = "https://analytics.test/api/"


class FakeResponse:
    """Minimal response object satisfying the transport contract."""

    def __init__(self, status_code: int, payload: Any = None, raw: Optional[str] = None):
        self.status_code = status_code
        self.ok = status_code < 400
        self._payload = payload
        self._raw = raw

    def json(self) -> Any:
        if self._raw is not None:
            raise ValueError(f"Expecting value: {self._raw!r}")
        return self._payload


class FakeTransport:
    """Records every call and replays a canned response or error."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response or FakeResponse(200, {})
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, method, url, headers, data=None):
        self.calls.append({"method": method, "url": url, "headers": headers, "data": data})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def transport():
    return FakeTransport()
