"""
HTTP plumbing for the Entrolytics Python SDK.

URL building and the default transport. A transport is any callable with
the signature of ``requests.request`` (method, url, headers=..., data=...)
returning an object that exposes ``status_code``, ``ok`` and ``json()``.
"""

from typing import Any, Dict, List, Optional, Protocol, Tuple
from urllib.parse import parse_qsl, urlencode, urljoin, urlsplit, urlunsplit

import requests

from .types import ParamValue, QueryParamsType


class TransportResponse(Protocol):
    status_code: int
    ok: bool

    def json(self) -> Any: ...


class Transport(Protocol):
    def __call__(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[bytes] = None,
    ) -> TransportResponse: ...


class RequestsTransport:
    """Default transport backed by the requests library."""

    def __init__(self, timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        """Initialize transport.

        Args:
            timeout: Optional per-request timeout in seconds. No timeout is
                enforced when omitted.
            session: Optional requests session to reuse connections
        """
        self.timeout = timeout
        self.session = session

    def __call__(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[bytes] = None,
    ) -> requests.Response:
        send = self.session.request if self.session is not None else requests.request
        kwargs: Dict[str, Any] = {'headers': headers, 'data': data}
        if self.timeout is not None:
            kwargs['timeout'] = self.timeout
        return send(method, url, **kwargs)


def stringify_param(value: ParamValue) -> str:
    """Render a query parameter value as plain text.

    Booleans become ``true``/``false``; integral floats drop the fractional
    part so ``2.0`` renders as ``2``.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_url(endpoint: str, path: str, params: Optional[QueryParamsType] = None) -> str:
    """Resolve ``path`` against ``endpoint`` and set query parameters.

    Args:
        endpoint: Base URL
        path: Relative or absolute path, or a full URL
        params: Query parameters; ``None`` values are omitted

    Returns:
        Fully qualified URL string
    """
    url = urljoin(endpoint, path)
    if not params:
        return url

    updates = [(key, stringify_param(value)) for key, value in params.items() if value is not None]
    if not updates:
        return url

    scheme, netloc, url_path, query, fragment = urlsplit(url)
    pairs: List[Tuple[str, str]] = parse_qsl(query, keep_blank_values=True)
    for key, text in updates:
        positions = [i for i, (existing, _) in enumerate(pairs) if existing == key]
        if positions:
            # Replace the first occurrence, drop the rest
            pairs[positions[0]] = (key, text)
            pairs = [pair for i, pair in enumerate(pairs) if i not in positions[1:]]
        else:
            pairs.append((key, text))

    return urlunsplit((scheme, netloc, url_path, urlencode(pairs), fragment))
