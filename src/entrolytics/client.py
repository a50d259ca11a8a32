"""
Entrolytics Python SDK - API Client

Core client every endpoint helper goes through. Requests never raise: each
call returns a result dict, ``{"ok": True, "status": ..., "data": ...}`` or
``{"ok": False, "status": ..., "error": ...}``, with status 0 when no
response was received.
"""

import json
import logging
import time
from typing import Any, Callable, Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict

from .auth import build_auth_headers, resolve_auth_mode
from .config import ClientConfig, resolve_config
from .http import build_url
from .types import (
    ApiFailureType,
    ApiResponseType,
    ApiSuccessType,
    ClientOptionsType,
    QueryParamsType,
    RequestOptionsType,
)

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = ('GET', 'POST', 'PUT', 'DELETE', 'PATCH')
DEFAULT_HEADERS = {'Content-Type': 'application/json'}


def _failure(status: int, error: str) -> ApiFailureType:
    return {'ok': False, 'status': status, 'error': error}


def _error_message(data: Any, status: int) -> str:
    if isinstance(data, dict):
        if isinstance(data.get('error'), str):
            return data['error']
        if isinstance(data.get('message'), str):
            return data['message']
    return f'HTTP {status}'


class ApiClient:
    """Authenticated client for the Entrolytics API.

    Usage::

        client = ApiClient({'endpoint': 'https://analytics.example.com/api', 'apiKey': '...'})
        result = client.get('websites', {'page': 1})
        if result['ok']:
            print(result['data'])
    """

    def __init__(
        self,
        options: Optional[ClientOptionsType] = None,
        environ: Optional[Mapping[str, str]] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Create a new ApiClient.

        Args:
            options: Client options (endpoint, apiKey, userId, secret,
                transport, timeout). Missing values fall back to the
                ENTROLYTICS_* environment variables.
            environ: Environment lookup used for fallbacks; defaults to
                ``os.environ``
            clock: Wall-clock source in seconds, used for share tokens

        Raises:
            ConfigurationError: If no endpoint is configured
        """
        self.config: ClientConfig = resolve_config(options, environ)
        self._clock = clock

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    def _auth_headers(self) -> Dict[str, str]:
        return build_auth_headers(self.config, int(self._clock() * 1000))

    def request(self, path: str, options: Optional[RequestOptionsType] = None) -> ApiResponseType:
        """Make an authenticated API request.

        Args:
            path: Path relative to the endpoint, or an absolute URL
            options: Request options (method, body, params, headers)

        Returns:
            Success or failure result; never raises for HTTP or network errors
        """
        if options is None:
            options = {}
        method = (options.get('method') or 'GET').upper()
        body = options.get('body')

        if method not in SUPPORTED_METHODS:
            return _failure(0, f'Unsupported HTTP method: {method}')

        url = build_url(self.config.endpoint, path, options.get('params'))

        headers = CaseInsensitiveDict(DEFAULT_HEADERS)
        headers.update(self._auth_headers())
        headers.update(options.get('headers') or {})

        try:
            data = None
            if body is not None:
                data = json.dumps(body, separators=(',', ':')).encode('utf-8')

            logger.debug('%s %s (auth=%s)', method, url, resolve_auth_mode(self.config).value)
            response = self.config.transport(method, url, headers=dict(headers), data=data)

            try:
                payload = response.json()
            except ValueError:
                payload = {}

            logger.debug('%s %s -> %s', method, url, response.status_code)
            if not response.ok:
                return _failure(response.status_code, _error_message(payload, response.status_code))

            result: ApiSuccessType = {'ok': True, 'status': response.status_code, 'data': payload}
            return result
        except Exception as e:
            logger.warning('%s %s failed: %s', method, url, e)
            return _failure(0, str(e) or 'Network error')

    def get(self, path: str, params: Optional[QueryParamsType] = None) -> ApiResponseType:
        """GET request helper."""
        return self.request(path, {'method': 'GET', 'params': params})

    def post(self, path: str, body: Any = None) -> ApiResponseType:
        """POST request helper."""
        return self.request(path, {'method': 'POST', 'body': body})

    def put(self, path: str, body: Any = None) -> ApiResponseType:
        """PUT request helper."""
        return self.request(path, {'method': 'PUT', 'body': body})

    def delete(self, path: str) -> ApiResponseType:
        """DELETE request helper."""
        return self.request(path, {'method': 'DELETE'})

    def patch(self, path: str, body: Any = None) -> ApiResponseType:
        """PATCH request helper."""
        return self.request(path, {'method': 'PATCH', 'body': body})
