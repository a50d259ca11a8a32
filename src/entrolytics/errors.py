"""
Error classes for the Entrolytics Python SDK.

Only ConfigurationError is raised by the client itself. ApiError and
NetworkError are raised by ``unwrap`` for callers that prefer exceptions
over inspecting the result dict.
"""

from typing import Any, Optional

from .types.responses import ApiResponseType


class EntrolyticsError(Exception):
    """Base exception class for Entrolytics SDK."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        """Initialize Entrolytics error.

        Args:
            message: Error message
            status_code: HTTP status code (optional)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigurationError(EntrolyticsError):
    """Client configuration is missing or inconsistent."""

    def __init__(self, message: str):
        super().__init__(message)


class ApiError(EntrolyticsError):
    """Non-2xx/3xx response from the API."""

    def __init__(self, status_code: int, message: str):
        """Initialize API error.

        Args:
            status_code: HTTP status code
            message: Error message extracted from the response
        """
        super().__init__(message, status_code)


class NetworkError(EntrolyticsError):
    """Network-related error (connection refused, DNS failure, timeout, etc.)."""

    def __init__(self, message: str):
        super().__init__(message, 0)


def unwrap(result: ApiResponseType) -> Any:
    """Return the payload of a successful result or raise.

    Args:
        result: Result returned by ``ApiClient.request``

    Returns:
        The ``data`` field of a success result

    Raises:
        NetworkError: For transport failures (status 0)
        ApiError: For HTTP failures
    """
    if result['ok']:
        return result['data']
    if result['status'] == 0:
        raise NetworkError(result['error'])
    raise ApiError(result['status'], result['error'])
