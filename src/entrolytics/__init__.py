"""
Entrolytics Python SDK

Authenticated request layer for the Entrolytics API.
- Cloud mode: API key sent as x-entrolytics-api-key
- Self-hosted mode: user ID + secret, sent as a per-request share token
- Every request returns a result dict instead of raising
"""

import logging

from .types import (
    ClientOptionsType as ClientOptions,
    RequestOptionsType as RequestOptions,
    ApiResponseType as ApiResponse,
    ApiSuccessType as ApiSuccess,
    ApiFailureType as ApiFailure,
    HttpMethod,
    QueryParamsType as QueryParams,
)
from .errors import EntrolyticsError, ConfigurationError, ApiError, NetworkError, unwrap
from .config import ClientConfig, resolve_config
from .auth import AuthMode, build_auth_headers, create_share_token, decode_share_token
from .http import RequestsTransport, Transport, build_url
from .client import ApiClient

logging.getLogger(__name__).addHandler(logging.NullHandler())


def Entrolytics(options: ClientOptions = None) -> ApiClient:
    """Factory function to create an ApiClient."""
    return ApiClient(options)


__all__ = [
    # Main client
    "ApiClient",
    "Entrolytics",

    # Configuration
    "ClientConfig",
    "resolve_config",
    "RequestsTransport",
    "Transport",

    # Auth
    "AuthMode",
    "build_auth_headers",
    "create_share_token",
    "decode_share_token",
    "build_url",

    # Errors
    "EntrolyticsError",
    "ConfigurationError",
    "ApiError",
    "NetworkError",
    "unwrap",

    # Types
    "ClientOptions",
    "RequestOptions",
    "ApiResponse",
    "ApiSuccess",
    "ApiFailure",
    "HttpMethod",
    "QueryParams",
]
