"""
Authentication headers for the Entrolytics API.

Two mutually exclusive schemes:

- Cloud: the API key is sent verbatim as ``x-entrolytics-api-key``.
- Self-hosted: a share token is sent as ``x-entrolytics-share-token``. The
  token is base64 of ``{"userId": ..., "timestamp": ...}`` and carries no
  signature; self-hosted servers expect exactly this format.

Headers are derived per request, so the token timestamp changes between calls.
"""

import base64
import enum
import json
import time
from typing import Any, Dict, Optional

from .config import ClientConfig
from .errors import ConfigurationError

API_KEY_HEADER = 'x-entrolytics-api-key'
SHARE_TOKEN_HEADER = 'x-entrolytics-share-token'


class AuthMode(enum.Enum):
    CLOUD_KEY = 'cloud_key'
    SELF_HOSTED = 'self_hosted'
    ANONYMOUS = 'anonymous'


def resolve_auth_mode(config: ClientConfig) -> AuthMode:
    """Pick the auth scheme; an API key takes precedence over user credentials."""
    if config.api_key:
        return AuthMode.CLOUD_KEY
    if config.user_id and config.secret:
        return AuthMode.SELF_HOSTED
    return AuthMode.ANONYMOUS


def create_share_token(user_id: Optional[str], secret: Optional[str], timestamp_ms: Optional[int] = None) -> str:
    """Create a share token for self-hosted authentication.

    Args:
        user_id: User ID embedded in the token
        secret: Self-hosted secret; must be set but is not embedded
        timestamp_ms: Generation time in milliseconds since the epoch;
            defaults to now

    Returns:
        Base64-encoded JSON token

    Raises:
        ConfigurationError: If user_id or secret is missing
    """
    if not user_id or not secret:
        raise ConfigurationError('userId and secret are required for self-hosted authentication')

    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)

    payload = {'userId': user_id, 'timestamp': timestamp_ms}
    raw = json.dumps(payload, separators=(',', ':'), ensure_ascii=False)
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')


def decode_share_token(token: str) -> Dict[str, Any]:
    """Decode a share token back into its payload.

    Raises:
        ValueError: If the token is not base64-encoded JSON object
    """
    try:
        payload = json.loads(base64.b64decode(token, validate=True).decode('utf-8'))
    except (ValueError, UnicodeDecodeError) as e:
        raise ValueError(f'Malformed share token: {e}') from e
    if not isinstance(payload, dict):
        raise ValueError('Malformed share token: payload is not an object')
    return payload


def build_auth_headers(config: ClientConfig, timestamp_ms: Optional[int] = None) -> Dict[str, str]:
    """Build authentication headers for the current credentials.

    Args:
        config: Resolved client configuration
        timestamp_ms: Optional fixed token timestamp (self-hosted only)

    Returns:
        Dictionary of headers, empty for anonymous requests
    """
    mode = resolve_auth_mode(config)
    if mode is AuthMode.CLOUD_KEY:
        return {API_KEY_HEADER: config.api_key}
    if mode is AuthMode.SELF_HOSTED:
        return {SHARE_TOKEN_HEADER: create_share_token(config.user_id, config.secret, timestamp_ms)}
    return {}
