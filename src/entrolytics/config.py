"""
Configuration resolution for the Entrolytics Python SDK.

Every option may be passed explicitly or read from the environment:

    ENTROLYTICS_API_ENDPOINT, ENTROLYTICS_API_KEY,
    ENTROLYTICS_USER_ID, ENTROLYTICS_SECRET

Explicit values win over the environment. The endpoint is required.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigurationError
from .http import RequestsTransport, Transport
from .types import ClientOptionsType

logger = logging.getLogger(__name__)

ENV_PREFIX = 'ENTROLYTICS'
ENV_ENDPOINT = f'{ENV_PREFIX}_API_ENDPOINT'
ENV_API_KEY = f'{ENV_PREFIX}_API_KEY'
ENV_USER_ID = f'{ENV_PREFIX}_USER_ID'
ENV_SECRET = f'{ENV_PREFIX}_SECRET'


@dataclass(frozen=True)
class ClientConfig:
    """Resolved, read-only client configuration."""

    endpoint: str
    transport: Transport
    api_key: Optional[str] = None
    user_id: Optional[str] = None
    secret: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ConfigurationError(
                f'Entrolytics API endpoint is required. Set {ENV_ENDPOINT} or pass endpoint in config.'
            )

    def __repr__(self) -> str:
        return (
            f'ClientConfig(endpoint={self.endpoint!r}, api_key={mask_secret(self.api_key)!r}, '
            f'user_id={self.user_id!r}, secret={mask_secret(self.secret)!r})'
        )


def mask_secret(value: Optional[str], visible_chars: int = 4) -> str:
    """Mask a credential for safe logging."""
    if value is None:
        return '<None>'
    if len(value) <= visible_chars:
        return '*' * len(value)
    return value[:visible_chars] + '*' * (len(value) - visible_chars)


def _pick(options: ClientOptionsType, key: str, environ: Mapping[str, str], env_name: str) -> Optional[str]:
    # Empty strings count as unset on both sides
    return options.get(key) or environ.get(env_name) or None


def resolve_config(
    options: Optional[ClientOptionsType] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ClientConfig:
    """Resolve client options against the environment.

    Args:
        options: Explicit client options (endpoint, apiKey, userId, secret,
            transport, timeout)
        environ: Environment lookup; defaults to ``os.environ``

    Returns:
        Resolved client configuration

    Raises:
        ConfigurationError: If no endpoint can be resolved
    """
    if options is None:
        options = {}
    if environ is None:
        environ = os.environ

    transport = options.get('transport')
    if transport is None:
        transport = RequestsTransport(timeout=options.get('timeout'))

    config = ClientConfig(
        endpoint=_pick(options, 'endpoint', environ, ENV_ENDPOINT) or '',
        transport=transport,
        api_key=_pick(options, 'apiKey', environ, ENV_API_KEY),
        user_id=_pick(options, 'userId', environ, ENV_USER_ID),
        secret=_pick(options, 'secret', environ, ENV_SECRET),
    )
    logger.debug('Resolved client configuration: %r', config)
    return config
