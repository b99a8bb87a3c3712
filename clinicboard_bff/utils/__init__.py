"""
Utilities for the ClinicBoard BFF
"""

from .http_request import (
    HttpRequestClient,
    UpstreamRequestError,
    UpstreamResponseError,
    UpstreamUnavailableError,
)
from .token_storage import TokenStorage, RedisTokenStorage

__all__ = [
    "HttpRequestClient",
    "UpstreamRequestError",
    "UpstreamResponseError",
    "UpstreamUnavailableError",
    "TokenStorage",
    "RedisTokenStorage",
]
