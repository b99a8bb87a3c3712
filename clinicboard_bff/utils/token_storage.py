"""
Access token storage

Holds the single server-side access token in Redis under a fixed key with
an expiry. Redis failures are never swallowed here: callers decide what a
failed read or write means for them.
"""

import logging
from typing import Optional, Protocol
import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "access_token"
ACCESS_TOKEN_TTL_SECONDS = 3600


class TokenStorage(Protocol):
    """Capability used by the request pipeline and the auth service"""

    async def set_access_token(self, token: str) -> None: ...

    async def get_access_token(self) -> Optional[str]: ...

    async def clear_access_token(self) -> None: ...


class RedisTokenStorage:
    """Token storage backed by a shared Redis cache (last write wins)"""

    def __init__(
        self,
        redis_client: aioredis.Redis,
        key: str = ACCESS_TOKEN_KEY,
        ttl: int = ACCESS_TOKEN_TTL_SECONDS
    ):
        self.redis = redis_client
        self.key = key
        self.ttl = ttl

    async def set_access_token(self, token: str) -> None:
        """Store the token, replacing any previous one"""
        await self.redis.set(self.key, token, ex=self.ttl)
        logger.info(f"Access token stored (ttl={self.ttl}s)")

    async def get_access_token(self) -> Optional[str]:
        """
        Return the current token

        Returns:
            The token, or None when absent or expired
        """
        token = await self.redis.get(self.key)
        if token is None:
            logger.debug("No access token cached")
        return token

    async def clear_access_token(self) -> None:
        """Delete the token; a missing key is not an error"""
        deleted = await self.redis.delete(self.key)
        logger.info(f"Access token cleared (deleted={deleted})")
