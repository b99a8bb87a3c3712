"""
Redis connection management

Uses async Redis (redis.asyncio) to avoid blocking the event loop.
"""

import logging
from typing import Optional
import redis.asyncio as aioredis
from redis.asyncio.sentinel import Sentinel

from clinicboard_bff.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

# Global async Redis client instance
_redis_client: Optional[aioredis.Redis] = None


async def init_redis_client(config: Optional[Settings] = None) -> aioredis.Redis:
    """Initialize async Redis client, through Sentinel when enabled"""
    global _redis_client

    if _redis_client is not None:
        return _redis_client

    config = config or default_settings

    if config.redis_sentinel_enabled:
        # Parse comma-separated hosts if provided
        sentinel_hosts = [
            (host.strip(), config.redis_sentinel_port)
            for host in config.redis_sentinel_host.split(",")
            if host.strip()
        ]

        logger.info(
            f"Initializing async Redis with Sentinel: hosts={sentinel_hosts}, "
            f"master={config.redis_sentinel_master}"
        )

        sentinel = Sentinel(
            sentinel_hosts,
            socket_timeout=5.0,
            socket_connect_timeout=5.0,
            socket_keepalive=True,
            retry_on_timeout=True
        )

        client = sentinel.master_for(
            config.redis_sentinel_master,
            socket_timeout=5.0,
            password=config.redis_password or None,
            db=config.redis_db,
            decode_responses=True,
            retry_on_timeout=True
        )
    else:
        logger.info(f"Initializing async Redis: host={config.redis_host}, port={config.redis_port}")

        client = aioredis.Redis(
            host=config.redis_host,
            port=config.redis_port,
            password=config.redis_password or None,
            db=config.redis_db,
            decode_responses=True,
            socket_keepalive=True,
            health_check_interval=30
        )

    # Test connection
    await client.ping()
    _redis_client = client
    logger.info("Async Redis client initialized successfully")

    return _redis_client


async def close_redis_client():
    """Close async Redis client connection"""
    global _redis_client

    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
        logger.info("Async Redis client closed")
