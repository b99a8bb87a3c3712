"""
Health check routes
"""

from datetime import datetime
from fastapi import APIRouter, Request, HTTPException
from redis.exceptions import RedisError
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    """Service health check"""
    return {
        "status": "healthy",
        "service": "bff-service",
        "timestamp": datetime.utcnow().isoformat(),
        "version": "1.0.0"
    }


@router.get("/health/redis")
async def redis_health_check(request: Request):
    """Token cache connection health check"""
    redis_client = getattr(request.app.state, "redis", None)
    if redis_client is None:
        raise HTTPException(status_code=503, detail="Redis not initialized")

    try:
        await redis_client.ping()
    except (RedisError, OSError) as e:
        logger.error(f"Redis health check failed: {e}")
        raise HTTPException(status_code=503, detail="Redis connection failed")

    return {
        "status": "healthy",
        "redis": "connected"
    }
