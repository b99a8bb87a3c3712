"""
Unit tests for RedisTokenStorage
"""

import pytest
from unittest.mock import AsyncMock, MagicMock
from redis.exceptions import ConnectionError as RedisConnectionError, TimeoutError as RedisTimeoutError

from clinicboard_bff.utils.token_storage import (
    ACCESS_TOKEN_KEY,
    ACCESS_TOKEN_TTL_SECONDS,
    RedisTokenStorage,
)

JWT = "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJzdWIiOiIxMjM0NTY3ODkwIn0"


@pytest.fixture
def mock_redis():
    """Mock async Redis client"""
    client = MagicMock()
    client.set = AsyncMock(return_value=True)
    client.get = AsyncMock(return_value=None)
    client.delete = AsyncMock(return_value=1)
    return client


@pytest.fixture
def storage(mock_redis):
    return RedisTokenStorage(mock_redis)


class TestSetAccessToken:

    @pytest.mark.asyncio
    async def test_stores_token_with_expiry(self, storage, mock_redis):
        await storage.set_access_token(JWT)

        mock_redis.set.assert_awaited_once_with("access_token", JWT, ex=3600)

    def test_defaults(self):
        assert ACCESS_TOKEN_KEY == "access_token"
        assert ACCESS_TOKEN_TTL_SECONDS == 3600

    @pytest.mark.asyncio
    async def test_custom_key_and_ttl(self, mock_redis):
        storage = RedisTokenStorage(mock_redis, key="bff:token", ttl=60)

        await storage.set_access_token("abc")

        mock_redis.set.assert_awaited_once_with("bff:token", "abc", ex=60)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        RedisConnectionError("Redis connection failed"),
        RedisTimeoutError("Redis operation timeout"),
    ])
    async def test_redis_failure_propagates(self, storage, mock_redis, error):
        mock_redis.set.side_effect = error

        with pytest.raises(type(error)) as excinfo:
            await storage.set_access_token("valid-token")

        assert excinfo.value is error


class TestGetAccessToken:

    @pytest.mark.asyncio
    async def test_returns_stored_token(self, storage, mock_redis):
        mock_redis.get.return_value = JWT

        assert await storage.get_access_token() == JWT
        mock_redis.get.assert_awaited_once_with("access_token")

    @pytest.mark.asyncio
    async def test_returns_none_when_absent_or_expired(self, storage, mock_redis):
        mock_redis.get.return_value = None

        assert await storage.get_access_token() is None

    @pytest.mark.asyncio
    async def test_redis_failure_propagates(self, storage, mock_redis):
        mock_redis.get.side_effect = RedisConnectionError("Redis server unavailable")

        with pytest.raises(RedisConnectionError, match="Redis server unavailable"):
            await storage.get_access_token()


class TestClearAccessToken:

    @pytest.mark.asyncio
    async def test_deletes_key(self, storage, mock_redis):
        await storage.clear_access_token()

        mock_redis.delete.assert_awaited_once_with("access_token")

    @pytest.mark.asyncio
    async def test_missing_key_is_not_an_error(self, storage, mock_redis):
        mock_redis.delete.return_value = 0

        await storage.clear_access_token()

        mock_redis.delete.assert_awaited_once_with("access_token")

    @pytest.mark.asyncio
    async def test_redis_failure_propagates(self, storage, mock_redis):
        mock_redis.delete.side_effect = RedisTimeoutError("Redis operation timeout")

        with pytest.raises(RedisTimeoutError):
            await storage.clear_access_token()
