"""
Authentication Service
Registration, login and logout against the user service
"""

import logging
from typing import Any, Dict

from clinicboard_bff.utils.http_request import HttpRequestClient, UpstreamResponseError
from clinicboard_bff.utils.token_storage import TokenStorage

logger = logging.getLogger(__name__)


class AuthService:
    """Forwards auth calls and keeps the cached access token in sync with the last login"""

    def __init__(self, http_client: HttpRequestClient, base_urls: Dict[str, str], token_storage: TokenStorage):
        self.http_client = http_client
        self.base_url = base_urls["USERS_SERVICE"]
        self.token_storage = token_storage

    async def register(self, payload: Dict[str, Any]) -> Any:
        """Create a user account in the user service"""
        return await self.http_client.request("POST", f"{self.base_url}/auth/register", payload)

    async def login(self, credentials: Dict[str, Any]) -> Any:
        """
        Authenticate against the user service and cache the returned token

        A login only counts once the token is stored: a storage failure
        fails the whole login with the storage error.

        Raises:
            UpstreamResponseError: upstream error, or a success without access_token
        """
        response = await self.http_client.request("POST", f"{self.base_url}/auth/login", credentials)

        token = response.get("access_token") if isinstance(response, dict) else None
        if not token:
            logger.error("Login response from user service did not include an access token")
            raise UpstreamResponseError(502, "Login response did not include an access token")

        await self.token_storage.set_access_token(token)
        logger.info("Login succeeded, access token cached")

        return response

    async def logout(self) -> Dict[str, str]:
        """Drop the cached access token; later calls go out unauthenticated"""
        await self.token_storage.clear_access_token()
        return {"message": "Logged out"}
