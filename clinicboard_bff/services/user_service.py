"""
User Service forwarder
"""

from typing import Any, Dict
from urllib.parse import quote

from clinicboard_bff.utils.http_request import HttpRequestClient


class UserService:
    """User management calls against the user service"""

    def __init__(self, http_client: HttpRequestClient, base_urls: Dict[str, str]):
        self.http_client = http_client
        self.base_url = base_urls["USERS_SERVICE"]

    async def find_all(self) -> Any:
        return await self.http_client.request("GET", f"{self.base_url}/users")

    async def find_by_email(self, email: str) -> Any:
        return await self.http_client.request("GET", f"{self.base_url}/users/user/{quote(email, safe='@')}")

    async def find_one(self, user_id: str) -> Any:
        return await self.http_client.request("GET", f"{self.base_url}/users/{quote(user_id, safe='')}")

    async def update(self, user_id: str, payload: Dict[str, Any]) -> Any:
        return await self.http_client.request("PUT", f"{self.base_url}/users/{quote(user_id, safe='')}", payload)

    async def remove(self, user_id: str) -> Any:
        return await self.http_client.request("DELETE", f"{self.base_url}/users/{quote(user_id, safe='')}")
