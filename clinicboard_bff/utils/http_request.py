"""
Upstream HTTP request pipeline

Every call the gateway makes to the user service or the business service
goes through HttpRequestClient.request(), which:
- attaches the cached access token as a bearer token when one exists
- returns the decoded upstream body untouched on success
- turns transport failures into UpstreamRequestError

Connection pooling follows the shared AsyncClient pattern:
- start() during app startup (FastAPI lifespan), stop() on shutdown
- if not started, a per-request client is used
"""

import httpx
import logging
from typing import Any, Dict, Optional

from clinicboard_bff.utils.token_storage import TokenStorage

logger = logging.getLogger(__name__)

GENERIC_REQUEST_ERROR_MESSAGE = "Erro ao fazer a requisição"

METHODS_WITHOUT_BODY = frozenset({"GET", "DELETE"})
METHODS_WITH_BODY = frozenset({"POST", "PUT", "PATCH"})


class UpstreamRequestError(Exception):
    """Normalized failure of an outbound call: a status code and a message"""

    def __init__(self, status_code: int, message: Any):
        self.status_code = status_code
        self.message = message
        super().__init__(message if isinstance(message, str) else f"Upstream request failed ({status_code})")


class UpstreamResponseError(UpstreamRequestError):
    """The upstream service answered with an error status; status and body are kept as-is"""


class UpstreamUnavailableError(UpstreamRequestError):
    """No upstream response at all (DNS, refused connection, timeout, ...)"""

    def __init__(self):
        super().__init__(400, GENERIC_REQUEST_ERROR_MESSAGE)


def decode_body(response: httpx.Response) -> Any:
    """Decode a response body: JSON when possible, text otherwise, None when empty"""
    if response.status_code == 204 or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class HttpRequestClient:
    """
    Authenticated HTTP client for upstream services.

    Each call is attempted exactly once; there are no retries.
    """

    # Connection pool settings (per worker)
    MAX_CONNECTIONS = 100
    MAX_KEEPALIVE = 20
    KEEPALIVE_EXPIRY = 5.0

    def __init__(
        self,
        token_storage: TokenStorage,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.token_storage = token_storage
        self.transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def start(self):
        """
        Initialize the shared HTTP client.
        Call this during FastAPI app startup via lifespan.
        """
        if self._client is not None:
            logger.warning("HttpRequestClient already started")
            return

        limits = httpx.Limits(
            max_connections=self.MAX_CONNECTIONS,
            max_keepalive_connections=self.MAX_KEEPALIVE,
            keepalive_expiry=self.KEEPALIVE_EXPIRY
        )

        self._client = httpx.AsyncClient(
            limits=limits,
            transport=self.transport,
            follow_redirects=True
        )

        logger.info(f"HttpRequestClient started: max_connections={self.MAX_CONNECTIONS}")

    async def stop(self):
        """
        Close the HTTP client and release resources.
        Call this during FastAPI app shutdown via lifespan.
        """
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("HttpRequestClient stopped")

    @staticmethod
    def build_headers(token: Optional[str]) -> Dict[str, str]:
        """Authorization header for a token; no header at all without one"""
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    async def _send(self, client: httpx.AsyncClient, method: str, url: str, headers: Dict[str, str], data: Any) -> httpx.Response:
        if method in METHODS_WITH_BODY and data is not None:
            return await client.request(method, url, headers=headers, json=data)
        return await client.request(method, url, headers=headers)

    async def request(self, method: str, url: str, data: Any = None) -> Any:
        """
        Execute one authenticated call against an upstream service

        Args:
            method: GET, POST, PUT, PATCH or DELETE
            url: Absolute upstream URL
            data: JSON body for POST/PUT/PATCH; ignored for GET/DELETE

        Returns:
            The decoded upstream response body

        Raises:
            UpstreamResponseError: upstream answered with an error status
            UpstreamUnavailableError: no upstream response was received
            Token storage errors propagate unchanged and no call is made
        """
        method = method.upper()
        if method not in METHODS_WITH_BODY | METHODS_WITHOUT_BODY:
            raise ValueError(f"Unsupported HTTP method: {method}")

        token = await self.token_storage.get_access_token()
        headers = self.build_headers(token)

        logger.debug(f"{method} {url} (authenticated={bool(headers)})")

        try:
            if self._client:
                response = await self._send(self._client, method, url, headers, data)
            else:
                logger.warning("HttpRequestClient not initialized, using per-request client")
                async with httpx.AsyncClient(transport=self.transport, follow_redirects=True) as client:
                    response = await self._send(client, method, url, headers, data)

            response.raise_for_status()

        except httpx.HTTPStatusError as e:
            body = decode_body(e.response)
            logger.warning(f"Upstream error calling {method} {url}: {e.response.status_code} - {body}")
            raise UpstreamResponseError(e.response.status_code, body) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Request error calling {method} {url}: {e!r}")
            raise UpstreamUnavailableError() from e

        return decode_body(response)
