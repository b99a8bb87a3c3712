"""
Pytest fixtures for BFF tests
"""

import json
import pytest
import httpx
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an asyncio test."
    )


class InMemoryTokenStorage:
    """Token storage fake keeping the token in memory"""

    def __init__(self, token: Optional[str] = None):
        self.token = token
        self.set_calls: List[str] = []

    async def set_access_token(self, token: str) -> None:
        self.set_calls.append(token)
        self.token = token

    async def get_access_token(self) -> Optional[str]:
        return self.token

    async def clear_access_token(self) -> None:
        self.token = None


class RecordingUpstream:
    """MockTransport handler that records requests and replays a canned response"""

    def __init__(self, response: Optional[httpx.Response] = None, error: Optional[Exception] = None):
        self.response = response or httpx.Response(200, json={})
        self.error = error
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.response.status_code,
            headers=self.response.headers,
            content=self.response.content
        )

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def token_storage():
    """In-memory token storage without a token"""
    return InMemoryTokenStorage()


@pytest.fixture
def mock_token_storage():
    """Token storage mock"""
    storage = MagicMock()
    storage.get_access_token = AsyncMock(return_value=None)
    storage.set_access_token = AsyncMock(return_value=None)
    storage.clear_access_token = AsyncMock(return_value=None)
    return storage


@pytest.fixture
def mock_http_client():
    """Request pipeline mock exposing only request()"""
    client = MagicMock()
    client.request = AsyncMock()
    return client


@pytest.fixture
def base_urls() -> Dict[str, str]:
    return {
        "USERS_SERVICE": "http://localhost:3001",
        "BUSINESS_SERVICE": "http://localhost:3002",
    }


@pytest.fixture
def sample_user_request() -> Dict[str, Any]:
    return {
        "name": "Test User",
        "email": "test@example.com",
        "password": "password123",
        "contact": "1234567890",
        "role": "PROFESSIONAL",
    }


@pytest.fixture
def sample_login_response() -> Dict[str, Any]:
    return {
        "access_token": "jwt-token-123",
        "id": "1",
        "email": "test@example.com",
        "name": "Test User",
        "role": "PROFESSIONAL",
    }


@pytest.fixture
def sample_patient_request() -> Dict[str, Any]:
    return {
        "name": "João Silva",
        "email": "joao@email.com",
        "phone": "(11) 99999-9999",
    }


@pytest.fixture
def sample_appointment_request() -> Dict[str, Any]:
    return {
        "patientId": "550e8400-e29b-41d4-a716-446655440000",
        "professionalId": "660e8400-e29b-41d4-a716-446655440001",
        "scheduledTime": "2025-09-15T10:30:00",
        "appointmentType": "FIRST_CONSULTATION",
        "observations": "Consulta de rotina",
    }
