"""Shared fixtures: an httpx.AsyncClient stand-in with scripted responses."""

import json as jsonlib
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from kcadmin import KeycloakAdminClient, Session

BASE_URL = "http://keycloak:8080/auth"
TOKEN = "test-token"


class MockResponse:
    """Mock HTTP response object."""

    def __init__(self, status_code: int, json_data=None, text: str = "", headers=None):
        self.status_code = status_code
        self._json_data = json_data
        self.headers = headers or {}
        if json_data is not None:
            self.text = jsonlib.dumps(json_data)
        else:
            self.text = text
        self.content = self.text.encode()

    def json(self):
        if self._json_data is None:
            return jsonlib.loads(self.text)
        return self._json_data


@pytest.fixture
def mock_httpx_client():
    """httpx.AsyncClient mock; script replies via ``request.side_effect``."""
    client = MagicMock(spec=httpx.AsyncClient)
    client.request = AsyncMock(return_value=MockResponse(200, []))
    client.post = AsyncMock()
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def session():
    return Session(base_url=BASE_URL, access_token=TOKEN)


@pytest.fixture
def admin_client(session, mock_httpx_client):
    return KeycloakAdminClient(session, mock_httpx_client)
