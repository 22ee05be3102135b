"""Unit tests for the async HTTP transport."""

from unittest.mock import AsyncMock

import httpx
import pytest

from kcadmin._http import HttpClient
from kcadmin.exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TransportError,
    ValidationError,
)

from ..conftest import BASE_URL, TOKEN, MockResponse


@pytest.fixture
def http(session, mock_httpx_client):
    return HttpClient(session, mock_httpx_client)


class TestRequests:
    @pytest.mark.asyncio
    async def test_sends_bearer_token_and_json_headers(self, http, mock_httpx_client):
        await http.get("/admin/realms/master/roles")

        mock_httpx_client.request.assert_awaited_once_with(
            "GET",
            f"{BASE_URL}/admin/realms/master/roles",
            headers={"Content-Type": "application/json", "Authorization": f"Bearer {TOKEN}"},
            params=None,
            json=None,
        )

    @pytest.mark.asyncio
    async def test_drops_none_query_values(self, http, mock_httpx_client):
        await http.get("/x", params={"name": "admin", "first": None})

        assert mock_httpx_client.request.await_args.kwargs["params"] == {"name": "admin"}

    @pytest.mark.asyncio
    async def test_returns_decoded_body(self, http, mock_httpx_client):
        mock_httpx_client.request.return_value = MockResponse(200, [{"name": "admin"}])

        assert await http.get("/x") == [{"name": "admin"}]

    @pytest.mark.asyncio
    async def test_empty_body_is_none(self, http, mock_httpx_client):
        mock_httpx_client.request.return_value = MockResponse(204)

        assert await http.delete("/x") is None

    @pytest.mark.asyncio
    async def test_raw_post_returns_response(self, http, mock_httpx_client):
        reply = MockResponse(201, headers={"Location": f"{BASE_URL}/admin/realms/master/groups/g1"})
        mock_httpx_client.request.return_value = reply

        assert await http.post("/admin/realms/master/groups", json={"name": "staff"}, raw=True) is reply

    @pytest.mark.asyncio
    async def test_non_json_body_is_text(self, http, mock_httpx_client):
        mock_httpx_client.request.return_value = MockResponse(500, text="Internal Server Error")

        with pytest.raises(ApiError) as exc_info:
            await http.get("/x")

        assert exc_info.value.body == "Internal Server Error"
        assert exc_info.value.status_code == 500


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("status", "cls"),
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, ForbiddenError),
            (404, NotFoundError),
            (409, ConflictError),
        ],
    )
    @pytest.mark.asyncio
    async def test_known_statuses(self, http, mock_httpx_client, status, cls):
        mock_httpx_client.request.return_value = MockResponse(status, {"errorMessage": "nope"})

        with pytest.raises(cls) as exc_info:
            await http.get("/x")

        assert exc_info.value.status_code == status
        assert exc_info.value.body == {"errorMessage": "nope"}
        assert exc_info.value.message == "nope"

    @pytest.mark.asyncio
    async def test_unexpected_success_code_is_an_error(self, http, mock_httpx_client):
        mock_httpx_client.request.return_value = MockResponse(200, {"id": "1"})

        with pytest.raises(ApiError) as exc_info:
            await http.put("/x", json={"id": "1"})

        assert type(exc_info.value) is ApiError
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_transport_failure_keeps_original(self, http, mock_httpx_client):
        original = httpx.ConnectError("connection refused")
        mock_httpx_client.request.side_effect = original

        with pytest.raises(TransportError) as exc_info:
            await http.get("/x")

        assert exc_info.value.original is original
        assert exc_info.value.__cause__ is original


class TestClose:
    @pytest.mark.asyncio
    async def test_injected_client_is_left_open(self, http, mock_httpx_client):
        await http.close()

        mock_httpx_client.aclose.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self, session, mock_httpx_client):
        http = HttpClient(session, mock_httpx_client, owns_client=True)

        await http.close()

        mock_httpx_client.aclose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_creates_own_client_when_none_given(self, session, monkeypatch):
        created = AsyncMock()
        monkeypatch.setattr(httpx.AsyncClient, "aclose", created)

        http = HttpClient(session)
        await http.close()

        created.assert_awaited_once()
