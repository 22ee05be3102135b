"""Internal async HTTP transport for the Keycloak admin client."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from .exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from .session import Session

logger = logging.getLogger(__name__)

_ERROR_MAP = {
    400: ValidationError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
}


def decode_body(resp: httpx.Response) -> Any:
    """Return the JSON body, the raw text if it is not JSON, or None if empty."""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


def error_for(status_code: int, body: Any) -> ApiError:
    cls = _ERROR_MAP.get(status_code)
    if cls is None:
        return ApiError(status_code, body)
    return cls(body)


class HttpClient:
    """Low-level async HTTP client wrapping httpx.

    Every call names the one status code that counts as success; anything
    else, 2xx included, raises an ``ApiError`` subclass.
    """

    def __init__(
        self,
        session: Session,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = 30.0,
        verify: bool = True,
        owns_client: Optional[bool] = None,
    ) -> None:
        self._session = session
        self._owns_client = client is None if owns_client is None else owns_client
        self._client = client or httpx.AsyncClient(timeout=timeout, verify=verify)

    @property
    def base_url(self) -> str:
        return self._session.base_url

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._session.access_token}",
        }

    def _handle_response(self, resp: httpx.Response, expected: int) -> Any:
        body = decode_body(resp)
        if resp.status_code == expected:
            return body
        raise error_for(resp.status_code, body)

    async def _send(
        self,
        method: str,
        path: str,
        expected: int,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        raw: bool = False,
    ) -> Any:
        url = f"{self.base_url}{path}"
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            resp = await self._client.request(
                method, url, headers=self._headers(), params=params or None, json=json
            )
        except httpx.HTTPError as e:
            raise TransportError(f"Request failed: {e}", e) from e
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        body = self._handle_response(resp, expected)
        return resp if raw else body

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None, expected: int = 200) -> Any:
        return await self._send("GET", path, expected, params=params)

    async def post(self, path: str, json: Any = None, expected: int = 201, raw: bool = False) -> Any:
        """POST; with ``raw=True`` the ``httpx.Response`` is returned instead of the body."""
        return await self._send("POST", path, expected, json=json, raw=raw)

    async def put(self, path: str, json: Any = None, expected: int = 204) -> Any:
        return await self._send("PUT", path, expected, json=json)

    async def delete(self, path: str, expected: int = 204) -> Any:
        return await self._send("DELETE", path, expected)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
