"""One-shot admin token acquisition (resource-owner password grant)."""

from __future__ import annotations

import logging

import httpx

from ._http import decode_body
from .exceptions import AuthenticationError, TransportError
from .settings import AdminSettings

logger = logging.getLogger(__name__)


async def obtain_access_token(settings: AdminSettings, client: httpx.AsyncClient) -> str:
    """Exchange the configured admin credentials for a bearer token.

    The token is fetched once; it is never refreshed.
    """
    data = {
        "grant_type": "password",
        "client_id": settings.client_id,
        "username": settings.username,
        "password": settings.password.get_secret_value(),
    }
    if settings.client_secret is not None:
        data["client_secret"] = settings.client_secret.get_secret_value()

    try:
        resp = await client.post(settings.token_url, data=data)
    except httpx.HTTPError as e:
        raise TransportError(f"Token request failed: {e}", e) from e

    body = decode_body(resp)
    if resp.status_code != 200:
        raise AuthenticationError(body, status_code=resp.status_code)
    if not isinstance(body, dict) or not body.get("access_token"):
        raise AuthenticationError(body, message="Token response carried no access_token", status_code=resp.status_code)

    logger.debug("Obtained admin token for %s in realm %s", settings.username, settings.auth_realm)
    return body["access_token"]
