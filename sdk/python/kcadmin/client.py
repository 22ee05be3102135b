"""Keycloak admin client."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ._http import HttpClient
from .auth import obtain_access_token
from .services import GroupsService, RolesService
from .session import Session
from .settings import AdminSettings


class KeycloakAdminClient:
    """Main client for the Keycloak admin REST API.

    Usage:
        async with await KeycloakAdminClient.connect(base_url="http://127.0.0.1:8080/auth",
                                                     username="admin", password="admin") as client:
            roles = await client.roles.find("master")
            role = await client.roles.create("master", {"name": "newRealmRole"})
            await client.roles.remove("master", role["id"])
    """

    def __init__(
        self,
        session: Session,
        http_client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        owns_client: Optional[bool] = None,
    ) -> None:
        self._session = session
        self._http = HttpClient(session, http_client, timeout=timeout, verify=verify_ssl, owns_client=owns_client)
        self.roles = RolesService(self._http)
        self.groups = GroupsService(self._http)

    @classmethod
    async def connect(
        cls,
        settings: Optional[AdminSettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **overrides: Any,
    ) -> KeycloakAdminClient:
        """Authenticate once and return a client bound to the resulting token.

        Without ``settings``, they are read from ``KEYCLOAK_*`` environment
        variables, with ``overrides`` taking precedence.
        """
        if settings is None:
            settings = AdminSettings(**overrides)
        elif overrides:
            settings = type(settings)(**{**settings.model_dump(), **overrides})

        owns_client = http_client is None
        client = http_client or httpx.AsyncClient(timeout=settings.timeout, verify=settings.verify_ssl)
        try:
            token = await obtain_access_token(settings, client)
        except Exception:
            if owns_client:
                await client.aclose()
            raise

        session = Session(base_url=settings.base_url, access_token=token)
        return cls(session, client, owns_client=owns_client)

    @property
    def session(self) -> Session:
        return self._session

    @property
    def base_url(self) -> str:
        return self._session.base_url

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        await self._http.close()

    async def __aenter__(self) -> KeycloakAdminClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"KeycloakAdminClient(base_url={self.base_url!r})"
