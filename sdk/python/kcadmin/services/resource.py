"""Generic CRUD service for a resource collection nested under a realm.

Every admin resource kind exposes the same four endpoints::

    GET    /admin/realms/{realm}/{kind}         -> 200, JSON array
    GET    /admin/realms/{realm}/{kind}/{id}    -> 200, JSON object
    POST   /admin/realms/{realm}/{kind}         -> 201, empty body
    PUT    /admin/realms/{realm}/{kind}/{id}    -> 204
    DELETE /admin/realms/{realm}/{kind}/{id}    -> 204

A subclass only names the path segment and the option key used to select a
single resource.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel

if TYPE_CHECKING:
    import httpx

    from .._http import HttpClient

logger = logging.getLogger(__name__)

ResourceLike = Union[Mapping[str, Any], BaseModel]


def _segment(value: Any) -> str:
    return quote(str(value), safe="")


def _as_payload(resource: Optional[ResourceLike]) -> dict[str, Any]:
    if resource is None:
        return {}
    if isinstance(resource, BaseModel):
        return resource.model_dump(by_alias=True, exclude_none=True)
    return dict(resource)


def _check_realm(realm: str) -> None:
    if not isinstance(realm, str) or not realm:
        raise ValueError("realm must be a non-empty realm name")


class ResourceService:
    kind: ClassVar[str]
    id_option: ClassVar[str]

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def _collection_path(self, realm: str) -> str:
        return f"/admin/realms/{_segment(realm)}/{self.kind}"

    def _resource_path(self, realm: str, resource_id: Any) -> str:
        return f"{self._collection_path(realm)}/{_segment(resource_id)}"

    async def find(
        self, realm: str, options: Optional[Mapping[str, Any]] = None, **filters: Any
    ) -> Union[dict, list[dict]]:
        """Return one resource if the id option is given, else the filtered collection.

        The id option (``roleId``, ``groupId``) overrides every other option.
        Remaining options are sent as query parameters, e.g. ``name``.
        """
        _check_realm(realm)
        query = {**(options or {}), **filters}
        resource_id = query.get(self.id_option)
        if resource_id:
            return await self._http.get(self._resource_path(realm, resource_id))
        result = await self._http.get(self._collection_path(realm), params=query)
        return result if result is not None else []

    async def create(self, realm: str, resource: ResourceLike) -> Optional[dict]:
        """Create a resource and return the server's representation of it.

        The create endpoint answers 201 with no body, so the new resource is
        read back afterwards (see ``_fetch_created``).
        """
        _check_realm(realm)
        payload = _as_payload(resource)
        if not payload.get("name"):
            raise ValueError(f"cannot create {self.kind} without a name")
        if payload.get("id") is not None:
            raise ValueError(f"id is assigned by the server; remove it before creating {self.kind}")
        response = await self._http.post(self._collection_path(realm), json=payload, raw=True)
        return await self._fetch_created(realm, payload, response)

    async def _fetch_created(
        self, realm: str, payload: dict[str, Any], response: httpx.Response
    ) -> Optional[dict]:
        """Resolve the resource the POST just created.

        ``response`` is the 201 reply; override to use e.g. its ``Location`` header.
        """
        # Not atomic with the POST: a concurrent create/rename can change what
        # comes back. Names are unique per realm, so the first match wins.
        matches = await self.find(realm, name=payload["name"])
        if not matches:
            logger.warning("Created %s %r in realm %s but could not read it back", self.kind, payload["name"], realm)
            return None
        return matches[0]

    async def update(self, realm: str, resource: Optional[ResourceLike] = None) -> None:
        """Replace the fields of an existing resource; ``resource`` must carry its id."""
        _check_realm(realm)
        payload = _as_payload(resource)
        if payload.get("id") is None:
            raise ValueError(f"cannot update {self.kind} without an id")
        await self._http.put(self._resource_path(realm, payload["id"]), json=payload)

    async def remove(self, realm: str, resource_id: str) -> None:
        _check_realm(realm)
        if not resource_id:
            raise ValueError(f"cannot remove {self.kind} without an id")
        await self._http.delete(self._resource_path(realm, resource_id))
