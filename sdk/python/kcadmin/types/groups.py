from __future__ import annotations

from typing import Optional

from ._base import Representation


class Group(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    path: Optional[str] = None
    parent_id: Optional[str] = None
    sub_group_count: Optional[int] = None
    sub_groups: Optional[list[Group]] = None
    attributes: Optional[dict[str, list[str]]] = None
    realm_roles: Optional[list[str]] = None
    client_roles: Optional[dict[str, list[str]]] = None
