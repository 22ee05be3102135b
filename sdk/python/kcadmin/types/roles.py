from __future__ import annotations

from typing import Any, Optional

from ._base import Representation


class Role(Representation):
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    composite: Optional[bool] = None
    client_role: Optional[bool] = None
    container_id: Optional[str] = None
    attributes: Optional[dict[str, list[str]]] = None
    composites: Optional[dict[str, Any]] = None
