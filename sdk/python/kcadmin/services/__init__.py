from __future__ import annotations

from .groups import GroupsService
from .resource import ResourceService
from .roles import RolesService

__all__ = ["ResourceService", "RolesService", "GroupsService"]
