from __future__ import annotations

from .resource import ResourceService


class RolesService(ResourceService):
    """Realm roles: ``client.roles.find("master", roleId="offline_access")``."""

    kind = "roles"
    id_option = "roleId"
