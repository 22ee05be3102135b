from __future__ import annotations

from .resource import ResourceService


class GroupsService(ResourceService):
    kind = "groups"
    id_option = "groupId"
