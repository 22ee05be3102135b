from __future__ import annotations

from ._base import Representation
from .groups import Group
from .roles import Role

__all__ = ["Representation", "Role", "Group"]
