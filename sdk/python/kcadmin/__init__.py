"""Async Python client for the Keycloak admin REST API."""

__version__ = "0.1.0"

from .client import KeycloakAdminClient
from .exceptions import (
    ApiError,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    KeycloakAdminError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from .session import Session
from .settings import AdminSettings
from .types import Group, Role

__all__ = [
    "__version__",
    "KeycloakAdminClient",
    "AdminSettings",
    "Session",
    "Role",
    "Group",
    "KeycloakAdminError",
    "TransportError",
    "ApiError",
    "ValidationError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
