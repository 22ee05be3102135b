"""Keycloak admin client exceptions."""

from __future__ import annotations

from typing import Any, Optional


class KeycloakAdminError(Exception):
    """Base exception for all Keycloak admin client errors."""


class TransportError(KeycloakAdminError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str, original: Optional[BaseException] = None) -> None:
        self.original = original
        super().__init__(message)


class ApiError(KeycloakAdminError):
    """The server answered with a status other than the one expected.

    ``body`` is the decoded response body exactly as the server sent it.
    """

    def __init__(self, status_code: int, body: Any = None, message: str = "") -> None:
        self.status_code = status_code
        self.body = body
        self.message = message or _message_from_body(body)
        super().__init__(f"[{status_code}] {self.message}" if self.message else f"[{status_code}]")


class ValidationError(ApiError):
    """400 Bad Request."""

    def __init__(self, body: Any = None, message: str = "") -> None:
        super().__init__(400, body, message)


class AuthenticationError(ApiError):
    """401 Unauthorized, or the token endpoint refused the credentials."""

    def __init__(self, body: Any = None, message: str = "", status_code: int = 401) -> None:
        super().__init__(status_code, body, message)


class ForbiddenError(ApiError):
    """403 Forbidden."""

    def __init__(self, body: Any = None, message: str = "") -> None:
        super().__init__(403, body, message)


class NotFoundError(ApiError):
    """404 Not Found."""

    def __init__(self, body: Any = None, message: str = "") -> None:
        super().__init__(404, body, message)


class ConflictError(ApiError):
    """409 Conflict, e.g. a duplicate name."""

    def __init__(self, body: Any = None, message: str = "") -> None:
        super().__init__(409, body, message)


def _message_from_body(body: Any) -> str:
    if isinstance(body, dict):
        for key in ("errorMessage", "error_description", "error"):
            if body.get(key):
                return str(body[key])
        return ""
    if body is None:
        return ""
    return str(body)
