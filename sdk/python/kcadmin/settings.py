"""Connection settings for the Keycloak admin client.

Values come from keyword arguments or from ``KEYCLOAK_*`` environment
variables, e.g. ``KEYCLOAK_BASE_URL=http://127.0.0.1:8080/auth``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="KEYCLOAK_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: str = Field(description="Server root, including any context path such as /auth")
    username: str = Field(default="admin")
    password: SecretStr = Field(default=SecretStr(""))
    auth_realm: str = Field(default="master", description="Realm the admin account lives in")
    client_id: str = Field(default="admin-cli")
    client_secret: Optional[SecretStr] = None
    verify_ssl: bool = True
    timeout: float = Field(default=30.0, gt=0)

    @property
    def token_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/realms/{self.auth_realm}/protocol/openid-connect/token"
