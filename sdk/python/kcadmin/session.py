"""Endpoint and credential context shared by every resource service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str
    access_token: str

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def __repr__(self) -> str:
        return f"Session(base_url={self.base_url!r})"
