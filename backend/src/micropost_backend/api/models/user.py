"""Pydantic models for user endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

NAME_MAX_LENGTH = 50
EMAIL_MAX_LENGTH = 255
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserResponse(BaseModel):
    """Public representation of a user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class _UserPayload(BaseModel):
    """Normalization shared by the create and update payloads."""

    @field_validator("name", mode="before", check_fields=False)
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @field_validator("email", mode="before", check_fields=False)
    @classmethod
    def normalize_email(cls, value: Any) -> Any:
        # Emails are compared case-insensitively for uniqueness.
        return value.strip().lower() if isinstance(value, str) else value


class UserCreateRequest(_UserPayload):
    """Payload for creating a new user."""

    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    email: str = Field(max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN)


class UserUpdateRequest(_UserPayload):
    """Payload for changing an existing user; omitted fields are kept."""

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    email: str | None = Field(
        default=None, max_length=EMAIL_MAX_LENGTH, pattern=EMAIL_PATTERN
    )
