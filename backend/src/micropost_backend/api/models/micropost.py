"""Pydantic models for micropost endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from micropost_backend.database.schemas import MICROPOST_CONTENT_MAX_LENGTH


class MicropostResponse(BaseModel):
    """Public representation of a micropost."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    content: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class MicropostCreateRequest(BaseModel):
    """Payload for publishing a micropost on behalf of a user."""

    content: str = Field(min_length=1, max_length=MICROPOST_CONTENT_MAX_LENGTH)
    user_id: UUID

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str) -> str:
        if not value.strip():
            msg = "content must not be blank"
            raise ValueError(msg)
        return value


class MicropostUpdateRequest(BaseModel):
    """Payload for editing a micropost; omitted fields are kept."""

    content: str | None = Field(
        default=None, min_length=1, max_length=MICROPOST_CONTENT_MAX_LENGTH
    )
    user_id: UUID | None = None

    @field_validator("content")
    @classmethod
    def validate_content(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            msg = "content must not be blank"
            raise ValueError(msg)
        return value
