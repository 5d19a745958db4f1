"""Micropost database schema."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlalchemy import DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from micropost_backend.database.base import BaseSchema, utcnow

if TYPE_CHECKING:
    from micropost_backend.database.schemas.user import UserSchema

MICROPOST_CONTENT_MAX_LENGTH = 140


class MicropostSchema(BaseSchema):
    """SQLAlchemy model for short posts authored by a user."""

    __tablename__ = "microposts"

    id: Mapped[UUID] = mapped_column(Uuid(as_uuid=True), primary_key=True, default=uuid4)
    content: Mapped[str] = mapped_column(
        String(MICROPOST_CONTENT_MAX_LENGTH), nullable=False
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow,
        nullable=False,
    )

    user: Mapped[UserSchema] = relationship(back_populates="microposts")
