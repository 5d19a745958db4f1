"""Repository helpers for working with microposts."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from micropost_backend.database.schemas import MicropostSchema


class MicropostRepository:
    """Encapsulates persistence operations for :class:`MicropostSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, micropost_id: UUID) -> MicropostSchema | None:
        """Return micropost entity by its ID."""
        return self._session.get(MicropostSchema, micropost_id)

    def list_all(self, *, user_id: UUID | None = None) -> Sequence[MicropostSchema]:
        """Return microposts oldest first, optionally limited to one author."""
        stmt = select(MicropostSchema)
        if user_id is not None:
            stmt = stmt.where(MicropostSchema.user_id == user_id)
        stmt = stmt.order_by(MicropostSchema.created_at, MicropostSchema.id)
        return self._session.scalars(stmt).all()

    def add(self, micropost: MicropostSchema) -> MicropostSchema:
        """Add new micropost to database."""
        self._session.add(micropost)
        return self.save(micropost)

    def save(self, micropost: MicropostSchema) -> MicropostSchema:
        """Flush pending changes and reload server-generated columns."""
        self._session.flush()
        self._session.refresh(micropost)
        return micropost

    def delete(self, micropost: MicropostSchema) -> None:
        """Remove a single micropost."""
        self._session.delete(micropost)
        self._session.flush()
