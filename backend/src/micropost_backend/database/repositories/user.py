"""Repository helpers for working with users."""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from micropost_backend.database.schemas import UserSchema


class UserRepository:
    """Encapsulates persistence operations for :class:`UserSchema`."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        """Return user entity by user's ID."""
        return self._session.get(UserSchema, user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        """Return user entity by user's email."""
        stmt = select(UserSchema).where(UserSchema.email == email)
        return self._session.scalar(stmt)

    def list_all(self) -> Sequence[UserSchema]:
        """Return every user, oldest first."""
        stmt = select(UserSchema).order_by(UserSchema.created_at, UserSchema.id)
        return self._session.scalars(stmt).all()

    def add(self, user: UserSchema) -> UserSchema:
        """Add new user to database."""
        self._session.add(user)
        return self.save(user)

    def save(self, user: UserSchema) -> UserSchema:
        """Flush pending changes and reload server-generated columns."""
        self._session.flush()
        self._session.refresh(user)
        return user

    def delete(self, user: UserSchema) -> None:
        """Remove a single user; its microposts go with it."""
        self._session.delete(user)
        self._session.flush()

    def delete_all(self) -> int:
        """Remove every user and return how many rows were deleted."""
        result = self._session.execute(delete(UserSchema))
        self._session.expunge_all()
        return result.rowcount
