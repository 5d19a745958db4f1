"""User management domain logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID, uuid4

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from micropost_backend.database import UserRepository, UserSchema

logger = logging.getLogger(__name__)


class UserNotFoundError(Exception):
    """Raised when no user exists for the requested ID."""


class EmailAlreadyTakenError(Exception):
    """Raised when an email address already belongs to another user."""


class UserService:
    """Implements the users resource actions on top of :class:`UserRepository`."""

    def list_users(self, *, session: Session) -> Sequence[UserSchema]:
        return UserRepository(session).list_all()

    def get_user(self, *, session: Session, user_id: UUID) -> UserSchema:
        user = UserRepository(session).get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def create_user(self, *, session: Session, name: str, email: str) -> UserSchema:
        repository = UserRepository(session)
        if repository.get_by_email(email) is not None:
            raise EmailAlreadyTakenError(email)

        try:
            user = repository.add(UserSchema(id=uuid4(), name=name, email=email))
        except IntegrityError as exc:
            # A concurrent request claimed the email between check and insert.
            raise EmailAlreadyTakenError(email) from exc
        logger.info("Created user %s", user.id)
        return user

    def update_user(
        self,
        *,
        session: Session,
        user_id: UUID,
        name: str | None = None,
        email: str | None = None,
    ) -> UserSchema:
        """Apply the provided fields to a user, leaving ``None`` fields untouched."""

        repository = UserRepository(session)
        user = repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if email is not None and email != user.email:
            owner = repository.get_by_email(email)
            if owner is not None and owner.id != user.id:
                raise EmailAlreadyTakenError(email)
            user.email = email
        if name is not None:
            user.name = name

        try:
            user = repository.save(user)
        except IntegrityError as exc:
            raise EmailAlreadyTakenError(email) from exc
        logger.info("Updated user %s", user.id)
        return user

    def delete_user(self, *, session: Session, user_id: UUID) -> None:
        repository = UserRepository(session)
        user = repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        repository.delete(user)
        logger.info("Deleted user %s", user_id)

    def delete_all_users(self, *, session: Session) -> int:
        """Delete every user along with their microposts."""

        deleted = UserRepository(session).delete_all()
        logger.info("Deleted all users (%d rows)", deleted)
        return deleted
