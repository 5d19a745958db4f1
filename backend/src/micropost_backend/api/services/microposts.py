"""Micropost publishing domain logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from micropost_backend.database import (
    MicropostRepository,
    MicropostSchema,
    UserRepository,
)

logger = logging.getLogger(__name__)


class MicropostNotFoundError(Exception):
    """Raised when no micropost exists for the requested ID."""


class UnknownAuthorError(Exception):
    """Raised when a micropost references a user that does not exist."""


class MicropostService:
    """Implements the microposts resource actions."""

    def list_microposts(
        self, *, session: Session, user_id: UUID | None = None
    ) -> Sequence[MicropostSchema]:
        return MicropostRepository(session).list_all(user_id=user_id)

    def get_micropost(self, *, session: Session, micropost_id: UUID) -> MicropostSchema:
        micropost = MicropostRepository(session).get_by_id(micropost_id)
        if micropost is None:
            raise MicropostNotFoundError(micropost_id)
        return micropost

    def create_micropost(
        self, *, session: Session, content: str, user_id: UUID
    ) -> MicropostSchema:
        self._ensure_author_exists(session, user_id)
        micropost = MicropostRepository(session).add(
            MicropostSchema(id=uuid4(), content=content, user_id=user_id)
        )
        logger.info("Created micropost %s for user %s", micropost.id, user_id)
        return micropost

    def update_micropost(
        self,
        *,
        session: Session,
        micropost_id: UUID,
        content: str | None = None,
        user_id: UUID | None = None,
    ) -> MicropostSchema:
        repository = MicropostRepository(session)
        micropost = repository.get_by_id(micropost_id)
        if micropost is None:
            raise MicropostNotFoundError(micropost_id)

        if user_id is not None and user_id != micropost.user_id:
            self._ensure_author_exists(session, user_id)
            micropost.user_id = user_id
        if content is not None:
            micropost.content = content

        micropost = repository.save(micropost)
        logger.info("Updated micropost %s", micropost.id)
        return micropost

    def delete_micropost(self, *, session: Session, micropost_id: UUID) -> None:
        repository = MicropostRepository(session)
        micropost = repository.get_by_id(micropost_id)
        if micropost is None:
            raise MicropostNotFoundError(micropost_id)
        repository.delete(micropost)
        logger.info("Deleted micropost %s", micropost_id)

    @staticmethod
    def _ensure_author_exists(session: Session, user_id: UUID) -> None:
        if UserRepository(session).get_by_id(user_id) is None:
            raise UnknownAuthorError(user_id)
