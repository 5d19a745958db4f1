"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    from sqlalchemy import Table

from micropost_backend.database.schemas import (
    MICROPOST_CONTENT_MAX_LENGTH,
    MicropostSchema,
    UserSchema,
)


def test_user_email_is_unique() -> None:
    table = cast("Table", UserSchema.__table__)
    assert table.c.email.unique is True


def test_micropost_user_fk_cascades_on_delete() -> None:
    table = cast("Table", MicropostSchema.__table__)
    (foreign_key,) = table.c.user_id.foreign_keys
    assert foreign_key.column.table.name == "users"
    assert foreign_key.ondelete == "CASCADE"


def test_micropost_content_length_matches_limit() -> None:
    table = cast("Table", MicropostSchema.__table__)
    assert table.c.content.type.length == MICROPOST_CONTENT_MAX_LENGTH == 140
