"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import NotFound, UserNotFound

_FOREIGN_KEY_COLUMNS = ("author", "review_id")


async def list_comments_for_review(conn: asyncpg.Connection, review_id: int) -> list[dict]:
    return await db.fetch_all(
        conn,
        """
        SELECT comment_id, votes, created_at, author, body
        FROM comments
        WHERE review_id = $1
        ORDER BY comment_id ASC
        """,
        review_id,
    )


def _foreign_key_column(exc: asyncpg.ForeignKeyViolationError) -> str | None:
    constraint = getattr(exc, "constraint_name", None) or ""
    detail = getattr(exc, "detail", None) or ""
    for column in _FOREIGN_KEY_COLUMNS:
        # Postgres reports: Key (author)=(x) is not present in table "users".
        if f"({column})=" in detail or constraint.endswith(f"_{column}_fkey"):
            return column
    return None


async def insert_comment(
    conn: asyncpg.Connection,
    *,
    review_id: int,
    author: str,
    body: str,
) -> dict:
    try:
        row = await db.fetch_one(
            conn,
            """
            INSERT INTO comments (review_id, author, body)
            VALUES ($1, $2, $3)
            RETURNING comment_id, author, review_id, votes, created_at, body
            """,
            review_id,
            author,
            body,
        )
    except asyncpg.ForeignKeyViolationError as exc:
        column = _foreign_key_column(exc)
        if column == "author":
            raise UserNotFound() from exc
        if column == "review_id":
            raise NotFound("review_id") from exc
        raise
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def delete_comment(conn: asyncpg.Connection, comment_id: int) -> None:
    row = await db.fetch_one(
        conn,
        """
        DELETE FROM comments
        WHERE comment_id = $1
        RETURNING comment_id
        """,
        comment_id,
    )
    if row is None:
        raise NotFound("comment_id")
