"""
Comment orchestration.

Scope:
- listing the comments of a review
- posting a comment on a review
- deleting and re-voting a comment
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg

from core import validators, votes
from core.errors import NotFound
from reviews import repository as review_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_review_comments(conn: asyncpg.Connection, raw_review_id: str) -> list[dict]:
    review_id = validators.parse_id(raw_review_id)
    rows = await repository.list_comments_for_review(conn, review_id)
    if not rows and not await review_repository.review_exists(conn, review_id):
        raise NotFound("review_id")
    return rows


async def post_comment(conn: asyncpg.Connection, raw_review_id: str, payload: Any) -> dict:
    review_id = validators.parse_id(raw_review_id)
    comment = validators.parse_body(
        schemas.NewComment,
        payload,
        missing_label="required field (username or body)",
    )
    row = await repository.insert_comment(
        conn,
        review_id=review_id,
        author=comment.username,
        body=comment.body,
    )
    logger.info("comment_created comment_id=%s review_id=%s", row["comment_id"], review_id)
    return row


async def delete_comment(conn: asyncpg.Connection, raw_comment_id: str) -> None:
    comment_id = validators.parse_id(raw_comment_id)
    await repository.delete_comment(conn, comment_id)
    logger.info("comment_deleted comment_id=%s", comment_id)


async def tweak_comment_votes(conn: asyncpg.Connection, raw_comment_id: str, payload: Any) -> dict:
    comment_id = validators.parse_id(raw_comment_id)
    delta = votes.parse_vote_update(payload)
    return await votes.tweak_votes(conn, "comment", comment_id, delta)
