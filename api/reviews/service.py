"""
Review orchestration: validate the request, then hit the repository.
"""

from __future__ import annotations

from typing import Any

import asyncpg

from core import validators, votes

from . import repository


async def list_reviews(
    conn: asyncpg.Connection,
    *,
    sort_by: str | None = None,
    order: str | None = None,
    category: str | None = None,
) -> list[dict]:
    listing = validators.parse_review_listing(sort_by=sort_by, order=order, category=category)
    return await repository.list_reviews(conn, listing)


async def get_review(conn: asyncpg.Connection, raw_review_id: str) -> dict:
    review_id = validators.parse_id(raw_review_id)
    return await repository.get_review(conn, review_id)


async def tweak_review_votes(conn: asyncpg.Connection, raw_review_id: str, payload: Any) -> dict:
    review_id = validators.parse_id(raw_review_id)
    delta = votes.parse_vote_update(payload)
    return await votes.tweak_votes(conn, "review", review_id, delta)
