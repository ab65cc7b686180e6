"""
Review persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import CategoryNotFound, NotFound
from core.validators import ReviewListing

from . import queries


async def category_exists(conn: asyncpg.Connection, slug: str) -> bool:
    return await db.exists(
        conn,
        """
        SELECT 1 AS ok
        FROM categories
        WHERE slug = $1
        LIMIT 1
        """,
        slug,
    )


async def review_exists(conn: asyncpg.Connection, review_id: int) -> bool:
    return await db.exists(
        conn,
        """
        SELECT 1 AS ok
        FROM reviews
        WHERE review_id = $1
        LIMIT 1
        """,
        review_id,
    )


async def list_reviews(conn: asyncpg.Connection, listing: ReviewListing) -> list[dict]:
    """
    Return reviews with their comment counts, sorted and optionally filtered.

    An unknown category raises CategoryNotFound; a known category with no
    reviews yields an empty list.
    """
    sql, params = queries.build_list_reviews_query(listing)
    rows = await db.fetch_all(conn, sql, *params)
    if not rows and listing.category is not None:
        if not await category_exists(conn, listing.category):
            raise CategoryNotFound()
    return rows


async def get_review(conn: asyncpg.Connection, review_id: int) -> dict:
    row = await db.fetch_one(conn, queries.build_get_review_query(), review_id)
    if row is None:
        raise NotFound("review_id")
    return row
