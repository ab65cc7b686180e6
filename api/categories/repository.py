"""
Category persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_categories(conn: asyncpg.Connection) -> list[dict]:
    return await db.fetch_all(
        conn,
        """
        SELECT slug, description
        FROM categories
        ORDER BY slug ASC
        """,
    )
