"""
User persistence (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db


async def list_users(conn: asyncpg.Connection) -> list[dict]:
    return await db.fetch_all(
        conn,
        """
        SELECT username, name, avatar_url
        FROM users
        ORDER BY username ASC
        """,
    )


async def get_user_by_username(conn: asyncpg.Connection, username: str) -> dict | None:
    return await db.fetch_one(
        conn,
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )
