"""
User orchestration.
"""

from __future__ import annotations

import asyncpg

from core.errors import NotFound

from . import repository


async def list_users(conn: asyncpg.Connection) -> list[dict]:
    return await repository.list_users(conn)


async def get_user(conn: asyncpg.Connection, username: str) -> dict:
    # NUL cannot appear in a stored username and would be rejected by PostgreSQL.
    user = None if "\x00" in username else await repository.get_user_by_username(conn, username)
    if user is None:
        raise NotFound("username")
    return user
