"""
Category orchestration.
"""

from __future__ import annotations

import asyncpg

from . import repository


async def list_categories(conn: asyncpg.Connection) -> list[dict]:
    return await repository.list_categories(conn)
