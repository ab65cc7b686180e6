"""
Async database access helpers (raw SQL) using asyncpg.

The pool is created by the FastAPI lifespan hook (see `api/main.py`) and
lives on `app.state.db_pool`. Each request borrows exactly one connection via
the `get_connection` dependency; services and repositories receive that
connection explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator

import asyncpg
from fastapi import FastAPI, Request

from . import config

logger = logging.getLogger(__name__)


async def init_pool(app: FastAPI) -> None:
    if getattr(app.state, "db_pool", None) is not None:
        return None
    app.state.db_pool = await asyncpg.create_pool(
        dsn=config.database_url(),
        min_size=config.pool_min_size(),
        max_size=config.pool_max_size(),
        command_timeout=config.command_timeout(),
    )
    logger.info(
        "db_pool_ready min_size=%s max_size=%s",
        config.pool_min_size(),
        config.pool_max_size(),
    )


async def close_pool(app: FastAPI) -> None:
    pool = getattr(app.state, "db_pool", None)
    if pool is None:
        return None
    await pool.close()
    app.state.db_pool = None
    logger.info("db_pool_closed")


def pool(app: FastAPI) -> asyncpg.Pool:
    current = getattr(app.state, "db_pool", None)
    if current is None:
        raise RuntimeError("DB pool is not initialized. Call init_pool() on startup.")
    return current


async def get_connection(request: Request) -> AsyncIterator[asyncpg.Connection]:
    """
    FastAPI dependency: one pooled connection for the lifetime of the request.
    """
    async with pool(request.app).acquire() as conn:
        yield conn


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(conn: asyncpg.Connection, sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).
    """
    row = await conn.fetchrow(sql, *args)
    return _record_to_dict(row) if row is not None else None


async def fetch_all(conn: asyncpg.Connection, sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    rows = await conn.fetch(sql, *args)
    return [_record_to_dict(r) for r in rows]


async def exists(conn: asyncpg.Connection, sql: str, *args: Any) -> bool:
    return await fetch_one(conn, sql, *args) is not None
