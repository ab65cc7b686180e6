"""
User API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import service

router = APIRouter()


@router.get("/api/users")
async def get_users(
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    users = await service.list_users(conn)
    return {"users": users}


@router.get("/api/users/{username}")
async def get_user(
    username: str,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    user = await service.get_user(conn, username)
    return {"user": user}
