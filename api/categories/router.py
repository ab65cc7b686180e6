"""
Category API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import service

router = APIRouter()


@router.get("/api/categories")
async def get_categories(
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    categories = await service.list_categories(conn)
    return {"categories": categories}
