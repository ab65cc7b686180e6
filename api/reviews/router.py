"""
Review API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends

from core import db

from . import service

router = APIRouter()


@router.get("/api/reviews")
async def get_reviews(
    sort_by: str | None = None,
    order: str | None = None,
    category: str | None = None,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    reviews = await service.list_reviews(conn, sort_by=sort_by, order=order, category=category)
    return {"reviews": reviews}


@router.get("/api/reviews/{review_id}")
async def get_review(
    review_id: str,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    review = await service.get_review(conn, review_id)
    return {"review": review}


@router.patch("/api/reviews/{review_id}")
async def patch_review(
    review_id: str,
    payload: Any = Body(default=None),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    review = await service.tweak_review_votes(conn, review_id, payload)
    return {"review": review}
