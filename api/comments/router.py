"""
Comment API endpoints.
"""

from __future__ import annotations

from typing import Any

import asyncpg
from fastapi import APIRouter, Body, Depends, Response, status

from core import db

from . import service

router = APIRouter()


@router.get("/api/reviews/{review_id}/comments")
async def get_review_comments(
    review_id: str,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    comments = await service.list_review_comments(conn, review_id)
    return {"comments": comments}


@router.post("/api/reviews/{review_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_review_comment(
    review_id: str,
    payload: Any = Body(default=None),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    comment = await service.post_comment(conn, review_id, payload)
    return {"comment": comment}


@router.delete("/api/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> Response:
    await service.delete_comment(conn, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/api/comments/{comment_id}")
async def patch_comment(
    comment_id: str,
    payload: Any = Body(default=None),
    conn: asyncpg.Connection = Depends(db.get_connection),
) -> dict:
    comment = await service.tweak_comment_votes(conn, comment_id, payload)
    return {"comment": comment}
