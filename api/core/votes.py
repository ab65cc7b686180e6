"""
Relative vote adjustment shared by reviews and comments.

The increment is applied server-side in a single UPDATE; there is no
read-modify-write round trip.
"""

from __future__ import annotations

import logging
from typing import Any

import asyncpg
from pydantic import BaseModel, Field, StrictInt

from . import db
from .errors import InvalidDataType, NotFound
from .validators import MAX_ID, parse_body

logger = logging.getLogger(__name__)

# resource -> (table, id column, columns returned after the update)
VOTABLE: dict[str, tuple[str, str, str]] = {
    "review": (
        "reviews",
        "review_id",
        "review_id, title, review_body, designer, review_img_url, votes, category, owner, created_at",
    ),
    "comment": (
        "comments",
        "comment_id",
        "comment_id, author, review_id, votes, created_at, body",
    ),
}


class VoteUpdate(BaseModel):
    inc_votes: StrictInt = Field(..., ge=-MAX_ID, le=MAX_ID)


def build_tweak_votes_query(resource: str) -> str:
    try:
        table, id_column, returning = VOTABLE[resource]
    except KeyError:
        raise ValueError(f"Unknown votable resource: {resource!r}") from None
    return f"""
        UPDATE {table}
        SET votes = votes + $1
        WHERE {id_column} = $2
        RETURNING {returning}
        """


def parse_vote_update(payload: Any) -> int:
    return parse_body(VoteUpdate, payload, missing_label="inc_votes").inc_votes


async def tweak_votes(
    conn: asyncpg.Connection,
    resource: str,
    item_id: int,
    delta: int,
) -> dict[str, Any]:
    try:
        row = await db.fetch_one(conn, build_tweak_votes_query(resource), delta, item_id)
    except asyncpg.NumericValueOutOfRangeError as exc:
        # votes + delta left the integer column's range.
        raise InvalidDataType() from exc
    if row is None:
        _, id_column, _ = VOTABLE[resource]
        raise NotFound(id_column)
    logger.info("vote_tweak resource=%s id=%s delta=%s votes=%s", resource, item_id, delta, row["votes"])
    return row
