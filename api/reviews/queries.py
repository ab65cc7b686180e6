"""
SQL builders for review reads.

Sort columns and directions are picked from fixed mappings keyed by the
already-validated query tokens; the only caller-supplied value that reaches
the database (the category) is a bound parameter.
"""

from __future__ import annotations

from typing import Any

from core.validators import ReviewListing

SORT_EXPRESSIONS: dict[str, str] = {
    "review_id": "reviews.review_id",
    "title": "reviews.title",
    "owner": "reviews.owner",
    "category": "reviews.category",
    "created_at": "reviews.created_at",
    "votes": "reviews.votes",
    # Sort on the integer aggregate, not its text rendering.
    "comment_count": "COUNT(comments.comment_id)",
}

ORDER_KEYWORDS: dict[str, str] = {
    "asc": "ASC",
    "desc": "DESC",
}

LIST_COLUMNS = """
    reviews.review_id,
    reviews.title,
    reviews.designer,
    reviews.review_img_url,
    reviews.votes,
    reviews.category,
    reviews.owner,
    reviews.created_at,
    COUNT(comments.comment_id)::text AS comment_count
"""

DETAIL_COLUMNS = """
    reviews.review_id,
    reviews.title,
    reviews.review_body,
    reviews.designer,
    reviews.review_img_url,
    reviews.votes,
    reviews.category,
    reviews.owner,
    reviews.created_at,
    COUNT(comments.comment_id)::text AS comment_count
"""


def build_list_reviews_query(listing: ReviewListing) -> tuple[str, list[Any]]:
    sort_expression = SORT_EXPRESSIONS[listing.sort_by]
    direction = ORDER_KEYWORDS[listing.order]

    params: list[Any] = []
    where = ""
    if listing.category is not None:
        params.append(listing.category)
        where = f"WHERE reviews.category = ${len(params)}"

    sql = f"""
        SELECT {LIST_COLUMNS}
        FROM reviews
        LEFT JOIN comments ON comments.review_id = reviews.review_id
        {where}
        GROUP BY reviews.review_id
        ORDER BY {sort_expression} {direction}, reviews.review_id {direction}
        """
    return sql, params


def build_get_review_query() -> str:
    return f"""
        SELECT {DETAIL_COLUMNS}
        FROM reviews
        LEFT JOIN comments ON comments.review_id = reviews.review_id
        WHERE reviews.review_id = $1
        GROUP BY reviews.review_id
        """
