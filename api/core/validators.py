"""
Request validation helpers.

Path ids, review-listing query parameters and JSON bodies are checked here
before any SQL runs. Each helper either returns a normalized value or raises
one of the `core.errors` failures.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import BadOrder, BadRequest, BadSort, CategoryNotFound, InvalidDataType, MissingField

_ID_PATTERN = re.compile(r"[0-9]+")

# PostgreSQL `integer` upper bound; larger ids cannot be bound to the key columns.
MAX_ID = 2_147_483_647

SORT_COLUMNS = frozenset(
    {
        "review_id",
        "title",
        "owner",
        "category",
        "created_at",
        "votes",
        "comment_count",
    }
)
SORT_ORDERS = frozenset({"asc", "desc"})

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"

_MISSING_ERROR_TYPES = {"missing", "string_too_short"}

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_id(token: str) -> int:
    """
    Return `token` as a positive integer id, or raise InvalidDataType.

    Format only: whether the row exists is decided by the repository.
    """
    raw = token if isinstance(token, str) else str(token)
    if not _ID_PATTERN.fullmatch(raw):
        raise InvalidDataType()
    value = int(raw)
    if value > MAX_ID:
        raise InvalidDataType()
    return value


def canonical_category(category: str) -> str:
    # Clients pass multi-word slugs with underscores: social_deduction.
    return category.replace("_", " ")


@dataclass(frozen=True)
class ReviewListing:
    sort_by: str = DEFAULT_SORT_BY
    order: str = DEFAULT_ORDER
    category: str | None = None


def parse_review_listing(
    sort_by: str | None = None,
    order: str | None = None,
    category: str | None = None,
) -> ReviewListing:
    sort_by = DEFAULT_SORT_BY if sort_by is None else sort_by
    if sort_by not in SORT_COLUMNS:
        raise BadSort()

    order = DEFAULT_ORDER if order is None else order.lower()
    if order not in SORT_ORDERS:
        raise BadOrder()

    if category is not None:
        # No slug can hold NUL; PostgreSQL would reject the parameter outright.
        if "\x00" in category:
            raise CategoryNotFound()
        category = canonical_category(category)

    return ReviewListing(sort_by=sort_by, order=order, category=category)


def parse_body(schema: type[SchemaT], payload: Any, *, missing_label: str) -> SchemaT:
    """
    Validate a JSON body against `schema`.

    Absent (or empty) required fields raise MissingField labelled with
    `missing_label`; fields of the wrong kind raise InvalidDataType.
    Unknown keys are ignored.
    """
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise BadRequest()

    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        error_types = {err["type"] for err in exc.errors()}
        if error_types & _MISSING_ERROR_TYPES:
            raise MissingField(missing_label) from exc
        raise InvalidDataType() from exc
