"""
Tests for the data-access layer, called directly with the FakeConnection.
"""

import asyncio

import asyncpg
import pytest

from comments import repository as comment_repository
from core import votes
from core.errors import CategoryNotFound, InvalidDataType, NotFound, UserNotFound
from core.validators import ReviewListing
from reviews import repository as review_repository


def _fk_error(constraint, detail):
    exc = asyncpg.ForeignKeyViolationError("violates foreign key constraint")
    exc.constraint_name = constraint
    exc.detail = detail
    return exc


class TestTweakVotes:
    def test_returns_updated_row(self, conn, comment_row):
        conn.queue(comment_row)
        row = asyncio.run(votes.tweak_votes(conn, "comment", 3, -2))
        assert row == comment_row
        assert conn.args == [(-2, 3)]

    @pytest.mark.parametrize("resource,key", [("review", "review_id"), ("comment", "comment_id")])
    def test_absent_row(self, conn, resource, key):
        with pytest.raises(NotFound) as info:
            asyncio.run(votes.tweak_votes(conn, resource, 99999, 1))
        assert info.value.msg == f"Not Found - {key} provided is non-existent"

    def test_overflowing_total(self, conn):
        conn.queue(asyncpg.NumericValueOutOfRangeError("integer out of range"))
        with pytest.raises(InvalidDataType):
            asyncio.run(votes.tweak_votes(conn, "review", 3, 2147483000))


class TestInsertComment:
    def test_author_violation(self, conn):
        conn.queue(_fk_error("comments_author_fkey", None))
        with pytest.raises(UserNotFound):
            asyncio.run(comment_repository.insert_comment(conn, review_id=2, author="nobody", body="hi"))

    def test_review_violation_from_detail(self, conn):
        conn.queue(_fk_error("fk_custom_name", 'Key (review_id)=(900000) is not present in table "reviews".'))
        with pytest.raises(NotFound):
            asyncio.run(comment_repository.insert_comment(conn, review_id=900000, author="dav3rid", body="hi"))

    def test_unrecognised_violation_propagates(self, conn):
        conn.queue(_fk_error("something_else", "Key (other)=(1) is not present."))
        with pytest.raises(asyncpg.ForeignKeyViolationError):
            asyncio.run(comment_repository.insert_comment(conn, review_id=2, author="dav3rid", body="hi"))


class TestDeleteComment:
    def test_deleted(self, conn):
        conn.queue({"comment_id": 4})
        assert asyncio.run(comment_repository.delete_comment(conn, 4)) is None

    def test_absent(self, conn):
        with pytest.raises(NotFound):
            asyncio.run(comment_repository.delete_comment(conn, 4))


class TestListReviews:
    def test_rows_skip_category_lookup(self, conn, review_row):
        conn.queue([review_row])
        rows = asyncio.run(review_repository.list_reviews(conn, ReviewListing(category="social deduction")))
        assert rows == [review_row]
        assert len(conn.calls) == 1

    def test_unfiltered_empty_listing(self, conn):
        assert asyncio.run(review_repository.list_reviews(conn, ReviewListing())) == []
        assert len(conn.calls) == 1

    def test_unknown_category(self, conn):
        conn.queue([], None)
        with pytest.raises(CategoryNotFound):
            asyncio.run(review_repository.list_reviews(conn, ReviewListing(category="cats!")))
