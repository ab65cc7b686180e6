"""
Tests for reviews/queries.py and core/votes.py — SQL builders

The builders only ever splice code-controlled fragments into the statement;
caller-supplied values travel as bound parameters.
"""

import pytest

from core.validators import SORT_COLUMNS, ReviewListing, parse_review_listing
from core.votes import VOTABLE, build_tweak_votes_query
from reviews.queries import (
    SORT_EXPRESSIONS,
    build_get_review_query,
    build_list_reviews_query,
)


class TestListReviewsQuery:
    def test_defaults(self):
        sql, params = build_list_reviews_query(ReviewListing())
        assert params == []
        assert "WHERE" not in sql
        assert "ORDER BY reviews.created_at DESC, reviews.review_id DESC" in sql
        assert "GROUP BY reviews.review_id" in sql
        assert "LEFT JOIN comments" in sql

    def test_comment_count_is_text(self):
        sql, _ = build_list_reviews_query(ReviewListing())
        assert "COUNT(comments.comment_id)::text AS comment_count" in sql

    def test_every_allowed_column_has_an_expression(self):
        assert set(SORT_EXPRESSIONS) == set(SORT_COLUMNS)

    @pytest.mark.parametrize("column", sorted(SORT_COLUMNS))
    def test_ascending_sort(self, column):
        sql, _ = build_list_reviews_query(ReviewListing(sort_by=column, order="asc"))
        assert f"ORDER BY {SORT_EXPRESSIONS[column]} ASC, reviews.review_id ASC" in sql

    def test_comment_count_sorts_on_the_aggregate(self):
        sql, _ = build_list_reviews_query(ReviewListing(sort_by="comment_count", order="asc"))
        assert "ORDER BY COUNT(comments.comment_id) ASC" in sql

    def test_category_is_bound_not_interpolated(self):
        category = "social'; DROP TABLE reviews; --"
        sql, params = build_list_reviews_query(ReviewListing(category=category))
        assert "WHERE reviews.category = $1" in sql
        assert params == [category]
        assert "DROP TABLE" not in sql

    def test_listing_from_query_tokens(self):
        listing = parse_review_listing(sort_by="votes", order="ASC", category="euro_game")
        sql, params = build_list_reviews_query(listing)
        assert "ORDER BY reviews.votes ASC" in sql
        assert params == ["euro game"]

    def test_list_omits_review_body(self):
        sql, _ = build_list_reviews_query(ReviewListing())
        assert "review_body" not in sql


class TestGetReviewQuery:
    def test_single_review_includes_body_and_count(self):
        sql = build_get_review_query()
        assert "reviews.review_body" in sql
        assert "comment_count" in sql
        assert "WHERE reviews.review_id = $1" in sql


class TestTweakVotesQuery:
    @pytest.mark.parametrize("resource", sorted(VOTABLE))
    def test_relative_single_statement_update(self, resource):
        table, id_column, _ = VOTABLE[resource]
        sql = build_tweak_votes_query(resource)
        assert f"UPDATE {table}" in sql
        assert "SET votes = votes + $1" in sql
        assert f"WHERE {id_column} = $2" in sql
        assert "RETURNING" in sql

    def test_unknown_resource(self):
        with pytest.raises(ValueError):
            build_tweak_votes_query("users")
