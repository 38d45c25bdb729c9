"""Tests for the property search statement builder."""

import pytest

from models.filters import FilterOptions
from repositories.property_search import build_search_query


def _normalized(sql: str) -> str:
    return " ".join(sql.split())


class TestNoFilters:
    def test_only_limit_is_bound(self):
        query = build_search_query(FilterOptions(), 10)
        assert query.params == [10]
        assert "WHERE" not in query.sql
        assert "HAVING" not in query.sql

    def test_orders_by_price_and_limits_last(self):
        sql = _normalized(build_search_query(FilterOptions(), 5).sql)
        assert sql.endswith("GROUP BY properties.id ORDER BY properties.cost_per_night LIMIT %s;")

    def test_left_joins_reviews(self):
        sql = _normalized(build_search_query(FilterOptions(), 10).sql)
        assert "LEFT JOIN property_reviews ON properties.id = property_reviews.property_id" in sql
        assert "AVG(property_reviews.rating) AS average_rating" in sql


class TestRowFilters:
    def test_city_is_wrapped_as_substring_pattern(self):
        query = build_search_query(FilterOptions(city="van"), 10)
        assert query.params == ["%van%", 10]
        assert query.sql.count("WHERE") == 1
        assert "properties.city LIKE %s" in query.sql

    def test_city_is_not_case_folded(self):
        query = build_search_query(FilterOptions(city="Van"), 10)
        assert query.params[0] == "%Van%"

    def test_city_and_owner_are_joined_with_and(self):
        query = build_search_query(FilterOptions(city="van", owner_id=3), 10)
        sql = _normalized(query.sql)
        assert "WHERE properties.city LIKE %s AND properties.owner_id = %s" in sql
        assert sql.count("WHERE") == 1
        assert query.params == ["%van%", 3, 10]

    def test_owner_alone_uses_where(self):
        query = build_search_query(FilterOptions(owner_id=3), 10)
        assert "WHERE properties.owner_id = %s" in _normalized(query.sql)
        assert " AND " not in query.sql

    def test_prices_are_converted_to_cents(self):
        query = build_search_query(FilterOptions(minimum_price_per_night=50), 10)
        assert query.params == [5000, 10]
        assert "properties.cost_per_night >= %s" in query.sql

    def test_price_range(self):
        query = build_search_query(
            FilterOptions(minimum_price_per_night=50, maximum_price_per_night=200), 10
        )
        sql = _normalized(query.sql)
        assert "WHERE properties.cost_per_night >= %s AND properties.cost_per_night <= %s" in sql
        assert query.params == [5000, 20000, 10]

    def test_zero_values_still_filter(self):
        query = build_search_query(FilterOptions(owner_id=0, minimum_price_per_night=0), 10)
        assert query.params == [0, 0, 10]
        assert "properties.owner_id = %s" in query.sql
        assert "properties.cost_per_night >= %s" in query.sql


class TestRatingFilter:
    def test_rating_alone_uses_having_without_where(self):
        query = build_search_query(FilterOptions(minimum_rating=4), 10)
        sql = _normalized(query.sql)
        assert "WHERE" not in sql
        assert "GROUP BY properties.id HAVING AVG(property_reviews.rating) >= %s" in sql
        assert query.params == [4, 10]

    def test_having_follows_where_and_group_by(self):
        sql = _normalized(build_search_query(FilterOptions(city="van", minimum_rating=4), 10).sql)
        assert sql.index("WHERE") < sql.index("GROUP BY") < sql.index("HAVING") < sql.index("ORDER BY")


class TestAllFilters:
    def test_six_params_in_placeholder_order(self):
        options = FilterOptions(
            city="van",
            owner_id=3,
            minimum_price_per_night=50,
            maximum_price_per_night=200,
            minimum_rating=4,
        )
        query = build_search_query(options, 20)
        assert query.params == ["%van%", 3, 5000, 20000, 4, 20]
        assert query.sql.count("%s") == len(query.params)
        assert query.sql.count(" AND ") == 3

    def test_placeholder_count_matches_params_for_every_subset(self):
        names = ["city", "owner_id", "minimum_price_per_night", "maximum_price_per_night", "minimum_rating"]
        values = {"city": "x", "owner_id": 1, "minimum_price_per_night": 1,
                  "maximum_price_per_night": 2, "minimum_rating": 3}
        for mask in range(1 << len(names)):
            chosen = {n: values[n] for i, n in enumerate(names) if mask & (1 << i)}
            query = build_search_query(FilterOptions(**chosen), 10)
            assert query.sql.count("%s") == len(query.params) == len(chosen) + 1
            assert query.sql.count("WHERE") == (1 if set(chosen) - {"minimum_rating"} else 0)


class TestLimit:
    @pytest.mark.parametrize("limit", [0, -1, "10", 2.5, True, None])
    def test_invalid_limit(self, limit):
        with pytest.raises(ValueError):
            build_search_query(FilterOptions(), limit)
