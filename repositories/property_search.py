"""
repositories/property_search.py
-------------------------------
Builds the property search statement from a set of FilterOptions.
Kept free of any connection handling so the SQL can be inspected directly.
"""

from typing import NamedTuple

from models.filters import FilterOptions, validate_limit

CENTS_PER_UNIT = 100

_BASE_SQL = """
    SELECT properties.*, AVG(property_reviews.rating) AS average_rating
    FROM properties
    LEFT JOIN property_reviews ON properties.id = property_reviews.property_id"""


class SearchQuery(NamedTuple):
    """A statement and its positional parameters, in placeholder order."""
    sql: str
    params: list


def build_search_query(options: FilterOptions, limit: int) -> SearchQuery:
    """
    Compose the search statement for the given filters.

    Row filters become WHERE predicates joined with AND; the rating filter
    applies to the per-property average, so it goes in HAVING after GROUP BY.
    Results are ordered by nightly price, cheapest first.

    Args:
        options: Filters to apply. Fields set to None are skipped.
        limit: Maximum number of rows, must be positive.

    Returns:
        SearchQuery with one parameter per placeholder.

    Raises:
        ValueError: If limit is not a positive integer.
    """
    validate_limit(limit)

    predicates: list[str] = []
    params: list = []

    if options.city is not None:
        predicates.append("properties.city LIKE %s")
        params.append(f"%{options.city}%")

    if options.owner_id is not None:
        predicates.append("properties.owner_id = %s")
        params.append(options.owner_id)

    if options.minimum_price_per_night is not None:
        predicates.append("properties.cost_per_night >= %s")
        params.append(int(options.minimum_price_per_night) * CENTS_PER_UNIT)

    if options.maximum_price_per_night is not None:
        predicates.append("properties.cost_per_night <= %s")
        params.append(int(options.maximum_price_per_night) * CENTS_PER_UNIT)

    sql = _BASE_SQL
    if predicates:
        sql += "\n    WHERE " + " AND ".join(predicates)
    sql += "\n    GROUP BY properties.id"

    if options.minimum_rating is not None:
        sql += "\n    HAVING AVG(property_reviews.rating) >= %s"
        params.append(int(options.minimum_rating))

    sql += "\n    ORDER BY properties.cost_per_night\n    LIMIT %s;"
    params.append(limit)

    return SearchQuery(sql, params)
