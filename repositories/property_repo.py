"""
repositories/property_repo.py
-----------------------------
Data access layer for property listings.
Search statements are composed in repositories/property_search.py.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT, SILENT_READ_FAILURES
from db.connection import execute
from db.errors import QueryExecutionError
from models.filters import FilterOptions
from models.property import INSERT_COLUMNS, Property
from repositories.property_search import build_search_query
from utils.logger import get_logger

logger = get_logger(__name__)

_INSERT_SQL = f"""
    INSERT INTO properties ({", ".join(INSERT_COLUMNS)})
    VALUES ({", ".join(["%s"] * len(INSERT_COLUMNS))})
    RETURNING *;
"""


class PropertyRepository:
    """
    Repository for searching and inserting properties.

    Args:
        fail_silently: Log failed searches and return [] instead of raising.
            Defaults to the SILENT_READ_FAILURES setting. Inserts always raise.
    """

    def __init__(self, fail_silently: Optional[bool] = None):
        self.fail_silently = SILENT_READ_FAILURES if fail_silently is None else fail_silently

    # ── CREATE ────────────────────────────────────────────

    def add(self, prop: Union[Property, Mapping[str, Any]]) -> Property:
        """
        Insert a new listing.

        Args:
            prop: A Property, or a mapping of its columns (e.g. a submitted form).

        Returns:
            The inserted Property with its generated `id`.

        Raises:
            KeyError: If a mapping is missing a required column.
            QueryExecutionError: If the insert fails.
        """
        if not isinstance(prop, Property):
            prop = Property.from_dict(prop)
        try:
            rows = execute(_INSERT_SQL, prop.insert_values(), operation="add_property")
        except QueryExecutionError as e:
            logger.error(f"Failed to add property '{prop.title}': {e}")
            raise
        created = Property.from_dict(rows[0])
        logger.info(f"Added property #{created.id} for owner {created.owner_id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def search(
        self, options: Optional[FilterOptions] = None, limit: int = DEFAULT_RESULT_LIMIT
    ) -> list[Property]:
        """
        Find listings matching the filters, cheapest first.

        Args:
            options: Filters to apply; None means no filtering.
            limit: Maximum number of listings to return.

        Returns:
            Matching properties, each with its average rating.

        Raises:
            ValueError: If limit is not a positive integer.
            QueryExecutionError: If the query fails and fail_silently is off.
        """
        query = build_search_query(options or FilterOptions(), limit)
        logger.debug(f"Property search: {' '.join(query.sql.split())} {query.params}")
        try:
            rows = execute(query.sql, query.params, operation="get_all_properties")
        except QueryExecutionError as e:
            logger.error(f"Failed to search properties: {e}")
            if self.fail_silently:
                return []
            raise
        return [Property.from_dict(r) for r in rows]
