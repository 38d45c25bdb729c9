"""
repositories/reservation_repo.py
--------------------------------
Data access layer for a guest's reservations.
"""

from typing import Optional

from config import DEFAULT_RESULT_LIMIT, SILENT_READ_FAILURES
from db.connection import execute
from db.errors import QueryExecutionError
from models.filters import validate_limit
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationRepository:
    """
    Repository for reading the reservations table.

    Args:
        fail_silently: Log failed reads and return [] instead of raising.
            Defaults to the SILENT_READ_FAILURES setting.
    """

    def __init__(self, fail_silently: Optional[bool] = None):
        self.fail_silently = SILENT_READ_FAILURES if fail_silently is None else fail_silently

    def get_all(self, guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
        """
        Get a guest's reservations with the reserved property and its rating.

        Args:
            guest_id: ID of the user who made the reservations.
            limit: Maximum number of reservations to return.

        Returns:
            Reservations ordered by start date, earliest first.

        Raises:
            ValueError: If limit is not a positive integer.
            QueryExecutionError: If the query fails and fail_silently is off.
        """
        validate_limit(limit)

        sql = """
            SELECT reservations.id AS reservation_id,
                   reservations.guest_id,
                   reservations.start_date,
                   reservations.end_date,
                   properties.*,
                   AVG(property_reviews.rating) AS average_rating
            FROM reservations
            JOIN properties ON reservations.property_id = properties.id
            LEFT JOIN property_reviews ON properties.id = property_reviews.property_id
            WHERE reservations.guest_id = %s
            GROUP BY reservations.id, properties.id
            ORDER BY reservations.start_date
            LIMIT %s;
        """
        try:
            rows = execute(sql, (guest_id, limit), operation="get_all_reservations")
        except QueryExecutionError as e:
            logger.error(f"Failed to fetch reservations for guest #{guest_id}: {e}")
            if self.fail_silently:
                return []
            raise
        return [Reservation.from_row(r) for r in rows]
