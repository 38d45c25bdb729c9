"""
models/reservation.py
---------------------
Domain model for a guest's booking of a property.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from models.property import Property


@dataclass
class Reservation:
    """
    A reservation joined with the property it books.

    Attributes:
        id: Database primary key of the reservation.
        guest_id: ID of the user who booked.
        start_date: First night.
        end_date: Checkout date.
        property: The reserved listing, including its average rating.
    """
    guest_id: int
    start_date: date
    end_date: date
    property: Property
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Reservation":
        """Convert a reservation/property join row (see ReservationRepository)."""
        return cls(
            id=row["reservation_id"],
            guest_id=row["guest_id"],
            start_date=row["start_date"],
            end_date=row["end_date"],
            property=Property.from_dict(row),
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.start_date} → {self.end_date} | {self.property}"
