"""
models/property.py
------------------
Domain model for rental listings.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Columns written by PropertyRepository.add, in insert order.
INSERT_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)

_INT_FIELDS = (
    "owner_id",
    "cost_per_night",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


@dataclass
class Property:
    """
    Represents a single listing.

    Attributes:
        id: Database primary key (None for new records).
        owner_id: ID of the owning user.
        title: Listing headline.
        cost_per_night: Nightly price in cents.
        street, city, province, post_code, country: Address.
        description: Free text description.
        thumbnail_photo_url: Small photo shown in search results.
        cover_photo_url: Large photo shown on the listing page.
        parking_spaces: Number of parking spots.
        number_of_bathrooms: Number of bathrooms.
        number_of_bedrooms: Number of bedrooms.
        active: Whether the listing is visible.
        average_rating: Mean review rating, None when unreviewed or not queried.
    """
    owner_id: int
    title: str
    cost_per_night: int
    street: str
    city: str
    province: str
    post_code: str
    country: str
    description: str = ""
    thumbnail_photo_url: str = ""
    cover_photo_url: str = ""
    parking_spaces: int = 0
    number_of_bathrooms: int = 0
    number_of_bedrooms: int = 0
    active: bool = True
    id: Optional[int] = None
    average_rating: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Property":
        """
        Build a Property from a database row or a submitted form.

        Numeric columns are coerced with int() so string form values work.

        Raises:
            KeyError: If a required column is missing.
            ValueError: If a numeric column is not an integer.
        """
        values = {
            "owner_id": data["owner_id"],
            "title": data["title"],
            "cost_per_night": data["cost_per_night"],
            "street": data["street"],
            "city": data["city"],
            "province": data["province"],
            "post_code": data["post_code"],
            "country": data["country"],
            "description": data.get("description") or "",
            "thumbnail_photo_url": data.get("thumbnail_photo_url") or "",
            "cover_photo_url": data.get("cover_photo_url") or "",
            "parking_spaces": data.get("parking_spaces") or 0,
            "number_of_bathrooms": data.get("number_of_bathrooms") or 0,
            "number_of_bedrooms": data.get("number_of_bedrooms") or 0,
        }
        for name in _INT_FIELDS:
            values[name] = int(values[name])

        rating = data.get("average_rating")
        return cls(
            **values,
            active=data.get("active", True),
            id=data.get("id"),
            average_rating=float(rating) if rating is not None else None,
        )

    def insert_values(self) -> list:
        """Values for INSERT_COLUMNS, in the same order."""
        return [getattr(self, column) for column in INSERT_COLUMNS]

    def __str__(self) -> str:
        rating = f"{self.average_rating:.2f}" if self.average_rating is not None else "-"
        return (
            f"#{self.id} {self.title} | {self.city}, {self.country} | "
            f"{self.cost_per_night / 100:.2f}/night | rating {rating}"
        )
