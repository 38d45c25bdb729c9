"""
models/filters.py
-----------------
Optional search filters for property listings.
"""

from dataclasses import dataclass, fields
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional


@dataclass
class FilterOptions:
    """
    Filters accepted by PropertyRepository.search.

    Every field is optional; a field filters only when it is not None.
    Zero is a real value (``owner_id=0`` still filters).

    Attributes:
        city: Substring of the city name, matched case-sensitively.
        owner_id: Only listings belonging to this user.
        minimum_price_per_night: Lower price bound in whole currency units.
        maximum_price_per_night: Upper price bound in whole currency units.
        minimum_rating: Lower bound for the average review rating.
    """
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[int] = None
    maximum_price_per_night: Optional[int] = None
    minimum_rating: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FilterOptions":
        """
        Build filters from a query string or form submission.

        Unknown keys are ignored, empty strings count as absent and numeric
        values are truncated to int (``"50.75"`` becomes ``50``).

        Raises:
            ValueError: If a numeric filter is not a number.
        """
        values: dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(f.name)
            if raw is None or (isinstance(raw, str) and not raw.strip()):
                continue
            values[f.name] = raw if f.name == "city" else _to_int(f.name, raw)
        return cls(**values)

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))


def _to_int(name: str, raw: Any) -> int:
    try:
        return int(Decimal(str(raw).strip()))
    except (InvalidOperation, ValueError, OverflowError):
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def validate_limit(limit: Any) -> int:
    """Return `limit` unchanged if it is a positive int, else raise ValueError."""
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    return limit
