"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive raw rows from the database and return domain model objects.

The module-level functions below are the entry points used by the web layer.
"""

from typing import Any, Mapping, Optional, Union

from config import DEFAULT_RESULT_LIMIT
from models.filters import FilterOptions
from models.property import Property
from models.reservation import Reservation
from models.user import User
from repositories.property_repo import PropertyRepository
from repositories.reservation_repo import ReservationRepository
from repositories.user_repo import UserRepository

_users = UserRepository()
_reservations = ReservationRepository()
_properties = PropertyRepository()


# ── Users ─────────────────────────────────────────────────

def get_user_with_email(email: str) -> Optional[User]:
    return _users.get_by_email(email)


def get_user_with_id(user_id: int) -> Optional[User]:
    return _users.get_by_id(user_id)


def add_user(user: Union[User, Mapping[str, Any]]) -> User:
    return _users.add(user)


# ── Reservations ──────────────────────────────────────────

def get_all_reservations(guest_id: int, limit: int = DEFAULT_RESULT_LIMIT) -> list[Reservation]:
    return _reservations.get_all(guest_id, limit)


# ── Properties ────────────────────────────────────────────

def get_all_properties(
    options: Union[FilterOptions, Mapping[str, Any], None] = None,
    limit: int = DEFAULT_RESULT_LIMIT,
) -> list[Property]:
    """Search listings; `options` may be FilterOptions or a raw query-string mapping."""
    if options is not None and not isinstance(options, FilterOptions):
        options = FilterOptions.from_dict(options)
    return _properties.search(options, limit)


def add_property(prop: Union[Property, Mapping[str, Any]]) -> Property:
    return _properties.add(prop)
