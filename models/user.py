"""
models/user.py
--------------
Domain model for registered users (guests and property owners).
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass
class User:
    """
    Represents a LightBnB user account.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name.
        email: Login email, stored lower-cased.
        password: Password hash as handed over by the web layer.
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        """Build a User from a row or a submitted form; missing keys raise KeyError."""
        return cls(
            name=data["name"],
            email=data["email"],
            password=data["password"],
            id=data.get("id"),
        )

    def __str__(self) -> str:
        return f"#{self.id} {self.name} <{self.email}>"
