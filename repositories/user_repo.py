"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
Emails are always compared and stored lower-cased.
"""

from typing import Any, Mapping, Optional, Union

from db.connection import execute
from db.errors import QueryExecutionError
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Repository for lookups and inserts on the users table."""

    # ── CREATE ────────────────────────────────────────────

    def add(self, user: Union[User, Mapping[str, Any]]) -> User:
        """
        Insert a new user.

        Args:
            user: A User, or a mapping with 'name', 'email' and 'password'.

        Returns:
            The inserted User, with its generated `id`.

        Raises:
            KeyError: If a mapping is missing one of the required keys.
            QueryExecutionError: If the insert fails (e.g. duplicate email).
        """
        if not isinstance(user, User):
            user = User.from_dict(user)
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        try:
            rows = execute(sql, (user.name, user.email.lower(), user.password), operation="add_user")
        except QueryExecutionError as e:
            logger.error(f"Failed to add user {user.email.lower()}: {e}")
            raise
        created = User.from_dict(rows[0])
        logger.info(f"Added user #{created.id}")
        return created

    # ── READ ──────────────────────────────────────────────

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email, ignoring case.

        Returns:
            The User or None.
        """
        sql = "SELECT * FROM users WHERE email = %s;"
        try:
            rows = execute(sql, (email.lower(),), operation="get_user_with_email")
        except QueryExecutionError as e:
            logger.error(f"Failed to fetch user by email: {e}")
            raise
        return User.from_dict(rows[0]) if rows else None

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Fetch a user by primary key.

        Returns:
            The User or None.
        """
        sql = "SELECT * FROM users WHERE id = %s;"
        try:
            rows = execute(sql, (user_id,), operation="get_user_with_id")
        except QueryExecutionError as e:
            logger.error(f"Failed to fetch user #{user_id}: {e}")
            raise
        return User.from_dict(rows[0]) if rows else None
