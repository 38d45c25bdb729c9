"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so repositories can be called
from several threads, and exposes `execute()` for single-statement calls.
"""

from typing import Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from db.errors import QueryExecutionError
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.ThreadedConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Initialize the database connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.ThreadedConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection(operation: str = "query"):
    """
    Get a connection from the pool.

    Args:
        operation: Name reported in the error if no connection is available.

    Returns:
        A psycopg2 connection object.

    Raises:
        QueryExecutionError: If the pool is exhausted.
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    try:
        return _pool.getconn()
    except pool.PoolError as e:
        raise QueryExecutionError(operation, str(e).strip()) from e


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.
    Connections the server has already closed are discarded, not reused.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn, close=bool(conn.closed))


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")


def _rollback(conn) -> None:
    # Closed connections cannot roll back.
    if conn.closed:
        return
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.warning(f"Rollback failed: {e}")


def execute(sql: str, params: Sequence = (), operation: str = "query") -> list[dict]:
    """
    Run one statement on a pooled connection and return its rows.

    The transaction is committed on success and rolled back on failure;
    the connection always goes back to the pool.

    Args:
        sql: Statement text with positional ``%s`` placeholders.
        params: Values bound to the placeholders, in order.
        operation: Name reported in the error if the statement fails.

    Returns:
        Every row as a plain dict, or an empty list for statements
        without a result set.

    Raises:
        QueryExecutionError: If psycopg2 reports any error, including
            an exhausted pool or a dropped connection.
        RuntimeError: If the pool has not been initialized.
    """
    conn = get_connection(operation)
    try:
        with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, list(params))
            rows = [dict(row) for row in cur.fetchall()] if cur.description else []
        conn.commit()
        return rows
    except psycopg2.Error as e:
        _rollback(conn)
        raise QueryExecutionError(operation, str(e).strip()) from e
    except Exception:
        _rollback(conn)
        raise
    finally:
        release_connection(conn)
