"""
db/connection.py
----------------
Manages the PostgreSQL connection pool used by callers of the catalog.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

Repositories never touch the pool: callers borrow a connection here and
hand it to the repository they construct.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool, extensions

from config import (
    DATABASE_URL,
    DB_AUTOCOMMIT,
    DB_POOL_MAX,
    DB_POOL_MIN,
    DB_STATEMENT_TIMEOUT_MS,
)
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: Optional[pool.SimpleConnectionPool] = None


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
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection() -> extensions.connection:
    """
    Get a connection from the pool, configured for catalog access.

    Autocommit follows DB_AUTOCOMMIT. When DB_STATEMENT_TIMEOUT_MS is set,
    the session's statement_timeout is applied so slow queries are
    cancelled server-side.

    Returns:
        A psycopg2 connection object.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    conn = _pool.getconn()
    conn.autocommit = DB_AUTOCOMMIT
    if DB_STATEMENT_TIMEOUT_MS > 0:
        with conn.cursor() as cur:
            cur.execute("SET statement_timeout = %s;", (DB_STATEMENT_TIMEOUT_MS,))
    return conn


def release_connection(conn) -> None:
    """
    Return a connection back to the pool.

    Args:
        conn: The psycopg2 connection to release.
    """
    if _pool is not None:
        _pool.putconn(conn)


@contextmanager
def pooled_connection() -> Iterator[extensions.connection]:
    """Borrow a connection for the duration of a `with` block."""
    conn = get_connection()
    try:
        yield conn
    finally:
        release_connection(conn)


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")
