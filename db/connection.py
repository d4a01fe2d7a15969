"""
db/connection.py
----------------
Opens PostgreSQL connections for host applications.
The gateway never opens or closes connections itself; callers use
`connect()` (or their own pool) and bind the result to a gateway.
"""

from typing import Optional

import psycopg2

from config import DATABASE_URL
from utils.logger import get_logger

logger = get_logger(__name__)


def connect(dsn: Optional[str] = None):
    """
    Open a new psycopg2 connection.

    Args:
        dsn: Connection string; defaults to DATABASE_URL from the environment.

    Returns:
        A psycopg2 connection object. The caller owns commit/rollback and close.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(dsn or DATABASE_URL)
        logger.info("Database connection opened.")
        return conn
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to open database connection: {e}")
        raise
