"""
Conexión a base de datos PostgreSQL

Orders and demo catalog data live in PostgreSQL; theme layouts don't touch
the database. Repositories open one psycopg2 connection per call.

Author: TM3
Updated: 2025-12-02
"""
import time
import logging

import psycopg2
from psycopg2.extras import RealDictCursor

from .config import settings

logger = logging.getLogger(__name__)


def _get_database_url() -> str:
    database_url = settings.DATABASE_URL
    if not database_url:
        raise Exception("DATABASE_URL not configured")
    return database_url


def get_db_connection_dict():
    """
    Connection whose cursors return rows as dicts (RealDictCursor)

    Raises:
        Exception if DATABASE_URL is not configured
    """
    return psycopg2.connect(_get_database_url(), cursor_factory=RealDictCursor)


def get_db_connection_with_retry(max_retries=3, retry_delay=1.0):
    """
    Connection checked with SELECT 1, retried with exponential backoff

    Only OperationalError (dropped SSL, refused connection) is retried.
    Used by /health, which passes max_retries=1 for a fast answer.

    Raises:
        psycopg2.OperationalError: If all attempts fail
    """
    database_url = _get_database_url()

    for attempt in range(1, max_retries + 1):
        try:
            conn = psycopg2.connect(database_url)
            cursor = conn.cursor()
            cursor.execute("SELECT 1")
            cursor.close()
            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {e}")
            if attempt == max_retries:
                logger.error(f"All {max_retries} connection attempts failed")
                raise

            delay = retry_delay * (2 ** (attempt - 1))
            logger.info(f"Retrying in {delay:.2f} seconds...")
            time.sleep(delay)
