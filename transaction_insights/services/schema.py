"""Products table schema and store initialisation."""

import logging
import sqlite3

from ..clients import SqliteClient

logger = logging.getLogger(__name__)

PRODUCT_COLUMNS = "id, title, price, description, category, image, sold, dateOfSale"

# SQL statements
CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY,
    title TEXT,
    price REAL,
    description TEXT,
    category TEXT,
    image TEXT,
    sold BOOLEAN,
    dateOfSale TEXT
)
"""


class DatabaseInitializationError(Exception):
    """Raised when the products store cannot be opened or initialised."""

    pass


def initialize_database(db_path: str) -> SqliteClient:
    """Open the store and make sure the products table exists.

    Args:
        db_path: Path to the SQLite database file.

    Returns:
        A connected SqliteClient.

    Raises:
        DatabaseInitializationError: If the file cannot be opened or the
            schema cannot be created.
    """
    try:
        client = SqliteClient(db_path)
    except (sqlite3.Error, OSError) as e:
        raise DatabaseInitializationError(f"Cannot open database {db_path}: {e}") from e

    try:
        client.execute_query(CREATE_TABLE_SQL)
    except sqlite3.Error as e:
        client.close()
        raise DatabaseInitializationError(
            f"Cannot create products table in {db_path}: {e}"
        ) from e

    logger.info(f"Database initialized at {db_path}")
    return client
