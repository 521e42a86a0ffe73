import sqlite3
import threading
from pathlib import Path
from typing import Iterable, Sequence

_WRITE_PREFIXES = ("INSERT", "UPDATE", "DELETE", "CREATE")


class SqliteClient:
    """SQLite database client with connection management.

    One connection is shared by every request thread, so each statement runs
    under a lock.
    """

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        if connection_string != ":memory:":
            Path(connection_string).parent.mkdir(parents=True, exist_ok=True)
        self._connection = sqlite3.connect(self.connection_string, check_same_thread=False)
        self._lock = threading.Lock()

    def execute_query(self, query: str, params: Sequence = None):
        """Execute a query and return all results."""
        with self._lock:
            cursor = self._connection.cursor()
            try:
                if params:
                    cursor.execute(query, params)
                else:
                    cursor.execute(query)

                # Commit for write operations
                if query.strip().upper().startswith(_WRITE_PREFIXES):
                    self._connection.commit()

                return cursor.fetchall()
            finally:
                cursor.close()

    def execute_many(self, query: str, rows: Iterable[Sequence]) -> int:
        """Execute a write statement once per row in a single transaction.

        Returns:
            Number of rows changed.
        """
        with self._lock:
            with self._connection:
                cursor = self._connection.executemany(query, rows)
                return cursor.rowcount

    def close(self):
        """Close the database connection."""
        self._connection.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False
