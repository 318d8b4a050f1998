# record_pager/db/connection.py

"""
SQLite connection handler
"""

import logging
import sqlite3
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from record_pager.errors import DatabaseError

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class SQLiteConnection:
    """
    Handles basic connection to SQLite
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize SQLite connection

        Args:
            config: Configuration dictionary containing SQLite settings
        """
        db_path_str = str(config["sqlite"]["db_path"])
        self.db_path = db_path_str

        if db_path_str != MEMORY_DB:
            db_path = Path(db_path_str)
            # Ensure parent directory exists
            if not db_path.parent.exists():
                logger.info(f"Creating database directory: {db_path.parent}")
                db_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self.conn = sqlite3.connect(db_path_str)
        except sqlite3.Error as e:
            logger.error(f"Error connecting to SQLite database at {db_path_str}: {e}", exc_info=True)
            raise DatabaseError(f"Could not open database {db_path_str}: {e}") from e

        # Enable foreign keys
        self.conn.execute("PRAGMA foreign_keys = ON")
        # Return rows as dictionaries
        self.conn.row_factory = sqlite3.Row
        logger.info(f"Connected to SQLite database: {db_path_str}")

    def cursor(self) -> sqlite3.Cursor:
        """
        Get a cursor for database operations

        Returns:
            SQLite cursor
        """
        return self.conn.cursor()

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        """Executes a SQL statement and returns the cursor."""
        cur = self.cursor()
        cur.execute(sql, tuple(params))
        return cur

    def fetchone(self, sql: str, params: Sequence[Any] = ()) -> Optional[Dict[str, Any]]:
        row = self.execute(sql, params).fetchone()
        return dict(row) if row else None

    def commit(self):
        """Commit the current transaction"""
        self.conn.commit()

    def close(self):
        """Close the connection"""
        self.conn.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
