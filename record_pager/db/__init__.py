from record_pager.db.connection import SQLiteConnection

__all__ = ["SQLiteConnection"]
