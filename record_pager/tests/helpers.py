from ..db.connection import SQLiteConnection
from ..db.repos.record_repo import RecordRepo

STATUSES = ("open", "closed")


def make_db(num_records: int = 45) -> SQLiteConnection:
    """In-memory database with an `entries` table holding `num_records` rows."""
    db = SQLiteConnection({"sqlite": {"db_path": ":memory:"}})
    db.execute(
        """
        CREATE TABLE entries (
            id INTEGER PRIMARY KEY,
            title TEXT NOT NULL,
            status TEXT,
            rank INTEGER
        )
        """
    )
    for i in range(1, num_records + 1):
        db.execute(
            "INSERT INTO entries (id, title, status, rank) VALUES (?, ?, ?, ?)",
            (i, f"Entry {i}", STATUSES[i % 2], i % 5),
        )
    db.commit()
    return db


def make_repo(num_records: int = 45, **kwargs) -> RecordRepo:
    return RecordRepo(make_db(num_records), "entries", **kwargs)


def ids(records) -> list:
    return [record["id"] for record in records]
