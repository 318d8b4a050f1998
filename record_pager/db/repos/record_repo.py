# record_pager/db/repos/record_repo.py
"""
Paginated read access to one SQLite table.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from record_pager.db.connection import SQLiteConnection
from record_pager.interfaces.dataset import Key
from record_pager.models.filter_spec import Query
from record_pager.models.pagination import SelectionWindow
from record_pager.pagination.arithmetic import DEFAULT_PAGE_SIZE
from record_pager.pagination.dataset import PaginatedDataset
from simple_logger import Slogger

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Stay well under SQLite's bound-parameter limit for `IN (...)` lookups.
MAX_KEYS_PER_LOOKUP = 500


def _identifier(name: str) -> str:
    if not _IDENTIFIER.match(name):
        raise ValueError(f"Not a valid SQL identifier: {name!r}")
    return name


class RecordRepo(PaginatedDataset):
    """
    Paginated access to the records of `table_name`.

    Rows come back as plain dicts unless a `model` with a `from_sqlite(row)`
    classmethod is given (the model must keep `key_column` as the stored value).
    Without an explicit order, records are ordered by
    `key_column`; an explicit order always gets `key_column` appended as a
    tie-breaker so the order is total.
    """

    def __init__(
        self,
        db: SQLiteConnection,
        table_name: str,
        *,
        key_column: str = "id",
        per_page: int = DEFAULT_PAGE_SIZE,
        model: Any = None,
    ) -> None:
        super().__init__(per_page)
        self._db = db
        self._table = _identifier(table_name)
        self._key = _identifier(key_column)
        self._model = model

    @property
    def table_name(self) -> str:
        return self._table

    # ---------- DatasetQuery -----------------------------------------------

    def query_keys(self, query: Optional[Query] = None) -> List[Key]:
        sql, params = self._select(self._key, query)
        cursor = self._db.execute(sql, params)
        keys = [row[0] for row in cursor.fetchall()]
        Slogger.debug(f"RecordRepo.query_keys: {len(keys)} keys from {self._table}")
        return keys

    def query_by_key_set(self, keys: Sequence[Key]) -> List[Any]:
        keys = list(keys)
        records: List[Any] = []
        for start in range(0, len(keys), MAX_KEYS_PER_LOOKUP):
            chunk = keys[start:start + MAX_KEYS_PER_LOOKUP]
            placeholders = ", ".join(["?"] * len(chunk))
            cursor = self._db.execute(
                f"SELECT * FROM {self._table} WHERE {self._key} IN ({placeholders})",
                chunk,
            )
            records.extend(self._to_record(row) for row in cursor.fetchall())
        return records

    def count_matching(self, query: Optional[Query] = None) -> int:
        sql = f"SELECT COUNT(*) AS total FROM {self._table}"
        params: Tuple[Any, ...] = ()
        if query is not None and query.where:
            sql += f" WHERE {query.where}"
            params = tuple(query.params)
        return self._db.fetchone(sql, params)["total"]

    def key_of(self, record: Any) -> Key:
        if isinstance(record, dict):
            return record[self._key]
        return getattr(record, self._key)

    # ---------- PaginatedDataset -------------------------------------------

    def fetch_window(self, window: SelectionWindow, query: Optional[Query] = None) -> List[Any]:
        sql, params = self._select("*", query)
        sql += " LIMIT ? OFFSET ?"
        cursor = self._db.execute(sql, (*params, window.limit, window.offset))
        results = cursor.fetchall()

        Slogger.log(
            f"RecordRepo.fetch_window: Retrieved {len(results)} rows from {self._table} "
            f"(limit={window.limit}, offset={window.offset})"
        )
        return [self._to_record(row) for row in results]

    # ---------- helpers ----------------------------------------------------

    def _select(self, columns: str, query: Optional[Query]) -> Tuple[str, Tuple[Any, ...]]:
        query = query or Query()
        sql = f"SELECT {columns} FROM {self._table}"
        if query.where:
            sql += f" WHERE {query.where}"
        if query.order_by:
            sql += f" ORDER BY {query.order_by}, {self._key}"
        else:
            sql += f" ORDER BY {self._key}"
        return sql, tuple(query.params)

    def _to_record(self, row: Any) -> Any:
        data: Dict[str, Any] = dict(row)
        if self._model is not None:
            return self._model.from_sqlite(data)
        return data

