# record_pager/di.py
"""
Very small dependency-injection helper.
"""

from __future__ import annotations

from typing import Any, Dict

from record_pager.db.connection import SQLiteConnection
from record_pager.db.repos.record_repo import RecordRepo
from record_pager.services.pager_service import PagerService
from simple_logger import Slogger


class Container:
    """Holds lazily-created singletons, one repo and service per table."""

    def __init__(self, config: Dict[str, Any]) -> None:
        self._cfg = config
        self._db: SQLiteConnection | None = None
        self._repos: Dict[str, RecordRepo] = {}
        self._services: Dict[str, PagerService] = {}

        logging_cfg = config.get("logging", {})
        Slogger.configure(logging_cfg.get("path"), logging_cfg.get("level"))

    @property
    def pagination_config(self) -> Dict[str, Any]:
        return self._cfg.get("pagination", {})

    # ---------- infra ----------
    @property
    def db(self) -> SQLiteConnection:
        if self._db is None:
            self._db = SQLiteConnection(self._cfg)
        return self._db

    # ---------- repositories ----------
    def record_repo(self, table_name: str, *, key_column: str = "id") -> RecordRepo:
        if table_name not in self._repos:
            self._repos[table_name] = RecordRepo(
                self.db,
                table_name,
                key_column=key_column,
                per_page=self.pagination_config.get("per_page", 20),
            )
        return self._repos[table_name]

    # ---------- services ----------
    def pager_service(self, table_name: str, *, key_column: str = "id") -> PagerService:
        if table_name not in self._services:
            link_options = {
                k: v for k, v in self.pagination_config.items() if k != "per_page"
            }
            self._services[table_name] = PagerService(
                self.record_repo(table_name, key_column=key_column),
                link_options=link_options,
            )
        return self._services[table_name]

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
            self._db = None


# convenience factory
def build_container(config: Dict[str, Any]) -> Container:
    """Create a container for the given config."""
    return Container(config)
