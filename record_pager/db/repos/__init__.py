from record_pager.db.repos.record_repo import RecordRepo

__all__ = ["RecordRepo"]
