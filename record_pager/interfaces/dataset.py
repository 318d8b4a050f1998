from typing import Any, Hashable, Iterable, Optional, Sequence

from ..models.filter_spec import Query

Key = Hashable


class DatasetQuery:
    """Interface for the store a paginated dataset is read from"""

    def query_keys(self, query: Optional[Query] = None) -> Sequence[Key]:
        """Keys only, honoring the query's filter and order"""
        raise NotImplementedError("Subclasses must implement query_keys")

    def query_by_key_set(self, keys: Sequence[Key]) -> Iterable[Any]:
        """Full records whose key is in `keys`; order is not guaranteed"""
        raise NotImplementedError("Subclasses must implement query_by_key_set")

    def count_matching(self, query: Optional[Query] = None) -> int:
        """Number of records matching the query's filter"""
        raise NotImplementedError("Subclasses must implement count_matching")

    def key_of(self, record: Any) -> Key:
        """Key of a record returned by query_by_key_set"""
        raise NotImplementedError("Subclasses must implement key_of")
