import logging
from typing import Any, Callable, Iterator, List, Optional, Tuple

from ..interfaces.dataset import DatasetQuery, Key
from ..models.filter_spec import Query
from .arithmetic import DEFAULT_PAGE_SIZE, page_count, validate_page_size

logger = logging.getLogger(__name__)

Batch = List[Any]


class SnapshotBatchIterator:
    """
    Visits every record matching a query exactly once, `page_size` at a time.

    Which records are visited, and in what order, is fixed by a snapshot of
    keys taken before the first batch is fetched. A callback may therefore
    update or delete the records it is handed, including the columns the
    query filters or orders on, without anything being skipped or revisited.
    Keys deleted after the snapshot are missing from their batch; keys
    inserted after it are never visited.
    """

    def __init__(self, dataset: DatasetQuery, page_size: int = DEFAULT_PAGE_SIZE):
        self.dataset = dataset
        self.page_size = validate_page_size(page_size)

    def snapshot(self, query: Optional[Query] = None) -> Tuple[Key, ...]:
        """Capture the ordered keys matching `query`."""
        keys = tuple(self.dataset.query_keys(query))
        logger.debug(f"Snapshot captured {len(keys)} keys")
        return keys

    def iter_batches(self, query: Optional[Query] = None) -> Iterator[Batch]:
        """
        Yield one batch of full records per chunk of the snapshot.

        Each chunk is fetched only when the consumer asks for the next batch,
        so work done on batch k is finished before batch k+1 is read.
        """
        keys = self.snapshot(query)
        if not keys:
            return

        total_batches = page_count(len(keys), self.page_size)
        cursor = 0
        batch_number = 0
        while cursor < len(keys):
            chunk = keys[cursor:cursor + self.page_size]
            cursor += self.page_size
            batch_number += 1
            batch = self._fetch_in_order(chunk)
            logger.debug(
                f"Batch {batch_number}/{total_batches}: {len(batch)} of {len(chunk)} records"
            )
            yield batch

    def by_page(self, query: Optional[Query], callback: Callable[[Batch], Any]) -> int:
        """Call `callback` once per batch; returns the number of batches handed over."""
        batches = 0
        for batch in self.iter_batches(query):
            callback(batch)
            batches += 1
        return batches

    def each_by_page(self, query: Optional[Query], callback: Callable[[Any], Any]) -> int:
        """Call `callback` once per record; returns the number of records visited."""
        visited = 0

        def handle(batch: Batch) -> None:
            nonlocal visited
            for record in batch:
                callback(record)
                visited += 1

        self.by_page(query, handle)
        return visited

    def _fetch_in_order(self, chunk: Tuple[Key, ...]) -> Batch:
        # The key-set fetch does not preserve order; restore the snapshot's.
        position = {key: index for index, key in enumerate(chunk)}
        key_of = self.dataset.key_of
        records = [
            record for record in self.dataset.query_by_key_set(chunk)
            if key_of(record) in position
        ]
        records.sort(key=lambda record: position[key_of(record)])
        if len(records) < len(chunk):
            logger.info(f"{len(chunk) - len(records)} snapshotted records no longer exist")
        return records
