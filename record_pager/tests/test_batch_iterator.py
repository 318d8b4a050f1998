import sqlite3
import unittest
from unittest.mock import Mock

from ..errors import InvalidPageSizeError
from ..interfaces.dataset import DatasetQuery
from ..models.filter_spec import Query
from ..pagination.batch_iterator import SnapshotBatchIterator
from .helpers import ids, make_repo


class ShuffledDataset(DatasetQuery):
    """Key-set fetches come back reversed, like a store that ignores order."""

    def __init__(self, keys):
        self.rows = {key: {"id": key} for key in keys}
        self.fetches = []

    def query_keys(self, query=None):
        return sorted(self.rows)

    def query_by_key_set(self, keys):
        self.fetches.append(list(keys))
        return [self.rows[k] for k in reversed(list(keys)) if k in self.rows]

    def count_matching(self, query=None):
        return len(self.rows)

    def key_of(self, record):
        return record["id"]


class TestSnapshotBatchIterator(unittest.TestCase):
    def test_batches_cover_every_key_once_in_order(self):
        repo = make_repo(45)
        batches = []

        count = repo.by_page(None, batches.append)

        self.assertEqual(count, 3)
        self.assertEqual([len(b) for b in batches], [20, 20, 5])
        self.assertEqual([i for b in batches for i in ids(b)], list(range(1, 46)))

    def test_empty_snapshot_never_calls_back(self):
        repo = make_repo(0)
        callback = Mock()

        self.assertEqual(repo.by_page(None, callback), 0)
        callback.assert_not_called()

    def test_batch_order_restored_from_snapshot(self):
        dataset = ShuffledDataset(range(1, 8))
        iterator = SnapshotBatchIterator(dataset, page_size=3)

        batches = list(iterator.iter_batches())

        self.assertEqual([ids(b) for b in batches], [[1, 2, 3], [4, 5, 6], [7]])

    def test_explicit_order_is_followed(self):
        repo = make_repo(45)
        seen = []

        repo.each_by_page(Query(order_by="id DESC"), lambda r: seen.append(r["id"]))

        self.assertEqual(seen, list(range(45, 0, -1)))

    def test_deleting_visited_records_does_not_disturb_later_batches(self):
        repo = make_repo(45)
        db = repo._db
        batches = []

        def delete_batch(batch):
            batches.append(ids(batch))
            if len(batches) == 1:
                for record in batch:
                    db.execute("DELETE FROM entries WHERE id = ?", (record["id"],))
                db.commit()

        repo.by_page(None, delete_batch)

        self.assertEqual(batches[1], list(range(21, 41)))
        self.assertEqual(batches[2], list(range(41, 46)))

    def test_records_deleted_ahead_are_missing_from_their_batch(self):
        repo = make_repo(45)
        db = repo._db
        sizes = []

        def delete_ahead(batch):
            sizes.append(len(batch))
            if len(sizes) == 1:
                db.execute("DELETE FROM entries WHERE id IN (21, 22, 45)")
                db.commit()

        self.assertEqual(repo.by_page(None, delete_ahead), 3)
        self.assertEqual(sizes, [20, 18, 4])

    def test_updating_filtered_column_visits_each_record_once(self):
        repo = make_repo(45)
        db = repo._db
        query = Query(where="status = ?", params=("open",), order_by="status")
        expected = repo.query_keys(query)
        seen = []

        def close(record):
            seen.append(record["id"])
            db.execute("UPDATE entries SET status = 'closed' WHERE id = ?", (record["id"],))
            db.commit()

        repo.per_page = 4
        visited = repo.each_by_page(query, close)

        self.assertEqual(seen, expected)
        self.assertEqual(visited, len(expected))
        self.assertEqual(repo.count_matching(query), 0)

    def test_records_inserted_after_snapshot_are_not_visited(self):
        repo = make_repo(25)
        db = repo._db
        seen = []

        def insert_more(batch):
            seen.extend(ids(batch))
            db.execute("INSERT INTO entries (id, title) VALUES (?, ?)", (100 + len(seen), "late"))
            db.commit()

        repo.by_page(None, insert_more)

        self.assertEqual(seen, list(range(1, 26)))

    def test_rerun_over_unmodified_data_is_identical(self):
        repo = make_repo(45)
        first, second = [], []

        repo.by_page(Query(order_by="rank DESC"), lambda b: first.append(ids(b)))
        repo.by_page(Query(order_by="rank DESC"), lambda b: second.append(ids(b)))

        self.assertEqual(first, second)

    def test_chunks_fetched_lazily(self):
        dataset = ShuffledDataset(range(1, 11))
        batches = SnapshotBatchIterator(dataset, page_size=4).iter_batches()

        self.assertEqual(dataset.fetches, [])
        next(batches)
        self.assertEqual(dataset.fetches, [[1, 2, 3, 4]])
        next(batches)
        self.assertEqual(len(dataset.fetches), 2)

    def test_collaborator_failure_propagates_and_stops(self):
        dataset = ShuffledDataset(range(1, 11))
        real_fetch = dataset.query_by_key_set
        calls = []

        def flaky(keys):
            calls.append(keys)
            if len(calls) == 2:
                raise sqlite3.OperationalError("database is locked")
            return real_fetch(keys)

        dataset.query_by_key_set = flaky
        received = []

        with self.assertRaises(sqlite3.OperationalError):
            SnapshotBatchIterator(dataset, page_size=4).by_page(None, received.append)

        self.assertEqual([ids(b) for b in received], [[1, 2, 3, 4]])
        self.assertEqual(len(calls), 2)

    def test_snapshot_failure_propagates(self):
        dataset = Mock(spec=DatasetQuery)
        dataset.query_keys.side_effect = sqlite3.OperationalError("no such table: entries")

        with self.assertRaises(sqlite3.OperationalError):
            SnapshotBatchIterator(dataset).by_page(None, Mock())
        dataset.query_by_key_set.assert_not_called()

    def test_invalid_page_size(self):
        with self.assertRaises(InvalidPageSizeError):
            SnapshotBatchIterator(ShuffledDataset([1]), page_size=0)


if __name__ == "__main__":
    unittest.main()
