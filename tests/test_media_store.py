import json
import os
import stat
import tempfile
import threading
import unittest
from pathlib import Path

from common.errors import StorageError
from media.media_store import MediaStore


class MediaStoreTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "media.json"
        self.records = [
            {"id": "a1", "Title": "The Matrix", "Year": "1999", "Type": "movie"},
            {"id": "b2", "Title": "Dark", "Year": "2017", "Type": "series"},
        ]
        self.path.write_text(json.dumps(self.records), encoding="utf-8")
        self.store = MediaStore(self.path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_load_returns_records_in_stored_order(self):
        self.assertEqual(self.store.load(), self.records)

    def test_save_then_load_round_trips(self):
        self.store.save(self.store.load())
        self.assertEqual(self.store.load(), self.records)

        self.store.save(self.store.load())
        self.assertEqual(self.store.load(), self.records)

    def test_save_keeps_non_ascii_text(self):
        self.store.save([{"id": "c3", "Title": "Amélie"}])
        self.assertIn("Amélie", self.path.read_text(encoding="utf-8"))
        self.assertEqual(self.store.load()[0]["Title"], "Amélie")

    def test_missing_document_raises_storage_error(self):
        store = MediaStore(Path(self.tmp.name) / "nope.json")
        with self.assertRaises(StorageError):
            store.load()

    def test_malformed_document_raises_storage_error(self):
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertRaises(StorageError):
            self.store.load()

    def test_document_must_be_an_array(self):
        self.path.write_text(json.dumps({"id": "a1"}), encoding="utf-8")
        with self.assertRaises(StorageError):
            self.store.load()

    def test_document_entries_must_be_objects(self):
        self.path.write_text(json.dumps([{"id": "a1"}, 1]), encoding="utf-8")
        with self.assertRaises(StorageError):
            self.store.load()

    def test_save_keeps_file_permissions(self):
        os.chmod(self.path, 0o640)
        self.store.save(self.store.load())
        self.assertEqual(stat.S_IMODE(os.stat(self.path).st_mode), 0o640)

    def test_save_creates_new_document_readable_by_others(self):
        path = Path(self.tmp.name) / "fresh.json"
        MediaStore(path).save([])
        self.assertEqual(stat.S_IMODE(os.stat(path).st_mode), 0o644)

    def test_unserializable_save_raises_storage_error_and_keeps_file(self):
        with self.assertRaises(StorageError):
            self.store.save([{"id": "x", "bad": object()}])
        self.assertEqual(self.store.load(), self.records)
        self.assertEqual(
            [p.name for p in Path(self.tmp.name).iterdir()], ["media.json"]
        )

    def test_transaction_saves_on_clean_exit(self):
        with self.store.transaction() as media:
            media.append({"id": "c3", "Title": "Up"})

        self.assertEqual([m["id"] for m in self.store.load()], ["a1", "b2", "c3"])

    def test_transaction_discards_changes_when_block_raises(self):
        with self.assertRaises(RuntimeError):
            with self.store.transaction() as media:
                media.clear()
                raise RuntimeError("boom")

        self.assertEqual(self.store.load(), self.records)

    def test_transactions_are_serialized_within_a_process(self):
        def add(index):
            with self.store.transaction() as media:
                media.append({"id": f"t{index}"})

        threads = [threading.Thread(target=add, args=(i,)) for i in range(10)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = {m["id"] for m in self.store.load()}
        self.assertTrue({f"t{i}" for i in range(10)}.issubset(ids))
        self.assertEqual(len(ids), 12)


if __name__ == "__main__":
    unittest.main()
