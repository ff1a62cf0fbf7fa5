import tempfile
import unittest
from pathlib import Path

from mnemotrainer.engine.models import Difficulty
from mnemotrainer.results.schema import GameSessionRecord
from mnemotrainer.results.store import SESSIONS_KEY, ResultsStore
from mnemotrainer.storage import (
    JsonFileStorage,
    MemoryStorage,
    NullStorage,
    ParquetStorage,
    make_storage,
)


def _session() -> GameSessionRecord:
    return GameSessionRecord(
        tactic_id="face-name",
        difficulty=Difficulty.INTERMEDIATE,
        items_to_memorize=["Alex", "James", "Carlos"],
        user_answers=["Alex", "Jim", "Carlos"],
        start_time=1_700_000_000_000,
        end_time=1_700_000_042_000,
        score=104,
        accuracy=67,
    )


class JsonFileStorageTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name) / "data"
        self.storage = JsonFileStorage(self.dir)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_collection_is_empty(self) -> None:
        self.assertEqual(self.storage.read("nothing"), [])

    def test_write_then_read(self) -> None:
        self.assertTrue(self.storage.available)
        self.storage.write("scores", [{"a": 1}, {"a": 2}])
        self.assertEqual(self.storage.read("scores"), [{"a": 1}, {"a": 2}])
        self.assertEqual(self.storage.names(), ["scores"])

    def test_corrupt_file_reads_empty(self) -> None:
        self.dir.mkdir(parents=True)
        (self.dir / "scores.json").write_text("{not json", encoding="utf-8")
        self.assertEqual(self.storage.read("scores"), [])
        (self.dir / "scores.json").write_text('{"a": 1}', encoding="utf-8")
        self.assertEqual(self.storage.read("scores"), [])

    def test_results_store_round_trip(self) -> None:
        store = ResultsStore(self.storage)
        store.append_session(_session())
        self.assertEqual(store.list_sessions(), [_session()])
        self.assertTrue((self.dir / f"{SESSIONS_KEY}.json").exists())


class ParquetStorageTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.storage = ParquetStorage(self.dir)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_results_store_round_trip(self) -> None:
        store = ResultsStore(self.storage)
        store.append_session(_session())
        store.append_session(_session())
        sessions = store.list_sessions()
        self.assertEqual(len(sessions), 2)
        self.assertEqual(sessions[0], _session())
        self.assertEqual(sessions[0].user_answers, ["Alex", "Jim", "Carlos"])

    def test_empty_write_removes_file(self) -> None:
        self.storage.write("scores", [{"score": 1}])
        self.assertEqual(self.storage.names(), ["scores"])
        self.storage.write("scores", [])
        self.assertEqual(self.storage.names(), [])
        self.assertEqual(self.storage.read("scores"), [])

    def test_values_come_back_as_python_types(self) -> None:
        self.storage.write("scores", [{"score": 7, "id": "x"}])
        row = self.storage.read("scores")[0]
        self.assertIs(type(row["score"]), int)
        self.assertEqual(row, {"score": 7, "id": "x"})


class BackendFactoryTests(unittest.TestCase):
    def test_backends(self) -> None:
        self.assertIsInstance(make_storage({"storage": {"backend": "memory"}}), MemoryStorage)
        self.assertIsInstance(make_storage({"storage": {"backend": "none"}}), NullStorage)
        self.assertIsInstance(make_storage({"storage": {"backend": "parquet", "data_dir": "/tmp/x"}}), ParquetStorage)
        self.assertIsInstance(make_storage({}), JsonFileStorage)

    def test_unknown_backend(self) -> None:
        with self.assertRaises(ValueError):
            make_storage({"storage": {"backend": "sqlite"}})

    def test_null_storage(self) -> None:
        s = NullStorage()
        self.assertFalse(s.available)
        s.write("x", [{"a": 1}])
        self.assertEqual(s.read("x"), [])

    def test_memory_storage_copies(self) -> None:
        s = MemoryStorage()
        rows = [{"a": [1]}]
        s.write("x", rows)
        rows[0]["a"].append(2)
        self.assertEqual(s.read("x"), [{"a": [1]}])


if __name__ == "__main__":
    unittest.main()
