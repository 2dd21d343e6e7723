"""
Tests for TransactionStore and DataFile persistence.
"""
import json
from datetime import datetime

from database.data_file import DataFile
from database.transaction_store import TransactionStore
from models.category import Category
from models.transaction_type import TransactionType
from tests.conftest import make_tx


class TestMutations:
    """add / update / delete / snapshot."""

    def test_add_appends(self, store):
        store.add(make_tx("a", 1.0))
        store.add(make_tx("b", 2.0))
        assert [t.description for t in store] == ["a", "b"]
        assert len(store) == 2

    def test_update_in_place(self, filled_store):
        replacement = make_tx("Groceries (fixed)", 60.0)
        assert filled_store.update(2, replacement) is True
        assert filled_store.get(2) == replacement
        assert len(filled_store) == 3

    def test_update_out_of_range_is_noop(self, filled_store):
        before = filled_store.snapshot()
        assert filled_store.update(3, make_tx("x", 1.0)) is False
        assert filled_store.update(-1, make_tx("x", 1.0)) is False
        assert filled_store.snapshot() == before

    def test_delete_shifts_later_items(self, filled_store):
        assert filled_store.delete(0) is True
        assert [t.description for t in filled_store] == ["Rent", "Groceries"]

    def test_delete_out_of_range_is_noop(self, filled_store):
        assert filled_store.delete(5) is False
        assert filled_store.delete(-1) is False
        assert len(filled_store) == 3

    def test_get_out_of_range(self, store):
        assert store.get(0) is None

    def test_snapshot_is_a_copy(self, filled_store):
        snap = filled_store.snapshot()
        filled_store.delete(0)
        assert len(snap) == 3
        snap.clear()
        assert len(filled_store) == 2

    def test_total_balance(self, filled_store):
        assert filled_store.total_balance() == 1000.0 - 400.0 - 55.5


class TestPersistence:
    """persist() / restore() round-trips and failure handling."""

    def test_round_trip(self, filled_store, data_file):
        assert filled_store.persist() is True
        restored = TransactionStore.load(data_file)
        assert restored.snapshot() == filled_store.snapshot()

    def test_round_trip_keeps_microseconds(self, store, data_file):
        store.add(make_tx("precise", 1.25, date=datetime(2024, 5, 6, 7, 8, 9, 123456)))
        store.persist()
        assert TransactionStore.load(data_file).snapshot() == store.snapshot()

    def test_file_layout(self, filled_store, data_file):
        filled_store.persist()
        with open(data_file.path, encoding="utf-8") as f:
            document = json.load(f)
        assert list(document) == ["transactions"]
        assert document["transactions"][0] == {
            "description": "Paycheck",
            "amount": 1000.0,
            "trans_type": "Income",
            "category": "Salary",
            "date": "2024-01-01T09:00:00",
        }

    def test_no_tmp_file_left_behind(self, filled_store, data_file):
        filled_store.persist()
        assert not data_file.path.with_name(data_file.path.name + ".tmp").exists()

    def test_missing_file_gives_empty_store(self, data_file):
        assert len(TransactionStore.load(data_file)) == 0

    def test_malformed_json_gives_empty_store(self, data_file):
        data_file.path.write_text("{not json", encoding="utf-8")
        assert len(TransactionStore.load(data_file)) == 0

    def test_wrong_shape_gives_empty_store(self, data_file):
        data_file.path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        assert len(TransactionStore.load(data_file)) == 0
        data_file.path.write_text(json.dumps({"transactions": "nope"}), encoding="utf-8")
        assert len(TransactionStore.load(data_file)) == 0

    def test_one_bad_row_gives_empty_store(self, data_file):
        data_file.path.write_text(json.dumps({"transactions": [
            {"description": "ok", "amount": 1.0, "trans_type": "Expense",
             "category": "Food", "date": "2024-01-01T00:00:00"},
            {"description": "bad", "amount": 1.0, "trans_type": "Refund",
             "category": "Food", "date": "2024-01-01T00:00:00"},
        ]}), encoding="utf-8")
        assert len(TransactionStore.load(data_file)) == 0

    def test_older_file_without_category(self, data_file):
        data_file.path.write_text(json.dumps({"transactions": [
            {"description": "legacy", "amount": 12.0, "trans_type": "Expense",
             "date": "2023-12-24T20:00:00"},
        ]}), encoding="utf-8")
        store = TransactionStore.load(data_file)
        assert store.get(0).category is Category.OTHER
        assert store.get(0).trans_type is TransactionType.EXPENSE

    def test_persist_failure_is_swallowed(self, tmp_path):
        # Parent "folder" is a regular file, so the write cannot succeed
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = TransactionStore(DataFile(blocker / "finance_data.json"))
        store.add(make_tx("kept", 3.0))
        assert store.persist() is False
        assert len(store) == 1

    def test_restore_replaces_contents(self, filled_store, data_file):
        filled_store.persist()
        filled_store.add(make_tx("unsaved", 1.0))
        filled_store.restore()
        assert len(filled_store) == 3

    def test_open_switches_data_file(self, filled_store, tmp_path):
        filled_store.persist()
        other = DataFile(tmp_path / "elsewhere.json")
        filled_store.open(other)
        assert len(filled_store) == 0
        assert filled_store.data_file is other
        filled_store.add(make_tx("new", 2.0))
        filled_store.persist()
        assert other.exists()
        assert len(TransactionStore.load(other)) == 1
