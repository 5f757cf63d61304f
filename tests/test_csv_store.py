'''
    File Name: test_csv_store.py
    Version: 3.0.0
    Date: 15/10/2026
    Author: Pablo Bartolomé Molina
'''
import pytest

from ledger.ledger import Ledger
from models.errors import StorageError
from models.transaction import Transaction
from storage.csv_store import TransactionStore


def test_missing_file_loads_empty(tmp_path):
    store = TransactionStore(tmp_path / "missing.csv")
    assert not store.exists()
    assert store.load() == []


def test_save_creates_parent_dir(tmp_path):
    path = tmp_path / "nested" / "data" / "transactions.csv"
    store = TransactionStore(path)
    assert store.save([Transaction("2024-01-01", 1, "Income", "Salary")])
    assert path.exists()
    assert path.read_text(encoding="utf-8").strip() == "2024-01-01,Income,1.0,Salary"


def test_round_trip_preserves_values_and_order(tmp_path):
    ledger = Ledger()
    ledger.add("2024-03-01", 100, "Income", "Salary")
    ledger.add("2024-02-15", 40.333333, "Expense", "Food")
    ledger.add("2024-02-15", 0.1, "Expense", "Dinner, drinks")
    ledger.add("2024-02-20", 12, "Expense", "")

    store = TransactionStore(tmp_path / "transactions.csv")
    assert store.save(ledger.list_transactions())

    reloaded = Ledger(store.load())
    assert reloaded.list_transactions() == ledger.list_transactions()


def test_malformed_rows_are_skipped(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text(
        "2024-01-01,Income,10.00,Salary\n"
        "garbage line\n"
        "2024-13-40,Expense,5,Food\n"
        "2024-01-02,Expense,-3,Food\n"
        "2024-01-03,Transfer,3,Food\n"
        "\n"
        "2024-01-04,Expense,2.50,Transport\n",
        encoding="utf-8",
    )
    loaded = TransactionStore(path).load()
    assert loaded == [
        Transaction("2024-01-01", 10, "Income", "Salary"),
        Transaction("2024-01-04", 2.5, "Expense", "Transport"),
    ]


def test_unreadable_file_raises_storage_error(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(StorageError):
        TransactionStore(path).load()


def test_save_failure_returns_false(tmp_path):
    # a directory in place of the file cannot be opened for writing
    path = tmp_path / "transactions.csv"
    path.mkdir()
    assert TransactionStore(path).save([]) is False


def test_last_save_wins(tmp_path):
    store = TransactionStore(tmp_path / "transactions.csv")
    store.save([Transaction("2024-01-01", 1, "Income", "a"), Transaction("2024-01-02", 2, "Income", "b")])
    store.save([Transaction("2024-01-03", 3, "Expense", "c")])
    assert store.load() == [Transaction("2024-01-03", 3, "Expense", "c")]
