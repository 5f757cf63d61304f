'''
    File Name: test_session.py
    Version: 1.0.0
    Date: 15/10/2026
    Author: Pablo Bartolomé Molina
'''
from unittest.mock import MagicMock

import pytest

from ledger.session import FinanceSession
from ledger.undo import UndoAction
from models.errors import EmptyUndoError, ValidationError
from models.transaction import Transaction, TransactionType
from storage.csv_store import TransactionStore


def test_concrete_scenario_with_undo():
    session = FinanceSession()
    session.add_transaction("2024-03-01", 100, TransactionType.INCOME, "Salary")
    session.add_transaction("2024-02-15", 40, TransactionType.EXPENSE, "Food")

    assert session.transactions() == (
        Transaction("2024-02-15", 40, "Expense", "Food"),
        Transaction("2024-03-01", 100, "Income", "Salary"),
    )
    s = session.summary()
    assert (s.total_income, s.total_expense, s.balance, s.count) == (100, 40, 60, 2)

    outcome = session.undo()
    assert outcome.action is UndoAction.ADD
    assert session.transactions() == (Transaction("2024-03-01", 100, "Income", "Salary"),)


def test_failed_mutations_do_not_record_undo():
    session = FinanceSession()
    with pytest.raises(ValidationError):
        session.add_transaction("2024-13-40", 10, "Income", "Food")
    with pytest.raises(IndexError):
        session.delete_transaction(0)
    with pytest.raises(IndexError):
        session.update_transaction(0, "2024-01-01", 10, "Income", "Food")
    assert not session.can_undo
    with pytest.raises(EmptyUndoError):
        session.undo()


def test_delete_and_update_round_trip_through_undo():
    session = FinanceSession()
    for day, cat in (("05", "Food"), ("01", "Salary"), ("09", "Transport")):
        session.add_transaction(f"2024-04-{day}", 10, "Expense", cat)
    before = session.transactions()

    session.delete_transaction(1)
    session.update_transaction(0, "2024-05-01", 99, "Income", "Other")
    assert len(session.transactions()) == 2

    session.undo()
    session.undo()
    assert session.transactions() == before


def test_every_mutation_and_undo_saves():
    store = MagicMock(spec=TransactionStore)
    store.save.return_value = True
    session = FinanceSession(store=store)

    session.add_transaction("2024-01-01", 5, "Income", "Salary")
    session.update_transaction(0, "2024-01-02", 6, "Income", "Salary")
    session.delete_transaction(0)
    session.undo()

    assert store.save.call_count == 4
    saved = store.save.call_args[0][0]
    assert saved == (Transaction("2024-01-02", 6, "Income", "Salary"),)


def test_failed_save_is_reported_not_raised():
    store = MagicMock(spec=TransactionStore)
    store.save.return_value = False
    store.path = "transactions.csv"
    session = FinanceSession(store=store)

    tx = session.add_transaction("2024-01-01", 5, "Income", "Salary")

    assert session.last_save_ok is False
    assert session.transactions() == (tx,)
    assert session.can_undo


def test_open_loads_from_store(tmp_path):
    store = TransactionStore(tmp_path / "transactions.csv")
    first = FinanceSession.open(store)
    first.add_transaction("2024-03-01", 100, "Income", "Salary")
    first.add_transaction("2024-02-15", 40.255, "Expense", "Food")

    second = FinanceSession.open(store)
    assert second.transactions() == first.transactions()
    # undo history is per session
    assert not second.can_undo


def test_category_totals_follow_ledger():
    session = FinanceSession()
    session.add_transaction("2024-01-01", 10, "Income", "Food")
    session.add_transaction("2024-01-02", 15, "Expense", "Food")
    assert session.category_totals() == {"Food": 25}
    session.undo()
    assert session.category_totals() == {"Food": 10}
