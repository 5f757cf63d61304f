'''
    File Name: test_transaction.py
    Version: 1.0.0
    Date: 13/10/2026
    Author: Pablo Bartolomé Molina
'''
import dataclasses

import pytest

from models.errors import ValidationError, ValidationReason
from models.transaction import Transaction, TransactionType


def test_create_trims_and_parses_input():
    tx = Transaction.create(" 2024-03-01 ", " 100.5 ", "Income", " Salary ")
    assert tx.date == "2024-03-01"
    assert tx.amount == 100.5
    assert tx.kind is TransactionType.INCOME
    assert tx.category == "Salary"


def test_transaction_is_immutable():
    tx = Transaction("2024-03-01", 10, TransactionType.EXPENSE, "Food")
    with pytest.raises(dataclasses.FrozenInstanceError):
        tx.amount = 20


def test_equality_is_by_value():
    a = Transaction("2024-03-01", 10, "Expense", "Food")
    b = Transaction.create("2024-03-01", "10", TransactionType.EXPENSE, "Food")
    assert a == b
    assert a is not b


@pytest.mark.parametrize("date", ["2024-13-40", "2024-1-01", "01/02/2024", "2024-02-30", "2024-01-01T10:00"])
def test_malformed_dates_rejected(date):
    with pytest.raises(ValidationError) as exc:
        Transaction.create(date, 10, "Income", "Food")
    assert exc.value.reason is ValidationReason.MALFORMED_DATE


@pytest.mark.parametrize("amount", [0, -5, "-0.01", "0"])
def test_non_positive_amounts_rejected(amount):
    with pytest.raises(ValidationError) as exc:
        Transaction.create("2024-01-01", amount, "Expense", "Food")
    assert exc.value.reason is ValidationReason.NON_POSITIVE_AMOUNT


@pytest.mark.parametrize("amount", ["abc", "nan", "inf", True])
def test_invalid_amounts_rejected(amount):
    with pytest.raises(ValidationError) as exc:
        Transaction.create("2024-01-01", amount, "Expense", "Food")
    assert exc.value.reason is ValidationReason.INVALID_AMOUNT


@pytest.mark.parametrize("date, amount", [("", 10), ("   ", 10), ("2024-01-01", ""), ("2024-01-01", None)])
def test_empty_mandatory_fields_rejected(date, amount):
    with pytest.raises(ValidationError) as exc:
        Transaction.create(date, amount, "Income", "Food")
    assert exc.value.reason is ValidationReason.EMPTY_FIELD
    assert "cannot be empty" in str(exc.value)


def test_unknown_type_rejected():
    with pytest.raises(ValidationError) as exc:
        Transaction.create("2024-01-01", 10, "Transfer", "Food")
    assert exc.value.reason is ValidationReason.INVALID_TYPE


def test_empty_category_is_accepted():
    tx = Transaction.create("2024-01-01", 10, "Income", "")
    assert tx.category == ""


def test_validation_error_is_a_value_error():
    with pytest.raises(ValueError):
        Transaction.create("bad", 10, "Income", "Food")


def test_row_and_dict_forms():
    tx = Transaction("2024-02-15", 40.125, TransactionType.EXPENSE, "Food, groceries")
    assert tx.to_row() == ["2024-02-15", "Expense", "40.125", "Food, groceries"]
    assert Transaction.from_row(tx.to_row()) == tx
    assert tx.to_dict() == {"date": "2024-02-15", "type": "Expense", "amount": 40.125, "category": "Food, groceries"}
    assert Transaction.from_dict(tx.to_dict()) == tx
