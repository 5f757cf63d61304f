'''
    File Name: transaction.py
    Version: 3.0.0
    Date: 12/10/2026
    Author: Pablo Bartolomé Molina
    Description: Transaction data model for the finance tracker.
'''
import math
import re
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Sequence, Union

from config import DATE_FORMAT
from models.errors import ValidationError, ValidationReason

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


class TransactionType(str, Enum):
    """Closed set of transaction kinds; the label is the only varying behavior."""
    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def parse(cls, value: Union["TransactionType", str]) -> "TransactionType":
        if isinstance(value, cls):
            return value
        label = str(value or "").strip()
        for member in cls:
            if member.value == label:
                return member
        raise ValidationError(
            ValidationReason.INVALID_TYPE,
            f"Type must be one of: {', '.join(m.value for m in cls)}.",
        )


def validate_date(date: str) -> str:
    """Return `date` if it is a real calendar date written as YYYY-MM-DD."""
    if not isinstance(date, str) or not _DATE_PATTERN.fullmatch(date):
        raise ValidationError(ValidationReason.MALFORMED_DATE, "Date must be in format yyyy-MM-dd.")
    try:
        datetime.strptime(date, DATE_FORMAT)
    except ValueError:
        raise ValidationError(ValidationReason.MALFORMED_DATE, f"Invalid date: {date}. Expected yyyy-MM-dd.")
    return date


def parse_amount(amount: Any) -> float:
    """Convert user/file input to a positive, finite float."""
    if isinstance(amount, bool):
        raise ValidationError(ValidationReason.INVALID_AMOUNT, "Please enter a valid number for amount.")
    try:
        value = float(amount)
    except (TypeError, ValueError):
        raise ValidationError(ValidationReason.INVALID_AMOUNT, "Please enter a valid number for amount.")
    if not math.isfinite(value):
        raise ValidationError(ValidationReason.INVALID_AMOUNT, "Please enter a valid number for amount.")
    if value <= 0:
        raise ValidationError(ValidationReason.NON_POSITIVE_AMOUNT, "Amount must be a positive number.")
    return value


@dataclass(frozen=True)
class Transaction:
    """
    Represents a single financial transaction. Instances never change;
    editing a ledger entry replaces it with a new instance.

    Attributes:
        date: Transaction date (YYYY-MM-DD)
        amount: Strictly positive amount, stored at full precision
        kind: Income or Expense
        category: Free-form label (e.g. "Salary", "Food"); may be empty
    """
    date: str
    amount: float
    kind: TransactionType
    category: str = ""

    def __post_init__(self):
        """Validate transaction data after initialization."""
        validate_date(self.date)
        object.__setattr__(self, "amount", parse_amount(self.amount))
        object.__setattr__(self, "kind", TransactionType.parse(self.kind))
        object.__setattr__(self, "category", "" if self.category is None else str(self.category))

    @classmethod
    def create(cls, date: Any, amount: Any, kind: Any, category: Any = "") -> "Transaction":
        """Build a Transaction from raw form input (strings are trimmed).

        Date and amount are mandatory; the category may be empty.
        """
        date_text = "" if date is None else str(date).strip()
        if isinstance(amount, str):
            amount = amount.strip()
        if not date_text or amount is None or amount == "":
            raise ValidationError(ValidationReason.EMPTY_FIELD, "Date and Amount fields cannot be empty.")
        category_text = "" if category is None else str(category).strip()
        return cls(date=date_text, amount=amount, kind=kind, category=category_text)

    @property
    def is_income(self) -> bool:
        return self.kind is TransactionType.INCOME

    def to_dict(self) -> dict:
        """Convert transaction to dictionary (useful for reports)."""
        return {
            "date": self.date,
            "type": self.kind.value,
            "amount": self.amount,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Transaction":
        """Create a Transaction instance from a dictionary."""
        return cls.create(
            date=data.get("date", ""),
            amount=data.get("amount", ""),
            kind=data.get("type", data.get("kind", "")),
            category=data.get("category", ""),
        )

    def to_row(self) -> list:
        """Flat-file record: [date, type, amount, category]."""
        return [self.date, self.kind.value, repr(self.amount), self.category]

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "Transaction":
        date, kind, amount, category = row
        return cls.create(date=date, amount=amount, kind=kind, category=category)

    def __repr__(self) -> str:
        return f"Transaction(date={self.date}, type={self.kind.value}, amount={self.amount}, category='{self.category}')"
