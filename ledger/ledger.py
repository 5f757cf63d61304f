'''
    File Name: ledger.py
    Version: 1.0.0
    Date: 13/10/2026
    Author: Pablo Bartolomé Molina
    Description: In-memory, date-sorted transaction ledger and its aggregates.
'''
import logging
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from models.transaction import Transaction, TransactionType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LedgerSummary:
    total_income: float
    total_expense: float
    balance: float
    count: int

    def to_dict(self) -> dict:
        return {
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "balance": self.balance,
            "count": self.count,
        }


class Ledger:
    """Ordered collection of transactions, always sorted ascending by date.

    Sorting compares the ISO date strings and is stable, so entries sharing
    a date keep their relative order. The ledger does not record undo
    information; callers use the returned values (and `index_of`) for that.
    """

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._transactions: List[Transaction] = list(transactions or [])
        self.sort()

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._transactions))

    def sort(self) -> None:
        self._transactions.sort(key=attrgetter("date"))

    # --- Mutations ---
    def add(self, date: Any, amount: Any, kind: Any, category: Any = "") -> Transaction:
        """Validate and append a new transaction, then re-sort. Returns the created value."""
        tx = Transaction.create(date, amount, kind, category)
        self._transactions.append(tx)
        self.sort()
        logger.debug("Added %r", tx)
        return tx

    def delete_at(self, index: int) -> Transaction:
        """Remove and return the transaction at `index`."""
        self._check_index(index)
        tx = self._transactions.pop(index)
        logger.debug("Deleted %r at index %d", tx, index)
        return tx

    def update_at(self, index: int, date: Any, amount: Any, kind: Any, category: Any = "") -> Tuple[Transaction, Transaction]:
        """Replace the transaction at `index` with a new validated value, then re-sort.

        Returns (old, new). Raises IndexError or ValidationError without
        touching the ledger.
        """
        self._check_index(index)
        new_tx = Transaction.create(date, amount, kind, category)
        old_tx = self._transactions[index]
        self._transactions[index] = new_tx
        self.sort()
        logger.debug("Updated index %d: %r -> %r", index, old_tx, new_tx)
        return old_tx, new_tx

    # --- Low-level helpers (used when replaying undo records) ---
    def transaction_at(self, index: int) -> Transaction:
        self._check_index(index)
        return self._transactions[index]

    def insert_at(self, index: int, tx: Transaction) -> int:
        """Insert `tx` at `index` clamped into [0, len]. Returns the position used."""
        position = max(0, min(index, len(self._transactions)))
        self._transactions.insert(position, tx)
        return position

    def replace_at(self, index: int, tx: Transaction) -> Transaction:
        self._check_index(index)
        old_tx = self._transactions[index]
        self._transactions[index] = tx
        return old_tx

    def remove(self, tx: Transaction) -> bool:
        """Remove `tx`, matching by identity first and then by value."""
        idx = self.index_of(tx)
        if idx is None:
            try:
                idx = self._transactions.index(tx)
            except ValueError:
                return False
        del self._transactions[idx]
        return True

    def index_of(self, tx: Transaction) -> Optional[int]:
        """Position of this exact instance, or None."""
        for idx, candidate in enumerate(self._transactions):
            if candidate is tx:
                return idx
        return None

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._transactions):
            raise IndexError(f"Transaction index {index!r} out of range (0..{len(self._transactions) - 1})")

    # --- Queries ---
    def list_transactions(self) -> Tuple[Transaction, ...]:
        """Read-only snapshot sorted by date."""
        return tuple(self._transactions)

    def summary(self) -> LedgerSummary:
        income = 0.0
        expense = 0.0
        for tx in self._transactions:
            if tx.kind is TransactionType.INCOME:
                income += tx.amount
            else:
                expense += tx.amount
        return LedgerSummary(
            total_income=income,
            total_expense=expense,
            balance=income - expense,
            count=len(self._transactions),
        )

    def category_totals(self) -> Dict[str, float]:
        """Sum of amounts per category, income and expense added together."""
        totals: Dict[str, float] = {}
        for tx in self._transactions:
            totals[tx.category] = totals.get(tx.category, 0.0) + tx.amount
        return totals
