'''
    File Name: session.py
    Version: 1.0.0
    Date: 14/10/2026
    Author: Pablo Bartolomé Molina
    Description: Per-run context owning the ledger, its undo stack and the store.
'''
import logging
from typing import Any, Dict, Iterable, Optional, Tuple

from ledger.ledger import Ledger, LedgerSummary
from ledger.undo import UndoManager, UndoOutcome
from models.transaction import Transaction
from storage.csv_store import TransactionStore

logger = logging.getLogger(__name__)


class FinanceSession:
    """Drives every mutation: apply to the ledger, record the inverse, save.

    An undo record is pushed only after the ledger accepted the change, so
    rejected input never reaches the undo stack.
    """

    def __init__(self, store: Optional[TransactionStore] = None, transactions: Optional[Iterable[Transaction]] = None):
        self.store = store
        self.ledger = Ledger(transactions)
        self.undo_manager = UndoManager()
        self.last_save_ok = True

    @classmethod
    def open(cls, store: TransactionStore) -> "FinanceSession":
        """Create a session initialized from the store's saved transactions."""
        return cls(store=store, transactions=store.load())

    # --- Mutations ---
    def add_transaction(self, date: Any, amount: Any, kind: Any, category: Any = "") -> Transaction:
        tx = self.ledger.add(date, amount, kind, category)
        self.undo_manager.record_add(tx, self.ledger.index_of(tx))
        self.save()
        return tx

    def delete_transaction(self, index: int) -> Transaction:
        tx = self.ledger.delete_at(index)
        self.undo_manager.record_delete(tx, index)
        self.save()
        return tx

    def update_transaction(self, index: int, date: Any, amount: Any, kind: Any, category: Any = "") -> Tuple[Transaction, Transaction]:
        old_tx, new_tx = self.ledger.update_at(index, date, amount, kind, category)
        self.undo_manager.record_update(old_tx, self.ledger.index_of(new_tx), origin_index=index)
        self.save()
        return old_tx, new_tx

    def undo(self) -> UndoOutcome:
        outcome = self.undo_manager.undo(self.ledger)
        self.save()
        return outcome

    @property
    def can_undo(self) -> bool:
        return self.undo_manager.can_undo

    # --- Queries ---
    def transactions(self) -> Tuple[Transaction, ...]:
        return self.ledger.list_transactions()

    def summary(self) -> LedgerSummary:
        return self.ledger.summary()

    def category_totals(self) -> Dict[str, float]:
        return self.ledger.category_totals()

    # --- Persistence ---
    def save(self) -> bool:
        """Persist the full ledger if a store is attached. Failures are reported, not raised."""
        if self.store is None:
            return True
        self.last_save_ok = self.store.save(self.ledger.list_transactions())
        if not self.last_save_ok:
            logger.warning("Ledger changes are kept in memory only; save to %s failed", self.store.path)
        return self.last_save_ok
