'''
    File Name: undo.py
    Version: 1.0.0
    Date: 13/10/2026
    Author: Pablo Bartolomé Molina
    Description: Single-level undo stack for ledger mutations.
'''
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ledger.ledger import Ledger
from models.errors import EmptyUndoError
from models.transaction import Transaction

logger = logging.getLogger(__name__)


class UndoAction(str, Enum):
    ADD = "add"
    DELETE = "delete"
    UPDATE = "update"


@dataclass(frozen=True)
class UndoRecord:
    """Stored inverse of one past mutation, addressed by ledger position.

    Attributes:
        action: Which mutation happened
        transaction: The added / deleted transaction, or the previous value for an update
        index: Position the record applies to (post-sort for add/update, pre-delete for delete)
        origin_index: For updates, where the previous value sat before the re-sort
    """
    action: UndoAction
    transaction: Transaction
    index: int
    origin_index: Optional[int] = None


@dataclass(frozen=True)
class UndoOutcome:
    record: UndoRecord
    applied: bool

    @property
    def action(self) -> UndoAction:
        return self.record.action


class UndoManager:
    """One stack of undo records; undoing pops and applies the inverse.

    Undo is single-level: applying a record does not push a redo record.
    """

    def __init__(self):
        self._stack: List[UndoRecord] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def can_undo(self) -> bool:
        return bool(self._stack)

    def clear(self) -> None:
        self._stack.clear()

    def peek(self) -> Optional[UndoRecord]:
        return self._stack[-1] if self._stack else None

    # --- Recording (call only after the mutation succeeded) ---
    def record_add(self, transaction: Transaction, index_after_sort: int) -> UndoRecord:
        return self._push(UndoRecord(UndoAction.ADD, transaction, index_after_sort))

    def record_delete(self, transaction: Transaction, original_index: int) -> UndoRecord:
        return self._push(UndoRecord(UndoAction.DELETE, transaction, original_index))

    def record_update(self, previous_transaction: Transaction, index: int, origin_index: Optional[int] = None) -> UndoRecord:
        return self._push(UndoRecord(UndoAction.UPDATE, previous_transaction, index, origin_index))

    def _push(self, record: UndoRecord) -> UndoRecord:
        self._stack.append(record)
        logger.debug("Recorded undo %s at index %d (depth=%d)", record.action.value, record.index, len(self._stack))
        return record

    # --- Replay ---
    def undo(self, ledger: Ledger) -> UndoOutcome:
        """Pop the most recent record and apply its inverse to `ledger`."""
        if not self._stack:
            raise EmptyUndoError()

        record = self._stack.pop()
        if record.action is UndoAction.ADD:
            applied = self._undo_add(ledger, record)
        elif record.action is UndoAction.DELETE:
            ledger.insert_at(record.index, record.transaction)
            applied = True
        else:
            applied = self._undo_update(ledger, record)

        ledger.sort()
        if applied:
            logger.debug("Undid %s of %r", record.action.value, record.transaction)
        else:
            logger.warning("Undo of %s had no effect; index %d is stale", record.action.value, record.index)
        return UndoOutcome(record=record, applied=applied)

    @staticmethod
    def _undo_add(ledger: Ledger, record: UndoRecord) -> bool:
        if 0 <= record.index < len(ledger) and ledger.transaction_at(record.index) is record.transaction:
            ledger.delete_at(record.index)
            return True
        # index no longer points at the added entry
        return ledger.remove(record.transaction)

    @staticmethod
    def _undo_update(ledger: Ledger, record: UndoRecord) -> bool:
        if not 0 <= record.index < len(ledger):
            return False
        ledger.replace_at(record.index, record.transaction)
        if record.origin_index is not None and record.origin_index != record.index:
            restored = ledger.delete_at(record.index)
            ledger.insert_at(record.origin_index, restored)
        return True
