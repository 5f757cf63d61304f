'''
    File Name: csv_store.py
    Version: 3.0.0
    Date: 14/10/2026
    Author: Pablo Bartolomé Molina
'''

import csv
import logging
from pathlib import Path
from typing import Iterable, List, Optional

import config
from models.errors import StorageError, ValidationError
from models.transaction import Transaction

logger = logging.getLogger(__name__)


class TransactionStore:
    """Flat-file persistence for the ledger.

    One transaction per CSV row, no header: date,type,amount,category.
    Every save rewrites the whole file; the last successful save wins.
    """

    FIELD_COUNT = 4

    def __init__(self, path: Optional[Path] = None):
        # prefer explicit path, otherwise config value
        if path is not None:
            self.path = Path(path)
        else:
            self.path = Path(config.TRANSACTIONS_PATH)

    def exists(self) -> bool:
        return self.path.exists()

    def ensure_storage(self) -> None:
        """Make sure the parent directory exists. Safe to call multiple times."""
        logger.debug("Ensuring storage directory for %s", self.path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> List[Transaction]:
        """Return the stored transactions in file order.

        A missing file is an empty ledger. Malformed rows are skipped.
        """
        if not self.path.exists():
            logger.debug("No transactions file at %s; starting empty", self.path)
            return []

        transactions: List[Transaction] = []
        try:
            with open(self.path, newline="", encoding="utf-8") as f:
                reader = csv.reader(f)
                for line_no, row in enumerate(reader, start=1):
                    if not row:
                        continue
                    if len(row) != self.FIELD_COUNT:
                        logger.warning("Skipping line %d of %s: expected %d fields, got %d",
                                       line_no, self.path, self.FIELD_COUNT, len(row))
                        continue
                    try:
                        transactions.append(Transaction.from_row(row))
                    except ValidationError as e:
                        logger.warning("Skipping line %d of %s: %s", line_no, self.path, e)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.exception("Failed loading transactions from %s", self.path)
            raise StorageError(f"Error loading transactions: {e}") from e

        logger.info("Loaded %d transactions from %s", len(transactions), self.path)
        return transactions

    def save(self, transactions: Iterable[Transaction]) -> bool:
        """Write all transactions to the file. Returns True on success."""
        try:
            self.ensure_storage()
            with open(self.path, "w", newline="", encoding="utf-8") as f:
                writer = csv.writer(f)
                for tx in transactions:
                    writer.writerow(tx.to_row())
            return True
        except OSError:
            logger.exception("Failed saving transactions to %s", self.path)
            return False
