'''
    File Name: entry_panel.py
    Version: 2.0.0
    Date: 15/10/2026
    Author: Pablo Bartolomé Molina
'''
from typing import Iterable, Optional

from PyQt6.QtWidgets import (
    QWidget,
    QGridLayout,
    QLabel,
    QLineEdit,
    QComboBox,
)
from PyQt6.QtCore import QDate

from config import DEFAULT_CATEGORIES, TRANSACTION_TYPES
from models.transaction import Transaction


class EntryPanel(QWidget):
    """Inline form collecting the fields of one transaction.

    The panel does no validation itself; `values()` returns the raw text so
    the ledger can reject it with a proper reason.
    """

    def __init__(self, parent=None, categories: Optional[Iterable[str]] = None):
        super().__init__(parent)
        self._categories = list(categories) if categories is not None else list(DEFAULT_CATEGORIES)
        self.setup_ui()

    def setup_ui(self) -> None:
        layout = QGridLayout()

        self.date = QLineEdit(self._today())
        self.date.setPlaceholderText("yyyy-MM-dd")
        self.amount = QLineEdit()
        self.amount.setPlaceholderText("0.00")

        self.type_box = QComboBox()
        self.type_box.addItems(TRANSACTION_TYPES)

        self.category = QComboBox()
        self.category.setEditable(True)
        self.category.addItems(self._categories)

        # row 1
        layout.addWidget(QLabel("Date (yyyy-MM-dd):"), 0, 0)
        layout.addWidget(self.date, 0, 1)
        layout.addWidget(QLabel("Amount:"), 0, 2)
        layout.addWidget(self.amount, 0, 3)
        # row 2
        layout.addWidget(QLabel("Type:"), 1, 0)
        layout.addWidget(self.type_box, 1, 1)
        layout.addWidget(QLabel("Category:"), 1, 2)
        layout.addWidget(self.category, 1, 3)

        self.setLayout(layout)

    @staticmethod
    def _today() -> str:
        return QDate.currentDate().toString("yyyy-MM-dd")

    def values(self) -> dict:
        return {
            "date": self.date.text().strip(),
            "amount": self.amount.text().strip(),
            "kind": self.type_box.currentText(),
            "category": self.category.currentText().strip(),
        }

    def set_transaction(self, tx: Transaction) -> None:
        """Populate fields from an existing transaction (row selected in the table)."""
        self.date.setText(tx.date)
        self.amount.setText(f"{tx.amount:.2f}")
        self.type_box.setCurrentText(tx.kind.value)
        idx = self.category.findText(tx.category)
        if idx >= 0:
            self.category.setCurrentIndex(idx)
        else:
            self.category.setEditText(tx.category)

    def clear(self) -> None:
        self.date.setText(self._today())
        self.amount.clear()
        self.type_box.setCurrentIndex(0)
        self.category.setCurrentIndex(0)
