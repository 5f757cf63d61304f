'''
    File Name: main_window.py
    Version: 3.0.0
    Date: 16/10/2026
    Author: Pablo Bartolomé Molina
'''
from pathlib import Path
import logging
import random
from typing import Optional

from PyQt6 import QtWidgets, QtGui, QtCore
from config import APP_NAME, APP_TITLE, APP_VERSION, STYLESHEET_PATH, TIPS, ensure_data_dir

# Local UI components
from .entry_panel import EntryPanel
from .stats_panel import StatsPanel
from ledger.session import FinanceSession
from models.errors import EmptyUndoError, StorageError, ValidationError
from storage.csv_store import TransactionStore

logger = logging.getLogger(__name__)


def random_tip() -> str:
    return random.choice(TIPS)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, *args, session: Optional[FinanceSession] = None, **kwargs):
        super().__init__(*args, **kwargs)

        # Window metadata and status bar
        self.setWindowTitle(f"{APP_TITLE} — {APP_VERSION}")
        self.status = self.statusBar()
        self.status.showMessage("Ready")

        # Session may be injected by the app; otherwise open the default store
        self.session = session if session is not None else self._open_default_session()

        # Apply stylesheet if present (non-fatal)
        try:
            self._apply_stylesheet()
        except Exception:
            logger.exception("Failed to apply stylesheet")

        central_widget = QtWidgets.QWidget()
        self.setCentralWidget(central_widget)

        main_layout = QtWidgets.QVBoxLayout()
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Entry panel
        entry_group = QtWidgets.QGroupBox("Transaction Entry")
        e_layout = QtWidgets.QVBoxLayout()
        self.entry = EntryPanel()
        e_layout.addWidget(self.entry)
        entry_group.setLayout(e_layout)

        # Actions group
        action_group = QtWidgets.QGroupBox("Actions")
        a_layout = QtWidgets.QHBoxLayout()
        self.add_button = QtWidgets.QPushButton("Add Transaction")
        self.delete_button = QtWidgets.QPushButton("Delete Selected")
        self.update_button = QtWidgets.QPushButton("Update Selected")
        self.undo_button = QtWidgets.QPushButton("Undo Last Action")
        self.undo_button.setStyleSheet("background-color: rgb(255, 200, 100); font-weight: bold;")
        for btn in (self.add_button, self.delete_button, self.update_button, self.undo_button):
            a_layout.addWidget(btn)
        action_group.setLayout(a_layout)

        # Transactions table (select a row to edit/delete)
        table_group = QtWidgets.QGroupBox("Transactions")
        t_layout = QtWidgets.QVBoxLayout()
        self.tx_table = QtWidgets.QTableWidget(0, 4)
        self.tx_table.setHorizontalHeaderLabels(["Date", "Type", "Amount", "Category"])
        self.tx_table.horizontalHeader().setStretchLastSection(True)
        self.tx_table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectionBehavior.SelectRows)
        self.tx_table.setSelectionMode(QtWidgets.QAbstractItemView.SelectionMode.SingleSelection)
        self.tx_table.setEditTriggers(QtWidgets.QAbstractItemView.EditTrigger.NoEditTriggers)
        self.tx_table.verticalHeader().setVisible(False)
        self.tx_table.selectionModel().selectionChanged.connect(self._on_table_selection_changed)
        t_layout.addWidget(self.tx_table)
        table_group.setLayout(t_layout)

        left_widget = QtWidgets.QWidget()
        left_layout = QtWidgets.QVBoxLayout()
        left_layout.setContentsMargins(0, 0, 0, 0)
        left_layout.addWidget(entry_group)
        left_layout.addWidget(action_group)
        left_layout.addWidget(table_group)
        left_widget.setLayout(left_layout)

        # Chart panel
        stats_group = QtWidgets.QGroupBox("Income vs Expense Chart")
        s_layout = QtWidgets.QVBoxLayout()
        self.stats_panel = StatsPanel()
        s_layout.addWidget(self.stats_panel)
        stats_group.setLayout(s_layout)

        splitter = QtWidgets.QSplitter(QtCore.Qt.Orientation.Horizontal)
        splitter.addWidget(left_widget)
        splitter.addWidget(stats_group)
        splitter.setStretchFactor(0, 7)
        splitter.setStretchFactor(1, 3)
        main_layout.addWidget(splitter)

        # Summary and tip
        self.summary_label = QtWidgets.QLabel("Summary: ")
        self.tip_label = QtWidgets.QLabel(f"Tip: {random_tip()}")
        main_layout.addWidget(self.summary_label)
        main_layout.addWidget(self.tip_label)

        central_widget.setLayout(main_layout)

        self.add_button.clicked.connect(self.on_add_clicked)
        self.delete_button.clicked.connect(self.on_delete_clicked)
        self.update_button.clicked.connect(self.on_update_clicked)
        self.undo_button.clicked.connect(self.on_undo_clicked)

        self.refresh()

        # Restore/Set initial window size (remember last state with QSettings)
        try:
            settings = QtCore.QSettings("pbm", APP_NAME)
            geom = settings.value("geometry", None)
            if isinstance(geom, (bytes, bytearray)):
                geom = QtCore.QByteArray(bytes(geom))
            if isinstance(geom, QtCore.QByteArray) and not geom.isEmpty():
                self.restoreGeometry(geom)
            else:
                self.resize(1000, 700)
        except Exception:
            logger.exception("Failed to restore/set window geometry")

    def _open_default_session(self) -> FinanceSession:
        try:
            ensure_data_dir()
        except OSError:
            logger.exception("Failed ensuring data directory")

        store = TransactionStore()
        try:
            return FinanceSession.open(store)
        except StorageError as e:
            # keep the app usable; the next successful save overwrites the unreadable file
            self.show_error("Load failed", str(e))
            return FinanceSession(store=store)

    def _apply_stylesheet(self) -> None:
        """Load and apply a stylesheet if the file exists; otherwise skip quietly."""
        path = Path(STYLESHEET_PATH)
        if path.exists():
            with path.open("r", encoding="utf-8") as f:
                self.setStyleSheet(f.read())
            logger.debug("Applied stylesheet: %s", path)
        else:
            logger.debug("Stylesheet not found at %s; skipping", path)

    def show_error(self, title: str, message: str) -> None:
        """Log and present a warning message box to the user."""
        logger.info("%s: %s", title, message)
        QtWidgets.QMessageBox.warning(self, title, message)

    def show_info(self, title: str, message: str) -> None:
        QtWidgets.QMessageBox.information(self, title, message)

    # --- View refresh ---
    def refresh(self) -> None:
        """Re-render table, summary and chart from the session."""
        transactions = self.session.transactions()
        self._populate_transactions(transactions)
        self._update_summary()
        self.stats_panel.set_transactions(transactions)
        self.undo_button.setEnabled(self.session.can_undo)

    def _populate_transactions(self, transactions) -> None:
        self.tx_table.clearSelection()
        self.tx_table.setRowCount(len(transactions))
        for r_idx, tx in enumerate(transactions):
            self.tx_table.setItem(r_idx, 0, QtWidgets.QTableWidgetItem(tx.date))
            self.tx_table.setItem(r_idx, 1, QtWidgets.QTableWidgetItem(tx.kind.value))
            amount_item = QtWidgets.QTableWidgetItem(f"{tx.amount:.2f}")
            amount_item.setTextAlignment(QtCore.Qt.AlignmentFlag.AlignRight | QtCore.Qt.AlignmentFlag.AlignVCenter)
            if not tx.is_income:
                amount_item.setForeground(QtGui.QBrush(QtGui.QColor(220, 20, 60)))
            self.tx_table.setItem(r_idx, 2, amount_item)
            self.tx_table.setItem(r_idx, 3, QtWidgets.QTableWidgetItem(tx.category))

    def _update_summary(self) -> None:
        s = self.session.summary()
        self.summary_label.setText(
            f"Summary: Income = {s.total_income:.2f} | Expense = {s.total_expense:.2f} | "
            f"Balance = {s.balance:.2f} | Transactions: {s.count}"
        )

    def _get_selected_row_index(self) -> Optional[int]:
        sel = self.tx_table.selectionModel().selectedRows()
        if not sel:
            return None
        return sel[0].row()

    def _on_table_selection_changed(self) -> None:
        """Fill the entry panel from the selected transaction."""
        row_idx = self._get_selected_row_index()
        transactions = self.session.transactions()
        if row_idx is None or not 0 <= row_idx < len(transactions):
            return
        self.entry.set_transaction(transactions[row_idx])

    def _after_mutation(self, message: str) -> None:
        self.refresh()
        if self.session.last_save_ok:
            self.status.showMessage(message)
        else:
            self.status.showMessage("Save failed")
            self.show_error("Save failed", "Error saving transactions; changes are kept until the next save.")

    # --- Actions ---
    def on_add_clicked(self) -> None:
        logger.debug("on_add_clicked")
        try:
            self.session.add_transaction(**self.entry.values())
        except ValidationError as e:
            self.show_error("Invalid transaction", e.message)
            return
        self.entry.clear()
        self._after_mutation("Transaction added successfully!")

    def on_delete_clicked(self) -> None:
        logger.debug("on_delete_clicked")
        row_idx = self._get_selected_row_index()
        try:
            if row_idx is None:
                raise IndexError("no row selected")
            self.session.delete_transaction(row_idx)
        except IndexError:
            self.show_error("Select transaction", "Please select a transaction to delete.")
            return
        self.entry.clear()
        self._after_mutation("Transaction deleted successfully!")

    def on_update_clicked(self) -> None:
        logger.debug("on_update_clicked")
        row_idx = self._get_selected_row_index()
        try:
            if row_idx is None:
                raise IndexError("no row selected")
            self.session.update_transaction(row_idx, **self.entry.values())
        except IndexError:
            self.show_error("Select transaction", "Please select a transaction to update.")
            return
        except ValidationError as e:
            self.show_error("Invalid transaction", e.message)
            return
        self._after_mutation("Transaction updated successfully!")

    def on_undo_clicked(self) -> None:
        logger.debug("on_undo_clicked")
        try:
            self.session.undo()
        except EmptyUndoError as e:
            self.show_info("Undo", str(e))
            return
        self.entry.clear()
        self._after_mutation("Last action undone successfully!")

    def closeEvent(self, event):
        try:
            settings = QtCore.QSettings("pbm", APP_NAME)
            settings.setValue("geometry", self.saveGeometry())
        except Exception:
            logger.exception("Failed to save window geometry")
        super().closeEvent(event)
