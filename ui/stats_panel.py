'''
    File Name: stats_panel.py
    Version: 2.0.0
    Date: 15/10/2026
    Author: Pablo Bartolomé Molina
'''
import logging
from typing import Iterable

from PyQt6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QLabel, QSizePolicy, QComboBox

from matplotlib.figure import Figure
from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
import pandas as pd

from models.transaction import Transaction

logger = logging.getLogger(__name__)

INCOME_COLOR = "#228b22"
EXPENSE_COLOR = "#dc143c"


class StatsPanel(QWidget):
    """Chart panel showing income vs expense, or totals by category.

    The panel only renders what it is given via `set_transactions()`; it
    never reads or changes the ledger.
    """

    CHART_TYPES = {"Income vs Expense": "balance", "By Category": "category"}

    def __init__(self, parent=None):
        super().__init__(parent)
        self._transactions = []
        self._current_chart_type = "balance"

        self._figure = Figure(figsize=(4, 4), dpi=100)
        self._canvas = FigureCanvas(self._figure)
        self._canvas.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self._ax = self._figure.add_subplot(111)

        self.setup_ui()
        self.plot_data()

    def setup_ui(self) -> None:
        main_layout = QVBoxLayout()

        controls_layout = QHBoxLayout()
        controls_layout.addWidget(QLabel("Chart:"))
        self._chart_combo = QComboBox()
        self._chart_combo.addItems(list(self.CHART_TYPES))
        self._chart_combo.currentTextChanged.connect(self._on_chart_type_changed)
        controls_layout.addWidget(self._chart_combo)
        controls_layout.addStretch()
        main_layout.addLayout(controls_layout)

        main_layout.addWidget(self._canvas)
        self.setLayout(main_layout)

    def _on_chart_type_changed(self, chart_type: str) -> None:
        self._current_chart_type = self.CHART_TYPES.get(chart_type, "balance")
        self.plot_data()

    def set_transactions(self, transactions: Iterable[Transaction]) -> None:
        self._transactions = [tx.to_dict() for tx in transactions]
        self.plot_data()

    def plot_data(self) -> None:
        """Plot based on current chart type and available data."""
        self._ax.clear()

        if not self._transactions:
            self._ax.text(0.5, 0.5, "No data to display", ha="center", va="center",
                          fontsize=12, color="#666666")
            self._ax.set_xticks([])
            self._ax.set_yticks([])
            self._canvas.draw()
            return

        df = pd.DataFrame(self._transactions)
        try:
            if self._current_chart_type == "category":
                self._plot_by_category(self._ax, df)
            else:
                self._plot_income_expense(self._ax, df)
            self._canvas.draw()
        except Exception:
            logger.exception("Failed to plot data for chart type: %s", self._current_chart_type)
            self._ax.clear()
            self._ax.text(0.5, 0.5, "Error rendering chart", ha="center", va="center")
            self._canvas.draw()

    def _plot_income_expense(self, ax, df) -> None:
        totals = df.groupby("type")["amount"].sum()
        income = float(totals.get("Income", 0.0))
        expense = float(totals.get("Expense", 0.0))
        balance = income - expense

        bars = ax.barh(["Expense", "Income"], [expense, income], color=[EXPENSE_COLOR, INCOME_COLOR],
                       edgecolor="black")
        for bar, value in zip(bars, [expense, income]):
            ax.text(bar.get_width(), bar.get_y() + bar.get_height() / 2, f" {value:.2f}",
                    va="center", fontsize=10)
        ax.set_title(f"Balance: {balance:.2f}", color=INCOME_COLOR if balance >= 0 else EXPENSE_COLOR,
                     fontweight="bold")
        ax.grid(axis="x", alpha=0.3)

    def _plot_by_category(self, ax, df) -> None:
        grouped = df.groupby("category")["amount"].sum().sort_values(ascending=False)
        labels = [name or "Uncategorized" for name in grouped.index]

        colors = ["#4c72b0", "#dd8452", "#55a868", "#c44e52", "#8172b3"]
        bar_colors = [colors[i % len(colors)] for i in range(len(grouped))]

        ax.bar(range(len(grouped)), grouped.values, color=bar_colors)
        ax.set_xticks(range(len(grouped)))
        ax.set_xticklabels(labels, rotation=45, ha="right")
        ax.set_ylabel("Amount")
        ax.set_title("Totals by Category")
        ax.grid(axis="y", alpha=0.3)
