'''
    File Name: config.py
    Version: 2.0.0
    Date: 12/10/2026
    Author: Pablo Bartolomé Molina
'''

from pathlib import Path
import logging

# Project paths & files
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
TRANSACTIONS_FILENAME = "transactions.csv"
TRANSACTIONS_PATH = DATA_DIR / TRANSACTIONS_FILENAME   # Path object

# App metadata
APP_NAME = "Parichko"
APP_TITLE = "Parichko - Personal Finance Tracker"
APP_VERSION = "2.0.0"

# UI / formatting
DATE_FORMAT = "%Y-%m-%d"
STYLESHEET_PATH = BASE_DIR / "resources" / "styles.qss"

# Defaults
TRANSACTION_TYPES = ["Income", "Expense"]
DEFAULT_CATEGORIES = [
    "Salary", "Food", "Transport", "Entertainment", "Other"
]

TIPS = [
    "Track every expense to understand your habits :)",
    "Set a monthly budget and stick to it :)",
    "Save at least 10% of your income :)",
    "Use categories to analyze spending patterns :)",
    "Review your finances weekly :)",
    "Click on a transaction row to edit it easily :)",
    "Use the Undo button if you make a mistake :)",
]

# Logging (simple default; modules can call logging.basicConfig(**config))
LOGGING_CONFIG = {
    "level": logging.INFO,
    "format": "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
}

# Helpers
def ensure_data_dir():
    """
    Ensure the data directory exists. The transactions file itself is
    created by the store on first save (see `storage.csv_store.TransactionStore`).
    """
    DATA_DIR.mkdir(parents=True, exist_ok=True)
