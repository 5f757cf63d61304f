'''
    File Name: errors.py
    Version: 1.0.0
    Date: 12/10/2026
    Author: Pablo Bartolomé Molina
    Description: Error kinds surfaced by the ledger core and its store.
'''
from enum import Enum


class ValidationReason(str, Enum):
    """Why a transaction input was rejected (used for user messaging)."""
    EMPTY_FIELD = "empty_field"
    MALFORMED_DATE = "malformed_date"
    INVALID_AMOUNT = "invalid_amount"
    NON_POSITIVE_AMOUNT = "non_positive_amount"
    INVALID_TYPE = "invalid_type"


class ValidationError(ValueError):
    """Raised when transaction input is rejected. Nothing was mutated."""

    def __init__(self, reason: ValidationReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class EmptyUndoError(LookupError):
    """Raised by undo when there is nothing on the stack."""

    def __init__(self, message: str = "Nothing to undo."):
        super().__init__(message)


class StorageError(OSError):
    """Raised when the transactions file exists but cannot be read."""
