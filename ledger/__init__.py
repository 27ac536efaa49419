"""Core business logic package for the expense ledger."""

from .models import Expense, ExpenseKind, describe
from .reports import CategoryTotal, MonthlyTotal, category_report, monthly_report
from .services import ExpenseStore
from .storage import JSONStorage
from .exceptions import DeserializationError, NoDataError, PersistenceError, ValidationError

__all__ = [
    "Expense",
    "ExpenseKind",
    "describe",
    "CategoryTotal",
    "MonthlyTotal",
    "category_report",
    "monthly_report",
    "ExpenseStore",
    "JSONStorage",
    "DeserializationError",
    "NoDataError",
    "PersistenceError",
    "ValidationError",
]
