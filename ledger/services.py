"""Framework-agnostic expense store for the ledger."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, Iterator, List, Optional

from .config import DEFAULT_STORE_NAME
from .exceptions import PersistenceError
from .models import Expense
from .storage import JSONStorage

logger = logging.getLogger(__name__)


class ExpenseStore:
    """Ordered, append-only collection of expenses with bulk persistence."""

    def __init__(self, storage: JSONStorage, resource: str = DEFAULT_STORE_NAME) -> None:
        self._storage = storage
        self._resource = resource
        self._expenses: List[Expense] = []

    # Public API -----------------------------------------------------------
    def add(self, expense: Expense) -> Expense:
        _ensure_expense(expense)
        self._expenses.append(expense)
        return expense

    def add_and_save(self, expense: Expense, resource: Optional[str] = None) -> Expense:
        """Persist the store with ``expense`` appended; keep it only if the write succeeds."""
        _ensure_expense(expense)
        name = resource or self._resource
        candidate = [*self._expenses, expense]
        self._storage.save(name, [record.to_dict() for record in candidate])
        self._expenses = candidate
        logger.debug("Saved %d expenses to %s", len(candidate), name)
        return expense

    def list_all(self) -> List[Expense]:
        return list(self._expenses)

    def filter_by_category(self, name: str) -> List[Expense]:
        canonical = name.strip().casefold()
        return [expense for expense in self._expenses if expense.category.casefold() == canonical]

    def total(self, expenses: Optional[Iterable[Expense]] = None) -> Decimal:
        records = self._expenses if expenses is None else expenses
        return sum((expense.amount for expense in records), start=Decimal("0"))

    def load_all(self, resource: Optional[str] = None, *, strict: bool = False) -> bool:
        """Replace the current contents with the persisted sequence.

        Returns ``True`` when records were read from an existing resource. A
        missing resource empties the store and returns ``False``. Unreadable
        or corrupt content does the same unless ``strict`` is set, in which
        case the error propagates and the current contents are kept.
        """
        name = resource or self._resource
        if not self._storage.exists(name):
            logger.info("No persisted store at %s; starting empty", self._storage.base_path / name)
            self._expenses = []
            return False

        try:
            raw_records = self._storage.load(name)
            loaded = [Expense.from_dict(payload) for payload in raw_records]
        except PersistenceError as exc:
            if strict:
                raise
            logger.warning("Could not load %s (%s); starting fresh", name, exc)
            self._expenses = []
            return False

        self._expenses = loaded
        logger.info("Loaded %d expenses from %s", len(loaded), name)
        return True

    def save_all(self, resource: Optional[str] = None) -> None:
        name = resource or self._resource
        self._storage.save(name, [expense.to_dict() for expense in self._expenses])
        logger.debug("Saved %d expenses to %s", len(self._expenses), name)

    @property
    def resource(self) -> str:
        return self._resource

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(list(self._expenses))


def _ensure_expense(candidate: object) -> None:
    if not isinstance(candidate, Expense):
        raise TypeError(f"Expected an Expense, got {type(candidate).__name__}")
