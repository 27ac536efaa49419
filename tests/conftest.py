from datetime import date

import pytest

from ledger.models import Expense
from ledger.services import ExpenseStore
from ledger.storage import JSONStorage


@pytest.fixture
def storage(tmp_path):
    return JSONStorage(tmp_path)


@pytest.fixture
def store(storage):
    return ExpenseStore(storage)


@pytest.fixture
def sample_expenses():
    return [
        Expense.one_time("Food", 100, date(2023, 1, 15)),
        Expense.recurring("Rent", "1200.50", date(2023, 2, 1), date(2023, 3, 1)),
        Expense.one_time("food", 50, date(2024, 1, 20)),
        Expense.one_time("Transport", "30", date(2023, 12, 5)),
    ]
