"""Aggregate reports over a sequence of expenses.

Both reports group first into an unordered mapping and sort the keys
afterwards. Monthly totals are keyed by month-of-year only, so the same
month in different years shares a bucket. Category totals are keyed by the
exact category text, unlike ``ExpenseStore.filter_by_category`` which
ignores case; keys sort by code point, so upper-case labels come first.
"""

from __future__ import annotations

import calendar
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Iterable, List

from .exceptions import NoDataError
from .models import Expense

__all__ = ["CategoryTotal", "MonthlyTotal", "category_report", "monthly_report"]


@dataclass(frozen=True)
class MonthlyTotal:
    month: int
    total: Decimal

    @property
    def name(self) -> str:
        return calendar.month_name[self.month]

    def to_dict(self) -> Dict[str, Any]:
        return {"month": self.month, "name": self.name, "total": f"{self.total:.2f}"}


@dataclass(frozen=True)
class CategoryTotal:
    category: str
    total: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "total": f"{self.total:.2f}"}


def monthly_report(expenses: Iterable[Expense]) -> List[MonthlyTotal]:
    """Sum amounts per calendar month, ordered January to December."""
    totals: Dict[int, Decimal] = defaultdict(Decimal)
    for expense in expenses:
        totals[expense.date.month] += expense.amount
    if not totals:
        raise NoDataError("No data for report.")
    return [MonthlyTotal(month=month, total=totals[month]) for month in sorted(totals)]


def category_report(expenses: Iterable[Expense]) -> List[CategoryTotal]:
    """Sum amounts per exact category text, ordered lexicographically."""
    totals: Dict[str, Decimal] = defaultdict(Decimal)
    for expense in expenses:
        totals[expense.category] += expense.amount
    if not totals:
        raise NoDataError("No data for report.")
    return [CategoryTotal(category=name, total=totals[name]) for name in sorted(totals)]
