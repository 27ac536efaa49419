"""Data models for the expense ledger domain."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, cast

from .exceptions import DeserializationError, ValidationError
from .validators import ensure_date, parse_amount, parse_date, validate_required_str

__all__ = ["CURRENCY_SYMBOL", "Expense", "ExpenseKind", "describe", "format_money"]

CURRENCY_SYMBOL = "Rs"


def format_money(amount: Decimal) -> str:
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


class ExpenseKind(str, Enum):
    ONE_TIME = "one_time"
    RECURRING = "recurring"


@dataclass(frozen=True)
class Expense:
    """A single recorded spend.

    The shared payload (category, amount, date) is common to both kinds;
    ``next_due_date`` is set only for recurring expenses.
    """

    category: str
    amount: Decimal
    date: date
    kind: ExpenseKind = ExpenseKind.ONE_TIME
    next_due_date: Optional[date] = None

    def __post_init__(self) -> None:
        # Frozen dataclass: normalised values are written through object.__setattr__.
        object.__setattr__(self, "category", validate_required_str(self.category, "category"))
        object.__setattr__(self, "amount", parse_amount(self.amount, "amount"))
        object.__setattr__(self, "date", ensure_date(self.date, "date"))
        try:
            kind = ExpenseKind(self.kind)
        except ValueError as exc:
            raise ValidationError(f"Unknown expense kind: {self.kind!r}") from exc
        object.__setattr__(self, "kind", kind)

        if kind is ExpenseKind.RECURRING:
            if self.next_due_date is None:
                raise ValidationError("next_due_date is required for recurring expenses")
            ensure_date(self.next_due_date, "next_due_date")
        elif self.next_due_date is not None:
            raise ValidationError("next_due_date is only allowed for recurring expenses")

    @classmethod
    def one_time(cls, category: str, amount: object, date: date) -> "Expense":
        return cls(category=category, amount=amount, date=date)  # type: ignore[arg-type]

    @classmethod
    def recurring(
        cls, category: str, amount: object, date: date, next_due_date: date
    ) -> "Expense":
        return cls(
            category=category,
            amount=amount,  # type: ignore[arg-type]
            date=date,
            kind=ExpenseKind.RECURRING,
            next_due_date=next_due_date,
        )

    @property
    def is_recurring(self) -> bool:
        return self.kind is ExpenseKind.RECURRING

    def describe(self) -> str:
        return describe(self)

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the expense to JSON-friendly natives."""
        return {
            "kind": self.kind.value,
            # Exact decimal text; rounding is a display concern.
            "amount": str(self.amount),
            "category": self.category,
            "date": self.date.isoformat(),
            "next_due_date": self.next_due_date.isoformat() if self.next_due_date else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Expense":
        """Hydrate an Expense from JSON-native data."""
        try:
            next_due = data.get("next_due_date")
            return cls(
                category=data["category"],
                amount=data["amount"],
                date=parse_date(data["date"], "date"),
                kind=ExpenseKind(data.get("kind", ExpenseKind.ONE_TIME.value)),
                next_due_date=parse_date(next_due, "next_due_date") if next_due is not None else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise DeserializationError(f"Invalid expense record: {data!r}") from exc


def describe(expense: Expense) -> str:
    """Return the human-readable summary line for an expense."""
    base = (
        f"Category: {expense.category}, Amount: {format_money(expense.amount)}, "
        f"Date: {expense.date.isoformat()}"
    )
    if expense.kind is ExpenseKind.RECURRING:
        next_due = cast(date, expense.next_due_date)
        return f"{base} | Next Due: {next_due.isoformat()}"
    return f"{base} | Type: One-Time"
