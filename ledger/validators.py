"""Validation helpers shared by the expense entity and its drivers."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from .exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"


def parse_amount(raw: object, field: str) -> Decimal:
    """Convert raw input to a non-negative, finite Decimal without rounding.

    Floats go through their shortest ``str`` form, so ``0.1`` becomes
    ``Decimal("0.1")``. Stored amounts compare equal to ``Decimal(str(raw))``,
    not to the binary float.
    """
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be a numeric value")
    try:
        amount = Decimal(str(raw).strip())
    except (InvalidOperation, TypeError) as exc:  # type: ignore[arg-type]
        raise ValidationError(f"{field} must be a numeric value") from exc

    if not amount.is_finite():
        raise ValidationError(f"{field} must be a finite number")
    if amount < 0:
        raise ValidationError(f"{field} cannot be negative")
    return amount


def validate_required_str(value: object, field: str, max_length: Optional[int] = None) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{field} cannot be empty")
    if max_length is not None and len(trimmed) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return trimmed


def ensure_date(value: object, field: str) -> date:
    """Accept only calendar dates; datetimes and strings are refused."""
    if isinstance(value, datetime) or not isinstance(value, date):
        raise ValidationError(f"{field} must be a calendar date")
    return value


def parse_date(value: object, field: str) -> date:
    """Parse a YYYY-MM-DD string (or pass a date through) into a calendar date."""
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError as exc:
            raise ValidationError(
                f"{field} must be a valid date in YYYY-MM-DD format"
            ) from exc
    return ensure_date(value, field)


def parse_optional_date(value: object, field: str) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return parse_date(value, field)
