"""Console interface for the expense ledger."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from ledger.config import load_settings
from ledger.exceptions import NoDataError, PersistenceError, ValidationError
from ledger.models import Expense, format_money
from ledger.reports import category_report, monthly_report
from ledger.services import ExpenseStore
from ledger.storage import JSONStorage
from ledger.validators import parse_amount, parse_date

MENU = (
    "\n-------------------------------\n"
    "PERSONAL EXPENSE TRACKER\n"
    "-------------------------------\n"
    "1. Add Expense\n"
    "2. View All Expenses\n"
    "3. Filter by Category\n"
    "4. Monthly Report\n"
    "5. Category Report\n"
    "6. Save & Exit"
)

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _load_store(data_dir: Path, store_name: str) -> ExpenseStore:
    store = ExpenseStore(JSONStorage(data_dir), store_name)
    store.load_all()
    return store


def build_expense(category: str, amount: str, date: str, next_due: Optional[str] = None) -> Expense:
    """Create an expense from raw text input; a next-due date makes it recurring."""
    parsed_amount = parse_amount(amount, "amount")
    parsed_date = parse_date(date, "date")
    if next_due:
        return Expense.recurring(category, parsed_amount, parsed_date, parse_date(next_due, "next_due_date"))
    return Expense.one_time(category, parsed_amount, parsed_date)


def render_expenses(expenses: Sequence[Expense], write: Writer) -> None:
    for expense in expenses:
        write(expense.describe())


def render_monthly(expenses: Sequence[Expense], write: Writer) -> None:
    try:
        lines = monthly_report(expenses)
    except NoDataError:
        write("No data for report.")
        return
    write("\nMONTHLY REPORT")
    for line in lines:
        write(f"{line.name.upper():<10} : {format_money(line.total)}")


def render_category(expenses: Sequence[Expense], write: Writer) -> None:
    try:
        lines = category_report(expenses)
    except NoDataError:
        write("No data for report.")
        return
    write("\nCATEGORY REPORT")
    for line in lines:
        write(f"{line.category:<15} : {format_money(line.total)}")


def handle_add(args: argparse.Namespace, store: ExpenseStore) -> None:
    expense = store.add_and_save(build_expense(args.category, args.amount, args.date, args.next_due))
    print("Expense added successfully!\n" + expense.describe())


def handle_list(args: argparse.Namespace, store: ExpenseStore) -> None:
    if args.category is not None:
        expenses = store.filter_by_category(args.category)
        if not expenses:
            print(f"No expenses found for {args.category}")
            return
    else:
        expenses = store.list_all()
        if not expenses:
            print("No expenses found.")
            return
    print(f"Found {len(expenses)} expenses (total {format_money(store.total(expenses))}):")
    render_expenses(expenses, print)


def handle_report(args: argparse.Namespace, store: ExpenseStore) -> None:
    if args.kind == "monthly":
        render_monthly(store.list_all(), print)
    else:
        render_category(store.list_all(), print)


def _prompt_expense(read: Reader) -> Expense:
    category = read("Enter category: ")
    amount = read("Enter amount: ")
    date = read("Enter date (yyyy-mm-dd): ")
    recurring = read("Is it recurring? (y/n): ")
    next_due = None
    if recurring.strip().lower() == "y":
        next_due = read("Enter next due date (yyyy-mm-dd): ")
        if not next_due.strip():
            raise ValidationError("next_due_date cannot be empty")
    return build_expense(category, amount, date, next_due)


def run_interactive(store: ExpenseStore, read: Reader = input, write: Writer = print) -> int:
    """Run the numbered menu until the user saves and exits or input ends."""
    while True:
        write(MENU)
        try:
            raw_choice = read("Enter choice: ")
        except EOFError:
            break
        try:
            choice = int(raw_choice.strip())
        except ValueError:
            write("Invalid input! Enter a number.")
            continue

        try:
            if choice == 1:
                store.add(_prompt_expense(read))
                write("Expense added successfully!")
            elif choice == 2:
                expenses = store.list_all()
                if expenses:
                    render_expenses(expenses, write)
                else:
                    write("No expenses found.")
            elif choice == 3:
                name = read("Enter category to filter: ")
                expenses = store.filter_by_category(name)
                if expenses:
                    render_expenses(expenses, write)
                else:
                    write(f"No expenses found for {name}")
            elif choice == 4:
                render_monthly(store.list_all(), write)
            elif choice == 5:
                render_category(store.list_all(), write)
            elif choice == 6:
                store.save_all()
                write("Expenses saved. Goodbye!")
                return 0
            else:
                write("Invalid choice!")
        except EOFError:
            break
        except (ValidationError, PersistenceError) as exc:
            write(f"Error: {exc}")

    # Input ended without an explicit exit; keep what was entered.
    try:
        store.save_all()
    except PersistenceError as exc:
        write(f"Error: {exc}")
        return 1
    write("Expenses saved. Goodbye!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Personal Expense Ledger")
    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Directory holding the expense store (default: $EXPENSE_LEDGER_DATA_DIR or ./data)",
    )
    parser.add_argument(
        "--store",
        help="Store file name inside the data directory (default: expenses.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable informational logging")

    subparsers = parser.add_subparsers(dest="command")

    add_parser = subparsers.add_parser("add", help="Add a new expense")
    add_parser.add_argument("category")
    add_parser.add_argument("amount")
    add_parser.add_argument("date", help="Effective date, YYYY-MM-DD")
    add_parser.add_argument(
        "--next-due", dest="next_due", help="Next due date; marks the expense as recurring"
    )

    list_parser = subparsers.add_parser("list", help="List expenses")
    list_parser.add_argument("--category", help="Only show this category (case-insensitive)")

    report_parser = subparsers.add_parser("report", help="Show an aggregate report")
    report_parser.add_argument("kind", choices=("monthly", "category"))

    subparsers.add_parser("interactive", help="Start the interactive menu (default)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings()
    store = _load_store(args.data_dir or settings.data_dir, args.store or settings.store_name)

    try:
        if args.command == "add":
            handle_add(args, store)
        elif args.command == "list":
            handle_list(args, store)
        elif args.command == "report":
            handle_report(args, store)
        else:
            return run_interactive(store)
    except ValidationError as exc:
        print(f"Validation error: {exc}", file=sys.stderr)
        return 1
    except PersistenceError as exc:
        print(f"Storage error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
