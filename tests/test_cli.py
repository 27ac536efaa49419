"""Tests for the console driver."""

from datetime import date

import pytest

from ledger.models import Expense
from ledger.services import ExpenseStore
from ledger.storage import JSONStorage
from ledger_cli.cli import build_expense, main, run_interactive


def _scripted(answers):
    remaining = list(answers)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


def _run(argv, tmp_path):
    return main(["--data-dir", str(tmp_path), *argv])


def test_build_expense_one_time_and_recurring():
    assert build_expense("Food", "12.50", "2023-01-01") == Expense.one_time("Food", "12.50", date(2023, 1, 1))
    recurring = build_expense("Rent", "900", "2023-01-01", "2023-02-01")
    assert recurring.next_due_date == date(2023, 2, 1)


def test_add_then_list(tmp_path, capsys):
    assert _run(["add", "Food", "100", "2023-01-15"], tmp_path) == 0
    assert _run(["add", "Rent", "900", "2023-02-01", "--next-due", "2023-03-01"], tmp_path) == 0
    capsys.readouterr()

    assert _run(["list"], tmp_path) == 0
    out = capsys.readouterr().out
    assert "Found 2 expenses (total Rs1000.00):" in out
    assert "Category: Food, Amount: Rs100.00, Date: 2023-01-15 | Type: One-Time" in out
    assert "Next Due: 2023-03-01" in out


def test_list_empty_and_unmatched_filter(tmp_path, capsys):
    assert _run(["list"], tmp_path) == 0
    assert "No expenses found." in capsys.readouterr().out

    _run(["add", "Food", "5", "2023-01-01"], tmp_path)
    capsys.readouterr()
    assert _run(["list", "--category", "Transport"], tmp_path) == 0
    assert "No expenses found for Transport" in capsys.readouterr().out


def test_add_rejects_negative_amount(tmp_path, capsys):
    assert _run(["add", "Food", "-5", "2023-01-01"], tmp_path) == 1
    assert "Validation error: amount cannot be negative" in capsys.readouterr().err
    assert not (tmp_path / "expenses.json").exists()


def test_add_rejects_malformed_date(tmp_path, capsys):
    assert _run(["add", "Food", "5", "01/01/2023"], tmp_path) == 1
    assert "Validation error" in capsys.readouterr().err


def test_reports(tmp_path, capsys):
    _run(["add", "Food", "100", "2023-01-15"], tmp_path)
    _run(["add", "food", "50", "2024-01-20"], tmp_path)
    _run(["add", "Transport", "30", "2023-03-02"], tmp_path)
    capsys.readouterr()

    _run(["report", "monthly"], tmp_path)
    out = capsys.readouterr().out
    assert "MONTHLY REPORT" in out
    assert "JANUARY    : Rs150.00" in out
    assert out.index("JANUARY") < out.index("MARCH")

    _run(["report", "category"], tmp_path)
    lines = [line for line in capsys.readouterr().out.splitlines() if " : " in line]
    assert lines == [
        "Food            : Rs100.00",
        "Transport       : Rs30.00",
        "food            : Rs50.00",
    ]


def test_report_without_data(tmp_path, capsys):
    assert _run(["report", "category"], tmp_path) == 0
    assert "No data for report." in capsys.readouterr().out


def test_corrupt_store_starts_fresh(tmp_path, capsys):
    (tmp_path / "expenses.json").write_text("garbage", encoding="utf-8")

    assert _run(["list"], tmp_path) == 0
    assert "No expenses found." in capsys.readouterr().out


class TestInteractive:
    @pytest.fixture
    def store(self, tmp_path):
        return ExpenseStore(JSONStorage(tmp_path))

    def test_add_view_and_save(self, store, tmp_path):
        output = []
        read = _scripted(["1", "Food", "100", "2023-01-15", "n", "2", "6"])

        assert run_interactive(store, read, output.append) == 0

        assert "Expense added successfully!" in output
        assert any("Type: One-Time" in line for line in output)
        assert output[-1] == "Expenses saved. Goodbye!"
        reloaded = ExpenseStore(JSONStorage(tmp_path))
        reloaded.load_all()
        assert len(reloaded) == 1

    def test_recurring_entry_and_filter(self, store):
        output = []
        read = _scripted(["1", "Rent", "900", "2023-01-01", "Y", "2023-02-01", "3", "RENT", "6"])

        run_interactive(store, read, output.append)

        assert any("Next Due: 2023-02-01" in line for line in output)

    def test_invalid_input_is_reported_and_loop_continues(self, store):
        output = []
        read = _scripted(["abc", "9", "1", "Food", "-3", "2023-01-01", "n", "4", "6"])

        assert run_interactive(store, read, output.append) == 0

        assert "Invalid input! Enter a number." in output
        assert "Invalid choice!" in output
        assert "Error: amount cannot be negative" in output
        assert "No data for report." in output
        assert len(store) == 0

    def test_end_of_input_saves(self, store, tmp_path):
        output = []
        read = _scripted(["1", "Food", "5", "2023-01-01", "n"])

        assert run_interactive(store, read, output.append) == 0
        assert (tmp_path / "expenses.json").exists()

    def test_save_failure_is_reported(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = ExpenseStore(JSONStorage(blocker / "nested"))
        store.add(Expense.one_time("Food", 1, date(2023, 1, 1)))
        output = []

        assert run_interactive(store, _scripted(["6"]), output.append) == 1

        assert any(line.startswith("Error: Unable to write") for line in output)
