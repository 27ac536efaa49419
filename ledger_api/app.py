"""Flask REST API exposing the expense ledger."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ledger.config import load_settings
from ledger.exceptions import NoDataError, PersistenceError, ValidationError
from ledger.models import Expense
from ledger.reports import category_report, monthly_report
from ledger.services import ExpenseStore
from ledger.storage import JSONStorage
from ledger.validators import parse_amount, parse_date, parse_optional_date


def create_app(data_dir: Optional[Path] = None, store_name: Optional[str] = None) -> Flask:
    app = Flask(__name__)

    env_name = os.getenv("EXPENSE_LEDGER_ENV", "prod").lower()
    if env_name in {"dev", "development"}:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("EXPENSE_LEDGER_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)

    settings = load_settings()
    store = ExpenseStore(
        JSONStorage(Path(data_dir or settings.data_dir)),
        store_name or settings.store_name,
    )
    if not store.load_all():
        app.logger.info("Expense store %s is empty", store.resource)

    def _success(payload: Any, status: int = 200):
        return jsonify(payload), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        return jsonify({"error": message, "details": str(exc)}), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Validation error")

    @app.errorhandler(NoDataError)
    def handle_no_data(exc: NoDataError):
        return _handle_error(exc, 404, "No data for report")

    @app.errorhandler(PersistenceError)
    def handle_persistence_error(exc: PersistenceError):
        return _handle_error(exc, 500, "Persistence error")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    @app.get("/expenses")
    def list_expenses():
        category = request.args.get("category")
        expenses = store.filter_by_category(category) if category else store.list_all()
        return _success({
            "items": [expense.to_dict() for expense in expenses],
            "total": f"{store.total(expenses):.2f}",
        })

    @app.post("/expenses")
    def create_expense():
        payload = _json_body()
        amount = parse_amount(payload.get("amount"), "amount")
        date = parse_date(payload.get("date"), "date")
        next_due = parse_optional_date(payload.get("next_due_date"), "next_due_date")
        if next_due is not None:
            expense = Expense.recurring(payload.get("category"), amount, date, next_due)
        else:
            expense = Expense.one_time(payload.get("category"), amount, date)
        store.add_and_save(expense)
        return _success(expense.to_dict(), 201)

    @app.get("/reports/monthly")
    def get_monthly_report():
        lines = monthly_report(store.list_all())
        return _success({"items": [line.to_dict() for line in lines]})

    @app.get("/reports/category")
    def get_category_report():
        lines = category_report(store.list_all())
        return _success({"items": [line.to_dict() for line in lines]})

    return app
