"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DATA_DIR = "data"
DEFAULT_STORE_NAME = "expenses.json"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    store_name: str


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Return settings from ``EXPENSE_LEDGER_*`` variables, falling back to defaults."""
    env = os.environ if environ is None else environ
    data_dir = env.get("EXPENSE_LEDGER_DATA_DIR") or DEFAULT_DATA_DIR
    store_name = env.get("EXPENSE_LEDGER_STORE") or DEFAULT_STORE_NAME
    return Settings(data_dir=Path(data_dir), store_name=store_name)
