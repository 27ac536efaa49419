"""JSON file persistence for the expense ledger."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .exceptions import DeserializationError, PersistenceError


class JSONStorage:
    """Reads and writes JSON record lists stored as files under ``base_path``."""

    def __init__(self, base_path: Path) -> None:
        self._base_path = Path(base_path)

    def _path(self, resource: str) -> Path:
        return self._base_path / resource

    def exists(self, resource: str) -> bool:
        return self._path(resource).exists()

    def load(self, resource: str) -> List[Dict[str, Any]]:
        path = self._path(resource)
        if not path.exists():
            return []
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Unable to read from {path}") from exc
        except UnicodeDecodeError as exc:
            raise DeserializationError(f"{path} is not UTF-8 text") from exc

        try:
            payload = json.loads(text)
        # JSONDecodeError is a ValueError; nesting too deep overflows the decoder.
        except (ValueError, RecursionError) as exc:
            raise DeserializationError(f"Corrupted JSON data in {path}") from exc

        if not isinstance(payload, list):
            raise DeserializationError(f"Expected a list of records in {path}")
        return payload

    def save(self, resource: str, records: Iterable[Dict[str, Any]]) -> None:
        """Write ``records`` through a sibling temp file, then move it into place."""
        path = self._path(resource)
        staging = path.parent / f"{path.name}.tmp"
        try:
            self._base_path.mkdir(parents=True, exist_ok=True)
            staging.write_text(json.dumps(list(records), indent=2), encoding="utf-8")
            staging.replace(path)
        except OSError as exc:
            raise PersistenceError(f"Unable to write to {path}") from exc

    @property
    def base_path(self) -> Path:
        return self._base_path
