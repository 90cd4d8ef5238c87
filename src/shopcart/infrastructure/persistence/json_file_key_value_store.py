"""JSON-file-backed implementation of KeyValueStore.

All keys live in one JSON object on disk, the way a browser keeps
localStorage entries side by side. Writes go to a temporary file that
then replaces the original, so a single blob is never half written.

A file whose content is not a JSON object reads as empty. The first
write over such a file moves it aside to ``<name>.corrupt`` before
starting a fresh one, so its other keys can still be recovered by hand.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from shopcart.domain.exceptions import StorageError
from shopcart.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(KeyValueStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    @property
    def backup_path(self) -> Path:
        return self._file_path.with_name(self._file_path.name + ".corrupt")

    # --- KeyValueStore interface ----------------------------------------------

    def get(self, key: str) -> str | None:
        try:
            records = self._read()
        except FileNotFoundError:
            return None
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self._file_path, exc)
            return None
        value = records.get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, blob: str) -> None:
        records = self._load_for_update()
        records[key] = blob
        self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _read(self) -> dict[str, object]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
        return raw

    def _load_for_update(self) -> dict[str, object]:
        try:
            return self._read()
        except FileNotFoundError:
            return {}
        except ValueError as exc:
            self._move_aside(exc)
            return {}
        except OSError as exc:
            raise StorageError(f"Could not read {self._file_path}: {exc}") from exc

    def _move_aside(self, reason: Exception) -> None:
        try:
            os.replace(self._file_path, self.backup_path)
        except OSError as exc:
            raise StorageError(
                f"Could not move corrupt store {self._file_path} aside: {exc}"
            ) from exc
        logger.warning(
            "Store %s was corrupt (%s); moved to %s", self._file_path, reason, self.backup_path
        )

    def _persist_raw(self, records: dict[str, object]) -> None:
        tmp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            tmp_path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            os.replace(tmp_path, self._file_path)
        except OSError as exc:
            raise StorageError(f"Could not write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
