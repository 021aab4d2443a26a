"""Note and settings stores.

Notes are kept one JSON document per employee ({"notes": "..."}); settings
are a single JSON document. Absence is never an error: a missing note reads
as None and missing settings read as defaults. Anything else that goes
wrong surfaces as StoreError.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import quote

from box_planner.domain.models import AppSettings
from box_planner.exceptions import StoreError


class NoteStore(ABC):
    """Key-value store for free-text employee notes."""

    @abstractmethod
    def put(self, employee_id: str, text: str) -> None:
        """Store a note, overwriting any previous one.

        Raises:
            StoreError: The note could not be written
        """
        pass

    @abstractmethod
    def get(self, employee_id: str) -> Optional[str]:
        """Return the stored note, or None if there is none.

        Raises:
            StoreError: A note exists but could not be read
        """
        pass


class SettingsStore(ABC):
    """Store for the single AppSettings record."""

    @abstractmethod
    def put(self, settings: AppSettings) -> None:
        pass

    @abstractmethod
    def get(self) -> AppSettings:
        """Return stored settings, or defaults when nothing was stored."""
        pass


class MemoryNoteStore(NoteStore):
    """In-memory note store (no persistence)."""

    def __init__(self):
        self._notes: Dict[str, str] = {}

    def put(self, employee_id: str, text: str) -> None:
        self._notes[employee_id] = text

    def get(self, employee_id: str) -> Optional[str]:
        return self._notes.get(employee_id)


class MemorySettingsStore(SettingsStore):
    """In-memory settings store (no persistence)."""

    def __init__(self):
        self._data: Optional[dict] = None

    def put(self, settings: AppSettings) -> None:
        self._data = settings.to_dict()

    def get(self) -> AppSettings:
        if self._data is None:
            return AppSettings()
        return AppSettings.from_dict(self._data)


def _write_json(path: Path, data: dict, key: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp.replace(path)
    except (OSError, TypeError, ValueError) as e:
        raise StoreError(f"Failed to write {path}: {e}", key=key) from e


def _read_json(path: Path, key: str) -> Optional[dict]:
    if not path.exists():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError) as e:
        raise StoreError(f"Failed to read {path}: {e}", key=key) from e
    if not isinstance(data, dict):
        raise StoreError(f"Expected a JSON object in {path}", key=key)
    return data


class FileNoteStore(NoteStore):
    """Stores each note as <notes_dir>/<employee_id>.json."""

    def __init__(self, notes_dir: str | Path):
        self.notes_dir = Path(notes_dir)

    def path_for(self, employee_id: str) -> Path:
        # Percent-quote so any id maps to a single safe file name
        return self.notes_dir / f"{quote(employee_id, safe='')}.json"

    def put(self, employee_id: str, text: str) -> None:
        _write_json(self.path_for(employee_id), {"notes": text}, key=employee_id)

    def get(self, employee_id: str) -> Optional[str]:
        path = self.path_for(employee_id)
        data = _read_json(path, key=employee_id)
        if data is None:
            return None
        notes = data.get("notes")
        if not isinstance(notes, str):
            raise StoreError(f"Note document {path} has no 'notes' string", key=employee_id)
        return notes


class FileSettingsStore(SettingsStore):
    """Stores settings as a single JSON file."""

    def __init__(self, settings_file: str | Path):
        self.settings_file = Path(settings_file)

    def put(self, settings: AppSettings) -> None:
        _write_json(self.settings_file, settings.to_dict(), key=self.settings_file.name)

    def get(self) -> AppSettings:
        data = _read_json(self.settings_file, key=self.settings_file.name)
        if data is None:
            return AppSettings()
        try:
            return AppSettings.from_dict(data)
        except (TypeError, ValueError, AttributeError) as e:
            raise StoreError(
                f"Invalid settings in {self.settings_file}: {e}", key=self.settings_file.name
            ) from e
