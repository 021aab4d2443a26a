from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

import yaml

CONFIG_ENV_VAR = "BOX_PLANNER_CONFIG"

StoreBackend = Literal["file", "memory", "firestore"]


def _load_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_json(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


@dataclass
class FirestoreSettings:
    notes_collection: str = "notes"
    settings_collection: str = "settings"
    settings_document: str = "app"


@dataclass
class PlannerConfig:
    storage_dir: Path = Path("data")
    notes_dir: Optional[Path] = None
    settings_file: Optional[Path] = None
    roster_csv: Optional[Path] = None
    store_backend: StoreBackend = "file"
    firestore: FirestoreSettings = field(default_factory=FirestoreSettings)
    default_year: int = 2024

    def __post_init__(self) -> None:
        self.storage_dir = Path(self.storage_dir)
        self.notes_dir = Path(self.notes_dir) if self.notes_dir else self.storage_dir / "notes"
        self.settings_file = (
            Path(self.settings_file) if self.settings_file else self.storage_dir / "app_settings.json"
        )
        if self.roster_csv is not None:
            self.roster_csv = Path(self.roster_csv)


def load_config(path: str | Path) -> PlannerConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    if path.suffix.lower() in {".yaml", ".yml"}:
        raw = _load_yaml(path)
    elif path.suffix.lower() == ".json":
        raw = _load_json(path)
    else:
        raise ValueError("Unsupported config extension. Use .yaml/.yml or .json")

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    # Relative paths are resolved against the config file's directory
    base = path.parent

    def _path(value) -> Optional[Path]:
        if value is None or value == "":
            return None
        p = Path(str(value))
        return p if p.is_absolute() else base / p

    fs = raw.get("firestore") or {}
    firestore = FirestoreSettings(
        notes_collection=str(fs.get("notes_collection", "notes")),
        settings_collection=str(fs.get("settings_collection", "settings")),
        settings_document=str(fs.get("settings_document", "app")),
    )

    cfg = PlannerConfig(
        storage_dir=_path(raw.get("storage_dir")) or base / "data",
        notes_dir=_path(raw.get("notes_dir")),
        settings_file=_path(raw.get("settings_file")),
        roster_csv=_path(raw.get("roster_csv")),
        store_backend=str(raw.get("store_backend", "file")).lower(),
        firestore=firestore,
        default_year=int(raw.get("default_year", 2024)),
    )
    _validate_config(cfg)
    return cfg


def load_config_from_env(path: str | Path | None = None) -> PlannerConfig:
    """Load the config named by `path` or $BOX_PLANNER_CONFIG, else defaults."""
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if path:
        return load_config(path)
    cfg = PlannerConfig()
    _validate_config(cfg)
    return cfg


def _validate_config(cfg: PlannerConfig) -> None:
    if cfg.store_backend not in ("file", "memory", "firestore"):
        raise ValueError(
            f"store_backend must be one of file, memory, firestore (got {cfg.store_backend!r})"
        )
    if cfg.default_year not in (2024, 2025):
        raise ValueError("default_year must be 2024 or 2025")
    if cfg.store_backend == "firestore":
        fs = cfg.firestore
        for key in ("notes_collection", "settings_collection", "settings_document"):
            if not getattr(fs, key):
                raise ValueError(f"firestore.{key} must not be empty")
