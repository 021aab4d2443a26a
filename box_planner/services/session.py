"""Planner session - roster, grid, selection and settings held together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from box_planner.config import PlannerConfig
from box_planner.domain.models import NINE_BOX_IDS, AppSettings, Employee
from box_planner.engine.grid import GridAssignmentEngine
from box_planner.exceptions import StoreError
from box_planner.io.import_csv import import_employees_csv
from box_planner.io.persistence import (
    FileNoteStore,
    FileSettingsStore,
    MemoryNoteStore,
    MemorySettingsStore,
    NoteStore,
    SettingsStore,
)


@dataclass
class PlannerSession:
    """
    Explicit context for one planning session.

    Grid placement follows the select-then-click flow: select an employee,
    then click a box to move them there. Settings changes are saved
    immediately; a StoreError from the settings store propagates to the
    caller with the in-memory change already applied.
    """

    note_store: NoteStore = field(default_factory=MemoryNoteStore)
    settings_store: SettingsStore = field(default_factory=MemorySettingsStore)
    settings: AppSettings = field(default_factory=AppSettings)
    employees: List[Employee] = field(default_factory=list)
    grid: GridAssignmentEngine = field(default_factory=GridAssignmentEngine)
    selected_employee_id: Optional[str] = None

    # --- Roster ---
    def load_roster(self, employees: List[Employee]) -> None:
        """Replace the roster. Clears the grid and the selection."""
        self.employees = list(employees)
        self.grid.clear()
        self.selected_employee_id = None

    def employee(self, user_id: str) -> Employee:
        for emp in self.employees:
            if emp.user_id == user_id:
                return emp
        raise KeyError(f"Employee {user_id} not found")

    def has_employee(self, user_id: str) -> bool:
        return any(emp.user_id == user_id for emp in self.employees)

    # --- Grid ---
    def select_employee(self, user_id: str) -> None:
        if not self.has_employee(user_id):
            raise KeyError(f"Employee {user_id} not found")
        self.selected_employee_id = user_id

    def click_box(self, box_id: str) -> bool:
        """Place the selected employee in box_id. Returns False if nobody is selected."""
        if self.selected_employee_id is None:
            return False
        self.grid.assign(self.selected_employee_id, box_id)
        self.selected_employee_id = None
        return True

    def assign(self, user_id: str, box_id: str) -> None:
        if not self.has_employee(user_id):
            raise KeyError(f"Employee {user_id} not found")
        self.grid.assign(user_id, box_id)

    def place_from_labels(self, year: int = 2024) -> List[Tuple[str, str]]:
        """
        Place employees whose 9-box label for `year` is a standard box id.

        Returns the (user_id, box_id) pairs that were placed.
        """
        placed = []
        for emp in self.employees:
            label = emp.box_label(year)
            if label is None:
                continue
            box_id = label.strip().upper()
            if box_id in NINE_BOX_IDS:
                self.grid.assign(emp.user_id, box_id)
                placed.append((emp.user_id, box_id))
        return placed

    # --- Settings (write-through) ---
    def _save_settings(self) -> None:
        self.settings_store.put(self.settings)

    def update_settings(self, changes: dict) -> AppSettings:
        """
        Apply several settings changes at once and save them in one write.

        Department colors in `changes` are merged into the current ones. The
        whole update is checked before anything is applied, so an invalid
        field leaves the current settings untouched.
        """
        colors = changes.get("department_colors") or {}
        if not isinstance(colors, dict):
            raise ValueError("department_colors must be a mapping")
        merged = {
            **self.settings.to_dict(),
            **changes,
            "department_colors": {**self.settings.department_colors, **colors},
        }
        candidate = AppSettings.from_dict(merged)
        self.settings_store.put(candidate)
        self.settings = candidate
        return candidate

    def set_view_scale(self, scale: float) -> None:
        if scale <= 0:
            raise ValueError("view_scale must be positive")
        self.settings.view_scale = float(scale)
        self._save_settings()

    def set_theme(self, theme: str) -> None:
        self.settings.theme_preference = theme
        self._save_settings()

    def set_department_color(self, department: str, color: str) -> None:
        self.settings.department_colors[department] = color
        self._save_settings()

    def set_auto_save(self, enabled: bool) -> None:
        self.settings.auto_save_enabled = bool(enabled)
        self._save_settings()

    # --- Notes ---
    def save_note(self, user_id: str, text: str) -> None:
        self.note_store.put(user_id, text)

    def load_note(self, user_id: str) -> Optional[str]:
        return self.note_store.get(user_id)


def build_stores(cfg: PlannerConfig) -> Tuple[NoteStore, SettingsStore]:
    """Create the note and settings stores selected by the config."""
    if cfg.store_backend == "memory":
        return MemoryNoteStore(), MemorySettingsStore()
    if cfg.store_backend == "firestore":
        from box_planner.domain.db import get_firestore
        from box_planner.domain.repositories import FirestoreNoteStore, FirestoreSettingsStore

        client = get_firestore()
        return (
            FirestoreNoteStore(client, cfg.firestore.notes_collection),
            FirestoreSettingsStore(
                client, cfg.firestore.settings_collection, cfg.firestore.settings_document
            ),
        )
    return FileNoteStore(cfg.notes_dir), FileSettingsStore(cfg.settings_file)


def open_session(cfg: PlannerConfig) -> PlannerSession:
    """
    Start a session from config.

    Unreadable settings fall back to defaults with a warning. The roster CSV,
    when configured and present, is imported; decode errors propagate.
    """
    note_store, settings_store = build_stores(cfg)

    try:
        settings = settings_store.get()
    except StoreError as e:
        print(f"[WARN] Failed to load settings: {e}. Using defaults.")
        settings = AppSettings()

    session = PlannerSession(
        note_store=note_store,
        settings_store=settings_store,
        settings=settings,
    )

    if cfg.roster_csv is not None:
        if cfg.roster_csv.exists():
            session.load_roster(import_employees_csv(cfg.roster_csv))
        else:
            print(f"[WARN] Roster CSV not found: {cfg.roster_csv}")

    return session
