"""Roster, grid and settings models for the 9-box planner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .schema import EMPLOYEE_COLUMNS


@dataclass
class Employee:
    """Employee record as it appears in the roster CSV.

    Optional fields are None when absent; an empty string is never used
    to mean "absent".
    """

    user_id: str
    pr_group_2025: str
    first_name: str
    last_name: str
    current_position: str

    current_temp_position: Optional[str] = None

    # Yearly performance ratings
    pr_2021: Optional[float] = None
    pr_2022: Optional[float] = None
    pr_2023: Optional[float] = None
    pr_2024: Optional[float] = None

    # Free-text 9-box labels, usually a box id such as "2B"
    user_9box_2024: Optional[str] = None
    user_9box_2025: Optional[str] = None

    notes: Optional[str] = None
    current_label: Optional[str] = None
    email: Optional[str] = None
    manager_id: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    hire_date: Optional[str] = None  # kept as-is, never parsed

    def __repr__(self) -> str:
        return f"<Employee(id='{self.user_id}', name='{self.full_name}', position='{self.current_position}')>"

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def rating(self, year: int) -> Optional[float]:
        """Performance rating for the given year (2021-2024)."""
        attr = f"pr_{year}"
        if not hasattr(self, attr):
            raise ValueError(f"No performance rating recorded for year {year}")
        return getattr(self, attr)

    def box_label(self, year: int) -> Optional[str]:
        """9-box label for the given year (2024 or 2025)."""
        attr = f"user_9box_{year}"
        if not hasattr(self, attr):
            raise ValueError(f"No 9-box label recorded for year {year}")
        return getattr(self, attr)

    def to_dict(self) -> dict:
        """Convert to a dictionary keyed by attribute name."""
        return {spec.attribute: getattr(self, spec.attribute) for spec in EMPLOYEE_COLUMNS}

    @classmethod
    def from_dict(cls, data: dict) -> Employee:
        """Create Employee from an attribute-keyed dictionary."""
        values = {}
        for spec in EMPLOYEE_COLUMNS:
            raw = data.get(spec.attribute)
            if spec.kind == "required_str":
                values[spec.attribute] = "" if raw is None else str(raw)
            elif spec.kind == "optional_float":
                values[spec.attribute] = None if raw is None else float(raw)
            else:
                values[spec.attribute] = None if raw is None else str(raw)
        return cls(**values)


@dataclass(frozen=True)
class GridBox:
    """One cell of the 9-box matrix."""

    id: str
    label: str
    description: str
    row: int
    column: int


_PERF = ["High", "Med", "Low"]
_POT = ["High", "Med", "Low"]


def _build_nine_box() -> List[GridBox]:
    boxes = []
    for r, perf in enumerate(_PERF):
        for c, pot in enumerate(_POT):
            box_id = f"{r + 1}{'ABC'[c]}"
            boxes.append(GridBox(
                id=box_id,
                label=f"{perf} Perf / {pot} Pot",
                description=f"{perf} performance, {pot.lower()} potential",
                row=r,
                column=c,
            ))
    return boxes


NINE_BOX_GRID: List[GridBox] = _build_nine_box()
NINE_BOX_IDS: List[str] = [box.id for box in NINE_BOX_GRID]


@dataclass
class AppSettings:
    """User preferences, saved on every change."""

    theme_preference: str = "system"
    department_colors: Dict[str, str] = field(default_factory=dict)
    auto_save_enabled: bool = False
    view_scale: Optional[float] = 1.0

    def __post_init__(self) -> None:
        if self.view_scale is not None and self.view_scale <= 0:
            raise ValueError("view_scale must be positive")

    @property
    def effective_view_scale(self) -> float:
        return self.view_scale if self.view_scale is not None else 1.0

    def to_dict(self) -> dict:
        return {
            "theme_preference": self.theme_preference,
            "department_colors": dict(self.department_colors),
            "auto_save_enabled": self.auto_save_enabled,
            "view_scale": self.view_scale,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AppSettings:
        """Create AppSettings from a stored document, defaulting missing keys."""
        defaults = cls()
        colors = data.get("department_colors") or {}
        if not isinstance(colors, dict):
            raise ValueError("department_colors must be a mapping")
        auto_save = data.get("auto_save_enabled", defaults.auto_save_enabled)
        if not isinstance(auto_save, bool):
            raise ValueError(f"auto_save_enabled must be true or false, got {auto_save!r}")
        view_scale = data.get("view_scale", defaults.view_scale)
        return cls(
            theme_preference=str(data.get("theme_preference", defaults.theme_preference)),
            department_colors={str(k): str(v) for k, v in colors.items()},
            auto_save_enabled=auto_save,
            view_scale=None if view_scale is None else float(view_scale),
        )
