"""Ordered CSV column table for the employee roster."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal

ColumnKind = Literal["required_str", "optional_str", "optional_float"]


@dataclass(frozen=True)
class ColumnSpec:
    """Maps one Employee attribute to its CSV header name."""

    attribute: str
    column: str
    kind: ColumnKind

    @property
    def optional(self) -> bool:
        return self.kind != "required_str"


# Export order is fixed; downstream consumers rely on it.
EMPLOYEE_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("user_id", "User ID", "required_str"),
    ColumnSpec("pr_group_2025", "PR Group 2025", "required_str"),
    ColumnSpec("first_name", "First Name", "required_str"),
    ColumnSpec("last_name", "Last Name", "required_str"),
    ColumnSpec("current_position", "Current Position", "required_str"),
    ColumnSpec("current_temp_position", "Current Temp Position", "optional_str"),
    ColumnSpec("pr_2021", "PR2021", "optional_float"),
    ColumnSpec("pr_2022", "PR2022", "optional_float"),
    ColumnSpec("pr_2023", "PR2023", "optional_float"),
    ColumnSpec("pr_2024", "PR2024", "optional_float"),
    ColumnSpec("user_9box_2024", "User 9Box 2024", "optional_str"),
    ColumnSpec("user_9box_2025", "User 9Box 2025", "optional_str"),
    ColumnSpec("notes", "Notes", "optional_str"),
    ColumnSpec("current_label", "Current Label", "optional_str"),
    ColumnSpec("email", "Email", "optional_str"),
    ColumnSpec("manager_id", "Manager ID", "optional_str"),
    ColumnSpec("department", "Department", "optional_str"),
    ColumnSpec("location", "Location", "optional_str"),
    ColumnSpec("hire_date", "Hire Date", "optional_str"),
]


def column_names() -> List[str]:
    """Header names in export order."""
    return [spec.column for spec in EMPLOYEE_COLUMNS]
