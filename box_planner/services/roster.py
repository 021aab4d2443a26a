"""Tabular views over the roster and the grid."""

from __future__ import annotations

from typing import Dict, List

import pandas as pd

from box_planner.domain.models import NINE_BOX_GRID, Employee
from box_planner.domain.schema import EMPLOYEE_COLUMNS, column_names
from box_planner.engine.grid import GridAssignmentEngine


def roster_frame(employees: List[Employee]) -> pd.DataFrame:
    """
    Build a DataFrame of the roster with the CSV column names in export order.

    Absent optional values are kept as None/NaN.
    """
    records = [
        {spec.column: getattr(emp, spec.attribute) for spec in EMPLOYEE_COLUMNS}
        for emp in employees
    ]
    return pd.DataFrame(records, columns=column_names())


def grid_summary(engine: GridAssignmentEngine, employees: List[Employee]) -> pd.DataFrame:
    """
    One row per 9-box cell with occupant count and names.

    Cells outside the standard layout are appended when they hold occupants.
    Occupants missing from the roster are shown by id.
    """
    names: Dict[str, str] = {}
    for emp in employees:
        names.setdefault(emp.user_id, emp.full_name)

    rows = []
    known = set()
    for box in NINE_BOX_GRID:
        known.add(box.id)
        occupants = engine.occupants_of(box.id)
        rows.append({
            "box_id": box.id,
            "label": box.label,
            "count": len(occupants),
            "occupants": [names.get(o, o) for o in occupants],
        })

    for cell in engine.cells():
        if cell in known:
            continue
        occupants = engine.occupants_of(cell)
        rows.append({
            "box_id": cell,
            "label": "",
            "count": len(occupants),
            "occupants": [names.get(o, o) for o in occupants],
        })

    return pd.DataFrame(rows, columns=["box_id", "label", "count", "occupants"])


def department_counts(employees: List[Employee]) -> pd.Series:
    """Number of employees per department, absent departments grouped as 'Unassigned'."""
    df = roster_frame(employees)
    if df.empty:
        return pd.Series(dtype="int64", name="count")
    return df["Department"].fillna("Unassigned").value_counts().rename("count")
