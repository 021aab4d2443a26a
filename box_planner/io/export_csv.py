"""CSV export utilities to write the employee roster."""

from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable, List, Optional

from box_planner.domain.models import Employee
from box_planner.domain.schema import EMPLOYEE_COLUMNS, column_names


def _format_cell(value: Optional[object], kind: str) -> str:
    if value is None:
        return ""
    if kind == "optional_float":
        # repr gives the shortest text that parses back to the same float
        return repr(float(value))
    return str(value)


def _format_row(fields: List[str]) -> str:
    # The writer only quotes characters found in its line terminator, so
    # "\r\n" makes it quote a lone "\r" as well as "\n"
    buf = io.StringIO(newline="")
    csv.writer(buf, lineterminator="\r\n", quoting=csv.QUOTE_MINIMAL).writerow(fields)
    return buf.getvalue()[:-2] + "\n"


def encode_employees(employees: Iterable[Employee]) -> bytes:
    """
    Encode employees as roster CSV.

    The header always lists every column in the fixed export order.
    Absent optional values become empty cells.

    Args:
        employees: Records to write, in output order

    Returns:
        UTF-8 encoded CSV with "\\n" row terminators
    """
    rows = [column_names()]
    for emp in employees:
        rows.append([
            _format_cell(getattr(emp, spec.attribute), spec.kind)
            for spec in EMPLOYEE_COLUMNS
        ])
    return "".join(_format_row(row) for row in rows).encode("utf-8")


def export_employees_csv(employees: List[Employee], csv_path: str | Path) -> int:
    """
    Export employees to a roster CSV file.

    Args:
        employees: Records to export
        csv_path: Path to output CSV

    Returns:
        Number of employees exported
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    csv_path.write_bytes(encode_employees(employees))

    print(f"[INFO] Exported {len(employees)} employees to {csv_path}")
    return len(employees)
