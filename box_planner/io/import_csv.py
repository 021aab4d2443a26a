"""CSV import utilities to load the employee roster."""

from __future__ import annotations

import csv
import io
import math
import re
from pathlib import Path
from typing import IO, Dict, List, Optional, Union

from box_planner.domain.models import Employee
from box_planner.domain.schema import EMPLOYEE_COLUMNS, ColumnSpec
from box_planner.exceptions import ParseError, SchemaError

CsvSource = Union[bytes, str, IO[bytes], IO[str]]

_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


def _read_text(source: CsvSource) -> str:
    if hasattr(source, "read"):
        source = source.read()
    if isinstance(source, bytes):
        try:
            return source.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParseError(f"Input is not valid UTF-8: {e}")
    if source.startswith("\ufeff"):
        source = source[1:]
    return source


def _parse_decimal(value: str, spec: ColumnSpec, row_num: int) -> float:
    if not _DECIMAL_RE.fullmatch(value):
        raise ParseError(f"Expected a decimal number, got {value!r}", row=row_num, column=spec.column)
    number = float(value)
    if not math.isfinite(number):
        raise ParseError(f"Decimal value out of range: {value!r}", row=row_num, column=spec.column)
    return number


def _decode_row(fields: List[str], positions: Dict[str, int], row_num: int) -> Employee:
    values: Dict[str, Optional[object]] = {}
    for spec in EMPLOYEE_COLUMNS:
        raw = fields[positions[spec.column]]
        if spec.kind == "required_str":
            values[spec.attribute] = raw
        elif raw == "":
            values[spec.attribute] = None
        elif spec.kind == "optional_float":
            values[spec.attribute] = _parse_decimal(raw, spec, row_num)
        else:
            values[spec.attribute] = raw

    if not values["user_id"]:
        raise ParseError("User ID must not be empty", row=row_num, column="User ID")
    return Employee(**values)


def decode_employees(source: CsvSource) -> List[Employee]:
    """
    Decode a roster CSV into Employee records.

    The header must name every roster column (in any order, extra columns
    are ignored). Rows keep their file order and duplicate User IDs are
    passed through untouched.

    Args:
        source: CSV bytes, text, or a readable file object

    Returns:
        Employees in row order

    Raises:
        SchemaError: Header is missing one or more required columns
        ParseError: Malformed quoting, wrong field count or an invalid value
    """
    reader = csv.reader(io.StringIO(_read_text(source), newline=""), strict=True)

    try:
        header = next(reader, [])
    except csv.Error as e:
        raise ParseError(f"Malformed header: {e}", row=0)

    positions: Dict[str, int] = {}
    for idx, name in enumerate(header):
        positions.setdefault(name, idx)

    missing = [spec.column for spec in EMPLOYEE_COLUMNS if spec.column not in positions]
    if missing:
        raise SchemaError(missing)

    employees: List[Employee] = []
    row_num = 0
    while True:
        try:
            fields = next(reader)
        except StopIteration:
            break
        except csv.Error as e:
            raise ParseError(f"Malformed CSV: {e}", row=row_num + 1)

        # Blank lines carry no record
        if not fields:
            continue
        row_num += 1

        if len(fields) != len(header):
            raise ParseError(
                f"Expected {len(header)} fields, found {len(fields)}",
                row=row_num,
            )
        employees.append(_decode_row(fields, positions, row_num))

    return employees


def import_employees_csv(csv_path: str | Path) -> List[Employee]:
    """
    Import employees from a roster CSV file.

    Args:
        csv_path: Path to the roster CSV

    Returns:
        Employees in file order
    """
    csv_path = Path(csv_path)
    employees = decode_employees(csv_path.read_bytes())

    print(f"[INFO] Imported {len(employees)} employees from {csv_path}")
    return employees
