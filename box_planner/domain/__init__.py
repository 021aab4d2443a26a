"""Domain models and the roster column schema."""

from .models import NINE_BOX_GRID, NINE_BOX_IDS, AppSettings, Employee, GridBox
from .schema import EMPLOYEE_COLUMNS, ColumnSpec, column_names

__all__ = [
    "Employee",
    "GridBox",
    "AppSettings",
    "NINE_BOX_GRID",
    "NINE_BOX_IDS",
    "ColumnSpec",
    "EMPLOYEE_COLUMNS",
    "column_names",
]
