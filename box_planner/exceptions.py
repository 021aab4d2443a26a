"""Exceptions raised by the box planner."""

from __future__ import annotations

from typing import List, Optional


class BoxPlannerError(Exception):
    """Base exception for all box planner errors."""

    pass


class CodecError(BoxPlannerError):
    """Raised when CSV roster data cannot be decoded."""

    def __init__(self, message: str, row: Optional[int] = None, column: Optional[str] = None):
        self.row = row
        self.column = column
        location = []
        if row is not None:
            location.append(f"row {row}")
        if column is not None:
            location.append(f"column '{column}'")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class SchemaError(CodecError):
    """Raised when the header row is missing required columns."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            f"Header is missing required columns: {', '.join(self.missing)}",
            row=0,
            column=self.missing[0] if self.missing else None,
        )


class ParseError(CodecError):
    """Raised when a data row is malformed or holds an invalid value."""

    pass


class StoreError(BoxPlannerError):
    """Raised when a note or settings blob cannot be read or written.

    Never raised for a blob that simply does not exist.
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)
