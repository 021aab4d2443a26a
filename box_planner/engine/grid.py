"""Grid assignment engine - keeps every occupant in at most one 9-box cell."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence


class GridAssignmentEngine:
    """
    In-memory mapping from cell id to an ordered list of occupant ids.

    Invariants:
    - an occupant id appears in at most one cell;
    - a cell with no occupants is dropped from the mapping.

    Cell ids are not restricted to the standard 3x3 layout. The engine does
    no locking; callers serialize assign/unassign.
    """

    def __init__(self, assignments: Optional[Mapping[str, Sequence[str]]] = None):
        self._cells: Dict[str, List[str]] = {}
        self._index: Dict[str, str] = {}
        for cell, occupants in (assignments or {}).items():
            for occupant_id in occupants:
                if occupant_id in self._index:
                    raise ValueError(
                        f"Occupant {occupant_id} listed in both {self._index[occupant_id]} and {cell}"
                    )
                self._cells.setdefault(cell, []).append(occupant_id)
                self._index[occupant_id] = cell

    def __repr__(self) -> str:
        return f"<GridAssignmentEngine(cells={len(self._cells)}, occupants={len(self._index)})>"

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, occupant_id: object) -> bool:
        return occupant_id in self._index

    def assign(self, occupant_id: str, target_cell: str) -> None:
        """
        Move an occupant to the end of target_cell.

        The occupant is removed from its current cell first, so assigning
        it again to the cell it already occupies moves it to the end of
        that cell's list.
        """
        self.unassign(occupant_id)
        self._cells.setdefault(target_cell, []).append(occupant_id)
        self._index[occupant_id] = target_cell

    def unassign(self, occupant_id: str) -> Optional[str]:
        """Remove an occupant from its cell. Returns the cell it left, if any."""
        cell = self._index.pop(occupant_id, None)
        if cell is None:
            return None
        occupants = self._cells[cell]
        occupants.remove(occupant_id)
        if not occupants:
            del self._cells[cell]
        return cell

    def occupants_of(self, cell: str) -> List[str]:
        return list(self._cells.get(cell, ()))

    def cell_of(self, occupant_id: str) -> Optional[str]:
        return self._index.get(occupant_id)

    def cells(self) -> List[str]:
        """Cells currently holding at least one occupant."""
        return list(self._cells)

    def assignments(self) -> Dict[str, List[str]]:
        """Snapshot copy of the full mapping."""
        return {cell: list(occupants) for cell, occupants in self._cells.items()}

    def clear(self) -> None:
        self._cells.clear()
        self._index.clear()
