"""Tests for the grid assignment engine."""

import pytest

from box_planner.engine.grid import GridAssignmentEngine


def test_assign_creates_cell():
    grid = GridAssignmentEngine()

    grid.assign("u1", "1A")

    assert grid.occupants_of("1A") == ["u1"]
    assert grid.cell_of("u1") == "1A"
    assert grid.assignments() == {"1A": ["u1"]}


def test_move_prunes_empty_cell():
    """Test moving the only occupant out of a cell removes the cell."""
    grid = GridAssignmentEngine()

    grid.assign("e", "1A")
    grid.assign("e", "2B")

    assert grid.cell_of("e") == "2B"
    assert grid.occupants_of("2B") == ["e"]
    assert "1A" not in grid.assignments()
    assert grid.occupants_of("1A") == []


def test_move_keeps_other_occupants():
    grid = GridAssignmentEngine()
    grid.assign("u1", "1A")
    grid.assign("u2", "1A")

    grid.assign("u1", "3C")

    assert grid.assignments() == {"1A": ["u2"], "3C": ["u1"]}


def test_repeat_assign_is_idempotent_on_cell():
    """Test assigning twice leaves a single entry in the same cell."""
    grid = GridAssignmentEngine()

    grid.assign("e", "2B")
    grid.assign("e", "2B")

    assert grid.cell_of("e") == "2B"
    assert grid.occupants_of("2B") == ["e"]


def test_repeat_assign_then_new_occupant_order():
    grid = GridAssignmentEngine()

    grid.assign("u1", "1A")
    grid.assign("u1", "1A")
    grid.assign("u2", "1A")

    assert grid.occupants_of("1A") == ["u1", "u2"]


def test_reassign_same_cell_moves_to_end():
    """Test re-assigning an occupant to its own cell moves it to the end."""
    grid = GridAssignmentEngine()
    grid.assign("u1", "1A")
    grid.assign("u2", "1A")

    grid.assign("u1", "1A")

    assert grid.occupants_of("1A") == ["u2", "u1"]


def test_unassign():
    grid = GridAssignmentEngine()
    grid.assign("u1", "1A")
    grid.assign("u2", "1A")

    assert grid.unassign("u1") == "1A"
    assert grid.cell_of("u1") is None
    assert grid.occupants_of("1A") == ["u2"]

    assert grid.unassign("u2") == "1A"
    assert grid.assignments() == {}


def test_unassign_unknown_is_noop():
    grid = GridAssignmentEngine()
    grid.assign("u1", "1A")

    assert grid.unassign("nobody") is None
    assert grid.assignments() == {"1A": ["u1"]}


def test_unknown_cell_is_empty():
    grid = GridAssignmentEngine()
    assert grid.occupants_of("9Z") == []
    assert grid.cell_of("u1") is None


def test_non_standard_cells_allowed():
    grid = GridAssignmentEngine()
    grid.assign("u1", "bench")
    assert grid.cells() == ["bench"]


def test_snapshots_are_copies():
    grid = GridAssignmentEngine()
    grid.assign("u1", "1A")

    grid.occupants_of("1A").append("x")
    grid.assignments()["1A"].append("y")

    assert grid.occupants_of("1A") == ["u1"]


def test_single_occupancy_over_many_moves():
    """Test every occupant sits in exactly one cell after a sequence of moves."""
    grid = GridAssignmentEngine()
    moves = [
        ("a", "1A"), ("b", "1A"), ("c", "2B"), ("a", "2B"),
        ("b", "3C"), ("c", "1A"), ("a", "2B"), ("d", "3C"),
    ]
    for occupant, cell in moves:
        grid.assign(occupant, cell)
    grid.unassign("c")

    mapping = grid.assignments()
    seen = [o for occupants in mapping.values() for o in occupants]
    assert sorted(seen) == ["a", "b", "d"]
    assert all(mapping.values())
    assert mapping == {"2B": ["a"], "3C": ["b", "d"]}
    assert len(grid) == 3
    assert "a" in grid and "c" not in grid


def test_initial_mapping():
    grid = GridAssignmentEngine({"1A": ["u1", "u2"], "2B": [], "3C": ["u3"]})

    assert grid.assignments() == {"1A": ["u1", "u2"], "3C": ["u3"]}
    assert grid.cell_of("u3") == "3C"


def test_initial_mapping_rejects_duplicates():
    with pytest.raises(ValueError):
        GridAssignmentEngine({"1A": ["u1"], "2B": ["u1"]})


def test_clear():
    grid = GridAssignmentEngine({"1A": ["u1"]})
    grid.clear()
    assert grid.assignments() == {}
    assert len(grid) == 0
