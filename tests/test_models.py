"""Tests for the domain models."""

import pytest

from box_planner.domain.models import NINE_BOX_GRID, NINE_BOX_IDS, AppSettings, Employee


def test_nine_box_layout():
    assert NINE_BOX_IDS == ["1A", "1B", "1C", "2A", "2B", "2C", "3A", "3B", "3C"]
    box = NINE_BOX_GRID[5]
    assert box.id == "2C"
    assert box.label == "Med Perf / Low Pot"
    assert (box.row, box.column) == (1, 2)


def test_employee_helpers(sample_employees):
    emp = sample_employees[0]

    assert emp.full_name == "John Doe"
    assert emp.rating(2023) == 4.2
    assert emp.box_label(2024) == "1A"
    assert sample_employees[1].rating(2021) is None

    with pytest.raises(ValueError):
        emp.rating(2025)
    with pytest.raises(ValueError):
        emp.box_label(2021)


def test_employee_dict_round_trip(sample_employees):
    for emp in sample_employees:
        assert Employee.from_dict(emp.to_dict()) == emp


def test_employee_from_dict_defaults():
    emp = Employee.from_dict({"user_id": "u1", "pr_2024": "3.5"})

    assert emp.first_name == ""
    assert emp.pr_2024 == 3.5
    assert emp.email is None


def test_settings_dict_round_trip():
    settings = AppSettings(theme_preference="dark", department_colors={"HR": "#000"}, view_scale=0.75)
    assert AppSettings.from_dict(settings.to_dict()) == settings


@pytest.mark.parametrize("data", [
    {"auto_save_enabled": "false"},
    {"auto_save_enabled": 0},
    {"department_colors": ["Sales", "#fff"]},
])
def test_settings_from_dict_rejects_wrong_types(data):
    with pytest.raises(ValueError):
        AppSettings.from_dict(data)
