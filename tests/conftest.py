"""Pytest fixtures shared by the box planner tests."""

import pytest

from box_planner.domain.models import Employee
from box_planner.domain.schema import column_names
from box_planner.io.persistence import FileNoteStore, FileSettingsStore
from box_planner.services.session import PlannerSession

HEADER = ",".join(column_names())


@pytest.fixture
def header():
    return HEADER


@pytest.fixture
def sample_employees():
    """Two employees covering present and absent optional fields."""
    return [
        Employee(
            user_id="user1",
            pr_group_2025="Group A",
            first_name="John",
            last_name="Doe",
            current_position="Developer",
            current_temp_position=None,
            pr_2021=4.0,
            pr_2022=4.1,
            pr_2023=4.2,
            pr_2024=4.3,
            user_9box_2024="1A",
            user_9box_2025="Growth Potential",
            notes="High performer",
            current_label="Senior",
            email="john.doe@example.com",
            manager_id="manager1",
            department="Engineering",
            location="New York",
            hire_date="2020-01-15",
        ),
        Employee(
            user_id="user2",
            pr_group_2025="Group B",
            first_name="Jane",
            last_name="Smith",
            current_position="Manager",
            current_temp_position="Acting Director",
            pr_2022=4.5,
            pr_2023=4.6,
            user_9box_2025="Key Player",
            email="jane.smith@example.com",
            department="Management",
            location="London",
            hire_date="2018-05-20",
        ),
    ]


@pytest.fixture
def session(sample_employees, tmp_path):
    """Session backed by file stores in a temporary directory."""
    s = PlannerSession(
        note_store=FileNoteStore(tmp_path / "notes"),
        settings_store=FileSettingsStore(tmp_path / "app_settings.json"),
    )
    s.load_roster(sample_employees)
    return s
