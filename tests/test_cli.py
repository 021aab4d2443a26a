"""Tests for the command-line interface."""

import pytest

from box_planner.cli import main
from box_planner.io.export_csv import export_employees_csv
from box_planner.io.import_csv import import_employees_csv


@pytest.fixture
def roster(tmp_path, sample_employees):
    path = tmp_path / "roster.csv"
    export_employees_csv(sample_employees, path)
    return path


@pytest.fixture
def config(tmp_path):
    path = tmp_path / "planner.yaml"
    path.write_text("storage_dir: store\n", encoding="utf-8")
    return path


def test_import_csv_show(roster, capsys):
    assert main(["import-csv", str(roster), "--show"]) == 0

    out = capsys.readouterr().out
    assert "[OK] Imported 2 employees" in out
    assert "Engineering" in out


def test_import_csv_error(tmp_path, capsys):
    bad = tmp_path / "bad.csv"
    bad.write_text("User ID\nu1\n", encoding="utf-8")

    assert main(["import-csv", str(bad)]) == 1
    assert "[ERROR] Import failed" in capsys.readouterr().out


def test_export_csv(roster, tmp_path, sample_employees):
    dest = tmp_path / "copy.csv"

    assert main(["export-csv", str(roster), str(dest)]) == 0
    assert import_employees_csv(dest) == sample_employees


def test_grid(roster, capsys):
    assert main(["grid", str(roster), "--year", "2024"]) == 0

    out = capsys.readouterr().out
    assert "John Doe" in out
    assert "[OK] Placed 1 of 2 employees from 2024 labels" in out


def test_note_set_and_get(config, tmp_path, capsys):
    assert main(["--config", str(config), "note", "get", "user1"]) == 0
    assert "No note stored" in capsys.readouterr().out

    assert main(["--config", str(config), "note", "set", "user1", "Mentor new hires"]) == 0
    assert (tmp_path / "store" / "notes" / "user1.json").exists()

    capsys.readouterr()
    assert main(["--config", str(config), "note", "get", "user1"]) == 0
    assert capsys.readouterr().out.strip() == "Mentor new hires"


def test_settings_set_and_show(config, tmp_path, capsys):
    argv = [
        "--config", str(config), "settings", "set",
        "--theme", "dark", "--scale", "1.5", "--auto-save",
        "--department-color", "Engineering=#FF0000",
    ]
    assert main(argv) == 0
    assert (tmp_path / "store" / "app_settings.json").exists()

    capsys.readouterr()
    assert main(["--config", str(config), "settings", "show"]) == 0
    out = capsys.readouterr().out
    assert "theme_preference: dark" in out
    assert "view_scale: 1.5" in out
    assert "auto_save_enabled: True" in out
    assert "Engineering: #FF0000" in out


def test_settings_invalid_scale(config, capsys):
    assert main(["--config", str(config), "settings", "set", "--scale", "0"]) == 1
    assert "[ERROR]" in capsys.readouterr().out
