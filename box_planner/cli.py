"""Command-line interface for the 9-box planner."""

from __future__ import annotations

import argparse
import sys

import pandas as pd

from box_planner.config import load_config_from_env
from box_planner.exceptions import BoxPlannerError
from box_planner.io.export_csv import export_employees_csv
from box_planner.io.import_csv import import_employees_csv
from box_planner.services.roster import department_counts, grid_summary, roster_frame
from box_planner.services.session import PlannerSession, build_stores, open_session


def _session_for(args: argparse.Namespace) -> PlannerSession:
    cfg = load_config_from_env(args.config)
    # The roster is given on the command line where a command needs one
    cfg.roster_csv = None
    return open_session(cfg)


def _cmd_import_csv(args: argparse.Namespace) -> int:
    """Decode a roster CSV and report what it holds."""
    try:
        employees = import_employees_csv(args.path)
    except (BoxPlannerError, OSError) as e:
        print(f"[ERROR] Import failed: {e}")
        return 1

    if args.show:
        with pd.option_context("display.max_columns", None, "display.width", 200):
            print(roster_frame(employees).to_string(index=False))
        print()
        print(department_counts(employees).to_string())

    print(f"[OK] Imported {len(employees)} employees")
    return 0


def _cmd_export_csv(args: argparse.Namespace) -> int:
    """Re-export a roster CSV in canonical column order."""
    try:
        employees = import_employees_csv(args.src)
        count = export_employees_csv(employees, args.dest)
    except (BoxPlannerError, OSError) as e:
        print(f"[ERROR] Export failed: {e}")
        return 1

    print(f"[OK] Exported {count} employees to {args.dest}")
    return 0


def _cmd_grid(args: argparse.Namespace) -> int:
    """Place a roster into the grid from its 9-box labels and print the grid."""
    try:
        cfg = load_config_from_env(args.config)
        employees = import_employees_csv(args.path)
    except (BoxPlannerError, OSError, ValueError) as e:
        print(f"[ERROR] Grid failed: {e}")
        return 1

    session = PlannerSession()
    session.load_roster(employees)
    year = args.year or cfg.default_year
    placed = session.place_from_labels(year)

    summary = grid_summary(session.grid, session.employees)
    summary["occupants"] = summary["occupants"].map(", ".join)
    print(summary.to_string(index=False))
    print(f"[OK] Placed {len(placed)} of {len(employees)} employees from {year} labels")
    return 0


def _cmd_note(args: argparse.Namespace) -> int:
    """Read or write an employee note."""
    try:
        note_store, _ = build_stores(load_config_from_env(args.config))
        if args.note_command == "set":
            note_store.put(args.employee_id, args.text)
            print(f"[OK] Saved note for {args.employee_id}")
            return 0

        text = note_store.get(args.employee_id)
    except (BoxPlannerError, OSError, ValueError) as e:
        print(f"[ERROR] Note {args.note_command} failed: {e}")
        return 1

    if text is None:
        print(f"[INFO] No note stored for {args.employee_id}")
    else:
        print(text)
    return 0


def _parse_color(value: str) -> tuple[str, str]:
    department, sep, color = value.partition("=")
    if not sep or not department:
        raise argparse.ArgumentTypeError("expected NAME=COLOR")
    return department, color


def _cmd_settings(args: argparse.Namespace) -> int:
    """Show or change user settings."""
    try:
        session = _session_for(args)
        if args.settings_command == "set":
            if args.theme is not None:
                session.set_theme(args.theme)
            if args.scale is not None:
                session.set_view_scale(args.scale)
            if args.auto_save is not None:
                session.set_auto_save(args.auto_save)
            for department, color in args.department_color or []:
                session.set_department_color(department, color)
            print("[OK] Settings saved")
    except (BoxPlannerError, OSError, ValueError) as e:
        print(f"[ERROR] Settings {args.settings_command} failed: {e}")
        return 1

    s = session.settings
    print(f"theme_preference: {s.theme_preference}")
    print(f"auto_save_enabled: {s.auto_save_enabled}")
    print(f"view_scale: {s.view_scale}")
    print("department_colors:")
    for department, color in sorted(s.department_colors.items()):
        print(f"  {department}: {color}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="box-planner",
        description="9-box talent grid planner",
    )
    parser.add_argument("--config", help="Path to config YAML/JSON (default: $BOX_PLANNER_CONFIG)")

    sub = parser.add_subparsers(dest="command", required=True)

    # import-csv command
    imp = sub.add_parser("import-csv", help="Decode and check a roster CSV")
    imp.add_argument("path", help="Path to roster CSV")
    imp.add_argument("--show", action="store_true", help="Print the decoded roster")
    imp.set_defaults(func=_cmd_import_csv)

    # export-csv command
    exp = sub.add_parser("export-csv", help="Rewrite a roster CSV in canonical form")
    exp.add_argument("src", help="Path to source roster CSV")
    exp.add_argument("dest", help="Path to output CSV")
    exp.set_defaults(func=_cmd_export_csv)

    # grid command
    grid = sub.add_parser("grid", help="Show the 9-box grid built from roster labels")
    grid.add_argument("path", help="Path to roster CSV")
    grid.add_argument("--year", type=int, choices=[2024, 2025], help="Label year (default from config)")
    grid.set_defaults(func=_cmd_grid)

    # note commands
    note = sub.add_parser("note", help="Read or write employee notes")
    note_sub = note.add_subparsers(dest="note_command", required=True)
    note_get = note_sub.add_parser("get", help="Print a note")
    note_get.add_argument("employee_id")
    note_set = note_sub.add_parser("set", help="Save a note")
    note_set.add_argument("employee_id")
    note_set.add_argument("text")
    note.set_defaults(func=_cmd_note)

    # settings commands
    settings = sub.add_parser("settings", help="Show or change settings")
    settings_sub = settings.add_subparsers(dest="settings_command", required=True)
    settings_sub.add_parser("show", help="Print current settings")
    settings_set = settings_sub.add_parser("set", help="Change settings")
    settings_set.add_argument("--theme", help="Theme preference (e.g. system, light, dark)")
    settings_set.add_argument("--scale", type=float, help="View scale (positive)")
    settings_set.add_argument("--auto-save", dest="auto_save", action="store_true", default=None)
    settings_set.add_argument("--no-auto-save", dest="auto_save", action="store_false", default=None)
    settings_set.add_argument(
        "--department-color",
        action="append",
        type=_parse_color,
        metavar="NAME=COLOR",
        help="Set a department color (repeatable)",
    )
    settings.set_defaults(func=_cmd_settings)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
