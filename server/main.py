"""HTTP API over a planner session.

Run with: uvicorn server.main:create_app --factory
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from box_planner.config import load_config_from_env
from box_planner.domain.models import NINE_BOX_GRID, Employee
from box_planner.exceptions import CodecError, SchemaError, StoreError
from box_planner.io.export_csv import encode_employees
from box_planner.io.import_csv import decode_employees
from box_planner.services.session import PlannerSession, open_session

ALLOWED_ORIGINS = [
    "http://localhost:8081",
    "*",
]


def _employee_json(e: Employee, session: PlannerSession) -> dict:
    return {
        "employeeId": e.user_id,
        "firstName": e.first_name,
        "lastName": e.last_name,
        "position": e.current_position,
        "department": e.department,
        "box": session.grid.cell_of(e.user_id),
        "record": e.to_dict(),
    }


def _grid_json(session: PlannerSession) -> dict:
    return {
        "assignments": session.grid.assignments(),
        "selected": session.selected_employee_id,
    }


def create_app(session: Optional[PlannerSession] = None) -> FastAPI:
    """Build the API around a planner session (opened from config when not given)."""
    if session is None:
        session = open_session(load_config_from_env())

    app = FastAPI(title="Box Planner API", redirect_slashes=False)
    app.state.session = session

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    def health(): return {"ok": True}

    @app.get("/boxes")
    def list_boxes():
        return [{
            "boxId": box.id,
            "label": box.label,
            "description": box.description,
            "row": box.row,
            "column": box.column,
            "occupants": session.grid.occupants_of(box.id),
        } for box in NINE_BOX_GRID]

    @app.get("/employees")
    def list_employees():
        return [_employee_json(e, session) for e in session.employees]

    @app.post("/employees/import")
    async def import_employees(request: Request):
        """Replace the roster with the posted CSV body. Clears the grid."""
        body = await request.body()
        try:
            employees = decode_employees(body)
        except SchemaError as e:
            raise HTTPException(status_code=400, detail={"error": str(e), "missing": e.missing})
        except CodecError as e:
            raise HTTPException(status_code=400, detail={"error": str(e), "row": e.row, "column": e.column})
        session.load_roster(employees)
        print(f"[INFO] Imported {len(employees)} employees via API")
        return {"imported": len(employees)}

    @app.get("/employees/export")
    def export_employees():
        return Response(content=encode_employees(session.employees), media_type="text/csv")

    @app.get("/grid")
    def get_grid():
        return _grid_json(session)

    @app.post("/grid/assign")
    def assign(payload: dict):
        """
        Move an employee to a box.
        Expected payload: {"employeeId": "u1", "boxId": "2B"}
        """
        employee_id = payload.get("employeeId")
        box_id = payload.get("boxId")
        if not employee_id or not box_id:
            raise HTTPException(status_code=400, detail="Missing required fields: employeeId, boxId")
        try:
            session.assign(str(employee_id), str(box_id))
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found")
        return _grid_json(session)

    @app.delete("/grid/{employee_id}")
    def unassign(employee_id: str):
        previous = session.grid.unassign(employee_id)
        return {"employeeId": employee_id, "removedFrom": previous, **_grid_json(session)}

    @app.post("/select/{employee_id}")
    def select(employee_id: str):
        try:
            session.select_employee(employee_id)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found")
        return {"selected": employee_id}

    @app.post("/boxes/{box_id}/click")
    def click_box(box_id: str):
        moved = session.selected_employee_id
        assigned = session.click_box(box_id)
        return {"assigned": assigned, "employeeId": moved if assigned else None, **_grid_json(session)}

    @app.get("/notes/{employee_id}")
    def get_note(employee_id: str):
        try:
            text = session.load_note(employee_id)
        except StoreError as e:
            raise HTTPException(status_code=500, detail=f"Note error: {e}")
        if text is None:
            raise HTTPException(status_code=404, detail=f"No note for {employee_id}")
        return {"employeeId": employee_id, "notes": text}

    @app.put("/notes/{employee_id}")
    def put_note(employee_id: str, payload: dict):
        text = payload.get("notes")
        if not isinstance(text, str):
            raise HTTPException(status_code=400, detail="Missing 'notes' string in body")
        try:
            session.save_note(employee_id, text)
        except StoreError as e:
            raise HTTPException(status_code=500, detail=f"Note error: {e}")
        return {"employeeId": employee_id, "notes": text}

    @app.get("/settings")
    def get_settings():
        return session.settings.to_dict()

    @app.put("/settings")
    def put_settings(payload: dict):
        """Partial update; the whole payload is saved at once or not at all."""
        known = {"theme_preference", "view_scale", "auto_save_enabled", "department_colors"}
        try:
            session.update_settings({k: v for k, v in payload.items() if k in known})
        except (TypeError, ValueError) as e:
            raise HTTPException(status_code=400, detail=f"Invalid settings: {e}")
        except StoreError as e:
            raise HTTPException(status_code=500, detail=f"Settings error: {e}")
        return session.settings.to_dict()

    return app
