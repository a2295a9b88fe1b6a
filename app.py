from __future__ import annotations

import json
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import FastAPI, Form, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

import db
from pond.errors import PondFormatError
from pond.loader import parse_pond
from pond.pathfinding import candidate_queue, find_path
from pond.persistence import pond_from_json, pond_to_json, result_to_dict, result_to_json
from pond.render_ascii import render_pond_ascii

from scenarios.simple_scenario import build_pond


app = FastAPI(title="Frog Path")
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def _load_pond(pond_id: str):
    s = db.get_pond_json(pond_id)
    if s is None:
        raise HTTPException(status_code=404, detail="No such pond")
    return pond_from_json(s)


def _save_pond(pond_id: str, pond) -> None:
    db.save_pond_json(pond_id, pond_to_json(pond))


def _new_pond_id(pond) -> str:
    pond_id = str(uuid.uuid4())
    db.create_pond(pond_id, pond_to_json(pond))
    return pond_id


def _solve(pond_id: str, pond) -> dict[str, Any]:
    """Run the search on the stored pond; eaten flies stay eaten."""
    result = find_path(pond)
    _save_pond(pond_id, pond)
    db.record_run(pond_id, result_to_json(result))
    return result_to_dict(result)


def _apply_command(pond_id: str, pond, command: str) -> list[str]:
    cmd = command.strip()
    if not cmd:
        return ["(no command)"]

    parts = cmd.split()
    head = parts[0].lower()

    if head == "solve":
        out = _solve(pond_id, pond)
        return [out["trace"]]

    if head == "best":
        if len(parts) != 2:
            return ["Usage: best <cell_id>"]
        try:
            cell_id = int(parts[1])
        except ValueError:
            return ["cell_id must be an integer"]
        cell = pond.get_cell(cell_id)
        if cell is None:
            return [f"ERROR: no such cell {cell_id}"]
        queue = candidate_queue(cell)
        if queue.is_empty():
            return [f"No move from {cell_id}"]
        return [f"Candidates from {cell_id}: {queue}"]

    if head == "save":
        if len(parts) != 2:
            return ["Usage: save <name>"]
        name = parts[1].strip()
        db.save_snapshot(pond_id, name, pond_to_json(pond))
        return [f"Saved snapshot '{name}'"]

    if head == "load":
        if len(parts) != 2:
            return ["Usage: load <name>"]
        name = parts[1].strip()
        s = db.load_snapshot(pond_id, name)
        if s is None:
            return [f"ERROR: no such snapshot '{name}'"]
        _save_pond(pond_id, pond_from_json(s))
        return [f"Loaded snapshot '{name}'"]

    if head == "list-saves":
        snaps = db.list_snapshots(pond_id)
        if not snaps:
            return ["(no snapshots)"]
        return ["Snapshots: " + ", ".join(snaps)]

    return [f"Unknown command: {cmd}"]


def _ui_state(pond_id: str) -> dict[str, Any]:
    pond = _load_pond(pond_id)
    runs = [json.loads(s) for s in db.list_runs(pond_id, limit=10)]
    last_path = runs[0]["path"] if runs else None

    return {
        "pond_id": pond_id,
        "cells": len(pond),
        "flies_left": pond.total_flies(),
        "map_text": render_pond_ascii(pond, path=last_path),
        "runs": [r["trace"] for r in runs],
        "events_tail": "\n".join(runs[0]["events"][-60:]) if runs else "",
    }


@app.get("/", response_class=HTMLResponse)
def index(request: Request, pond_id: Optional[str] = None):
    # No pond yet: create the default one and redirect to it.
    if pond_id is None:
        new_id = _new_pond_id(build_pond())
        return RedirectResponse(url=f"/?pond_id={new_id}", status_code=302)

    state = _ui_state(pond_id)
    return templates.TemplateResponse(
        request,
        "index.html",
        {**state, "ponds": db.list_pond_ids()},
    )


@app.get("/ponds")
def list_ponds():
    return {"ponds": db.list_pond_ids()}


@app.post("/ponds")
def create_pond(payload: Optional[Dict[str, Any]] = None):
    text = (payload or {}).get("text")
    if text is not None:
        try:
            pond = parse_pond(str(text))
        except PondFormatError as e:
            raise HTTPException(status_code=400, detail=str(e))
    else:
        pond = build_pond()
    return {"pond_id": _new_pond_id(pond)}


@app.get("/ponds/{pond_id}/state")
def get_state(pond_id: str):
    return _ui_state(pond_id)


@app.post("/ponds/{pond_id}/solve")
def solve(pond_id: str):
    pond = _load_pond(pond_id)
    return _solve(pond_id, pond)


@app.get("/ponds/{pond_id}/runs")
def list_runs(pond_id: str):
    _load_pond(pond_id)
    return {"runs": [json.loads(s) for s in db.list_runs(pond_id)]}


@app.post("/ponds/{pond_id}/command")
def post_command(pond_id: str, payload: Dict[str, Any]):
    command = str(payload.get("command", ""))
    pond = _load_pond(pond_id)

    out = _apply_command(pond_id, pond, command)
    return {"events": out, "state": _ui_state(pond_id)}


@app.post("/ui/command", response_class=HTMLResponse)
def ui_command(
    request: Request,
    pond_id: str = Form(...),
    command: str = Form(""),
):
    pond = _load_pond(pond_id)
    events = _apply_command(pond_id, pond, command)

    state = _ui_state(pond_id)
    return templates.TemplateResponse(
        request,
        "index.html",
        {**state, "ponds": db.list_pond_ids(), "last_events": "\n".join(events)},
    )
