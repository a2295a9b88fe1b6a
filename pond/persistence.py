# pond/persistence.py
from __future__ import annotations

import json
from typing import Any

from pond.cells import Cell, Terrain
from pond.grid import Pond
from pond.hexgrid import Hex
from pond.pathfinding import PathResult

SCHEMA_VERSION = 1


def _cell_to_dict(c: Cell) -> dict[str, Any]:
    return {
        "id": c.cell_id,
        "q": c.hex.q,
        "r": c.hex.r,
        "terrain": c.terrain.name,
        "end": c.is_end,
        "flies": c.flies,
    }


def _cell_from_dict(d: dict[str, Any]) -> Cell:
    flies = d.get("flies")
    return Cell(
        cell_id=int(d["id"]),
        hex_=Hex(int(d["q"]), int(d["r"])),
        terrain=Terrain[d.get("terrain", "WATER")],
        is_end=bool(d.get("end", False)),
        flies=None if flies is None else int(flies),
    )


def pond_to_dict(pond: Pond) -> dict[str, Any]:
    if pond.start_id is None:
        raise ValueError("Pond.start_id must be set to serialize.")
    return {
        "schema_version": SCHEMA_VERSION,
        "start": pond.start_id,
        "cells": [_cell_to_dict(c) for c in pond],
    }


def pond_from_dict(data: dict[str, Any]) -> Pond:
    if int(data.get("schema_version", 0)) != SCHEMA_VERSION:
        raise ValueError(f"Unsupported schema_version: {data.get('schema_version')}")

    pond = Pond()
    for c_d in data.get("cells", []):
        pond.add_cell(_cell_from_dict(c_d))
    pond.set_start(int(data["start"]))
    return pond


def pond_to_json(pond: Pond) -> str:
    return json.dumps(pond_to_dict(pond), sort_keys=True)


def pond_from_json(s: str) -> Pond:
    return pond_from_dict(json.loads(s))


def result_to_dict(result: PathResult) -> dict[str, Any]:
    return {
        "solved": result.solved,
        "path": list(result.path),
        "flies_eaten": result.flies_eaten,
        "pushes": result.pushes,
        "trace": result.trace(),
        "events": list(result.events),
    }


def result_from_dict(d: dict[str, Any]) -> PathResult:
    return PathResult(
        solved=bool(d["solved"]),
        path=[int(i) for i in d.get("path", [])],
        flies_eaten=int(d.get("flies_eaten", 0)),
        pushes=int(d.get("pushes", 0)),
        events=list(d.get("events", [])),
    )


def result_to_json(result: PathResult) -> str:
    return json.dumps(result_to_dict(result), sort_keys=True)


def result_from_json(s: str) -> PathResult:
    return result_from_dict(json.loads(s))
