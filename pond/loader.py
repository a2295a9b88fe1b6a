# pond/loader.py
"""
Pond description files.

One text row per hex row (odd-r offset: odd rows sit half a cell to the
right). One character per column:

    .  water          L  lily pad       R  reeds
    M  mud            A  alligator      E  goal
    1 2 3  water with that many flies
    S  start (water)  P  start on a lily pad
    space or -  no cell

Characters are case sensitive; lowercase letters are rejected.

Blank lines and lines starting with '#' are skipped. Cell ids are handed
out 0, 1, 2, ... in reading order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from pond.cells import Cell, Terrain
from pond.errors import PondFormatError
from pond.grid import Pond
from pond.hexgrid import offset_to_hex

logger = logging.getLogger(__name__)

GAP_CHARS = frozenset(" -")

# char -> (terrain, is_end, flies, is_start)
CELL_CHARS: Dict[str, Tuple[Terrain, bool, Optional[int], bool]] = {
    ".": (Terrain.WATER, False, None, False),
    "L": (Terrain.LILY_PAD, False, None, False),
    "R": (Terrain.REEDS, False, None, False),
    "M": (Terrain.MUD, False, None, False),
    "A": (Terrain.ALLIGATOR, False, None, False),
    "E": (Terrain.WATER, True, None, False),
    "1": (Terrain.WATER, False, 1, False),
    "2": (Terrain.WATER, False, 2, False),
    "3": (Terrain.WATER, False, 3, False),
    "S": (Terrain.WATER, False, None, True),
    "P": (Terrain.LILY_PAD, False, None, True),
}


def parse_pond(text: str) -> Pond:
    pond = Pond()
    next_id = 0
    row = 0
    start_line: Optional[int] = None

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip("\r\n")
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        for col, ch in enumerate(line.rstrip()):
            if ch in GAP_CHARS:
                continue
            spec = CELL_CHARS.get(ch)
            if spec is None:
                raise PondFormatError(f"unknown cell character {ch!r} at column {col + 1}", line_no)

            terrain, is_end, flies, is_start = spec
            cell = pond.add_cell(Cell(next_id, offset_to_hex(col, row), terrain, is_end=is_end, flies=flies))
            next_id += 1

            if is_start:
                if start_line is not None:
                    raise PondFormatError(f"second start cell (first on line {start_line})", line_no)
                pond.set_start(cell.cell_id)
                start_line = line_no
        row += 1

    if not pond.cells:
        raise PondFormatError("pond has no cells")
    if pond.start_id is None:
        raise PondFormatError("pond has no start cell (use S or P)")

    logger.debug("parse_pond: %d cells in %d rows, start=%s", len(pond), row, pond.start_id)
    return pond


def load_pond(path: Union[str, Path]) -> Pond:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise PondFormatError(f"{p} is not UTF-8 text (byte {e.start})") from e
    except OSError as e:
        raise PondFormatError(f"cannot read {p}: {e.strerror or e}") from e
    return parse_pond(text)
