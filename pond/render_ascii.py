from __future__ import annotations

from typing import Iterable, Optional

from pond.cells import Cell, Terrain
from pond.grid import Pond
from pond.hexgrid import hex_to_offset

TERRAIN_SYMBOLS = {
    Terrain.WATER: "..",
    Terrain.LILY_PAD: "Lp",
    Terrain.REEDS: "Rd",
    Terrain.MUD: "Md",
    Terrain.ALLIGATOR: "Al",
}

LEGEND = (
    "Legend: .. water | Lp lily pad | Rd reeds | Md mud | Al alligator | EE goal | "
    "F3 flies | SS start | *x on path"
)


def render_cell_symbol(pond: Pond, cell: Cell) -> str:
    """2-char symbol for a cell, ignoring any path overlay."""
    if cell.cell_id == pond.start_id:
        return "SS"
    if cell.is_end:
        return "EE"
    if cell.is_food and cell.flies:
        return f"F{cell.flies}"
    return TERRAIN_SYMBOLS.get(cell.terrain, "..")


def render_pond_ascii(pond: Pond, path: Optional[Iterable[int]] = None, show_ids: bool = False) -> str:
    if not pond.cells:
        return "(empty pond)"

    on_path = set(path or ())
    offsets = {hex_to_offset(c.hex): c for c in pond}
    cols = [c for c, _ in offsets]
    rows = [r for _, r in offsets]
    min_col, max_col = min(cols), max(cols)
    min_row, max_row = min(rows), max(rows)

    # id view widens every column to fit the largest id
    width = max(2, len(str(max(pond.cells)))) if show_ids else 2

    lines = [
        f"Pond: {len(pond)} cells, {pond.total_flies()} flies left",
        LEGEND,
        "",
    ]

    for row in range(min_row, max_row + 1):
        indent = " " * width if (row % 2) != 0 else ""
        parts = [f"r={row:>2}  {indent}"]

        for col in range(min_col, max_col + 1):
            cell = offsets.get((col, row))
            if cell is None:
                parts.append(" " * width)
                continue
            if show_ids:
                parts.append(f"{cell.cell_id:>{width}}")
                continue

            symbol = render_cell_symbol(pond, cell)
            if cell.cell_id in on_path:
                symbol = "*" + symbol[0]
            parts.append(symbol)

        lines.append("  ".join(parts).rstrip())

    return "\n".join(lines)
