# pond/grid.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from pond.cells import Cell
from pond.hexgrid import Hex


@dataclass
class Pond:
    cells: Dict[int, Cell] = field(default_factory=dict)
    by_hex: Dict[Hex, Cell] = field(default_factory=dict)
    start_id: Optional[int] = None

    def add_cell(self, cell: Cell) -> Cell:
        if cell.cell_id in self.cells:
            raise ValueError(f"Duplicate cell id {cell.cell_id}")
        if cell.hex in self.by_hex:
            raise ValueError(f"Hex {cell.hex} already holds cell {self.by_hex[cell.hex].cell_id}")

        self.cells[cell.cell_id] = cell
        self.by_hex[cell.hex] = cell

        # Wire both directions: direction d from cell is (d + 3) % 6 from the neighbour.
        for d in range(6):
            other = self.by_hex.get(cell.hex.neighbor(d))
            cell.set_neighbor(d, other)
            if other is not None:
                other.set_neighbor((d + 3) % 6, cell)
        return cell

    def set_start(self, cell_id: int) -> None:
        if cell_id not in self.cells:
            raise KeyError(f"No cell {cell_id}")
        self.start_id = cell_id

    @property
    def start(self) -> Cell:
        if self.start_id is None:
            raise ValueError("Pond has no start cell")
        return self.cells[self.start_id]

    def get_cell(self, cell_id: int) -> Optional[Cell]:
        return self.cells.get(cell_id)

    def __iter__(self) -> Iterator[Cell]:
        return (self.cells[k] for k in sorted(self.cells))

    def __len__(self) -> int:
        return len(self.cells)

    def total_flies(self) -> int:
        return sum(c.flies or 0 for c in self.cells.values())

    def copy(self) -> "Pond":
        """Independent copy (cells and links), for runs that must not eat the original flies."""
        twin = Pond()
        for c in self:
            twin.add_cell(Cell(c.cell_id, c.hex, c.terrain, is_end=c.is_end, flies=c.flies))
        twin.start_id = self.start_id
        return twin
