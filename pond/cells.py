# pond/cells.py
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pond.hexgrid import Hex


class Terrain(Enum):
    WATER = "water"
    LILY_PAD = "lily_pad"
    REEDS = "reeds"
    MUD = "mud"
    ALLIGATOR = "alligator"


class Cell:
    """
    One hexagon of the pond.

    Neighbour links are wired by the owning Pond; index i follows
    pond.hexgrid.DIRECTIONS. A cell with `flies is None` is not a food
    cell at all; a food cell that has been eaten keeps `flies == 0`.
    """

    def __init__(self, cell_id: int, hex_: Hex, terrain: Terrain = Terrain.WATER,
                 is_end: bool = False, flies: Optional[int] = None):
        if flies is not None and flies < 0:
            raise ValueError(f"flies must be >= 0, got {flies}")
        self.cell_id = int(cell_id)
        self.hex = hex_
        self.terrain = terrain
        self.is_end = bool(is_end)
        self.flies = None if flies is None else int(flies)
        self._neighbors: List[Optional[Cell]] = [None] * 6

    def __eq__(self, other):
        return isinstance(other, Cell) and self.cell_id == other.cell_id

    def __hash__(self):
        return hash(self.cell_id)

    def __repr__(self):
        return f"Cell({self.cell_id} {self.terrain.name} at {self.hex})"

    def __str__(self):
        return str(self.cell_id)

    # --- graph ---
    def neighbor(self, direction: int) -> Optional["Cell"]:
        return self._neighbors[direction % 6]

    def neighbors(self) -> List["Cell"]:
        return [n for n in self._neighbors if n is not None]

    def set_neighbor(self, direction: int, cell: Optional["Cell"]) -> None:
        self._neighbors[direction % 6] = cell

    # --- terrain predicates ---
    @property
    def is_lily_pad(self) -> bool:
        return self.terrain is Terrain.LILY_PAD

    @property
    def is_reeds(self) -> bool:
        return self.terrain is Terrain.REEDS

    @property
    def is_mud(self) -> bool:
        return self.terrain is Terrain.MUD

    @property
    def is_alligator(self) -> bool:
        return self.terrain is Terrain.ALLIGATOR

    # --- food ---
    @property
    def is_food(self) -> bool:
        return self.flies is not None

    def remove_flies(self) -> int:
        """Empty the cell; returns how many flies were there."""
        if self.flies is None:
            return 0
        eaten, self.flies = self.flies, 0
        return eaten
