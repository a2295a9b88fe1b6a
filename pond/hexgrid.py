# pond/hexgrid.py
from __future__ import annotations

from typing import Tuple

# Axial (dq, dr) per direction index 0..5. Consecutive indices are
# neighbouring directions, so (i + 1) % 6 is a 60 degree turn.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (1, -1), (0, -1),
    (-1, 0), (-1, 1), (0, 1),
)


class Hex:
    def __init__(self, q, r):
        self.q = q
        self.r = r

    def __eq__(self, other):
        return isinstance(other, Hex) and self.q == other.q and self.r == other.r

    def __hash__(self):
        return hash((self.q, self.r))

    def __repr__(self):
        return f"({self.q},{self.r})"

    def neighbor(self, direction: int) -> "Hex":
        dq, dr = DIRECTIONS[direction % 6]
        return Hex(self.q + dq, self.r + dr)


def hex_distance(a: Hex, b: Hex) -> int:
    # axial distance via cube coords
    ax, az = a.q, a.r
    ay = -ax - az
    bx, bz = b.q, b.r
    by = -bx - bz
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))


def offset_to_hex(col: int, row: int) -> Hex:
    """odd-r offset (odd rows shoved right) -> axial."""
    return Hex(col - (row - (row & 1)) // 2, row)


def hex_to_offset(h: Hex) -> Tuple[int, int]:
    """axial -> odd-r offset (col, row)."""
    return h.q + (h.r - (h.r & 1)) // 2, h.r
