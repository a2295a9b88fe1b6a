import pytest

from pond.cells import Cell, Terrain
from pond.grid import Pond
from pond.hexgrid import Hex
from pond.loader import parse_pond


def mk_pond(*specs, start=0):
    """
    Build a pond by hand: each spec is (cell_id, q, r) plus optional
    terrain / is_end / flies keywords packed in a dict.
    """
    pond = Pond()
    for spec in specs:
        cell_id, q, r = spec[:3]
        kwargs = spec[3] if len(spec) > 3 else {}
        pond.add_cell(Cell(cell_id, Hex(q, r), **kwargs))
    pond.set_start(start)
    return pond


@pytest.fixture
def food_line_pond():
    """S(0) -> 3 flies(1) -> goal(2), in a straight line."""
    return mk_pond(
        (0, 0, 0),
        (1, 1, 0, {"flies": 3}),
        (2, 2, 0, {"is_end": True}),
    )


@pytest.fixture
def trapped_pond():
    """The only neighbour of the start is next to an alligator."""
    return mk_pond(
        (0, 0, 0),
        (1, 1, 0),
        (2, 2, 0, {"terrain": Terrain.ALLIGATOR}),
    )


@pytest.fixture
def lily_jump_pond():
    return parse_pond("P.E\n")


def dump_events(result):
    print("\n--- SEARCH LOG ---")
    for e in result.events:
        print(e)
    print("--- END LOG ---\n")
