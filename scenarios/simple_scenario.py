from pond.grid import Pond
from pond.loader import parse_pond

# 0 1 2 3 8 14 with the greedy search, eating both fly cells on the way.
SIMPLE_POND = """\
# default pond for new games
S.2.L
..R3.
M.A.E
"""


def build_pond() -> Pond:
    return parse_pond(SIMPLE_POND)
