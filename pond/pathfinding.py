"""
Greedy backtracking path search for the frog.

At every step the frog scores the cells it can reach, loads them into a
fresh UniquePriorityQueue and hops to the cheapest one. Dead ends are
popped off the stack. Marks are never cleared within a run, so each cell
is pushed at most once and the walk always terminates.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, List, Optional, Set

from pond.cells import Cell
from pond.grid import Pond
from pond.priority_queue import UniquePriorityQueue

logger = logging.getLogger(__name__)

# Priority ladder (lower is better).
PRIORITY_THREE_FLIES = 0.0
PRIORITY_TWO_FLIES = 1.0
PRIORITY_ONE_FLY = 2.0
PRIORITY_END = 3.0
PRIORITY_LILY_PAD = 4.0
PRIORITY_REEDS = 5.0
PRIORITY_PLAIN = 6.0
PRIORITY_ALLIGATOR_PAIR = 10.0
PRIORITY_MUD = 50.0

# Extra cost of a two-hop jump from a lily pad.
STRAIGHT_HOP_PENALTY = 0.5
VEER_HOP_PENALTY = 1.0

NO_SOLUTION = "No solution"

_FLY_PRIORITIES = {3: PRIORITY_THREE_FLIES, 2: PRIORITY_TWO_FLIES, 1: PRIORITY_ONE_FLY}


def is_near_alligator(cell: Cell) -> bool:
    return any(n.is_alligator for n in cell.neighbors())


def cell_priority(cell: Cell) -> float:
    if cell.is_food and cell.flies in _FLY_PRIORITIES:
        return _FLY_PRIORITIES[cell.flies]

    if cell.is_end:
        return PRIORITY_END
    if cell.is_lily_pad:
        return PRIORITY_LILY_PAD
    if cell.is_reeds:
        return PRIORITY_REEDS
    if cell.is_alligator and is_near_alligator(cell):
        return PRIORITY_ALLIGATOR_PAIR
    if cell.is_mud:
        return PRIORITY_MUD
    return PRIORITY_PLAIN


def is_available(cell: Cell, marked: AbstractSet[int] = frozenset()) -> bool:
    """
    Whether the frog may hop onto `cell` given the ids marked in this run.
    Mud ignores alligators but never a mark.
    """
    if cell.cell_id in marked:
        return False
    if cell.is_mud and not cell.is_lily_pad:
        return True
    return not cell.is_alligator and not is_near_alligator(cell)


def candidate_queue(cell: Cell, marked: AbstractSet[int] = frozenset()) -> UniquePriorityQueue[Cell]:
    """All moves from `cell` with their priorities, cheapest first."""
    queue: UniquePriorityQueue[Cell] = UniquePriorityQueue()

    for i in range(6):
        neighbour = cell.neighbor(i)
        if neighbour is None or not is_available(neighbour, marked):
            continue

        queue.add(neighbour, cell_priority(neighbour))

        if cell.is_lily_pad:
            straight = neighbour.neighbor(i)
            if straight is not None and is_available(straight, marked):
                queue.add(straight, cell_priority(straight) + STRAIGHT_HOP_PENALTY)

            veer = neighbour.neighbor((i + 1) % 6)
            if veer is not None and is_available(veer, marked):
                queue.add(veer, cell_priority(veer) + VEER_HOP_PENALTY)

    return queue


def find_best(cell: Cell, marked: AbstractSet[int] = frozenset()) -> Optional[Cell]:
    """Best next cell from `cell`, or None if the frog is stuck."""
    queue = candidate_queue(cell, marked)
    if queue.is_empty():
        return None
    return queue.remove_min()


@dataclass
class PathResult:
    solved: bool
    path: List[int] = field(default_factory=list)
    flies_eaten: int = 0
    pushes: int = 0
    events: List[str] = field(default_factory=list)

    def trace(self) -> str:
        if not self.solved:
            return NO_SOLUTION
        ids = " ".join(str(i) for i in self.path)
        return f"{ids} ate {self.flies_eaten} flies"

    def __str__(self) -> str:
        return self.trace()


def find_path(pond: Pond) -> PathResult:
    """
    Walk from the pond's start until the goal is reached or the stack runs dry.

    Eaten flies are removed from the cells of `pond`; pass `pond.copy()` to
    keep the original intact.
    """
    start = pond.start
    result = PathResult(solved=False)
    marked: Set[int] = set()

    stack: List[Cell] = [start]
    marked.add(start.cell_id)
    result.pushes = 1
    result.events.append(f"start at {start.cell_id}")

    while stack:
        curr = stack[-1]
        result.path.append(curr.cell_id)

        if curr.is_end:
            result.solved = True
            result.events.append(f"reached goal {curr.cell_id}")
            break

        if curr.is_food and curr.flies:
            eaten = curr.remove_flies()
            result.flies_eaten += eaten
            result.events.append(f"ate {eaten} flies at {curr.cell_id}")

        nxt = find_best(curr, marked)
        if nxt is None:
            stack.pop()
            result.events.append(f"backtrack from {curr.cell_id}")
            logger.debug("find_path: dead end at %s, stack depth %d", curr.cell_id, len(stack))
            continue

        stack.append(nxt)
        marked.add(nxt.cell_id)
        result.pushes += 1
        result.events.append(f"hop {curr.cell_id} -> {nxt.cell_id}")

    if not result.solved:
        result.events.append("no solution")

    logger.info("find_path: %s after %d pushes", result.trace(), result.pushes)
    return result
