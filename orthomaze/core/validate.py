import random
from typing import List, Set

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid


def validate(grid: Grid) -> bool:
    """
    Checks that every cell is reachable from (0, 0) through carved passages.

    Uses its own unseeded RNG for the direction order, so the traversal is
    independent of whatever seed generated the maze. Only the result is stable.
    """
    if grid.width < 1 or grid.height < 1:
        return False

    rng = random.Random()

    visited: Set[Coords] = {(0, 0)}
    stack: List[Coords] = [(0, 0)]

    while stack:
        coords = stack.pop()

        dirs = list(Cell.DIRECTIONS)
        rng.shuffle(dirs)

        for direction in dirs:
            if not grid.is_carved(coords, direction):
                continue
            nxt = (coords[0] + Cell.DX[direction], coords[1] + Cell.DY[direction])
            if nxt in visited:
                continue
            visited.add(nxt)
            stack.append(nxt)

    return len(visited) == grid.width * grid.height
