import random
from typing import Iterator, List, Optional, Tuple

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.errors import TransitError
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP


class RecursiveBacktracking(Algorithm):
    """
    Depth-first carving: long winding corridors with plenty of dead ends.

    From each cell the four directions are tried in a shuffled order; the walk
    moves into any unvisited neighbour and backs up when none is left.
    Uses an explicit stack of (cell, remaining directions).
    """

    def has_start_coords(self) -> bool:
        return True

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0
        if grid.width < 1 or grid.height < 1:
            yield "Done"
            return

        start = start_coords if start_coords is not None else (0, 0)

        stack: List[Tuple[Coords, Iterator[int]]] = [(start, self._shuffled_dirs(rng))]

        while stack:
            coords, dirs = stack[-1]

            direction = next(dirs, None)
            if direction is None:
                # Backtrack
                stack.pop()
                continue

            try:
                nxt = grid.get_next_cell_coords(coords, direction)
            except TransitError:
                continue
            if grid.is_cell_visited(nxt):
                continue

            grid.carve_passage(coords, direction)
            stack.append((nxt, self._shuffled_dirs(rng)))

            self.step_count += 1
            if self.step_count % PROGRESS_STEP == 0:
                yield f"Carving... Stack: {len(stack)}"

        yield "Done"

    @staticmethod
    def _shuffled_dirs(rng: random.Random) -> Iterator[int]:
        dirs = [Cell.NORTH, Cell.SOUTH, Cell.WEST, Cell.EAST]
        rng.shuffle(dirs)
        return iter(dirs)
