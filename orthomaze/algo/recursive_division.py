import random
from typing import Iterator, List, Optional, Tuple

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, BOOL_TRUE_PROBABILITY, PROGRESS_STEP


class RecursiveDivision(Algorithm):
    """
    Wall adder instead of passage carver.

    Starts from one open chamber covering the grid and keeps splitting
    chambers with a wall that has a single random gap. Splits run across the
    narrow side (random for square chambers) until every chamber is one cell
    wide. Chambers wait on an explicit stack instead of the call stack.
    """

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0
        if grid.width < 1 or grid.height < 1:
            yield "Done"
            return

        # Open chamber
        for y in range(grid.height):
            for x in range(grid.width):
                if x < grid.width - 1:
                    grid.carve_passage((x, y), Cell.EAST)
                if y < grid.height - 1:
                    grid.carve_passage((x, y), Cell.SOUTH)

        # (x, y, width, height)
        chambers: List[Tuple[int, int, int, int]] = [(0, 0, grid.width, grid.height)]

        while chambers:
            x, y, w, h = chambers.pop()
            if w < 2 and h < 2:
                continue

            if self._split_horizontally(w, h, rng):
                # Wall along the south side of row 'wy'
                wy = y + rng.randrange(h - 1)
                gap = x + rng.randrange(w)
                for cx in range(x, x + w):
                    if cx != gap:
                        grid.build_wall((cx, wy), Cell.SOUTH)

                chambers.append((x, y, w, wy - y + 1))
                chambers.append((x, wy + 1, w, y + h - wy - 1))
            else:
                # Wall along the east side of column 'wx'
                wx = x + rng.randrange(w - 1)
                gap = y + rng.randrange(h)
                for cy in range(y, y + h):
                    if cy != gap:
                        grid.build_wall((wx, cy), Cell.EAST)

                chambers.append((x, y, wx - x + 1, h))
                chambers.append((wx + 1, y, x + w - wx - 1, h))

            self.step_count += 1
            if self.step_count % PROGRESS_STEP == 0:
                yield f"Chambers: {len(chambers)}"

        yield "Done"

    @staticmethod
    def _split_horizontally(width: int, height: int, rng: random.Random) -> bool:
        if width < height:
            return True
        if height < width:
            return False
        return rng.random() < BOOL_TRUE_PROBABILITY
