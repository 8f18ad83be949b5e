import random
from typing import Iterator, List, Optional

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, BOOL_TRUE_PROBABILITY, PROGRESS_STEP


class Sidewinder(Algorithm):
    """
    Row-by-row runs: each cell either extends the current run east, or closes
    it and carves north from one random member of the run. The top row has
    nothing above it and becomes one long corridor.
    """

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0

        for y in range(grid.height):
            run: List[int] = []

            for x in range(grid.width):
                run.append(x)

                at_east_border = x == grid.width - 1
                at_north_border = y == 0
                close_run = at_east_border or (
                    not at_north_border and rng.random() < BOOL_TRUE_PROBABILITY
                )

                if close_run:
                    if not at_north_border:
                        grid.carve_passage((rng.choice(run), y), Cell.NORTH)
                    run.clear()
                else:
                    grid.carve_passage((x, y), Cell.EAST)

                self.step_count += 1
                if self.step_count % PROGRESS_STEP == 0:
                    yield f"Row {y}/{grid.height}"

        yield "Done"
