import random
from typing import Dict, Iterator, List, Optional

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, BOOL_TRUE_PROBABILITY, PROGRESS_STEP


class Eller(Algorithm):
    """
    Row-by-row generation that only keeps the set membership of one row in memory.

    1. Cells of the current row without a set get a fresh one.
    2. Adjacent cells in different sets are randomly joined (always on the last row).
    3. Every set carves down at least once; cells below inherit the set.
    """

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0

        row: List[int] = [0] * grid.width
        next_set = 1

        for y in range(grid.height):
            last_row = y == grid.height - 1

            for x in range(grid.width):
                if row[x] == 0:
                    row[x] = next_set
                    next_set += 1

            # Horizontal merges
            for x in range(grid.width - 1):
                if row[x] == row[x + 1]:
                    continue
                if last_row or rng.random() < BOOL_TRUE_PROBABILITY:
                    grid.carve_passage((x, y), Cell.EAST)
                    old, new = row[x + 1], row[x]
                    row = [new if s == old else s for s in row]

            if last_row:
                break

            # Vertical connections, at least one per set
            members: Dict[int, List[int]] = {}
            for x, set_id in enumerate(row):
                members.setdefault(set_id, []).append(x)

            below = [0] * grid.width
            for set_id, xs in members.items():
                rng.shuffle(xs)
                for x in xs[:rng.randint(1, len(xs))]:
                    grid.carve_passage((x, y), Cell.SOUTH)
                    below[x] = set_id

            row = below

            self.step_count += 1
            if self.step_count % PROGRESS_STEP == 0:
                yield f"Row {y}/{grid.height}"

        yield "Done"
