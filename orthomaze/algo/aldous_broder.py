import random
from typing import Iterator, Optional

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP, random_coords


class AldousBroder(Algorithm):
    """
    Uniform random walk. Produces an unbiased (uniform spanning tree) maze,
    but converges slowly on large grids because the walk keeps crossing
    cells it has already visited.
    """

    def has_start_coords(self) -> bool:
        return True

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0
        total = grid.width * grid.height
        if total == 0:
            yield "Done"
            return

        x, y = start_coords if start_coords is not None else random_coords(grid, rng)

        visited = bytearray(total)
        visited[grid.get_index(x, y)] = 1
        remaining = total - 1

        while remaining > 0:
            nx, ny, dir_bit = rng.choice(list(grid.get_neighbors(x, y)))

            idx = grid.get_index(nx, ny)
            if not visited[idx]:
                grid.carve_passage((x, y), dir_bit)
                visited[idx] = 1
                remaining -= 1

                self.step_count += 1
                if self.step_count % PROGRESS_STEP == 0:
                    yield f"Walking... Unvisited: {remaining}"

            x, y = nx, ny

        yield "Done"
