import random
from typing import Iterator, Optional

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP, random_coords


class HuntAndKill(Algorithm):
    """
    Random walk until stuck, then "hunt" in row-major order for the first
    unvisited cell that touches the maze, connect it and walk again.
    """

    def has_start_coords(self) -> bool:
        return True

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0
        if grid.width < 1 or grid.height < 1:
            yield "Done"
            return

        visited = bytearray(grid.width * grid.height)
        # Rows above this one are fully visited
        hunt_row = 0

        current = start_coords if start_coords is not None else random_coords(grid, rng)
        visited[grid.get_index(*current)] = 1

        while current is not None:
            cx, cy = current

            # Kill: walk into a random unvisited neighbour
            options = [
                (nx, ny, dir_bit)
                for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                if not visited[grid.get_index(nx, ny)]
            ]
            if options:
                nx, ny, dir_bit = rng.choice(options)
                grid.carve_passage(current, dir_bit)
                visited[grid.get_index(nx, ny)] = 1
                current = (nx, ny)

                self.step_count += 1
                if self.step_count % PROGRESS_STEP == 0:
                    yield f"Walking... ({nx}, {ny})"
                continue

            # Hunt
            current = None
            while hunt_row < grid.height and all(
                visited[hunt_row * grid.width + x] for x in range(grid.width)
            ):
                hunt_row += 1

            for y in range(hunt_row, grid.height):
                for x in range(grid.width):
                    if visited[y * grid.width + x]:
                        continue
                    targets = [
                        dir_bit
                        for nx, ny, dir_bit in grid.get_neighbors(x, y)
                        if visited[grid.get_index(nx, ny)]
                    ]
                    if targets:
                        grid.carve_passage((x, y), rng.choice(targets))
                        visited[y * grid.width + x] = 1
                        current = (x, y)
                        break
                if current is not None:
                    yield f"Hunting... Row {y}"
                    break

        yield "Done"
