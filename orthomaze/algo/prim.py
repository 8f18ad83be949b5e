import random
from typing import Iterator, List, Optional, Set

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP, random_coords


class Prim(Algorithm):
    """
    Simplified Prim's algorithm: grows the maze from a frontier of cells that
    touch it, picking a random frontier cell each time. Shorter, more
    branching corridors than recursive backtracking.
    """

    def has_start_coords(self) -> bool:
        return True

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0
        if grid.width < 1 or grid.height < 1:
            yield "Done"
            return

        start_x, start_y = start_coords if start_coords is not None else random_coords(grid, rng)

        in_maze = bytearray(grid.width * grid.height)
        in_maze[grid.get_index(start_x, start_y)] = 1

        # Set for O(1) membership, list for random choice
        frontier_set: Set[Coords] = set()
        frontier_list: List[Coords] = []

        def add_frontier(cx, cy):
            for nx, ny, _ in grid.get_neighbors(cx, cy):
                if not in_maze[grid.get_index(nx, ny)] and (nx, ny) not in frontier_set:
                    frontier_set.add((nx, ny))
                    frontier_list.append((nx, ny))

        add_frontier(start_x, start_y)

        while frontier_list:
            # Pick random cell from frontier, swap remove for O(1)
            idx = rng.randrange(len(frontier_list))
            cx, cy = frontier_list[idx]
            frontier_list[idx] = frontier_list[-1]
            frontier_list.pop()
            frontier_set.remove((cx, cy))

            # Carve to one random neighbour that is already part of the maze
            possible = [
                dir_bit
                for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                if in_maze[grid.get_index(nx, ny)]
            ]
            grid.carve_passage((cx, cy), rng.choice(possible))
            in_maze[grid.get_index(cx, cy)] = 1

            add_frontier(cx, cy)

            self.step_count += 1
            if self.step_count % PROGRESS_STEP == 0:
                yield f"Frontier: {len(frontier_list)}"

        yield "Done"
