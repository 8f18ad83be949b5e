import random
from typing import Iterator, List, Optional, Tuple

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP


class DisjointSet:
    """Union-find over cell indices with path halving and union by size."""

    def __init__(self, size: int):
        self.parent = list(range(size))
        self.size = [1] * size

    def find(self, item: int) -> int:
        parent = self.parent
        while parent[item] != item:
            parent[item] = parent[parent[item]]
            item = parent[item]
        return item

    def union(self, a: int, b: int) -> bool:
        """Merges the sets of a and b. Returns False if they were already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self.size[ra] < self.size[rb]:
            ra, rb = rb, ra
        self.parent[rb] = ra
        self.size[ra] += self.size[rb]
        return True


class Kruskal(Algorithm):
    """
    Randomized Kruskal: every potential passage is an edge, edges are visited
    in random order and carved whenever they join two separate trees.
    """

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0

        edges: List[Tuple[int, int, int]] = []
        for y in range(grid.height):
            for x in range(grid.width):
                if y > 0:
                    edges.append((x, y, Cell.NORTH))
                if x > 0:
                    edges.append((x, y, Cell.WEST))
        rng.shuffle(edges)

        sets = DisjointSet(grid.width * grid.height)

        for x, y, dir_bit in edges:
            nx, ny = x + Cell.DX[dir_bit], y + Cell.DY[dir_bit]
            if sets.union(grid.get_index(x, y), grid.get_index(nx, ny)):
                grid.carve_passage((x, y), dir_bit)

                self.step_count += 1
                if self.step_count % PROGRESS_STEP == 0:
                    yield f"Edges carved: {self.step_count}"

        yield "Done"
