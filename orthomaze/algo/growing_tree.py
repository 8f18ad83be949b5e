import random
from enum import Enum
from typing import Iterator, List, Optional

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP, random_coords


class Method(Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    RANDOM = "random"
    MIDDLE = "middle"
    NEWEST50_RANDOM50 = "newest50-random50"
    NEWEST75_RANDOM25 = "newest75-random25"
    NEWEST25_RANDOM75 = "newest25-random75"

    @classmethod
    def from_name(cls, name: str) -> "Method":
        name = name.strip().lower().replace("_", "-")
        for method in cls:
            if method.value == name:
                return method
        raise KeyError(name)


# Chance of picking the newest cell for the mixed methods
_NEWEST_WEIGHT = {
    Method.NEWEST50_RANDOM50: 0.5,
    Method.NEWEST75_RANDOM25: 0.75,
    Method.NEWEST25_RANDOM75: 0.25,
}


class GrowingTree(Algorithm):
    """
    Keeps a list of active cells and grows the maze from one of them at a time.

    The selection method decides the texture: NEWEST behaves like recursive
    backtracking, RANDOM like Prim's algorithm, mixes land in between.
    """

    def __init__(self, method: Method = Method.NEWEST):
        super().__init__()
        self.method = method

    def has_start_coords(self) -> bool:
        return True

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0
        if grid.width < 1 or grid.height < 1:
            yield "Done"
            return

        start = start_coords if start_coords is not None else random_coords(grid, rng)

        visited = bytearray(grid.width * grid.height)
        visited[grid.get_index(*start)] = 1
        active: List[Coords] = [start]

        while active:
            idx = self._select(len(active), rng)
            cx, cy = active[idx]

            options = [
                (nx, ny, dir_bit)
                for nx, ny, dir_bit in grid.get_neighbors(cx, cy)
                if not visited[grid.get_index(nx, ny)]
            ]

            if not options:
                del active[idx]
                continue

            nx, ny, dir_bit = rng.choice(options)
            grid.carve_passage((cx, cy), dir_bit)
            visited[grid.get_index(nx, ny)] = 1
            active.append((nx, ny))

            self.step_count += 1
            if self.step_count % PROGRESS_STEP == 0:
                yield f"Active: {len(active)}"

        yield "Done"

    def _select(self, count: int, rng: random.Random) -> int:
        if self.method == Method.NEWEST:
            return count - 1
        if self.method == Method.OLDEST:
            return 0
        if self.method == Method.MIDDLE:
            return count // 2
        if self.method == Method.RANDOM:
            return rng.randrange(count)

        if rng.random() < _NEWEST_WEIGHT[self.method]:
            return count - 1
        return rng.randrange(count)
