import random
from enum import Enum
from typing import Iterator, Optional

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.errors import TransitError
from orthomaze.core.grid import Grid
from orthomaze.algo.base import Algorithm, PROGRESS_STEP


class Bias(Enum):
    NORTH_EAST = (Cell.NORTH, Cell.EAST)
    NORTH_WEST = (Cell.NORTH, Cell.WEST)
    SOUTH_EAST = (Cell.SOUTH, Cell.EAST)
    SOUTH_WEST = (Cell.SOUTH, Cell.WEST)

    @classmethod
    def from_name(cls, name: str) -> "Bias":
        # Accepts "north-east", "north_east" or "NORTH_EAST"
        return cls[name.strip().upper().replace("-", "_")]


class BinaryTree(Algorithm):
    """
    Every cell carves towards one of two fixed directions.

    Very fast and needs no state, but the result is strongly biased: the two
    borders on the bias side always end up as straight corridors.
    """

    def __init__(self, bias: Bias = Bias.NORTH_EAST):
        super().__init__()
        self.bias = bias

    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        self.step_count = 0

        for y in range(grid.height):
            for x in range(grid.width):
                dirs = []
                for direction in self.bias.value:
                    try:
                        grid.get_next_cell_coords((x, y), direction)
                    except TransitError:
                        continue
                    dirs.append(direction)

                if not dirs:
                    continue

                grid.carve_passage((x, y), rng.choice(dirs))

                self.step_count += 1
                if self.step_count % PROGRESS_STEP == 0:
                    yield f"Row {y}/{grid.height}"

        yield "Done"
