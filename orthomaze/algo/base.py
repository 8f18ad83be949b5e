import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid

# Probability used wherever an algorithm flips a coin
BOOL_TRUE_PROBABILITY = 0.5

# Yield a progress update every N carves
PROGRESS_STEP = 100


class Algorithm(ABC):
    def __init__(self):
        self.step_count = 0

    @abstractmethod
    def run(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on 'grid'.
        """
        pass

    def generate(self, grid: Grid, start_coords: Optional[Coords], rng: random.Random):
        """Helper to run the algorithm to completion."""
        for _ in self.run(grid, start_coords, rng):
            pass

    def has_start_coords(self) -> bool:
        return False

    def name(self) -> str:
        return type(self).__name__


def random_coords(grid: Grid, rng: random.Random) -> Coords:
    return rng.randrange(grid.width), rng.randrange(grid.height)
