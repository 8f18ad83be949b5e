import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from orthomaze.algo.base import Algorithm
from orthomaze.algo.recursive_backtracking import RecursiveBacktracking
from orthomaze.core.cell import Coords
from orthomaze.core.errors import BuildError
from orthomaze.core.grid import Grid
from orthomaze.maze.maze import OrthogonalMaze

logger = logging.getLogger(__name__)

MAX_SEED = 2 ** 64 - 1


@dataclass
class MazeConfig:
    """Everything needed to build one maze."""
    width: int = 10
    height: int = 10
    algorithm: Algorithm = field(default_factory=RecursiveBacktracking)
    start_coords: Optional[Coords] = None
    seed: Optional[int] = None

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Maze dimensions must not be negative, got {self.width}x{self.height}")
        if self.seed is not None and not (0 <= self.seed <= MAX_SEED):
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got {self.seed}")
        if self.start_coords is not None:
            x, y = self.start_coords
            if not (0 <= x < self.width and 0 <= y < self.height):
                raise ValueError(
                    f"Start coords {self.start_coords} are outside of a {self.width}x{self.height} maze"
                )


class OrthogonalMazeBuilder:
    """
    Collects maze options step by step:

        maze = OrthogonalMazeBuilder().width(20).height(15).seed(42).build()
    """

    def __init__(self):
        self._width = 10
        self._height = 10
        self._algorithm: Algorithm = RecursiveBacktracking()
        self._start_coords: Optional[Coords] = None
        self._seed: Optional[int] = None

    @classmethod
    def from_config(cls, config: MazeConfig) -> "OrthogonalMazeBuilder":
        builder = cls().width(config.width).height(config.height).algorithm(config.algorithm).seed(config.seed)
        if config.start_coords is not None:
            builder.start_coords(config.start_coords)
        return builder

    def width(self, width: int) -> "OrthogonalMazeBuilder":
        self._width = width
        return self

    def height(self, height: int) -> "OrthogonalMazeBuilder":
        self._height = height
        return self

    def algorithm(self, algorithm: Algorithm) -> "OrthogonalMazeBuilder":
        self._algorithm = algorithm
        return self

    def start_coords(self, coords: Coords) -> "OrthogonalMazeBuilder":
        self._start_coords = (coords[0], coords[1])
        return self

    def seed(self, seed: Optional[int]) -> "OrthogonalMazeBuilder":
        self._seed = seed
        return self

    def config(self) -> MazeConfig:
        return MazeConfig(
            width=self._width,
            height=self._height,
            algorithm=self._algorithm,
            start_coords=self._start_coords,
            seed=self._seed,
        )

    def build(self) -> OrthogonalMaze:
        """
        Generates the maze.
        Raises BuildError if start coords were given to an algorithm that has no use for them.
        """
        if self._start_coords is not None and not self._algorithm.has_start_coords():
            raise BuildError(self._algorithm.name())

        config = self.config()
        algorithm = config.algorithm

        grid = Grid(config.width, config.height)
        # A None seed draws from OS entropy
        rng = random.Random(config.seed)

        logger.debug(
            "Generating %dx%d maze with %s (seed=%s, start=%s)",
            config.width, config.height, algorithm.name(), config.seed, config.start_coords,
        )
        algorithm.generate(grid, config.start_coords, rng)

        return OrthogonalMaze(grid)
