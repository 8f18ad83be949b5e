from array import array
from typing import Iterator, List, Tuple

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.core.validate import validate
from orthomaze.formatters.base import Formatter, Saveable


class OrthogonalMaze:
    """
    A finished orthogonal maze. Owns its grid and never changes it after
    the builder hands it over; formatters and the pathfinder only read it.
    """

    def __init__(self, grid: Grid):
        self._grid = grid

    @classmethod
    def new(cls, width: int, height: int) -> "OrthogonalMaze":
        """An ungenerated maze: every cell is still empty."""
        return cls(Grid(width, height))

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def __getitem__(self, coords: Coords) -> int:
        return self._grid[coords]

    def __len__(self) -> int:
        return len(self._grid.cells)

    def __iter__(self) -> Iterator[Tuple[Coords, int]]:
        return self.iter()

    def __eq__(self, other) -> bool:
        if not isinstance(other, OrthogonalMaze):
            return NotImplemented
        return self._grid == other._grid

    def __str__(self) -> str:
        return str(self._grid)

    def iter(self) -> Iterator[Tuple[Coords, int]]:
        """Yields ((x, y), cell) in row-major order, index == y * width + x."""
        width = self._grid.width
        for index, cell in enumerate(self._grid.cells):
            yield (index % width, index // width), cell

    def into_iter(self) -> Iterator[Tuple[Coords, int]]:
        """
        Consuming iterator with the same ordering as iter().
        The cells are detached immediately, leaving the maze empty.
        """
        width = self._grid.width
        cells = self._grid.cells
        self._grid.cells = array('B')
        return (((index % width, index // width), cell) for index, cell in enumerate(cells))

    def ends(self) -> List[Tuple[Coords, int]]:
        """Returns all dead ends (cells with 3 walls) in row-major order."""
        return [(coords, cell) for coords, cell in self.iter() if Cell.is_end(cell)]

    def is_valid(self) -> bool:
        return validate(self._grid)

    def format(self, formatter: Formatter) -> Saveable:
        return formatter.format(self._grid)

    def save(self, path: str, formatter: Formatter) -> str:
        """
        Formats the maze and writes it to 'path'.
        Returns a success message, raises MazeSaveError otherwise.
        """
        return formatter.format(self._grid).save(path)
