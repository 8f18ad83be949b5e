from array import array
from typing import Iterator, Tuple

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.errors import TransitError


class Grid:
    """
    Flat row-major storage of cell passage bits.
    One byte per cell, index = y * width + x.
    """

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        # Every cell starts empty (no passages carved)
        self.cells = array('B', [Cell.EMPTY] * (width * height))

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def __getitem__(self, coords: Coords) -> int:
        return self.cells[self.get_index(*coords)]

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.cells == other.cells

    def get_next_cell_coords(self, coords: Coords, direction: int) -> Coords:
        x, y = coords
        nx, ny = x + Cell.DX[direction], y + Cell.DY[direction]
        if not (0 <= nx < self.width and 0 <= ny < self.height):
            raise TransitError(coords, direction)
        return nx, ny

    def carve_passage(self, coords: Coords, direction: int) -> Coords:
        """
        Opens the wall between 'coords' and its neighbor in 'direction'.
        Also opens the OPPOSITE wall on the neighbor. Returns the neighbor coords.
        """
        nx, ny = self.get_next_cell_coords(coords, direction)

        self.cells[self.get_index(*coords)] |= direction
        self.cells[ny * self.width + nx] |= Cell.OPPOSITE[direction]
        return nx, ny

    def build_wall(self, coords: Coords, direction: int) -> Coords:
        """Inverse of carve_passage: closes both sides of the boundary."""
        nx, ny = self.get_next_cell_coords(coords, direction)

        self.cells[self.get_index(*coords)] &= ~direction
        self.cells[ny * self.width + nx] &= ~Cell.OPPOSITE[direction]
        return nx, ny

    def is_carved(self, coords: Coords, direction: int) -> bool:
        return (self.cells[self.get_index(*coords)] & direction) != 0

    def is_cell_visited(self, coords: Coords) -> bool:
        return self.cells[self.get_index(*coords)] != Cell.EMPTY

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all valid grid neighbors.
        Does NOT check passages.
        """
        # North
        if y > 0:
            yield (x, y - 1, Cell.NORTH)
        # South
        if y < self.height - 1:
            yield (x, y + 1, Cell.SOUTH)
        # East
        if x < self.width - 1:
            yield (x + 1, y, Cell.EAST)
        # West
        if x > 0:
            yield (x - 1, y, Cell.WEST)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors reachable through a carved passage.
        """
        val = self.cells[self.get_index(x, y)]

        if val & Cell.NORTH:
            yield (x, y - 1)
        if val & Cell.SOUTH:
            yield (x, y + 1)
        if val & Cell.EAST:
            yield (x + 1, y)
        if val & Cell.WEST:
            yield (x - 1, y)

    def __str__(self) -> str:
        from orthomaze.formatters.ascii import AsciiNarrow
        return AsciiNarrow().format(self).into_inner()
