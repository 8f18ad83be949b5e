from typing import Dict, Optional, Tuple

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.pathfind.astar import Costs, PathResult, find_path, manhattan

EndsPaths = Dict[Tuple[Coords, Coords], PathResult]


def maze_ends(grid: Grid):
    for index, cell in enumerate(grid.cells):
        if Cell.is_end(cell):
            yield index % grid.width, index // grid.width


def find_maze_ends_paths(grid: Grid, start: Coords, costs: Optional[Costs] = None,
                         heuristic=manhattan) -> EndsPaths:
    """
    Paths from 'start' to every dead end of the maze, keyed by (start, end).

    One full search per dead end: call this on demand, not every frame.
    Unreachable ends are left out.
    """
    paths: EndsPaths = {}
    for end in maze_ends(grid):
        result = find_path(grid, start, end, costs, heuristic)
        if result is not None:
            paths[(start, end)] = result
    return paths


class MazeEndsPaths:
    """Last computed set of start-to-dead-end paths."""

    def __init__(self):
        self.paths: EndsPaths = {}

    def update(self, grid: Grid, start: Coords, costs: Optional[Costs] = None) -> EndsPaths:
        self.paths = find_maze_ends_paths(grid, start, costs)
        return self.paths

    def contains_path_to_end(self, goal: Coords, path_coord: Coords) -> bool:
        """True if 'path_coord' lies on the stored path that leads to 'goal'."""
        for (_, end), (path, _) in self.paths.items():
            if end == goal:
                return path_coord in path
        return False
