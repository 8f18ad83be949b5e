from typing import Dict, Optional

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid
from orthomaze.pathfind.astar import Algorithm, PathResult, find_path


class MazePath:
    """
    Holds the start/goal markers and per-cell cost overrides for one grid,
    and the last path computed for them. Callers decide when to refresh;
    update() only searches again when one of the inputs changed.
    """

    def __init__(self, grid: Grid, algorithm: Algorithm = Algorithm.ASTAR):
        self.grid = grid
        self.algorithm = algorithm
        self.start: Optional[Coords] = None
        self.goal: Optional[Coords] = None
        self.costs: Dict[Coords, int] = {}
        self.path: Optional[PathResult] = None
        self._dirty = True

    def set_start(self, coords: Coords):
        if coords != self.start:
            self.start = coords
            self._dirty = True

    def set_goal(self, coords: Coords):
        if coords != self.goal:
            self.goal = coords
            self._dirty = True

    def set_cost(self, coords: Coords, cost: int):
        if self.costs.get(coords) != cost:
            self.costs[coords] = cost
            self._dirty = True

    def clear_cost(self, coords: Coords):
        if self.costs.pop(coords, None) is not None:
            self._dirty = True

    def update(self) -> Optional[PathResult]:
        if not self._dirty:
            return self.path

        if self.start is None or self.goal is None:
            self.path = None
        else:
            self.path = find_path(self.grid, self.start, self.goal, self.costs, self.algorithm.heuristic)
        self._dirty = False
        return self.path

    def cost(self) -> Optional[int]:
        return self.path[1] if self.path else None
