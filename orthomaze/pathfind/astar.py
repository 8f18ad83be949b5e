import heapq
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from orthomaze.core.cell import Coords
from orthomaze.core.grid import Grid

# Path from start to goal inclusive, plus its accumulated cost
PathResult = Tuple[List[Coords], int]
Costs = Mapping[Coords, int]

DEFAULT_COST = 1


def manhattan(a: Coords, b: Coords) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def zero(a: Coords, b: Coords) -> int:
    """Dijkstra is just A* with h(n) = 0."""
    return 0


class Algorithm(Enum):
    ASTAR = "astar"
    DIJKSTRA = "dijkstra"

    @property
    def heuristic(self) -> Callable[[Coords, Coords], int]:
        return manhattan if self == Algorithm.ASTAR else zero


def successors(grid: Grid, coords: Coords, costs: Optional[Costs] = None) -> List[Tuple[Coords, int]]:
    """Cells reachable through a carved passage, with the cost of stepping onto them."""
    costs = costs or {}
    return [
        (nxt, costs.get(nxt, DEFAULT_COST))
        for nxt in grid.get_open_neighbors(*coords)
    ]


def find_path(grid: Grid, start: Coords, goal: Coords, costs: Optional[Costs] = None,
              heuristic: Callable[[Coords, Coords], int] = manhattan) -> Optional[PathResult]:
    """
    Shortest path over carved passages. Stepping onto a cell costs
    costs[cell] (default 1); the Manhattan heuristic stays admissible as
    long as no cost drops below 1.

    Returns (path, cost) or None if the goal is unreachable.
    """
    # Validate both ends up front
    grid.get_index(*start)
    grid.get_index(*goal)

    g_score: Dict[Coords, int] = {start: 0}
    parents: Dict[Coords, Coords] = {}

    # (f, g, x, y) so ties break on cheaper-so-far, then position
    pq = [(heuristic(start, goal), 0, start[0], start[1])]

    while pq:
        f, g, cx, cy = heapq.heappop(pq)
        current = (cx, cy)

        if current == goal:
            return reconstruct_path(parents, start, goal), g

        if g > g_score.get(current, g):
            continue # Stale entry

        for nxt, step_cost in successors(grid, current, costs):
            new_g = g + step_cost
            if new_g < g_score.get(nxt, new_g + 1):
                g_score[nxt] = new_g
                parents[nxt] = current
                heapq.heappush(pq, (new_g + heuristic(nxt, goal), new_g, nxt[0], nxt[1]))

    return None


def reconstruct_path(parents: Dict[Coords, Coords], start: Coords, end: Coords) -> List[Coords]:
    path = [end]
    curr = end
    while curr != start:
        curr = parents[curr]
        path.append(curr)
    path.reverse()
    return path
