from typing import Any, Dict

from orthomaze.core.cell import Cell
from orthomaze.core.grid import Grid


def calculate_stats(grid: Grid) -> Dict[str, Any]:
    dead_ends = 0
    corridors = 0 # 2 walls
    intersections = 0 # 0, 1 walls

    for val in grid.cells:
        walls = Cell.walls_count(val)
        if walls == 3: dead_ends += 1
        elif walls == 2: corridors += 1
        elif walls <= 1: intersections += 1

    total = grid.width * grid.height
    return {
        "dead_ends": dead_ends,
        "corridors": corridors,
        "intersections": intersections,
        "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
    }
