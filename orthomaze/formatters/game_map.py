import random
from typing import List, Optional, Tuple

from orthomaze.core.cell import Cell
from orthomaze.core.grid import Grid
from orthomaze.formatters.base import Formatter, StringWrapper

START = "S"
GOAL = "G"


class GameMap(Formatter):
    """
    Character map for ray-casting style games. Every cell becomes a
    span x span block of passage characters, surrounded by wall characters
    wherever no passage was carved. A 4x2 maze with span=1:

        #########
        #.....#.#
        ###.#.#.#
        #...#...#
        #########

    With start/goal enabled, "S" and "G" replace two random border walls
    that open onto a passage.
    """

    def __init__(self, span: int = 2, passage: str = ".", wall: str = "#",
                 with_start_goal: bool = False, seed: Optional[int] = None):
        self.span = span
        self.passage = passage
        self.wall = wall
        self.with_start_goal = with_start_goal
        self.seed = seed

    def format(self, grid: Grid) -> StringWrapper:
        step = self.span + 1
        map_w = grid.width * step + 1
        map_h = grid.height * step + 1

        rows = [[self.wall] * map_w for _ in range(map_h)]

        for y in range(grid.height):
            for x in range(grid.width):
                x0, y0 = 1 + x * step, 1 + y * step

                for row in rows[y0:y0 + self.span]:
                    row[x0:x0 + self.span] = [self.passage] * self.span

                if grid.is_carved((x, y), Cell.EAST):
                    for row in rows[y0:y0 + self.span]:
                        row[x0 + self.span] = self.passage
                if grid.is_carved((x, y), Cell.SOUTH):
                    rows[y0 + self.span][x0:x0 + self.span] = [self.passage] * self.span

        if self.with_start_goal:
            self._place_start_goal(rows, random.Random(self.seed))

        return StringWrapper("".join("".join(row) + "\n" for row in rows))

    def _place_start_goal(self, rows: List[List[str]], rng: random.Random):
        candidates = self._border_candidates(rows)
        if len(candidates) < 2:
            return

        (sr, sc), (gr, gc) = rng.sample(candidates, 2)
        rows[sr][sc] = START
        rows[gr][gc] = GOAL

    def _border_candidates(self, rows: List[List[str]]) -> List[Tuple[int, int]]:
        map_h, map_w = len(rows), len(rows[0])
        if map_h < 3 or map_w < 3:
            return []

        candidates = []
        for c in range(1, map_w - 1):
            if rows[1][c] == self.passage:
                candidates.append((0, c))
            if rows[map_h - 2][c] == self.passage:
                candidates.append((map_h - 1, c))
        for r in range(1, map_h - 1):
            if rows[r][1] == self.passage:
                candidates.append((r, 0))
            if rows[r][map_w - 2] == self.passage:
                candidates.append((r, map_w - 1))
        return candidates
