from typing import Tuple

Coords = Tuple[int, int]


class Cell:
    # Passage bits, laid out as "wesn"
    NORTH = 0b0001
    SOUTH = 0b0010
    EAST  = 0b0100
    WEST  = 0b1000

    EMPTY = 0
    ALL = NORTH | SOUTH | EAST | WEST

    # Direction Helpers
    DIRECTIONS = (NORTH, SOUTH, WEST, EAST)
    DX = {NORTH: 0, SOUTH: 0, EAST: 1, WEST: -1}
    DY = {NORTH: -1, SOUTH: 1, EAST: 0, WEST: 0}
    OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}
    NAMES = {NORTH: "NORTH", SOUTH: "SOUTH", EAST: "EAST", WEST: "WEST"}

    @staticmethod
    def passages_count(cell: int) -> int:
        c = 0
        if cell & Cell.NORTH: c += 1
        if cell & Cell.SOUTH: c += 1
        if cell & Cell.EAST: c += 1
        if cell & Cell.WEST: c += 1
        return c

    @staticmethod
    def walls_count(cell: int) -> int:
        return 4 - Cell.passages_count(cell)

    @staticmethod
    def is_end(cell: int) -> bool:
        """A maze end (dead end) has exactly one passage."""
        return Cell.walls_count(cell) == 3

    @staticmethod
    def to_bits_str(cell: int) -> str:
        return format(cell & Cell.ALL, "04b")

    @staticmethod
    def name(direction: int) -> str:
        return Cell.NAMES.get(direction, str(direction))
