from typing import Mapping, Tuple

from orthomaze.core.cell import Cell, Coords

# Corner offsets (dx, dy)
NE = (1, -1)
SE = (1, 1)
NW = (-1, -1)
SW = (-1, 1)

# 1-based tile indices into the top-down shooter tile sheet, keyed by the
# "wesn" passage pattern. Patterns with open sides need corner pieces, so
# they map the corner flags (in the order listed in _CORNERS) to a tile.
_PLAIN = {
    0b0000: 358,
    0b0001: 286,
    0b0010: 312,
    0b0011: 309,
    0b0100: 313,
    0b1000: 285,
    0b1100: 282,
}

_CORNERS = {
    0b0101: (NE,),
    0b0110: (SE,),
    0b0111: (NE, SE),
    0b1001: (NW,),
    0b1010: (SW,),
    0b1011: (NW, SW),
    0b1101: (NE, NW),
    0b1110: (SE, SW),
    0b1111: (NE, NW, SE, SW),
}

_CORNER_TILES = {
    0b0101: {(True,): 307, (False,): 314},
    0b0110: {(True,): 280, (False,): 287},
    0b0111: {(True, True): 310, (True, False): 390, (False, True): 417, (False, False): 338},
    0b1001: {(True,): 308, (False,): 315},
    0b1010: {(True,): 281, (False,): 288},
    0b1011: {(True, True): 311, (True, False): 391, (False, True): 418, (False, False): 339},
    0b1101: {(True, True): 284, (True, False): 420, (False, True): 419, (False, False): 366},
    0b1110: {(True, True): 283, (True, False): 393, (False, True): 392, (False, False): 365},
    0b1111: {
        (True, True, True, True): 341,
        (True, True, True, False): 389,
        (True, True, False, True): 388,
        (True, True, False, False): 337,
        (True, False, True, True): 416,
        (True, False, True, False): 363,
        (True, False, False, True): 394,
        (True, False, False, False): 361,
        (False, True, True, True): 415,
        (False, True, True, False): 421,
        (False, True, False, True): 364,
        (False, True, False, False): 362,
        (False, False, True, True): 336,
        (False, False, True, False): 334,
        (False, False, False, True): 335,
        (False, False, False, False): 340,
    },
}


def _check_pattern(cell: int):
    if not 0 <= cell <= Cell.ALL:
        raise ValueError(f"Cell can only be 4 bits, got {cell}")


def tile_name(cell: int) -> str:
    """Sprite file for a cell, e.g. 'tile_0101.png'."""
    _check_pattern(cell)
    return f"tile_{Cell.to_bits_str(cell)}.png"


def has_corner(position: Coords, corner: Tuple[int, int], cells: Mapping[Coords, int]) -> bool:
    """
    Whether a wall piece is needed in the given corner of the tile at 'position'.

    Step along one axis and look at the wall facing the other axis: if either
    neighbour has that side closed, the corner is solid.
    """
    x, y = position
    dx, dy = corner

    vertical = Cell.SOUTH if dy == 1 else Cell.NORTH
    horizontal = Cell.EAST if dx == 1 else Cell.WEST

    side = cells.get((x + dx, y)) if x + dx >= 0 else None
    if side is not None and not side & vertical:
        return True

    above_below = cells.get((x, y + dy)) if y + dy >= 0 else None
    return above_below is not None and not above_below & horizontal


def tile_index(cell: int, position: Coords, cells: Mapping[Coords, int]) -> int:
    """0-based tile sheet index for the cell at 'position'."""
    _check_pattern(cell)

    if cell in _PLAIN:
        return _PLAIN[cell] - 1

    flags = tuple(has_corner(position, corner, cells) for corner in _CORNERS[cell])
    return _CORNER_TILES[cell][flags] - 1
