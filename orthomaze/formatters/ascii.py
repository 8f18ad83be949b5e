from orthomaze.core.cell import Cell
from orthomaze.core.grid import Grid
from orthomaze.formatters.base import Formatter, StringWrapper


class AsciiNarrow(Formatter):
    """
    ASCII with narrow passages:

         _______
        |  ___| |
        |_  |  _|
        | | |_  |
        |_______|
    """

    def format(self, grid: Grid) -> StringWrapper:
        lines = [" " + "_" * (grid.width * 2 - 1) + " "]

        for y in range(grid.height):
            line = ["|"]
            for x in range(grid.width):
                south_open = grid.is_carved((x, y), Cell.SOUTH)
                line.append(" " if south_open else "_")

                if grid.is_carved((x, y), Cell.EAST):
                    # Corner between two cells shows a floor if either has one
                    if south_open or grid.is_carved((x + 1, y), Cell.SOUTH):
                        line.append(" ")
                    else:
                        line.append("_")
                else:
                    line.append("|")
            lines.append("".join(line))

        return StringWrapper("\n".join(lines) + "\n")


class AsciiBroad(Formatter):
    """
    ASCII with broad passages and "+" where walls meet:

        +---+---+---+---+
        |               |
        +---+---+   +   +
        |           |   |
        +   +---+   +   +
        |   |       |   |
        +   +---+---+   +
        |   |           |
        +---+---+---+---+
    """

    def format(self, grid: Grid) -> StringWrapper:
        lines = ["+" + "---+" * grid.width]

        for y in range(grid.height):
            top_line = ["|"]
            bottom_line = ["+"]
            for x in range(grid.width):
                top_line.append("   ")
                top_line.append(" " if grid.is_carved((x, y), Cell.EAST) else "|")

                bottom_line.append("   " if grid.is_carved((x, y), Cell.SOUTH) else "---")
                bottom_line.append("+")
            if grid.width:
                lines.append("".join(top_line))
                lines.append("".join(bottom_line))

        return StringWrapper("\n".join(lines) + "\n")
