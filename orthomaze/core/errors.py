from orthomaze.core.cell import Cell, Coords


class MazeError(Exception):
    """Base class for every failure raised by the maze engine."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TransitError(MazeError):
    """A move or carve targets a cell outside of the grid."""

    def __init__(self, coords: Coords, direction: int):
        self.coords = coords
        self.direction = direction
        super().__init__(
            f"Cannot move {Cell.name(direction)} from {coords}: no cell in that direction"
        )


class BuildError(MazeError):
    """An incompatible combination of builder options was requested."""

    def __init__(self, algorithm_name: str):
        self.algorithm_name = algorithm_name
        super().__init__(f"Algorithm `{algorithm_name}` doesn't support `start_coords`")

    def __str__(self):
        return f"Cannot build maze. Reason: {self.reason}"


class MazeSaveError(MazeError):
    """Formatting or writing a maze to disk failed."""

    def __str__(self):
        return f"Cannot save maze to file. Reason: {self.reason}"
