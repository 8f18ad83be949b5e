import numpy as np

from orthomaze.core.cell import Cell
from orthomaze.core.grid import Grid
from orthomaze.formatters.base import Formatter, ImageWrapper
from orthomaze.formatters.color import BLACK, WHITE, Color


class Image(Formatter):
    """
    Rasterizes the maze. Walls are drawn in the foreground color, passages
    and the margin in the background color. Sizes are in pixels.
    """

    def __init__(self, wall: int = 40, passage: int = 40, margin: int = 50,
                 background: Color = WHITE, foreground: Color = BLACK):
        self.wall = wall
        self.passage = passage
        self.margin = margin
        self.background = background
        self.foreground = foreground

    def image_size(self, grid: Grid):
        """(width, height) of the resulting image in pixels."""
        return (
            2 * self.margin + grid.width * self.passage + (grid.width + 1) * self.wall,
            2 * self.margin + grid.height * self.passage + (grid.height + 1) * self.wall,
        )

    def format(self, grid: Grid) -> ImageWrapper:
        img_w, img_h = self.image_size(grid)
        m, p, t = self.margin, self.passage, self.wall

        pixels = np.empty((img_h, img_w, 3), dtype=np.uint8)
        pixels[:, :] = self.background
        # Start with a solid block and cut the passages out of it
        pixels[m:img_h - m, m:img_w - m] = self.foreground

        bg = self.background
        for y in range(grid.height):
            y0 = m + t + y * (p + t)
            for x in range(grid.width):
                x0 = m + t + x * (p + t)
                pixels[y0:y0 + p, x0:x0 + p] = bg

                if grid.is_carved((x, y), Cell.EAST):
                    pixels[y0:y0 + p, x0 + p:x0 + p + t] = bg
                if grid.is_carved((x, y), Cell.SOUTH):
                    pixels[y0 + p:y0 + p + t, x0:x0 + p] = bg

        return ImageWrapper(pixels)
