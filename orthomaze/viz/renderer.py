from typing import Iterator, List, Optional, Tuple

import pygame

from orthomaze.core.cell import Cell, Coords
from orthomaze.core.grid import Grid
from orthomaze.pathfind.astar import find_path

MIN_CELL_SIZE = 0.001
MAX_CELL_SIZE = 100.0


class Camera:
    """Maps grid coordinates to pixels: cell_size pixels per cell, shifted by an offset."""

    def __init__(self, cell_size: float = 20.0, offset: Tuple[float, float] = (0.0, 0.0)):
        self.cell_size = cell_size
        self.offset_x, self.offset_y = offset

    def fit(self, cols: int, rows: int, view_w: int, view_h: int, padding: int = 40):
        """Largest zoom that shows cols x rows cells inside the view, centred."""
        self.cell_size = min((view_w - 2 * padding) / max(1, cols), (view_h - 2 * padding) / max(1, rows))
        self.offset_x = (view_w - cols * self.cell_size) / 2
        self.offset_y = (view_h - rows * self.cell_size) / 2

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        return int(x * self.cell_size + self.offset_x), int(y * self.cell_size + self.offset_y)

    def to_world(self, sx: float, sy: float) -> Tuple[float, float]:
        return (sx - self.offset_x) / self.cell_size, (sy - self.offset_y) / self.cell_size

    def zoom_at(self, sx: float, sy: float, factor: float):
        # The world point under (sx, sy) stays put
        wx, wy = self.to_world(sx, sy)
        self.cell_size = max(MIN_CELL_SIZE, min(MAX_CELL_SIZE, self.cell_size * factor))
        self.offset_x = sx - wx * self.cell_size
        self.offset_y = sy - wy * self.cell_size

    def pan(self, dx: float, dy: float):
        self.offset_x += dx
        self.offset_y += dy


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_CARVED = (60, 100, 160) # Blue tint
    COLOR_SOLUTION = (255, 215, 0) # Gold
    ZOOM_STEP = 1.1

    def __init__(self, grid: Grid, generator: Optional[Iterator[str]] = None,
                 endpoints: Optional[Tuple[Coords, Coords]] = None, width=1280, height=720):
        """
        generator: an Algorithm.run(...) iterator to animate, or None for a finished grid.
        endpoints: (start, goal) to solve and draw once generation is done.
        """
        self.grid = grid
        self.generator = generator
        self.endpoints = endpoints
        self.path: List[Coords] = []
        self.size = (width, height)
        self.camera = Camera()

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None

    def fit_to_screen(self):
        self.camera.fit(self.grid.width, self.grid.height, *self.size)

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"orthomaze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode(self.size, pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.size = (event.w, event.h)
        elif event.type == pygame.MOUSEWHEEL:
            factor = self.ZOOM_STEP if event.y > 0 else 1 / self.ZOOM_STEP
            self.camera.zoom_at(*pygame.mouse.get_pos(), factor)
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.camera.pan(*event.rel)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_f:
                self.fit_to_screen()
            elif event.key == pygame.K_SPACE:
                self.finish_generation()

    def visible_range(self, surface: pygame.Surface) -> Tuple[int, int, int, int]:
        screen_w, screen_h = surface.get_size()
        left, top = self.camera.to_world(0, 0)
        right, bottom = self.camera.to_world(screen_w, screen_h)
        return (
            max(0, int(left)),
            max(0, int(top)),
            min(self.grid.width, int(right) + 1),
            min(self.grid.height, int(bottom) + 1),
        )

    def draw_maze(self, surface: pygame.Surface):
        """Draws the visible part of the grid onto any surface (window or off-screen)."""
        surface.fill(self.COLOR_BG)
        start_x, start_y, end_x, end_y = self.visible_range(surface)
        size = int(self.camera.cell_size) + 1

        # Pass 1 - cells that already have a passage
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                if self.grid.cells[y * self.grid.width + x]:
                    px, py = self.camera.to_screen(x, y)
                    pygame.draw.rect(surface, self.COLOR_CARVED, (px, py, size, size))

        # Pass 2 - solution path
        for (cx, cy) in self.path:
            if start_x <= cx < end_x and start_y <= cy < end_y:
                px, py = self.camera.to_screen(cx, cy)
                pygame.draw.rect(surface, self.COLOR_SOLUTION, (px, py, size, size))

        # Pass 3 - walls, skipped when zoomed far out
        if self.camera.cell_size <= 4.0:
            return
        wall = self.COLOR_WALL
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                cell = self.grid.cells[y * self.grid.width + x]
                px, py = self.camera.to_screen(x, y)
                if not cell & Cell.SOUTH:
                    pygame.draw.line(surface, wall, (px, py + size), (px + size, py + size), 1)
                if not cell & Cell.EAST:
                    pygame.draw.line(surface, wall, (px + size, py), (px + size, py + size), 1)
                if y == 0 and not cell & Cell.NORTH:
                    pygame.draw.line(surface, wall, (px, py), (px + size, py), 1)
                if x == 0 and not cell & Cell.WEST:
                    pygame.draw.line(surface, wall, (px, py), (px, py + size), 1)

    def draw_hud(self):
        cells = self.grid.width * self.grid.height
        info = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Zoom: {self.camera.cell_size:.2f}",
            f"Status: {'Done' if self.gen_finished else 'Generating (space to skip)'}",
        ]
        if self.path:
            info.append(f"Path: {len(self.path)} cells")

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step_generator(self, steps: int = 10):
        if self.gen_finished:
            return
        try:
            for _ in range(steps):
                next(self.generator)
        except StopIteration:
            self.gen_finished = True
            self.solve()

    def finish_generation(self):
        if self.gen_finished:
            return
        for _ in self.generator:
            pass
        self.gen_finished = True
        self.solve()

    def solve(self):
        if not self.endpoints:
            return
        result = find_path(self.grid, *self.endpoints)
        self.path = result[0] if result else []

    def run_loop(self):
        if self.gen_finished:
            self.solve()

        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)

            self.step_generator()

            self.draw_maze(self.surface)
            self.draw_hud()
            pygame.display.flip()

            self.clock.tick(60)

        pygame.quit()
