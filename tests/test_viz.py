import unittest
import sys
import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from orthomaze.algo.recursive_backtracking import RecursiveBacktracking
from orthomaze.core.cell import Cell
from orthomaze.core.grid import Grid
from orthomaze.core.validate import validate
from orthomaze.viz.renderer import MAX_CELL_SIZE, Camera, Renderer
from orthomaze.viz.tiles import NE, SW, has_corner, tile_index, tile_name
from test_maze import generate_valid_grid

def pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]

class TestTiles(unittest.TestCase):
    def test_tile_name(self):
        self.assertEqual(tile_name(0b0101), "tile_0101.png")
        self.assertEqual(tile_name(0), "tile_0000.png")
        self.assertEqual(tile_name(Cell.ALL), "tile_1111.png")

    def test_plain_tiles(self):
        self.assertEqual(tile_index(0, (0, 0), {}), 357)
        self.assertEqual(tile_index(Cell.NORTH, (0, 0), {}), 285)
        self.assertEqual(tile_index(Cell.WEST | Cell.EAST, (0, 0), {}), 281)

    def test_corner_tiles(self):
        cell = Cell.NORTH | Cell.EAST
        self.assertEqual(tile_index(cell, (0, 0), {(0, 0): cell}), 313)
        # East neighbour without a north passage closes the corner
        self.assertEqual(tile_index(cell, (0, 0), {(0, 0): cell, (1, 0): 0}), 306)

    def test_has_corner(self):
        cells = {(1, 1): Cell.ALL, (0, 1): Cell.EAST, (1, 2): Cell.NORTH}
        # (0,1) has no south passage
        self.assertTrue(has_corner((1, 1), SW, cells))
        # Nothing known to the north east
        self.assertFalse(has_corner((1, 1), NE, cells))
        # Negative neighbours are never looked up
        self.assertFalse(has_corner((0, 0), (-1, -1), {(-1, 0): 0}))

    def test_every_cell_of_a_maze_has_a_tile(self):
        grid = generate_valid_grid()
        cells = {(i % grid.width, i // grid.width): c for i, c in enumerate(grid.cells)}
        for coords, cell in cells.items():
            self.assertGreaterEqual(tile_index(cell, coords, cells), 0)

    def test_invalid_pattern(self):
        with self.assertRaises(ValueError):
            tile_name(16)
        with self.assertRaises(ValueError):
            tile_index(-1, (0, 0), {})

class TestRenderer(unittest.TestCase):
    def setUp(self):
        self.surface = pygame.Surface((100, 100))

    def make_renderer(self, grid, **kwargs):
        renderer = Renderer(grid, **kwargs)
        renderer.camera = Camera(cell_size=20.0)
        return renderer

    def test_walls_drawn_between_cells(self):
        renderer = self.make_renderer(Grid(2, 2))
        renderer.draw_maze(self.surface)
        self.assertEqual(pixel(self.surface, 21, 10), Renderer.COLOR_WALL)
        self.assertEqual(pixel(self.surface, 10, 10), Renderer.COLOR_BG)

    def test_carved_cells_and_open_walls(self):
        grid = Grid(2, 2)
        grid.carve_passage((0, 0), Cell.EAST)
        renderer = self.make_renderer(grid)
        renderer.draw_maze(self.surface)
        self.assertEqual(pixel(self.surface, 10, 10), Renderer.COLOR_CARVED)
        self.assertEqual(pixel(self.surface, 21, 10), Renderer.COLOR_CARVED)

    def test_path_overlay(self):
        renderer = self.make_renderer(Grid(2, 2))
        renderer.path = [(1, 1)]
        renderer.draw_maze(self.surface)
        self.assertEqual(pixel(self.surface, 30, 30), Renderer.COLOR_SOLUTION)

    def test_visible_range(self):
        renderer = self.make_renderer(Grid(50, 50))
        renderer.camera.pan(-200, 0)
        self.assertEqual(renderer.visible_range(self.surface), (10, 0, 16, 6))

    def test_fit_to_screen(self):
        renderer = Renderer(Grid(10, 5), width=400, height=300)
        renderer.fit_to_screen()
        self.assertAlmostEqual(renderer.camera.cell_size, 32.0)
        self.assertAlmostEqual(renderer.camera.offset_x, 40.0)
        self.assertAlmostEqual(renderer.camera.offset_y, 70.0)

    def test_animation_then_solve(self):
        grid = Grid(8, 6)
        generator = RecursiveBacktracking().run(grid, None, random.Random(5))
        renderer = self.make_renderer(grid, generator=generator, endpoints=((0, 0), (7, 5)))
        self.assertFalse(renderer.gen_finished)

        for _ in range(1000):
            renderer.step_generator()
            if renderer.gen_finished:
                break
        self.assertTrue(renderer.gen_finished)
        self.assertTrue(validate(grid))

        renderer.solve()
        self.assertEqual(renderer.path[0], (0, 0))
        self.assertEqual(renderer.path[-1], (7, 5))

    def test_solve_without_endpoints(self):
        renderer = self.make_renderer(generate_valid_grid())
        renderer.solve()
        self.assertEqual(renderer.path, [])

    def test_skip_to_finished_maze(self):
        grid = Grid(6, 6)
        generator = RecursiveBacktracking().run(grid, None, random.Random(2))
        renderer = self.make_renderer(grid, generator=generator, endpoints=((0, 0), (5, 5)))
        renderer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        self.assertTrue(renderer.gen_finished)
        self.assertTrue(validate(grid))
        self.assertEqual(renderer.path[-1], (5, 5))

    def test_drag_pans_and_key_refits(self):
        renderer = self.make_renderer(Grid(10, 5), width=400, height=300)
        renderer.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 5), rel=(15, -5), buttons=(1, 0, 0)))
        self.assertEqual((renderer.camera.offset_x, renderer.camera.offset_y), (15, -5))

        renderer.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_f))
        self.assertAlmostEqual(renderer.camera.cell_size, 32.0)

    def test_quit(self):
        renderer = self.make_renderer(Grid(2, 2))
        renderer.handle_event(pygame.event.Event(pygame.QUIT))
        self.assertFalse(renderer.running)

class TestCamera(unittest.TestCase):
    def test_zoom_keeps_point_under_cursor(self):
        camera = Camera(cell_size=10.0, offset=(30.0, -20.0))
        before = camera.to_world(120, 80)
        camera.zoom_at(120, 80, 1.1)
        self.assertAlmostEqual(camera.cell_size, 11.0)
        after = camera.to_world(120, 80)
        self.assertAlmostEqual(before[0], after[0])
        self.assertAlmostEqual(before[1], after[1])

    def test_zoom_is_clamped(self):
        camera = Camera(cell_size=90.0)
        camera.zoom_at(0, 0, 2.0)
        self.assertEqual(camera.cell_size, MAX_CELL_SIZE)

    def test_to_screen(self):
        camera = Camera(cell_size=8.0, offset=(4.0, 2.0))
        self.assertEqual(camera.to_screen(3, 1), (28, 10))

    def test_fit_degenerate_grid(self):
        camera = Camera()
        camera.fit(0, 0, 200, 100)
        self.assertAlmostEqual(camera.cell_size, 20.0)

if __name__ == '__main__':
    unittest.main()
