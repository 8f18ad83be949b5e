import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from orthomaze.core.grid import Grid
from orthomaze.core.stats import calculate_stats
from orthomaze.maze.builder import OrthogonalMazeBuilder
from test_maze import generate_valid_grid

class TestStats(unittest.TestCase):
    def test_fixture_counts(self):
        stats = calculate_stats(generate_valid_grid())
        self.assertEqual(stats["dead_ends"], 4)
        self.assertEqual(stats["intersections"], 2) # (1,1) and (1,2)
        self.assertEqual(stats["corridors"], 10)
        self.assertAlmostEqual(stats["dead_end_percent"], 25.0)

    def test_counts_cover_every_cell(self):
        maze = OrthogonalMazeBuilder().width(30).height(30).seed(99).build()
        stats = calculate_stats(maze.grid)
        total = stats["dead_ends"] + stats["corridors"] + stats["intersections"]
        self.assertEqual(total, 900)
        self.assertGreater(stats["dead_ends"], 0)

    def test_empty_grid(self):
        stats = calculate_stats(Grid(0, 0))
        self.assertEqual(stats["dead_end_percent"], 0)

if __name__ == '__main__':
    unittest.main()
