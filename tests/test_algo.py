import random
import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from orthomaze.algo.aldous_broder import AldousBroder
from orthomaze.algo.binary_tree import Bias, BinaryTree
from orthomaze.algo.catalog import ALGORITHMS, create_algorithm
from orthomaze.algo.eller import Eller
from orthomaze.algo.growing_tree import GrowingTree, Method
from orthomaze.algo.hunt_and_kill import HuntAndKill
from orthomaze.algo.kruskal import DisjointSet, Kruskal
from orthomaze.algo.prim import Prim
from orthomaze.algo.recursive_backtracking import RecursiveBacktracking
from orthomaze.algo.recursive_division import RecursiveDivision
from orthomaze.algo.sidewinder import Sidewinder
from orthomaze.core.cell import Cell
from orthomaze.core.errors import TransitError
from orthomaze.core.grid import Grid
from orthomaze.core.validate import validate

SIZES = [(1, 1), (1, 6), (6, 1), (2, 2), (7, 5), (16, 16)]

def all_algorithms():
    return [
        AldousBroder(),
        BinaryTree(),
        Eller(),
        GrowingTree(),
        HuntAndKill(),
        Kruskal(),
        Prim(),
        RecursiveBacktracking(),
        RecursiveDivision(),
        Sidewinder(),
    ]

def generate(algo, w, h, seed=42, start=None):
    grid = Grid(w, h)
    algo.generate(grid, start, random.Random(seed))
    return grid

def count_passages(grid):
    # Each passage sets one bit on both of its cells
    return sum(Cell.passages_count(v) for v in grid.cells) // 2

def assert_symmetric(test, grid):
    for y in range(grid.height):
        for x in range(grid.width):
            for direction in Cell.DIRECTIONS:
                try:
                    nxt = grid.get_next_cell_coords((x, y), direction)
                except TransitError:
                    test.assertFalse(grid.is_carved((x, y), direction), f"({x},{y}) open to the void")
                    continue
                test.assertEqual(
                    grid.is_carved((x, y), direction),
                    grid.is_carved(nxt, Cell.OPPOSITE[direction]),
                    f"Asymmetric passage at ({x},{y}) {Cell.name(direction)}",
                )

class TestGenerators(unittest.TestCase):
    def test_every_algorithm_is_valid(self):
        for algo in all_algorithms():
            for w, h in SIZES:
                with self.subTest(algo=algo.name(), size=(w, h)):
                    grid = generate(algo, w, h)
                    self.assertTrue(validate(grid), f"{algo.name()} left unreachable cells")

    def test_every_algorithm_builds_a_perfect_maze(self):
        # A spanning tree over w*h cells has exactly w*h - 1 passages
        for algo in all_algorithms():
            with self.subTest(algo=algo.name()):
                grid = generate(algo, 12, 9, seed=7)
                self.assertEqual(count_passages(grid), 12 * 9 - 1)

    def test_symmetry(self):
        for algo in all_algorithms():
            with self.subTest(algo=algo.name()):
                assert_symmetric(self, generate(algo, 9, 7, seed=3))

    def test_determinism(self):
        for algo in all_algorithms():
            with self.subTest(algo=algo.name()):
                grid1 = generate(algo, 10, 10, seed=12345)
                grid2 = generate(algo, 10, 10, seed=12345)
                self.assertEqual(grid1.cells.tobytes(), grid2.cells.tobytes())

    def test_run_yields_progress(self):
        grid = Grid(30, 30)
        updates = list(RecursiveBacktracking().run(grid, None, random.Random(1)))
        self.assertEqual(updates[-1], "Done")
        self.assertGreater(len(updates), 1)

    def test_start_coords_support(self):
        supported = {"RecursiveBacktracking", "AldousBroder", "GrowingTree", "HuntAndKill", "Prim"}
        for algo in all_algorithms():
            self.assertEqual(algo.has_start_coords(), algo.name() in supported, algo.name())

    def test_start_coords_are_used(self):
        for algo in [RecursiveBacktracking(), AldousBroder(), GrowingTree(), HuntAndKill(), Prim()]:
            with self.subTest(algo=algo.name()):
                grid = generate(algo, 6, 6, start=(5, 5))
                self.assertTrue(validate(grid))

    def test_empty_grid_terminates(self):
        for algo in all_algorithms():
            grid = generate(algo, 0, 0)
            self.assertEqual(len(grid), 0)

class TestAlgorithmShapes(unittest.TestCase):
    def test_binary_tree_north_east_corridors(self):
        grid = generate(BinaryTree(Bias.NORTH_EAST), 8, 8)
        # Top row can only go east, east column can only go north
        for x in range(7):
            self.assertTrue(grid.is_carved((x, 0), Cell.EAST))
        for y in range(1, 8):
            self.assertTrue(grid.is_carved((7, y), Cell.NORTH))

    def test_binary_tree_south_west_corridors(self):
        grid = generate(BinaryTree(Bias.SOUTH_WEST), 8, 8)
        for x in range(1, 8):
            self.assertTrue(grid.is_carved((x, 7), Cell.WEST))
        for y in range(7):
            self.assertTrue(grid.is_carved((0, y), Cell.SOUTH))

    def test_bias_from_name(self):
        self.assertEqual(Bias.from_name("north-west"), Bias.NORTH_WEST)
        self.assertEqual(Bias.from_name("SOUTH_EAST"), Bias.SOUTH_EAST)
        with self.assertRaises(KeyError):
            Bias.from_name("up")

    def test_sidewinder_top_row_is_one_corridor(self):
        grid = generate(Sidewinder(), 9, 6)
        for x in range(8):
            self.assertTrue(grid.is_carved((x, 0), Cell.EAST))
        # Nothing ever carves north out of the top row
        for x in range(9):
            self.assertFalse(grid.is_carved((x, 0), Cell.NORTH))

    def test_eller_last_row_is_joined(self):
        for seed in range(5):
            grid = generate(Eller(), 8, 5, seed=seed)
            self.assertTrue(validate(grid))

    def test_growing_tree_methods(self):
        for method in Method:
            with self.subTest(method=method):
                grid = generate(GrowingTree(method), 10, 8)
                self.assertTrue(validate(grid))
                self.assertEqual(count_passages(grid), 79)

    def test_growing_tree_newest_has_fewer_dead_ends(self):
        # NEWEST carves long corridors, RANDOM branches everywhere
        newest = generate(GrowingTree(Method.NEWEST), 30, 30, seed=5)
        rand = generate(GrowingTree(Method.RANDOM), 30, 30, seed=5)
        ends = lambda g: sum(1 for v in g.cells if Cell.is_end(v))
        self.assertLess(ends(newest), ends(rand))

    def test_method_from_name(self):
        self.assertEqual(Method.from_name("newest75-random25"), Method.NEWEST75_RANDOM25)
        self.assertEqual(Method.from_name("OLDEST"), Method.OLDEST)
        with self.assertRaises(KeyError):
            Method.from_name("sideways")

    def test_recursive_division_splits_square_grid(self):
        grid = generate(RecursiveDivision(), 2, 2, seed=9)
        # Three of the four inner boundaries stay open
        self.assertEqual(count_passages(grid), 3)

class TestDisjointSet(unittest.TestCase):
    def test_union_find(self):
        sets = DisjointSet(5)
        self.assertTrue(sets.union(0, 1))
        self.assertTrue(sets.union(3, 4))
        self.assertFalse(sets.union(1, 0))
        self.assertEqual(sets.find(0), sets.find(1))
        self.assertNotEqual(sets.find(1), sets.find(3))
        self.assertTrue(sets.union(1, 4))
        self.assertEqual(sets.find(0), sets.find(3))

class TestCatalog(unittest.TestCase):
    def test_catalog_names(self):
        self.assertEqual(len(ALGORITHMS), 10)
        for name in ALGORITHMS:
            self.assertIsNotNone(create_algorithm(name))

    def test_algorithm_options(self):
        algo = create_algorithm("binary-tree", bias=Bias.SOUTH_EAST)
        self.assertEqual(algo.bias, Bias.SOUTH_EAST)
        algo = create_algorithm("growing-tree", method=Method.OLDEST)
        self.assertEqual(algo.method, Method.OLDEST)

    def test_unknown_algorithm(self):
        with self.assertRaises(ValueError):
            create_algorithm("wilson")

if __name__ == '__main__':
    unittest.main()
