from typing import Callable, Dict, Optional

from orthomaze.algo.base import Algorithm
from orthomaze.algo.aldous_broder import AldousBroder
from orthomaze.algo.binary_tree import Bias, BinaryTree
from orthomaze.algo.eller import Eller
from orthomaze.algo.growing_tree import GrowingTree, Method
from orthomaze.algo.hunt_and_kill import HuntAndKill
from orthomaze.algo.kruskal import Kruskal
from orthomaze.algo.prim import Prim
from orthomaze.algo.recursive_backtracking import RecursiveBacktracking
from orthomaze.algo.recursive_division import RecursiveDivision
from orthomaze.algo.sidewinder import Sidewinder

ALGORITHMS: Dict[str, Callable[..., Algorithm]] = {
    "aldous-broder": AldousBroder,
    "binary-tree": BinaryTree,
    "eller": Eller,
    "growing-tree": GrowingTree,
    "hunt-and-kill": HuntAndKill,
    "kruskal": Kruskal,
    "prim": Prim,
    "recursive-backtracking": RecursiveBacktracking,
    "recursive-division": RecursiveDivision,
    "sidewinder": Sidewinder,
}

DEFAULT_ALGORITHM = "recursive-backtracking"


def create_algorithm(name: str, bias: Optional[Bias] = None, method: Optional[Method] = None) -> Algorithm:
    """Instantiates an algorithm by its CLI name, passing on its specific option."""
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}'. Choose one of: {', '.join(ALGORITHMS)}")

    if name == "binary-tree":
        return BinaryTree(bias or Bias.NORTH_EAST)
    if name == "growing-tree":
        return GrowingTree(method or Method.NEWEST)
    return ALGORITHMS[name]()
