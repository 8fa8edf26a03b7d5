"""Spanning-tree generators and the algorithm dispatch used by the pipeline."""

from amazegen.config.parameters import Algorithm
from amazegen.generator.growing_tree import growing_tree
from amazegen.generator.kruskal import kruskal
from amazegen.maze.arengee import Arengee
from amazegen.maze.types import Maze

GENERATORS = {
    Algorithm.KRUSKAL: kruskal,
    Algorithm.GROWING_TREE: growing_tree,
}


def run_algorithm(algorithm: Algorithm, maze: Maze, rng: Arengee) -> Maze:
    """Carve ``maze`` with the selected algorithm."""
    return GENERATORS[Algorithm(algorithm)](maze, rng)


__all__ = [
    "GENERATORS",
    "growing_tree",
    "kruskal",
    "run_algorithm",
]
