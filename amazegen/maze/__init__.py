"""Maze topologies, the shared RNG, and the generic solver."""

from amazegen.maze.arengee import Arengee
from amazegen.maze.coordinates import Cartesian, RingNode
from amazegen.maze.types import (
    Maze,
    MazeCarveError,
    MazeGenerationError,
    Opening,
    Solution,
)
from amazegen.maze.solver import dijkstra, find_path, make_solution
from amazegen.maze.rectilinear import RectilinearMaze
from amazegen.maze.sigma import SigmaMaze
from amazegen.maze.delta import DeltaMaze
from amazegen.maze.theta import RingMaze, compute_no_of_columns
from amazegen.maze.mask import MaskedMaze, circular_mask
from amazegen.maze.validation import (
    carved_adjacency,
    validate_partition,
    validate_solution,
    validate_spanning_tree,
)

__all__ = [
    "Arengee",
    "Cartesian",
    "DeltaMaze",
    "MaskedMaze",
    "Maze",
    "MazeCarveError",
    "MazeGenerationError",
    "Opening",
    "RectilinearMaze",
    "RingMaze",
    "RingNode",
    "SigmaMaze",
    "Solution",
    "carved_adjacency",
    "circular_mask",
    "compute_no_of_columns",
    "dijkstra",
    "find_path",
    "make_solution",
    "validate_partition",
    "validate_solution",
    "validate_spanning_tree",
]
