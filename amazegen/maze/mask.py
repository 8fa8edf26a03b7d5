"""Decorator that hides a subset of cells from generators and the solver.

The wrapped maze keeps its full storage; masked cells simply never appear
as walls, edges, nodes or boundary candidates, so nothing ever carves into
them.
"""

import logging
from collections.abc import Callable

import numpy as np

from amazegen.maze import solver
from amazegen.maze.arengee import Arengee
from amazegen.maze.rectilinear import RectilinearMaze
from amazegen.maze.types import Maze, Opening, Solution

log = logging.getLogger(__name__)

Masker = Callable[[Maze], np.ndarray]


class MaskedMaze:
    """View of ``maze`` without the cells flagged by ``masker``.

    Args:
        maze: The maze to wrap. Carving through the view mutates it.
        masker: Returns a boolean array indexed by ``maze.get_index``;
            True marks a cell as masked out.

    Raises:
        ValueError: If the mask has the wrong length or hides every cell.
    """

    def __init__(self, maze: Maze, masker: Masker) -> None:
        mask = np.asarray(masker(maze), dtype=bool)
        if mask.shape != (maze.index_size(),):
            raise ValueError(
                f"mask has shape {mask.shape}, expected ({maze.index_size()},)"
            )
        self.maze = maze
        self.masked = mask
        self.unmasked_nodes = [
            node for node in maze.get_all_nodes() if not mask[maze.get_index(node)]
        ]
        if not self.unmasked_nodes:
            raise ValueError("mask hides every cell")
        log.debug(
            "Masked %d of %d cells", len(mask) - len(self.unmasked_nodes), len(mask)
        )

    def is_masked(self, node) -> bool:
        return bool(self.masked[self.maze.get_index(node)])

    @property
    def entrance_opening(self) -> Opening | None:
        return self.maze.entrance_opening

    @property
    def exit_opening(self) -> Opening | None:
        return self.maze.exit_opening

    def carve(self, node, neighbour) -> None:
        self.maze.carve(node, neighbour)

    def get_walls(self, node) -> list:
        return [n for n in self.maze.get_walls(node) if not self.is_masked(n)]

    def get_paths(self, node) -> list:
        return self.maze.get_paths(node)

    def get_random_node(self, rng: Arengee):
        return rng.choice(self.unmasked_nodes)

    def get_all_edges(self) -> list:
        return [
            (a, b)
            for a, b in self.maze.get_all_edges()
            if not (self.is_masked(a) or self.is_masked(b))
        ]

    def get_all_nodes(self) -> list:
        return list(self.unmasked_nodes)

    def get_index(self, node) -> int:
        return self.maze.get_index(node)

    def index_size(self) -> int:
        return self.maze.index_size()

    def entrance_candidates(self) -> list:
        return [n for n in self.maze.entrance_candidates() if not self.is_masked(n)]

    def exit_candidates(self) -> list:
        return [n for n in self.maze.exit_candidates() if not self.is_masked(n)]

    def open_entrance(self, node, rng: Arengee) -> None:
        self.maze.open_entrance(node, rng)

    def open_exit(self, node, rng: Arengee) -> None:
        self.maze.open_exit(node, rng)

    def make_solution(self, rng: Arengee) -> Solution:
        return solver.make_solution(self, rng)


def circular_mask(maze: RectilinearMaze) -> np.ndarray:
    """Mask everything outside the ellipse inscribed in a rectilinear grid.

    The centre column is always kept, so the first and last rows each keep
    at least one cell and the remaining region stays connected.
    """
    width, height = maze.extents
    xs = (np.arange(width) + 0.5 - width / 2) / (width / 2)
    ys = (np.arange(height) + 0.5 - height / 2) / (height / 2)
    inside = ys[:, None] ** 2 + xs[None, :] ** 2 <= 1.0
    inside[:, width // 2] = True
    # Row-major, matching RectilinearMaze.get_index
    return ~inside.ravel()
