"""Growing tree that always extends the newest cell (Jarník variant)."""

import logging

import numpy as np

from amazegen.maze.arengee import Arengee
from amazegen.maze.types import Maze

log = logging.getLogger(__name__)


def growing_tree(maze: Maze, rng: Arengee) -> Maze:
    """Carve a spanning tree by randomized backtracking from a random cell.

    The top of the stack is extended into a random unvisited wall
    neighbour; when it has none it is popped. Working only on the top
    gives long corridors with few branches.

    Args:
        maze: Template maze with every wall standing. Mutated in place.
        rng: Shared RNG.

    Returns:
        The same maze, carved.
    """
    visited = np.zeros(maze.index_size(), dtype=bool)
    start = maze.get_random_node(rng)
    visited[maze.get_index(start)] = True
    stack = [start]
    steps = 0

    while stack:
        top = stack[-1]
        targets = [n for n in maze.get_walls(top) if not visited[maze.get_index(n)]]
        if targets:
            target = rng.choice(targets)
            maze.carve(top, target)
            visited[maze.get_index(target)] = True
            stack.append(target)
            steps += 1
        else:
            stack.pop()

    log.debug("Growing tree from %s carved %d edges", start, steps)
    return maze
