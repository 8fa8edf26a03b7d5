"""Randomized Kruskal: shuffled edges merged through a union-find."""

import logging

import numpy as np

from amazegen.maze.arengee import Arengee
from amazegen.maze.types import Maze

log = logging.getLogger(__name__)


class _Classes:
    """Union-find as a class id per cell plus the member list of each class.

    Merging relabels the smaller class, so each cell is relabelled at most
    log2(n) times.
    """

    def __init__(self, maze: Maze) -> None:
        self.maze = maze
        self.class_of = np.full(maze.index_size(), -1, dtype=np.int64)
        self.members: list[list] = []
        for node in maze.get_all_nodes():
            self.class_of[maze.get_index(node)] = len(self.members)
            self.members.append([node])

    def find(self, node) -> int:
        return int(self.class_of[self.maze.get_index(node)])

    def distinct(self, a, b) -> bool:
        return self.find(a) != self.find(b)

    def link(self, a, b) -> None:
        source, target = self.find(a), self.find(b)
        if len(self.members[source]) > len(self.members[target]):
            source, target = target, source
        drained = self.members[source]
        self.members[source] = []
        for node in drained:
            self.class_of[self.maze.get_index(node)] = target
        self.members[target].extend(drained)


def kruskal(maze: Maze, rng: Arengee) -> Maze:
    """Carve a spanning tree by visiting every edge in random order.

    An edge is carved iff its endpoints are still in different classes.
    The only source of randomness is the edge shuffle.

    Args:
        maze: Template maze with every wall standing. Mutated in place.
        rng: Shared RNG.

    Returns:
        The same maze, carved.
    """
    edges = maze.get_all_edges()
    rng.shuffle(edges)
    classes = _Classes(maze)

    carved = 0
    for a, b in edges:
        if classes.distinct(a, b):
            maze.carve(a, b)
            classes.link(a, b)
            carved += 1

    log.debug("Kruskal carved %d of %d edges", carved, len(edges))
    return maze
