"""Post-generation checks for carved mazes and their solutions.

Every check returns a list of error strings; an empty list means valid.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components

from amazegen.maze.types import Maze, Solution

log = logging.getLogger(__name__)


def carved_adjacency(maze: Maze) -> scipy.sparse.csr_matrix:
    """Symmetric adjacency matrix of carved passages.

    Rows and columns follow the order of ``maze.get_all_nodes()``, so masked
    cells do not show up as isolated vertices.
    """
    nodes = maze.get_all_nodes()
    position = {node: i for i, node in enumerate(nodes)}
    rows, cols = [], []
    for node in nodes:
        for neighbour in maze.get_paths(node):
            if neighbour in position:
                rows.append(position[node])
                cols.append(position[neighbour])
    data = np.ones(len(rows), dtype=np.int8)
    return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(len(nodes), len(nodes)))


def validate_partition(maze: Maze) -> list[str]:
    """Walls and paths split each node's neighbours between them.

    Checks that walls and paths are disjoint, that together they cover
    exactly the structural neighbours from ``get_all_edges``, and that every
    path is seen from both ends.
    """
    errors: list[str] = []
    expected: dict = {}
    for a, b in maze.get_all_edges():
        expected.setdefault(a, set()).add(b)
        expected.setdefault(b, set()).add(a)

    for node in maze.get_all_nodes():
        walls = set(maze.get_walls(node))
        paths = maze.get_paths(node)
        overlap = walls.intersection(paths)
        if overlap:
            errors.append(f"{node}: neighbours both walled and carved: {sorted(overlap)}")
        if len(set(paths)) != len(paths):
            errors.append(f"{node}: duplicate carved neighbours {paths}")
        neighbours = expected.get(node, set())
        seen = walls | set(paths)
        if seen != neighbours:
            errors.append(
                f"{node}: walls and paths do not cover its neighbours "
                f"(missing {sorted(neighbours - seen)}, extra {sorted(seen - neighbours)})"
            )
        for neighbour in paths:
            if node not in maze.get_paths(neighbour):
                errors.append(f"Passage {node} -> {neighbour} is not symmetric")
    return errors


def validate_spanning_tree(maze: Maze) -> list[str]:
    """Carved passages form a spanning tree over all (unmasked) nodes.

    Exactly ``|nodes| - 1`` edges plus a single connected component
    implies there is no cycle.
    """
    errors: list[str] = []
    adj = carved_adjacency(maze)
    n_nodes = adj.shape[0]

    n_edges = adj.nnz // 2
    if n_edges != n_nodes - 1:
        errors.append(f"Expected {n_nodes - 1} carved edges, found {n_edges}")

    n_components, _ = connected_components(adj, directed=False)
    if n_components != 1:
        errors.append(f"Not connected: {n_components} components found")

    return errors


def validate_solution(maze: Maze, solution: Solution) -> list[str]:
    """Check the solution path against the carved maze.

    Checks (cheapest first):
    1. No repeated node
    2. Endpoints are boundary candidates (when the maze has any)
    3. Consecutive nodes are connected by a carved passage
    4. Entrance distances increase by one along the path
    5. The exit's distance equals the path length (1-based)
    """
    errors: list[str] = []
    path = solution.path
    if not path:
        return ["Solution path is empty"]

    # 1. No repeats
    if len(set(path)) != len(path):
        errors.append("Solution path visits a node more than once")

    # 2. Endpoints
    entrance_side = maze.entrance_candidates()
    exit_side = maze.exit_candidates()
    if entrance_side and solution.entrance not in entrance_side:
        errors.append(f"Entrance {solution.entrance} is not on the entrance side")
    if exit_side and solution.exit not in exit_side:
        errors.append(f"Exit {solution.exit} is not on the exit side")

    # 3. Connectivity
    for a, b in zip(path, path[1:]):
        if b not in maze.get_paths(a):
            errors.append(f"No passage between consecutive nodes {a} and {b}")

    # 4. Distances
    distances = solution.distances
    along = [int(distances[maze.get_index(node)]) for node in path]
    if along != list(range(1, len(path) + 1)):
        errors.append("Distances along the path do not increase by one from 1")

    # 5. Exit distance
    exit_distance = int(distances[maze.get_index(solution.exit)])
    if exit_distance != len(path):
        errors.append(
            f"Exit distance {exit_distance} does not match path length {len(path)}"
        )

    return errors
