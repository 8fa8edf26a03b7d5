"""Distance maps, path reconstruction and entrance/exit selection.

All functions are generic over the Maze protocol. Distances are 1-based
(origin = 1) so that 0 can mark unreached cells in a dense array.
"""

import logging

import numpy as np

from amazegen.maze.arengee import Arengee
from amazegen.maze.types import Maze, Solution

log = logging.getLogger(__name__)


def dijkstra(maze: Maze, origin) -> np.ndarray:
    """Breadth-first distances from ``origin`` over carved passages.

    Every edge has unit weight, so the frontier is expanded one wavefront
    at a time: all cells at distance d are labelled before any at d + 1.

    Args:
        maze: Any maze implementing the protocol.
        origin: Node to measure from.

    Returns:
        int64 array of length ``maze.index_size()``; origin = 1, unreached = 0.
    """
    distances = np.zeros(maze.index_size(), dtype=np.int64)
    distances[maze.get_index(origin)] = 1
    frontier = [origin]

    while frontier:
        new_frontier = []
        for cell in frontier:
            next_distance = distances[maze.get_index(cell)] + 1
            for neighbour in maze.get_paths(cell):
                i = maze.get_index(neighbour)
                if distances[i] == 0:
                    distances[i] = next_distance
                    new_frontier.append(neighbour)
        frontier = new_frontier

    return distances


def find_path(maze: Maze, distances_from_exit: np.ndarray, entrance, exit_node) -> list:
    """Walk from ``entrance`` to ``exit_node`` by always stepping closer to the exit.

    ``distances_from_exit`` must be ``dijkstra(maze, exit_node)``. In a perfect
    maze every cell except the exit has exactly one carved neighbour that
    is strictly closer, so the greedy descent is the unique path.

    Returns:
        Nodes from entrance to exit, both included, exit exactly once.

    Raises:
        ValueError: If the entrance is not connected to the exit, or no
            neighbour is closer (the distance map does not match the maze).
    """
    cursor = entrance
    current = distances_from_exit[maze.get_index(cursor)]
    if current == 0:
        raise ValueError(f"{entrance} is not connected to {exit_node}")

    path = [cursor]
    while current != 1:
        reachable = [
            n for n in maze.get_paths(cursor)
            if distances_from_exit[maze.get_index(n)] > 0
        ]
        cursor = min(reachable, key=lambda n: distances_from_exit[maze.get_index(n)])
        step = distances_from_exit[maze.get_index(cursor)]
        if step >= current:
            raise ValueError(f"No neighbour of {path[-1]} is closer to {exit_node}")
        current = step
        path.append(cursor)

    return path


def _furthest(maze: Maze, candidates: list, distances: np.ndarray):
    """Candidate with the greatest distance; first one wins ties."""
    return max(candidates, key=lambda n: distances[maze.get_index(n)])


def make_solution(maze: Maze, rng: Arengee) -> Solution:
    """Pick a far-apart entrance/exit pair, open them, and trace the route.

    Double sweep over the maze's boundary candidates:

    1. Run dijkstra from a random entrance-side cell.
    2. The furthest exit-side cell becomes the exit.
    3. Run dijkstra from the exit.
    4. The furthest entrance-side cell becomes the entrance.
    5. Run dijkstra from the entrance for the distance map handed to
       renderers (the stain gradient).
    6. Open the boundary walls at entrance and exit.
    7. Trace the path with the exit-rooted distances.

    This approximates the endpoints of the diameter restricted to the two
    boundary sides; it is not an exact longest-path search.

    Args:
        maze: A fully generated maze; mutated only by opening its boundary.
        rng: Shared RNG, advanced by the random start and opening choices.

    Returns:
        Solution with the path from entrance to exit and the entrance-rooted
        distance map.
    """
    entrance_side = maze.entrance_candidates()
    exit_side = maze.exit_candidates()

    if entrance_side:
        start = rng.choice(entrance_side)
    else:
        log.warning("No entrance-side cells available, starting from a random cell")
        start = maze.get_random_node(rng)
    start_distances = dijkstra(maze, start)

    if exit_side:
        exit_node = _furthest(maze, exit_side, start_distances)
    else:
        log.warning("No exit-side cells available, using a random exit")
        exit_node = maze.get_random_node(rng)
    exit_distances = dijkstra(maze, exit_node)

    if entrance_side:
        entrance = _furthest(maze, entrance_side, exit_distances)
    else:
        entrance = maze.get_random_node(rng)
    entrance_distances = dijkstra(maze, entrance)

    maze.open_entrance(entrance, rng)
    maze.open_exit(exit_node, rng)

    path = find_path(maze, exit_distances, entrance, exit_node)
    log.debug(
        "Solution: entrance=%s, exit=%s, length=%d",
        entrance,
        exit_node,
        len(path) - 1,
    )

    return Solution(path=path, distances=entrance_distances)
