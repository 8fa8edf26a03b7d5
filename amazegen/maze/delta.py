"""Triangular maze: alternating upward/downward triangles in rows.

A cell is "top" oriented when ``(x + y) % 2 == 0``: its flat side faces
north and its vertical (alpha) neighbour is the cell above. "Bottom"
cells have the flat side facing south and their alpha neighbour below.
Every cell also has an east and a west neighbour within its row.
"""

import logging
from enum import IntEnum

from amazegen.maze import solver
from amazegen.maze.arengee import Arengee
from amazegen.maze.coordinates import Cartesian
from amazegen.maze.types import MazeCarveError, Opening, Solution

log = logging.getLogger(__name__)

MIN_SIZE = 2


class Direction(IntEnum):
    ALPHA = 0
    WEST = 1
    EAST = 2


def is_top(coordinates: Cartesian) -> bool:
    return (coordinates.x + coordinates.y) % 2 == 0


class DeltaMaze:
    """Triangle grid of ``width`` cells per row and ``height`` rows."""

    def __init__(self, width: int, height: int | None = None) -> None:
        height = width if height is None else height
        if width < MIN_SIZE or height < MIN_SIZE:
            log.warning(
                "Delta extents %dx%d below minimum, clamping to >= %d",
                width,
                height,
                MIN_SIZE,
            )
        self.width = max(width, MIN_SIZE)
        self.height = max(height, MIN_SIZE)
        self.inaccessible: list[dict[Direction, Cartesian]] = []
        self.accessible: list[dict[Direction, Cartesian]] = []
        for y in range(self.height):
            for x in range(self.width):
                self.inaccessible.append(self.neighbours(Cartesian(x, y)))
                self.accessible.append({})
        self.entrance_opening: Opening | None = None
        self.exit_opening: Opening | None = None

    def neighbours(self, node: Cartesian) -> dict[Direction, Cartesian]:
        """Structural neighbours of ``node`` keyed by side."""
        x, y = node.x, node.y
        out: dict[Direction, Cartesian] = {}
        if is_top(node):
            if y > 0:
                out[Direction.ALPHA] = Cartesian(x, y - 1)
        elif y < self.height - 1:
            out[Direction.ALPHA] = Cartesian(x, y + 1)
        if x > 0:
            out[Direction.WEST] = Cartesian(x - 1, y)
        if x < self.width - 1:
            out[Direction.EAST] = Cartesian(x + 1, y)
        return out

    def has_path(self, node: Cartesian, direction: Direction) -> bool:
        if direction in self.accessible[self.get_index(node)]:
            return True
        return any(
            opening is not None
            and opening.node == node
            and opening.direction == direction
            for opening in (self.entrance_opening, self.exit_opening)
        )

    def _move(self, node: Cartesian, neighbour: Cartesian) -> None:
        i = self.get_index(node)
        for direction, n in self.inaccessible[i].items():
            if n == neighbour:
                del self.inaccessible[i][direction]
                self.accessible[i][direction] = neighbour
                return

    def carve(self, node: Cartesian, neighbour: Cartesian) -> None:
        if neighbour not in self.neighbours(node).values():
            raise MazeCarveError(f"{node} and {neighbour} are not neighbours")
        self._move(node, neighbour)
        self._move(neighbour, node)

    def get_walls(self, node: Cartesian) -> list[Cartesian]:
        return list(self.inaccessible[self.get_index(node)].values())

    def get_paths(self, node: Cartesian) -> list[Cartesian]:
        return list(self.accessible[self.get_index(node)].values())

    def get_random_node(self, rng: Arengee) -> Cartesian:
        return Cartesian(rng.next_u32(0, self.width), rng.next_u32(0, self.height))

    def get_all_edges(self) -> list[tuple[Cartesian, Cartesian]]:
        edges = []
        for node in self.get_all_nodes():
            neighbours = self.neighbours(node)
            if Direction.EAST in neighbours:
                edges.append((node, neighbours[Direction.EAST]))
            # Vertical edges are emitted once, from the upper (bottom-oriented) cell
            if not is_top(node) and Direction.ALPHA in neighbours:
                edges.append((node, neighbours[Direction.ALPHA]))
        return edges

    def get_all_nodes(self) -> list[Cartesian]:
        return [Cartesian(x, y) for y in range(self.height) for x in range(self.width)]

    def get_index(self, node: Cartesian) -> int:
        if not (0 <= node.x < self.width and 0 <= node.y < self.height):
            raise IndexError(f"{node} is outside the {self.width}x{self.height} grid")
        return node.regular_index(self.width)

    def index_size(self) -> int:
        return self.width * self.height

    def entrance_candidates(self) -> list[Cartesian]:
        return [Cartesian(x, 0) for x in range(self.width) if is_top(Cartesian(x, 0))]

    def exit_candidates(self) -> list[Cartesian]:
        y = self.height - 1
        return [Cartesian(x, y) for x in range(self.width) if not is_top(Cartesian(x, y))]

    def _open(self, node: Cartesian) -> Opening:
        if Direction.ALPHA in self.neighbours(node):
            return Opening(node)
        return Opening(node, Direction.ALPHA)

    def open_entrance(self, node: Cartesian, rng: Arengee) -> None:
        self.entrance_opening = self._open(node)

    def open_exit(self, node: Cartesian, rng: Arengee) -> None:
        self.exit_opening = self._open(node)

    def make_solution(self, rng: Arengee) -> Solution:
        return solver.make_solution(self, rng)
