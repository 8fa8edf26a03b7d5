"""Square-grid maze with one packed bitmask per cell.

Each cell stores which of its four sides are open as bits of a uint8.
Nodes are plain ``(x, y)`` tuples; x grows to the right, y grows down.
"""

import logging
from enum import IntEnum

import numpy as np

from amazegen.maze import solver
from amazegen.maze.arengee import Arengee
from amazegen.maze.types import MazeCarveError, Opening, Solution

log = logging.getLogger(__name__)

MIN_EXTENT = 2

VISIT = 1


class Direction(IntEnum):
    """Side of a cell. The value is the side's bit in the cell mask."""

    LEFT = 2
    UP = 4
    RIGHT = 8
    DOWN = 16

    @property
    def reciprocal(self) -> "Direction":
        return _RECIPROCAL[self]


_RECIPROCAL = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# Neighbour enumeration order for walls and paths
DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class RectilinearMaze:
    """Rectangular maze of ``width`` x ``height`` square cells.

    Extents below 2 are clamped to 2 so an entrance row and an exit row
    always exist.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_EXTENT or height < MIN_EXTENT:
            log.warning(
                "Rectilinear extents %dx%d below minimum, clamping to >= %d",
                width,
                height,
                MIN_EXTENT,
            )
        self.width = max(width, MIN_EXTENT)
        self.height = max(height, MIN_EXTENT)
        self.fields = np.zeros((self.height, self.width), dtype=np.uint8)
        self.entrance_opening: Opening | None = None
        self.exit_opening: Opening | None = None

    @property
    def extents(self) -> tuple[int, int]:
        return self.width, self.height

    def contains(self, node: tuple[int, int]) -> bool:
        x, y = node
        return 0 <= x < self.width and 0 <= y < self.height

    def translate(
        self, node: tuple[int, int], direction: Direction
    ) -> tuple[int, int] | None:
        """Neighbouring cell in ``direction``, or None at the grid edge."""
        x, y = node
        if direction is Direction.LEFT and x > 0:
            return x - 1, y
        if direction is Direction.RIGHT and x < self.width - 1:
            return x + 1, y
        if direction is Direction.UP and y > 0:
            return x, y - 1
        if direction is Direction.DOWN and y < self.height - 1:
            return x, y + 1
        return None

    @staticmethod
    def direction_between(
        a: tuple[int, int], b: tuple[int, int]
    ) -> Direction | None:
        (ax, ay), (bx, by) = a, b
        dx, dy = bx - ax, by - ay
        if (dx, dy) == (1, 0):
            return Direction.RIGHT
        if (dx, dy) == (-1, 0):
            return Direction.LEFT
        if (dx, dy) == (0, 1):
            return Direction.DOWN
        if (dx, dy) == (0, -1):
            return Direction.UP
        return None

    def has_wall(self, node: tuple[int, int], direction: Direction) -> bool:
        x, y = node
        return not self.fields[y, x] & direction

    def is_visited(self, node: tuple[int, int]) -> bool:
        x, y = node
        return bool(self.fields[y, x] & VISIT)

    def carve(self, node: tuple[int, int], neighbour: tuple[int, int]) -> None:
        direction = self.direction_between(node, neighbour)
        if direction is None or not (self.contains(node) and self.contains(neighbour)):
            raise MazeCarveError(f"{node} and {neighbour} are not neighbours")
        (x, y), (nx, ny) = node, neighbour
        self.fields[y, x] |= VISIT | direction
        self.fields[ny, nx] |= VISIT | direction.reciprocal

    def _neighbours(self, node: tuple[int, int], carved: bool) -> list[tuple[int, int]]:
        x, y = node
        mask = self.fields[y, x]
        out = []
        for direction in DIRECTIONS:
            target = self.translate(node, direction)
            if target is not None and bool(mask & direction) == carved:
                out.append(target)
        return out

    def get_walls(self, node: tuple[int, int]) -> list[tuple[int, int]]:
        return self._neighbours(node, carved=False)

    def get_paths(self, node: tuple[int, int]) -> list[tuple[int, int]]:
        return self._neighbours(node, carved=True)

    def get_random_node(self, rng: Arengee) -> tuple[int, int]:
        return rng.next_u32(0, self.width), rng.next_u32(0, self.height)

    def get_all_edges(self) -> list[tuple[tuple[int, int], tuple[int, int]]]:
        edges = []
        for y in range(self.height):
            for x in range(self.width):
                if x < self.width - 1:
                    edges.append(((x, y), (x + 1, y)))
                if y < self.height - 1:
                    edges.append(((x, y), (x, y + 1)))
        return edges

    def get_all_nodes(self) -> list[tuple[int, int]]:
        return [(x, y) for y in range(self.height) for x in range(self.width)]

    def get_index(self, node: tuple[int, int]) -> int:
        if not self.contains(node):
            raise IndexError(f"{node} is outside {self.width}x{self.height}")
        x, y = node
        return self.width * y + x

    def index_size(self) -> int:
        return self.width * self.height

    def entrance_candidates(self) -> list[tuple[int, int]]:
        return [(x, 0) for x in range(self.width)]

    def exit_candidates(self) -> list[tuple[int, int]]:
        return [(x, self.height - 1) for x in range(self.width)]

    def _open(self, node: tuple[int, int], direction: Direction) -> Opening:
        if self.translate(node, direction) is not None:
            return Opening(node)
        x, y = node
        self.fields[y, x] |= direction
        return Opening(node, direction)

    def open_entrance(self, node: tuple[int, int], rng: Arengee) -> None:
        self.entrance_opening = self._open(node, Direction.UP)

    def open_exit(self, node: tuple[int, int], rng: Arengee) -> None:
        self.exit_opening = self._open(node, Direction.DOWN)

    def make_solution(self, rng: Arengee) -> Solution:
        return solver.make_solution(self, rng)
