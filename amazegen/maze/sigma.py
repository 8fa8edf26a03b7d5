"""Hexagonal maze on a brick-offset grid.

Columns alternate vertical offset: even columns sit half a cell higher
than odd ones, so the diagonal neighbours of a cell depend on the parity
of its x coordinate.
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
    NORTH = 0
    SOUTH = 1
    NORTH_EAST = 2
    NORTH_WEST = 3
    SOUTH_EAST = 4
    SOUTH_WEST = 5


ENTRANCE_SIDES = (Direction.NORTH, Direction.NORTH_EAST, Direction.NORTH_WEST)
EXIT_SIDES = (Direction.SOUTH, Direction.SOUTH_EAST, Direction.SOUTH_WEST)


def hex_neighbours(coordinates: Cartesian, size: int) -> dict[Direction, Cartesian]:
    """Structural neighbours of a hex cell inside a ``size`` x ``size`` grid."""
    x, y = coordinates.x, coordinates.y
    out: dict[Direction, Cartesian] = {}
    if y > 0:
        out[Direction.NORTH] = Cartesian(x, y - 1)
    if y < size - 1:
        out[Direction.SOUTH] = Cartesian(x, y + 1)

    if x % 2 == 0:
        if x < size - 1:
            out[Direction.SOUTH_EAST] = Cartesian(x + 1, y)
            if y > 0:
                out[Direction.NORTH_EAST] = Cartesian(x + 1, y - 1)
        if x > 0:
            out[Direction.SOUTH_WEST] = Cartesian(x - 1, y)
            if y > 0:
                out[Direction.NORTH_WEST] = Cartesian(x - 1, y - 1)
    else:
        if x < size - 1:
            out[Direction.NORTH_EAST] = Cartesian(x + 1, y)
            if y < size - 1:
                out[Direction.SOUTH_EAST] = Cartesian(x + 1, y + 1)
        if x > 0:
            out[Direction.NORTH_WEST] = Cartesian(x - 1, y)
            if y < size - 1:
                out[Direction.SOUTH_WEST] = Cartesian(x - 1, y + 1)
    return out


class SigmaCell:
    """Hex cell with direction-keyed wall and passage neighbours."""

    __slots__ = ("coordinates", "inaccessible", "accessible")

    def __init__(self, coordinates: Cartesian, size: int) -> None:
        self.coordinates = coordinates
        self.inaccessible = hex_neighbours(coordinates, size)
        self.accessible: dict[Direction, Cartesian] = {}

    def direction_of(self, neighbour: Cartesian) -> Direction | None:
        for side in (self.inaccessible, self.accessible):
            for direction, n in side.items():
                if n == neighbour:
                    return direction
        return None

    def carve(self, neighbour: Cartesian) -> None:
        for direction, n in self.inaccessible.items():
            if n == neighbour:
                del self.inaccessible[direction]
                self.accessible[direction] = neighbour
                return


class SigmaMaze:
    """Square hex maze of ``size`` columns by ``size`` rows."""

    def __init__(self, size: int) -> None:
        if size < MIN_SIZE:
            log.warning("Sigma size %d below minimum, clamping to %d", size, MIN_SIZE)
        self.size = max(size, MIN_SIZE)
        self.cells = [
            SigmaCell(Cartesian(x, y), self.size)
            for y in range(self.size)
            for x in range(self.size)
        ]
        self.entrance_opening: Opening | None = None
        self.exit_opening: Opening | None = None

    def cell(self, node: Cartesian) -> SigmaCell:
        return self.cells[self.get_index(node)]

    def has_path(self, node: Cartesian, direction: Direction) -> bool:
        """True if the side is carved, including a boundary opening."""
        if direction in self.cell(node).accessible:
            return True
        return any(
            opening is not None
            and opening.node == node
            and opening.direction == direction
            for opening in (self.entrance_opening, self.exit_opening)
        )

    def carve(self, node: Cartesian, neighbour: Cartesian) -> None:
        a = self.cell(node)
        if a.direction_of(neighbour) is None:
            raise MazeCarveError(f"{node} and {neighbour} are not neighbours")
        a.carve(neighbour)
        self.cell(neighbour).carve(node)

    def get_walls(self, node: Cartesian) -> list[Cartesian]:
        return list(self.cell(node).inaccessible.values())

    def get_paths(self, node: Cartesian) -> list[Cartesian]:
        return list(self.cell(node).accessible.values())

    def get_random_node(self, rng: Arengee) -> Cartesian:
        return Cartesian(rng.next_u32(0, self.size), rng.next_u32(0, self.size))

    def get_all_edges(self) -> list[tuple[Cartesian, Cartesian]]:
        edges = []
        for cell in self.cells:
            neighbours = hex_neighbours(cell.coordinates, self.size)
            for direction in (Direction.SOUTH, Direction.SOUTH_EAST, Direction.SOUTH_WEST):
                if direction in neighbours:
                    edges.append((cell.coordinates, neighbours[direction]))
        return edges

    def get_all_nodes(self) -> list[Cartesian]:
        return [c.coordinates for c in self.cells]

    def get_index(self, node: Cartesian) -> int:
        if not (0 <= node.x < self.size and 0 <= node.y < self.size):
            raise IndexError(f"{node} is outside the {self.size}x{self.size} grid")
        return node.regular_index(self.size)

    def index_size(self) -> int:
        return self.size * self.size

    def entrance_candidates(self) -> list[Cartesian]:
        return [Cartesian(x, 0) for x in range(self.size)]

    def exit_candidates(self) -> list[Cartesian]:
        return [Cartesian(x, self.size - 1) for x in range(self.size)]

    def _open(self, node: Cartesian, sides: tuple[Direction, ...], rng: Arengee) -> Opening:
        # Only sides without a structural neighbour lie on the outer boundary
        free = [d for d in sides if d not in hex_neighbours(node, self.size)]
        if not free:
            return Opening(node)
        return Opening(node, rng.choice(free))

    def open_entrance(self, node: Cartesian, rng: Arengee) -> None:
        self.entrance_opening = self._open(node, ENTRANCE_SIDES, rng)

    def open_exit(self, node: Cartesian, rng: Arengee) -> None:
        self.exit_opening = self._open(node, EXIT_SIDES, rng)

    def make_solution(self, rng: Arengee) -> Solution:
        return solver.make_solution(self, rng)
