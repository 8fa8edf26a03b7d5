"""Circular maze of concentric rings.

Ring 0 is a single centre cell. Ring ``r >= 1`` has
``2 ** floor(log2(r)) * column_factor`` cells, so ring width only doubles
when ``r`` crosses a power of two. A cell's neighbours are its east and
west columns on the same ring (wrapping around), one inward cell and one
or two outward cells depending on whether the next ring is wider.

Cells live in one flat list; the index of ``(row, column)`` is the number
of cells on all inner rings plus ``column``.
"""

import logging
from dataclasses import dataclass, field

from amazegen.maze import solver
from amazegen.maze.arengee import Arengee
from amazegen.maze.coordinates import RingNode
from amazegen.maze.types import MazeCarveError, Opening, Solution

log = logging.getLogger(__name__)

MIN_RINGS = 2
MIN_COLUMN_FACTOR = 3
DEFAULT_COLUMN_FACTOR = 8

# Direction recorded for openings cut through the outer wall
OUTWARD = "outward"


def compute_no_of_columns(row: int, column_factor: int) -> int:
    """Cells on ring ``row`` (ring 0 is the centre)."""
    if row == 0:
        return 1
    return 2 ** (row.bit_length() - 1) * column_factor


@dataclass
class RingCell:
    """Cell record. Each neighbour sits in exactly one of the two lists."""

    coordinates: RingNode
    inaccessible_neighbours: list[RingNode]
    accessible_neighbours: list[RingNode] = field(default_factory=list)

    def carve(self, neighbour: RingNode) -> None:
        if neighbour in self.inaccessible_neighbours:
            self.inaccessible_neighbours.remove(neighbour)
            self.accessible_neighbours.append(neighbour)

    def is_neighbour(self, node: RingNode) -> bool:
        return node in self.inaccessible_neighbours or node in self.accessible_neighbours


def ring_neighbours(
    coordinates: RingNode, ring_sizes: list[int], column_factor: int
) -> list[RingNode]:
    """Structural neighbours in west, east, inward, outward order."""
    row, column = coordinates.row, coordinates.column
    if row == 0:
        return [RingNode(1, c) for c in range(column_factor)]

    width = ring_sizes[row]
    neighbours = [
        RingNode(row, (column - 1) % width),
        RingNode(row, (column + 1) % width),
    ]

    if row == 1:
        neighbours.append(RingNode(0, 0))
    elif ring_sizes[row - 1] < width:
        neighbours.append(RingNode(row - 1, column // 2))
    else:
        neighbours.append(RingNode(row - 1, column))

    if row + 1 < len(ring_sizes):
        if ring_sizes[row + 1] > width:
            neighbours.append(RingNode(row + 1, column * 2))
            neighbours.append(RingNode(row + 1, column * 2 + 1))
        else:
            neighbours.append(RingNode(row + 1, column))

    return neighbours


class RingMaze:
    """Theta maze with ``rings`` rings including the centre cell.

    Args:
        rings: Number of rings, clamped to at least 2 so the outer ring is
            distinct from the centre.
        column_factor: Cells on ring 1; clamped to at least 3 so the east
            and west neighbours of a cell are never the same cell.
    """

    def __init__(self, rings: int, column_factor: int = DEFAULT_COLUMN_FACTOR) -> None:
        if rings < MIN_RINGS:
            log.warning("Theta rings %d below minimum, clamping to %d", rings, MIN_RINGS)
        if column_factor < MIN_COLUMN_FACTOR:
            log.warning(
                "Theta column factor %d below minimum, clamping to %d",
                column_factor,
                MIN_COLUMN_FACTOR,
            )
        rings = max(rings, MIN_RINGS)
        self.column_factor = max(column_factor, MIN_COLUMN_FACTOR)
        self.ring_sizes = [compute_no_of_columns(r, self.column_factor) for r in range(rings)]

        # offsets[r] = number of cells on rings 0..r-1
        self.offsets = [0]
        for size in self.ring_sizes[:-1]:
            self.offsets.append(self.offsets[-1] + size)

        self.cells = [
            RingCell(
                coordinates=node,
                inaccessible_neighbours=ring_neighbours(
                    node, self.ring_sizes, self.column_factor
                ),
            )
            for node in self._enumerate_nodes()
        ]
        self.entrance_opening: Opening | None = None
        self.exit_opening: Opening | None = None

    def _enumerate_nodes(self) -> list[RingNode]:
        return [
            RingNode(row, column)
            for row, size in enumerate(self.ring_sizes)
            for column in range(size)
        ]

    @property
    def rings(self) -> int:
        return len(self.ring_sizes)

    def max_column(self, ring: int) -> int:
        return self.ring_sizes[ring]

    def __getitem__(self, node: RingNode) -> RingCell:
        return self.cells[self.get_index(node)]

    def carve(self, node: RingNode, neighbour: RingNode) -> None:
        cell = self[node]
        if not cell.is_neighbour(neighbour):
            raise MazeCarveError(f"{node} and {neighbour} are not neighbours")
        cell.carve(neighbour)
        self[neighbour].carve(node)

    def get_walls(self, node: RingNode) -> list[RingNode]:
        return list(self[node].inaccessible_neighbours)

    def get_paths(self, node: RingNode) -> list[RingNode]:
        return list(self[node].accessible_neighbours)

    def get_random_node(self, rng: Arengee) -> RingNode:
        return self.cells[rng.next_u32(0, len(self.cells))].coordinates

    def get_all_edges(self) -> list[tuple[RingNode, RingNode]]:
        """Each relation once: outward links plus the westward ring link."""
        edges = []
        for cell in self.cells:
            node = cell.coordinates
            for n in ring_neighbours(node, self.ring_sizes, self.column_factor):
                if n.is_north_of(node) or n.is_east_of(node, self.ring_sizes):
                    edges.append((node, n))
        return edges

    def get_all_nodes(self) -> list[RingNode]:
        return [c.coordinates for c in self.cells]

    def get_index(self, node: RingNode) -> int:
        if not (0 <= node.row < self.rings and 0 <= node.column < self.ring_sizes[node.row]):
            raise IndexError(f"{node} is outside the ring maze")
        return self.offsets[node.row] + node.column

    def index_size(self) -> int:
        return len(self.cells)

    def _outer_ring(self) -> list[RingNode]:
        row = self.rings - 1
        return [RingNode(row, column) for column in range(self.ring_sizes[row])]

    def entrance_candidates(self) -> list[RingNode]:
        return self._outer_ring()

    def exit_candidates(self) -> list[RingNode]:
        return self._outer_ring()

    def _open(self, node: RingNode) -> Opening:
        if node.row == self.rings - 1:
            return Opening(node, OUTWARD)
        return Opening(node)

    def open_entrance(self, node: RingNode, rng: Arengee) -> None:
        self.entrance_opening = self._open(node)

    def open_exit(self, node: RingNode, rng: Arengee) -> None:
        self.exit_opening = self._open(node)

    def has_opening(self, node: RingNode) -> bool:
        return any(
            opening is not None and opening.node == node and opening.direction == OUTWARD
            for opening in (self.entrance_opening, self.exit_opening)
        )

    def make_solution(self, rng: Arengee) -> Solution:
        return solver.make_solution(self, rng)
