"""Coordinate types for the grid-like and the circular topologies."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class Cartesian:
    """Column/row position in a sigma or delta grid."""

    x: int
    y: int

    def regular_index(self, row_size: int) -> int:
        return row_size * self.y + self.x


@dataclass(frozen=True, slots=True, order=True)
class RingNode:
    """Position in a ring maze. Row 0 is the single centre cell.

    "North" means further from the centre. East/west are the column
    neighbours on the same ring and wrap around at column 0.
    """

    row: int
    column: int

    def is_north_of(self, other: "RingNode") -> bool:
        return self.row > other.row

    def is_south_of(self, other: "RingNode") -> bool:
        return self.row < other.row

    def is_east_of(self, other: "RingNode", ring_sizes: list[int]) -> bool:
        """True if ``other`` is the next column after this one on the same ring."""
        return (
            self.row == other.row
            and (self.column + 1) % ring_sizes[self.row] == other.column
        )

    def is_west_of(self, other: "RingNode", ring_sizes: list[int]) -> bool:
        """True if this node is the next column after ``other`` on the same ring."""
        return (
            self.row == other.row
            and self.column == (other.column + 1) % ring_sizes[self.row]
        )
