"""Maze capability interface and the data structures shared by every topology."""

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Protocol, TypeVar

import numpy as np

from amazegen.maze.arengee import Arengee

Idx = TypeVar("Idx", bound=Hashable)


class MazeCarveError(ValueError):
    """Raised when two cells that are not structural neighbours are carved."""


class MazeGenerationError(RuntimeError):
    """Raised when a generated maze or its solution fails validation."""


@dataclass(frozen=True)
class Solution(Generic[Idx]):
    """A route through a finished maze plus the distance map it was cut from.

    Omits slots=True since numpy arrays don't interact well with __slots__.
    """

    path: list[Idx]  # nodes from entrance to exit, inclusive
    distances: np.ndarray  # int64, indexed by get_index; 1 = entrance, 0 = unreached

    @property
    def entrance(self) -> Idx:
        return self.path[0]

    @property
    def exit(self) -> Idx:
        return self.path[-1]

    @property
    def length(self) -> int:
        """Number of steps from entrance to exit."""
        return len(self.path) - 1


@dataclass(frozen=True, slots=True)
class Opening:
    """A boundary wall removed at the entrance or exit.

    ``direction`` is the topology's own direction enum, or None when the
    node was a fallback pick that does not touch the outer boundary.
    """

    node: Any
    direction: Any = None


class Maze(Protocol[Idx]):
    """Capability interface implemented by every topology.

    Generators and the solver are written against this protocol only.
    Cells hold two disjoint neighbour collections: walls (not yet carved)
    and paths (carved). Their union is always the full structural
    neighbourhood of the cell.
    """

    entrance_opening: Opening | None
    exit_opening: Opening | None

    def carve(self, node: Idx, neighbour: Idx) -> None:
        """Connect two neighbouring cells; raises MazeCarveError otherwise."""
        ...

    def get_walls(self, node: Idx) -> list[Idx]:
        """Neighbours of ``node`` not yet connected to it."""
        ...

    def get_paths(self, node: Idx) -> list[Idx]:
        """Neighbours of ``node`` connected to it by a carved passage."""
        ...

    def get_random_node(self, rng: Arengee) -> Idx: ...

    def get_all_edges(self) -> list[tuple[Idx, Idx]]:
        """Every neighbour relation exactly once, carved or not."""
        ...

    def get_all_nodes(self) -> list[Idx]: ...

    def get_index(self, node: Idx) -> int:
        """Dense, collision-free index for flat per-cell arrays."""
        ...

    def index_size(self) -> int:
        """Length of a dense array addressable by every ``get_index`` value."""
        ...

    def entrance_candidates(self) -> list[Idx]: ...

    def exit_candidates(self) -> list[Idx]: ...

    def open_entrance(self, node: Idx, rng: Arengee) -> None: ...

    def open_exit(self, node: Idx, rng: Arengee) -> None: ...

    def make_solution(self, rng: Arengee) -> Solution[Idx]: ...
