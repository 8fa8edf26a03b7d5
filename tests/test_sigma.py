"""Tests for the hexagonal sigma maze."""

import pytest

from amazegen.maze.arengee import Arengee
from amazegen.maze.coordinates import Cartesian
from amazegen.maze.sigma import (
    ENTRANCE_SIDES,
    EXIT_SIDES,
    Direction,
    SigmaMaze,
    hex_neighbours,
)
from amazegen.maze.types import MazeCarveError


class TestHexNeighbours:
    """Parity-dependent neighbour offsets."""

    def test_top_left_corner(self) -> None:
        assert hex_neighbours(Cartesian(0, 0), 3) == {
            Direction.SOUTH: Cartesian(0, 1),
            Direction.SOUTH_EAST: Cartesian(1, 0),
        }

    def test_odd_column_interior_has_six(self) -> None:
        n = hex_neighbours(Cartesian(1, 1), 3)
        assert n == {
            Direction.NORTH: Cartesian(1, 0),
            Direction.SOUTH: Cartesian(1, 2),
            Direction.NORTH_EAST: Cartesian(2, 1),
            Direction.SOUTH_EAST: Cartesian(2, 2),
            Direction.NORTH_WEST: Cartesian(0, 1),
            Direction.SOUTH_WEST: Cartesian(0, 2),
        }

    def test_even_column_interior(self) -> None:
        n = hex_neighbours(Cartesian(2, 1), 4)
        assert n[Direction.NORTH_EAST] == Cartesian(3, 0)
        assert n[Direction.SOUTH_EAST] == Cartesian(3, 1)
        assert n[Direction.NORTH_WEST] == Cartesian(1, 0)
        assert n[Direction.SOUTH_WEST] == Cartesian(1, 1)

    @pytest.mark.parametrize("size", [2, 3, 6])
    def test_symmetric(self, size: int) -> None:
        for y in range(size):
            for x in range(size):
                node = Cartesian(x, y)
                for n in hex_neighbours(node, size).values():
                    assert node in hex_neighbours(n, size).values()


class TestSigmaMaze:
    """Carving, edges and indexing."""

    def test_clamps(self) -> None:
        assert SigmaMaze(1).size == 2

    def test_edges_cover_each_relation_once(self) -> None:
        maze = SigmaMaze(5)
        edges = maze.get_all_edges()
        assert len({frozenset(e) for e in edges}) == len(edges)
        degree_sum = sum(len(maze.get_walls(n)) for n in maze.get_all_nodes())
        assert len(edges) * 2 == degree_sum

    def test_carve(self) -> None:
        maze = SigmaMaze(3)
        maze.carve(Cartesian(1, 1), Cartesian(2, 2))
        assert maze.get_paths(Cartesian(1, 1)) == [Cartesian(2, 2)]
        assert maze.get_paths(Cartesian(2, 2)) == [Cartesian(1, 1)]
        assert Cartesian(2, 2) not in maze.get_walls(Cartesian(1, 1))
        assert maze.has_path(Cartesian(1, 1), Direction.SOUTH_EAST)
        assert maze.has_path(Cartesian(2, 2), Direction.NORTH_WEST)

    def test_carve_non_neighbours_raises(self) -> None:
        with pytest.raises(MazeCarveError):
            SigmaMaze(3).carve(Cartesian(0, 0), Cartesian(2, 2))

    def test_index(self) -> None:
        maze = SigmaMaze(4)
        assert maze.get_index(Cartesian(3, 2)) == 11
        assert sorted(maze.get_index(n) for n in maze.get_all_nodes()) == list(range(16))
        with pytest.raises(IndexError):
            maze.get_index(Cartesian(4, 0))


class TestSigmaOpenings:
    """Openings face the outer boundary."""

    def test_odd_column_entrance_is_north(self) -> None:
        maze = SigmaMaze(4)
        maze.open_entrance(Cartesian(1, 0), Arengee(0))
        assert maze.entrance_opening.direction is Direction.NORTH
        assert maze.has_path(Cartesian(1, 0), Direction.NORTH)

    def test_even_column_entrance_is_northern_side(self) -> None:
        maze = SigmaMaze(4)
        maze.open_entrance(Cartesian(2, 0), Arengee(3))
        assert maze.entrance_opening.direction in ENTRANCE_SIDES

    def test_exit_is_southern_side(self) -> None:
        maze = SigmaMaze(4)
        maze.open_exit(Cartesian(1, 3), Arengee(3))
        assert maze.exit_opening.direction in EXIT_SIDES
        assert maze.exit_opening.direction not in hex_neighbours(Cartesian(1, 3), 4)
