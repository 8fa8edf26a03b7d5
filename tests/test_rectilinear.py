"""Tests for the bitmask rectilinear maze."""

import logging

import pytest

from amazegen.maze.arengee import Arengee
from amazegen.maze.rectilinear import Direction, RectilinearMaze
from amazegen.maze.types import MazeCarveError, Opening


class TestConstruction:
    """Extents and clamping."""

    def test_extents(self) -> None:
        maze = RectilinearMaze(4, 3)
        assert maze.extents == (4, 3)
        assert maze.fields.shape == (3, 4)

    def test_clamps_to_two(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            maze = RectilinearMaze(1, 0)
        assert maze.extents == (2, 2)
        assert "clamping" in caplog.text

    def test_starts_fully_walled(self) -> None:
        maze = RectilinearMaze(3, 3)
        for node in maze.get_all_nodes():
            assert maze.get_paths(node) == []
            assert not maze.is_visited(node)


class TestNeighbours:
    """Walls, paths and edge enumeration."""

    def test_left_edge_has_no_west_neighbour(self) -> None:
        maze = RectilinearMaze(3, 3)
        for y in range(3):
            assert (-1, y) not in maze.get_walls((0, y))
            assert (1, y) in maze.get_walls((0, y))

    def test_wall_order(self) -> None:
        maze = RectilinearMaze(3, 3)
        assert maze.get_walls((1, 1)) == [(1, 0), (1, 2), (0, 1), (2, 1)]
        assert maze.get_walls((0, 1)) == [(0, 0), (0, 2), (1, 1)]

    def test_carve_moves_wall_to_path(self) -> None:
        maze = RectilinearMaze(3, 3)
        maze.carve((0, 0), (1, 0))
        assert maze.get_paths((0, 0)) == [(1, 0)]
        assert maze.get_paths((1, 0)) == [(0, 0)]
        assert (1, 0) not in maze.get_walls((0, 0))
        assert not maze.has_wall((0, 0), Direction.RIGHT)
        assert not maze.has_wall((1, 0), Direction.LEFT)
        assert maze.is_visited((0, 0)) and maze.is_visited((1, 0))

    def test_carve_twice_is_noop(self) -> None:
        maze = RectilinearMaze(3, 3)
        maze.carve((1, 1), (1, 2))
        before = maze.fields.copy()
        maze.carve((1, 2), (1, 1))
        assert (maze.fields == before).all()

    @pytest.mark.parametrize("a,b", [((0, 0), (1, 1)), ((0, 0), (2, 0)), ((2, 2), (3, 2))])
    def test_carve_non_neighbours_raises(self, a, b) -> None:
        maze = RectilinearMaze(3, 3)
        with pytest.raises(MazeCarveError):
            maze.carve(a, b)

    def test_carve_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            RectilinearMaze(2, 2).carve((0, 0), (0, 0))

    def test_all_edges(self) -> None:
        maze = RectilinearMaze(4, 3)
        edges = maze.get_all_edges()
        assert len(edges) == 4 * 2 + 3 * 3
        seen = {frozenset(e) for e in edges}
        assert len(seen) == len(edges)
        for a, b in edges:
            assert b in maze.get_walls(a)

    def test_random_node_in_bounds(self) -> None:
        maze = RectilinearMaze(5, 2)
        rng = Arengee(4)
        for _ in range(50):
            assert maze.contains(maze.get_random_node(rng))


class TestIndexing:
    """Dense row-major indexing."""

    def test_dense(self) -> None:
        maze = RectilinearMaze(4, 3)
        indices = sorted(maze.get_index(n) for n in maze.get_all_nodes())
        assert indices == list(range(maze.index_size()))

    def test_row_major(self) -> None:
        maze = RectilinearMaze(4, 3)
        assert maze.get_index((3, 2)) == 11
        assert maze.get_index((1, 1)) == 5

    def test_out_of_bounds(self) -> None:
        with pytest.raises(IndexError):
            RectilinearMaze(3, 3).get_index((3, 0))


class TestOpenings:
    """Entrance and exit openings."""

    def test_candidates(self) -> None:
        maze = RectilinearMaze(3, 4)
        assert maze.entrance_candidates() == [(0, 0), (1, 0), (2, 0)]
        assert maze.exit_candidates() == [(0, 3), (1, 3), (2, 3)]

    def test_open_boundary_walls(self) -> None:
        maze = RectilinearMaze(3, 3)
        rng = Arengee(0)
        maze.open_entrance((1, 0), rng)
        maze.open_exit((2, 2), rng)
        assert maze.entrance_opening == Opening((1, 0), Direction.UP)
        assert maze.exit_opening == Opening((2, 2), Direction.DOWN)
        assert not maze.has_wall((1, 0), Direction.UP)
        assert not maze.has_wall((2, 2), Direction.DOWN)
        # Openings lead off the grid, so they never show up as paths
        assert maze.get_paths((1, 0)) == []

    def test_interior_fallback_opening(self) -> None:
        maze = RectilinearMaze(3, 3)
        maze.open_entrance((1, 1), Arengee(0))
        assert maze.entrance_opening == Opening((1, 1))
        assert maze.has_wall((1, 1), Direction.UP)

    def test_reciprocal(self) -> None:
        for direction in Direction:
            assert direction.reciprocal.reciprocal is direction
