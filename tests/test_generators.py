"""Tests for the Kruskal and growing-tree generators."""

import pytest

from amazegen.config import Algorithm
from amazegen.generator import GENERATORS, growing_tree, kruskal, run_algorithm
from amazegen.maze.arengee import Arengee
from amazegen.maze.delta import DeltaMaze
from amazegen.maze.rectilinear import RectilinearMaze
from amazegen.maze.sigma import SigmaMaze
from amazegen.maze.theta import RingMaze
from amazegen.maze.validation import (
    carved_adjacency,
    validate_partition,
    validate_spanning_tree,
)

TOPOLOGIES = {
    "rectilinear": lambda: RectilinearMaze(7, 5),
    "sigma": lambda: SigmaMaze(6),
    "delta": lambda: DeltaMaze(6, 5),
    "theta": lambda: RingMaze(5),
}


@pytest.mark.parametrize("topology", sorted(TOPOLOGIES))
@pytest.mark.parametrize("generator", [kruskal, growing_tree])
@pytest.mark.parametrize("seed", [0, 1, 42, 2**63 + 5])
def test_generates_spanning_tree(topology: str, generator, seed: int) -> None:
    maze = generator(TOPOLOGIES[topology](), Arengee(seed))
    assert validate_spanning_tree(maze) == []
    assert validate_partition(maze) == []


class TestKruskal:
    """Randomized Kruskal over shuffled edges."""

    def test_four_by_four_has_fifteen_edges(self) -> None:
        maze = kruskal(RectilinearMaze(4, 4), Arengee(1))
        assert carved_adjacency(maze).nnz // 2 == 15

    def test_returns_same_object(self) -> None:
        maze = RectilinearMaze(3, 3)
        assert kruskal(maze, Arengee(0)) is maze

    def test_deterministic(self) -> None:
        a = kruskal(SigmaMaze(8), Arengee(99))
        b = kruskal(SigmaMaze(8), Arengee(99))
        assert (carved_adjacency(a) != carved_adjacency(b)).nnz == 0

    def test_seed_changes_maze(self) -> None:
        a = kruskal(RectilinearMaze(10, 10), Arengee(1))
        b = kruskal(RectilinearMaze(10, 10), Arengee(2))
        assert (carved_adjacency(a) != carved_adjacency(b)).nnz > 0


class TestGrowingTree:
    """Stack-top growing tree."""

    def test_returns_same_object(self) -> None:
        maze = DeltaMaze(4)
        assert growing_tree(maze, Arengee(0)) is maze

    def test_deterministic(self) -> None:
        a = growing_tree(RingMaze(6), Arengee(7))
        b = growing_tree(RingMaze(6), Arengee(7))
        assert (carved_adjacency(a) != carved_adjacency(b)).nnz == 0

    def test_long_corridors(self) -> None:
        """Stack-top growth leaves fewer dead ends than Kruskal."""
        def dead_ends(maze) -> int:
            return sum(1 for n in maze.get_all_nodes() if len(maze.get_paths(n)) == 1)

        tree = growing_tree(RectilinearMaze(20, 20), Arengee(3))
        forest = kruskal(RectilinearMaze(20, 20), Arengee(3))
        assert dead_ends(tree) < dead_ends(forest)


class TestRunAlgorithm:
    """Dispatch by Algorithm."""

    def test_every_algorithm_registered(self) -> None:
        assert set(GENERATORS) == set(Algorithm)

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_dispatch(self, algorithm: Algorithm) -> None:
        maze = run_algorithm(algorithm, RectilinearMaze(5, 5), Arengee(1))
        assert validate_spanning_tree(maze) == []

    def test_accepts_algorithm_name(self) -> None:
        a = run_algorithm("Kruskal", RectilinearMaze(5, 5), Arengee(1))
        b = kruskal(RectilinearMaze(5, 5), Arengee(1))
        assert (carved_adjacency(a) != carved_adjacency(b)).nnz == 0


class TestValidatePartition:
    """Walls and paths together cover exactly the structural neighbours."""

    @pytest.mark.parametrize("topology", sorted(TOPOLOGIES))
    def test_uncarved_template_is_all_walls(self, topology: str) -> None:
        assert validate_partition(TOPOLOGIES[topology]()) == []

    def test_dropped_wall_detected(self) -> None:
        maze = growing_tree(SigmaMaze(4), Arengee(1))
        a, b = next(
            (a, b) for a, b in maze.get_all_edges() if b in maze.get_walls(a)
        )
        for node, other in ((a, b), (b, a)):
            cell = maze.cell(node)
            del cell.inaccessible[cell.direction_of(other)]

        # Still a spanning tree; only the neighbour cover is broken
        assert validate_spanning_tree(maze) == []
        errors = validate_partition(maze)
        assert len(errors) == 2
        assert all("do not cover its neighbours" in e for e in errors)
        assert any(str(a) in e and f"missing [{b}]" in e for e in errors)
