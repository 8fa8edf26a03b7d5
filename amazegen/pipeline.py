"""Configuration-level entry point: template -> carve -> solve -> validate."""

import logging
from dataclasses import astuple, dataclass, is_dataclass, replace
from typing import Any

from amazegen.config import MazeConfig, ShapeConfig, ShapeKind, config_to_hash
from amazegen.generator import run_algorithm
from amazegen.maze import (
    Arengee,
    DeltaMaze,
    Maze,
    MazeGenerationError,
    RectilinearMaze,
    RingMaze,
    SigmaMaze,
    Solution,
    carved_adjacency,
    validate_partition,
    validate_solution,
    validate_spanning_tree,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedMaze:
    """A carved maze, its solution and the seed to continue the RNG stream.

    Omits slots=True since the solution holds a numpy array.
    """

    config: MazeConfig
    maze: Maze
    solution: Solution
    terminal_seed: int  # seed for the next page of a batch


def create_template(shape: ShapeConfig) -> Maze:
    """Uncarved maze for ``shape``; every wall is standing."""
    if shape.kind is ShapeKind.RECTILINEAR:
        return RectilinearMaze(*shape.extents)
    if shape.kind is ShapeKind.SIGMA:
        return SigmaMaze(shape.size)
    if shape.kind is ShapeKind.DELTA:
        return DeltaMaze(*shape.extents)
    if shape.kind is ShapeKind.THETA:
        return RingMaze(shape.size, shape.column_factor)
    raise ValueError(f"Unknown shape kind: {shape.kind}")


def check_maze(maze: Maze, solution: Solution) -> list[str]:
    """All post-generation checks, cheapest first."""
    errors = validate_partition(maze)
    errors.extend(validate_spanning_tree(maze))
    errors.extend(validate_solution(maze, solution))
    return errors


def generate_maze(
    config: MazeConfig, rng: Arengee | None = None, validate: bool = True
) -> GeneratedMaze:
    """Generate one maze and its solution from a config.

    Args:
        config: Shape, algorithm and seed to use.
        rng: Optional RNG to draw from instead of a fresh ``Arengee`` seeded
            with ``config.seed``.
        validate: Run the spanning-tree and solution checks.

    Returns:
        GeneratedMaze holding the carved maze and its solution.

    Raises:
        MazeGenerationError: If validation is enabled and fails.
    """
    if rng is None:
        rng = Arengee(config.seed)

    maze = create_template(config.shape)
    run_algorithm(config.algorithm, maze, rng)
    solution = maze.make_solution(rng)

    if validate:
        errors = check_maze(maze, solution)
        if errors:
            raise MazeGenerationError(
                f"Generated maze {config_to_hash(config)} failed validation:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )

    log.info(
        "Generated %s: %d nodes, solution length %d",
        config_to_hash(config),
        len(maze.get_all_nodes()),
        solution.length,
    )
    return GeneratedMaze(
        config=config,
        maze=maze,
        solution=solution,
        terminal_seed=rng.current_seed(),
    )


def generate_batch(config: MazeConfig, count: int) -> list[GeneratedMaze]:
    """Generate ``count`` pages, seeding each from the previous terminal seed.

    Raises:
        ValueError: If count < 1.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    pages = []
    for page in range(count):
        generated = generate_maze(config)
        pages.append(generated)
        log.debug("Page %d/%d seed=%d", page + 1, count, config.seed)
        config = replace(config, seed=generated.terminal_seed)
    return pages


def _node_to_json(node: Any) -> list[int]:
    if is_dataclass(node):
        return list(astuple(node))
    return list(node)


def summarize(generated: GeneratedMaze) -> dict[str, Any]:
    """JSON-ready description of a generated maze."""
    config = generated.config
    solution = generated.solution
    return {
        "hash": config_to_hash(config),
        "shape": config.shape.kind.value,
        "size": config.shape.size,
        "algorithm": config.algorithm.value,
        "seed": config.seed,
        "nodes": len(generated.maze.get_all_nodes()),
        "carved_edges": carved_adjacency(generated.maze).nnz // 2,
        "solution_length": solution.length,
        "entrance": _node_to_json(solution.entrance),
        "exit": _node_to_json(solution.exit),
        "terminal_seed": generated.terminal_seed,
    }
