#!/usr/bin/env python3
"""Entry point for generating mazes from a config file or location hash.

Chains template creation -> carving -> solving -> validation for one or
more pages and prints a summary per page.

Usage:
    python run_maze.py --hash "T7|Kruskal|1234"
    python run_maze.py --config maze.json --pages 4 --output mazes.json
    python run_maze.py --hash S12 --random-seed --dry-run
"""

import argparse
import json
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from amazegen.config import (
    DEFAULT_CONFIG,
    MazeConfig,
    config_from_hash,
    config_from_json,
    config_to_hash,
)

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(config: MazeConfig, pages: int, output: Path | None) -> list[dict]:
    """Generate ``pages`` mazes and optionally write their summaries as JSON.

    Args:
        config: Config for the first page; later pages chain terminal seeds.
        pages: Number of pages to generate.
        output: JSON file to write the summaries to, or None.

    Returns:
        One summary dict per page.
    """
    # Lazy imports to keep --dry-run fast
    from amazegen.pipeline import generate_batch, summarize

    with stage_timer("Maze Generation"):
        generated = generate_batch(config, pages)

    summaries = [summarize(g) for g in generated]
    for page, summary in enumerate(summaries, start=1):
        print(f"Page {page}: {summary['hash']}")
        print(f"  Nodes:    {summary['nodes']}, carved edges: {summary['carved_edges']}")
        print(f"  Solution: {summary['entrance']} -> {summary['exit']}, "
              f"length {summary['solution_length']}")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(summaries, indent=2))
        log.info("Summaries written to %s", output)

    return summaries


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate perfect mazes")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--config",
        type=str,
        help="Path to maze config JSON file",
    )
    source.add_argument(
        "--hash",
        type=str,
        help='Location hash such as "R10|GrowingTree|1"',
    )
    parser.add_argument(
        "--random-seed",
        action="store_true",
        help="Replace the configured seed with a fresh random one",
    )
    parser.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Number of mazes to generate (default: 1)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write a JSON list of page summaries to this path",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the resolved config without generating anything",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.pages < 1:
        print(f"Error: --pages must be >= 1, got {args.pages}", file=sys.stderr)
        sys.exit(1)

    # Resolve config
    if args.config is not None:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        try:
            config = config_from_json(config_path.read_text())
        except Exception:
            log.exception("Invalid config file %s", config_path)
            sys.exit(1)
    elif args.hash is not None:
        config = config_from_hash(args.hash)
    else:
        config = DEFAULT_CONFIG

    if args.random_seed:
        from amazegen.reproducibility import generate_seed

        config = replace(config, seed=generate_seed())

    shape = config.shape
    print(f"Location hash: {config_to_hash(config)}")
    print(f"Shape:     {shape.kind.name.lower()} size={shape.size}"
          + (f" height={shape.height}" if shape.height is not None else ""))
    print(f"Algorithm: {config.algorithm.value}")
    print(f"Seed:      {config.seed}")
    print(f"Pages:     {args.pages}")

    if args.dry_run:
        print("\n[dry-run] Config resolved successfully. Exiting.")
        return

    try:
        run_pipeline(
            config,
            pages=args.pages,
            output=Path(args.output) if args.output else None,
        )
    except Exception:
        log.exception("Maze generation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
