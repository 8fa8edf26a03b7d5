"""JSON and location-hash encodings of maze configs."""

import json
import logging
from dataclasses import asdict, replace
from enum import Enum
from typing import Any

from dacite import from_dict, Config as DaciteConfig

from amazegen.config.defaults import DEFAULT_CONFIG
from amazegen.config.parameters import (
    MAX_SEED,
    Algorithm,
    MazeConfig,
    ShapeConfig,
    ShapeKind,
)

log = logging.getLogger(__name__)

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple, Enum],
    check_types=True,
    strict=True,
)


def config_to_json(config: MazeConfig) -> str:
    """Serialize a MazeConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> MazeConfig:
    """Deserialize a JSON string to a MazeConfig.

    Uses dacite with strict=True to reject unknown keys, cast=[tuple] to
    turn JSON arrays back into tuples and cast=[Enum] to turn shape codes
    and algorithm names back into enum members.
    """
    return config_from_dict(json.loads(json_str))


def config_to_dict(config: MazeConfig) -> dict[str, Any]:
    """Convert a MazeConfig to a plain dictionary."""
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> MazeConfig:
    """Reconstruct a MazeConfig from a plain dictionary."""
    return from_dict(data_class=MazeConfig, data=d, config=_DACITE_CONFIG)


def config_to_hash(config: MazeConfig) -> str:
    """Shareable ``"{ShapeCode}{Size}|{AlgorithmName}|{Seed}"`` string.

    Only the shape code and its primary size are encoded: rectilinear and
    delta heights and the theta column factor are not part of the hash.
    """
    shape = config.shape
    return f"{shape.kind.value}{shape.size}|{config.algorithm.value}|{config.seed}"


def _parse_shape(part: str) -> ShapeConfig | None:
    if not part:
        return None
    code, digits = part[0], part[1:]
    if code.isdecimal():
        code, digits = ShapeKind.RECTILINEAR.value, part
    try:
        kind = ShapeKind(code)
    except ValueError:
        return None
    if not digits.isdecimal():
        return None
    return ShapeConfig(kind=kind, size=int(digits))


def _parse_algorithm(part: str) -> Algorithm | None:
    try:
        return Algorithm(part)
    except ValueError:
        return None


def _parse_seed(part: str) -> int | None:
    if not part.isdecimal():
        return None
    seed = int(part)
    return seed if seed <= MAX_SEED else None


def config_from_hash(
    hash_str: str, default: MazeConfig = DEFAULT_CONFIG
) -> MazeConfig:
    """Parse a location hash, falling back to ``default`` field by field.

    Never raises. A bare number selects a square rectilinear maze of that
    size; ``R`` sizes decode to width = height. Parts that are missing or
    malformed keep the default's value, and so do the renderer fields,
    which the hash does not carry.

    Args:
        hash_str: e.g. ``"T7|Kruskal|1234"``, ``"||42"`` or ``"12"``.
            A leading ``#`` is ignored.
        default: Config supplying every field the hash does not.

    Returns:
        The parsed config.
    """
    parts = hash_str.removeprefix("#").split("|")
    parts += [""] * (3 - len(parts))

    shape = _parse_shape(parts[0])
    algorithm = _parse_algorithm(parts[1])
    seed = _parse_seed(parts[2])

    for name, raw, parsed in (
        ("shape", parts[0], shape),
        ("algorithm", parts[1], algorithm),
        ("seed", parts[2], seed),
    ):
        if raw and parsed is None:
            log.warning("Ignoring malformed %s %r in location hash", name, raw)

    return replace(
        default,
        shape=shape if shape is not None else default.shape,
        algorithm=algorithm if algorithm is not None else default.algorithm,
        seed=seed if seed is not None else default.seed,
    )
