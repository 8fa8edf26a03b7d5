"""Maze configuration: frozen dataclasses plus JSON and location-hash codecs."""

from amazegen.config.parameters import (
    Algorithm,
    Feature,
    MazeConfig,
    ShapeConfig,
    ShapeKind,
)
from amazegen.config.defaults import DEFAULT_CONFIG
from amazegen.config.serialization import (
    config_from_dict,
    config_from_hash,
    config_from_json,
    config_to_dict,
    config_to_hash,
    config_to_json,
)

__all__ = [
    "Algorithm",
    "DEFAULT_CONFIG",
    "Feature",
    "MazeConfig",
    "ShapeConfig",
    "ShapeKind",
    "config_from_dict",
    "config_from_hash",
    "config_from_json",
    "config_to_dict",
    "config_to_hash",
    "config_to_json",
]
