"""Maze configuration dataclasses, all frozen and slotted for immutability."""

import re
from dataclasses import dataclass, field
from enum import StrEnum

MAX_SEED = 2**64 - 1

_COLOUR = re.compile(r"[0-9a-fA-F]{6}")


class ShapeKind(StrEnum):
    """Topology selector. The value is the shape code used in location hashes."""

    RECTILINEAR = "R"
    THETA = "T"
    SIGMA = "S"
    DELTA = "D"


class Algorithm(StrEnum):
    KRUSKAL = "Kruskal"
    GROWING_TREE = "GrowingTree"


class Feature(StrEnum):
    """Optional renderer overlays."""

    STAIN = "Stain"  # colour cells by distance from the entrance
    SOLVE = "Solve"  # draw the solution path


@dataclass(frozen=True, slots=True)
class ShapeConfig:
    """Topology and its size parameters.

    ``size`` is the width for rectilinear and delta mazes, the side length
    for sigma and the number of rings for theta. ``height`` defaults to
    ``size`` and only applies to rectilinear and delta. ``column_factor``
    only applies to theta.
    """

    kind: ShapeKind = ShapeKind.RECTILINEAR
    size: int = 10
    height: int | None = None
    column_factor: int = 8

    def __post_init__(self) -> None:
        """Coerces kind to ShapeKind (uses object.__setattr__ since frozen)."""
        object.__setattr__(self, "kind", ShapeKind(self.kind))
        if self.size < 0:
            raise ValueError(f"size must be >= 0, got {self.size}")
        if self.height is not None:
            if self.kind not in (ShapeKind.RECTILINEAR, ShapeKind.DELTA):
                raise ValueError(f"height is not supported for shape {self.kind}")
            if self.height < 0:
                raise ValueError(f"height must be >= 0, got {self.height}")
        if self.column_factor < 1:
            raise ValueError(f"column_factor must be >= 1, got {self.column_factor}")

    @property
    def extents(self) -> tuple[int, int]:
        return self.size, self.size if self.height is None else self.height


@dataclass(frozen=True, slots=True)
class MazeConfig:
    """Everything needed to reproduce one maze page.

    Only ``shape``, ``algorithm`` and ``seed`` affect the carved maze; the
    rest is carried through for the renderer.
    """

    shape: ShapeConfig = field(default_factory=ShapeConfig)
    algorithm: Algorithm = Algorithm.GROWING_TREE
    seed: int = 1
    colour: str = "000000"  # hex RGB without the leading '#'
    features: tuple[Feature, ...] = ()
    stroke_width: float = 8.0

    def __post_init__(self) -> None:
        """Coerces enum fields and validates ranges (object.__setattr__ since frozen)."""
        object.__setattr__(self, "algorithm", Algorithm(self.algorithm))
        object.__setattr__(self, "features", tuple(Feature(f) for f in self.features))
        if not 0 <= self.seed <= MAX_SEED:
            raise ValueError(f"seed must be in [0, 2**64), got {self.seed}")
        if not _COLOUR.fullmatch(self.colour):
            raise ValueError(f"colour must be six hex digits, got {self.colour!r}")
        if self.stroke_width <= 0:
            raise ValueError(f"stroke_width must be > 0, got {self.stroke_width}")
        if len(set(self.features)) != len(self.features):
            raise ValueError(f"duplicate features: {self.features}")
