"""Default configuration: the maze shown when nothing else is requested."""

from amazegen.config.parameters import MazeConfig

# Rectilinear 10x10, GrowingTree, seed 1, black, no overlays.
DEFAULT_CONFIG = MazeConfig()
