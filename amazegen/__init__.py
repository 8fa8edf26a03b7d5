"""Perfect-maze generation over rectilinear, hex, triangular and ring grids."""

__version__ = "0.1.0"
