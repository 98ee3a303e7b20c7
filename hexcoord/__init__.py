"""Cube coordinate model for hexagonal grids."""

import logging

from .config import HexLayoutConfig
from .conversions import cartesian_to_cube, cube_round, cube_to_cartesian
from .coords import HexCoordinate, create, from_cartesian
from .errors import HexCoordinateError, InvalidCoordinateError
from .geometry import edge_markers, vertex_offsets
from .heuristics import hex_distance_cube
from .neighbors import CUBE_DIRECTIONS, HexDirection, neighbor_triples

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CUBE_DIRECTIONS",
    "HexCoordinate",
    "HexCoordinateError",
    "HexDirection",
    "HexLayoutConfig",
    "InvalidCoordinateError",
    "cartesian_to_cube",
    "create",
    "cube_round",
    "cube_to_cartesian",
    "edge_markers",
    "from_cartesian",
    "hex_distance_cube",
    "neighbor_triples",
    "vertex_offsets",
]
