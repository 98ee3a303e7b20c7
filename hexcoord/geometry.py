"""Presentational metadata for drawing a single hex cell.

Nothing in the coordinate maths reads these values; they are computed for
renderers that want the outline of a cell relative to its centre.
"""

from __future__ import annotations

from math import cos, pi

Point = tuple[float, float]


def vertex_offsets(radius: float = 1.0) -> tuple[Point, ...]:
    """Return the six corner offsets of a cell, counter-clockwise from the east-north corner."""

    x_projection = cos(pi / 6) * radius
    y_projection = 0.5 * radius
    return (
        (x_projection, y_projection),
        (0.0, radius),
        (-x_projection, y_projection),
        (-x_projection, -y_projection),
        (0.0, -radius),
        (x_projection, -y_projection),
    )


def edge_markers() -> tuple[int, ...]:
    """Return one marker per edge; every edge is drawn."""

    return (1, 1, 1, 1, 1, 1)


__all__ = ["Point", "edge_markers", "vertex_offsets"]
