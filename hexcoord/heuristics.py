from __future__ import annotations

from collections.abc import Sequence


def cube_length(q: float, r: float, s: float) -> float:
    return max(abs(q), abs(r), abs(s))


def hex_distance_cube(a: Sequence[float], b: Sequence[float]) -> float:
    return cube_length(b[0] - a[0], b[1] - a[1], b[2] - a[2])


__all__ = ["cube_length", "hex_distance_cube"]
