"""Conversions between cube coordinates and cartesian space.

Cells use a pointy-top layout: a cell of ``radius`` R is ``2R`` tall and
``sqrt(3) * R`` wide, ``x`` grows eastward and ``y`` grows northward with
``s``.
"""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)

SQRT3 = math.sqrt(3.0)

Number = int | float


def read_number(value: object) -> Number:
    """Read ``value`` as a number without rejecting it.

    ``None`` and blank strings read as ``0``; numeric strings are parsed;
    anything that cannot be read becomes ``nan``.
    """

    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return float(text)
        except ValueError:
            return math.nan
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return math.nan


def coerce_number(value: object, default: Number = 0) -> Number:
    """Read ``value`` and replace non-finite results with ``default``.

    Integral floats are returned as ``int``.
    """

    number = read_number(value)
    if not math.isfinite(number):
        return default
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number


def cube_to_cartesian(q: float, r: float, s: float, radius: float = 1.0) -> tuple[float, float]:
    height = 2 * radius
    width = SQRT3 * radius
    x = 0.5 * width * (q - r)
    y = 0.75 * height * s
    return x, y


def cube_round(qf: float, rf: float, sf: float) -> tuple[int, int, int]:
    """Round fractional cube coordinates to the nearest valid cell."""

    qi, ri, si = round(qf), round(rf), round(sf)
    dq, dr, ds = abs(qi - qf), abs(ri - rf), abs(si - sf)
    if dq > dr and dq > ds:
        qi = -ri - si
    elif dr > ds:
        ri = -qi - si
    else:
        si = -qi - ri
    return qi, ri, si


def cartesian_to_cube(x: float, y: float, radius: float = 1.0) -> tuple[int, int, int]:
    """Return the cube coordinates of the cell containing point ``(x, y)``."""

    scaled_x = x / radius
    scaled_y = y / radius

    t = scaled_x / SQRT3
    a = math.ceil(2 * t)
    b = math.ceil(-t - scaled_y)
    c = math.ceil(-t + scaled_y)

    qf, rf, sf = (a - c) / 3, (b - a) / 3, (c - b) / 3
    q, r, s = round(qf), round(rf), round(sf)
    if q + r + s != 0:
        # only reachable for points on a cell corner
        q, r, s = cube_round(qf, rf, sf)
        logger.debug("point (%s, %s) lies on a cell corner, rounded to (%d, %d, %d)", x, y, q, r, s)
    return q, r, s


__all__ = [
    "SQRT3",
    "cartesian_to_cube",
    "coerce_number",
    "cube_round",
    "cube_to_cartesian",
    "read_number",
]
