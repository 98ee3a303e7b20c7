from __future__ import annotations

import logging
import math

import pytest

from hexcoord import cartesian_to_cube, create, cube_round, cube_to_cartesian, from_cartesian
from hexcoord.conversions import coerce_number, read_number


@pytest.mark.parametrize(
    ("point", "radius", "expected"),
    [
        ((0.5, 0.5), 1, (0, 0, 0)),
        ((1, 1), 1, (0, -1, 1)),
        ((1, 1), 2, (0, 0, 0)),
        ((10, 10), 2, (1, -4, 3)),
    ],
)
def test_from_cartesian_fixtures(point, radius, expected):
    h = from_cartesian(*point, radius=radius)
    assert (h.q, h.r, h.s) == expected


def test_from_cartesian_result_uses_default_radius():
    assert from_cartesian(10, 10, radius=2).radius == 1.0


def test_cell_centres_locate_their_own_cell():
    for q in range(-4, 5):
        for r in range(-4, 5):
            h = create(q, r, -q - r)
            assert from_cartesian(h.x, h.y) == h
            big = create(q, r, -q - r, radius=3)
            assert from_cartesian(big.x, big.y, radius=3) == big


def test_cell_corner_resolves_to_touching_cell(caplog):
    caplog.set_level(logging.DEBUG, logger="hexcoord.conversions")
    h = from_cartesian(0, -1)
    assert h.q + h.r + h.s == 0
    assert h in {create(0, 0, 0), create(0, 1, -1), create(1, 0, -1)}
    assert "corner" in caplog.text


def test_from_cartesian_never_breaks_invariant():
    steps = [i / 4 for i in range(-20, 21)]
    for x in steps:
        for y in steps:
            q, r, s = cartesian_to_cube(x, y)
            assert q + r + s == 0


def test_cube_to_cartesian():
    x, y = cube_to_cartesian(1, -1, 0)
    assert x == pytest.approx(math.sqrt(3))
    assert y == 0
    assert cube_to_cartesian(0, 1, -1, radius=2) == (pytest.approx(-math.sqrt(3)), -3.0)


def test_cube_round_rebuilds_largest_error():
    assert cube_round(0.4, 0.3, -0.7) == (1, 0, -1)
    assert cube_round(1.1, -0.9, -0.2) == (1, -1, 0)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("2.0", 2), (None, 0), ("x", 0), (math.nan, 0), (math.inf, 0), (0.5, 0.5), (7, 7)],
)
def test_coerce_number(value, expected):
    assert coerce_number(value) == expected


def test_read_number_keeps_unreadable_as_nan():
    assert math.isnan(read_number("x"))
    assert math.isnan(read_number([1]))
    assert read_number("  ") == 0
