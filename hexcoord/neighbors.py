from __future__ import annotations

from enum import IntEnum

Triple = tuple[int, int, int]


class HexDirection(IntEnum):
    """Neighbor directions, in the order neighbors are listed."""

    EAST = 0
    NORTHEAST = 1
    NORTHWEST = 2
    WEST = 3
    SOUTHWEST = 4
    SOUTHEAST = 5


CUBE_DIRECTIONS: tuple[Triple, ...] = (
    (+1, -1, 0),
    (0, -1, +1),
    (-1, 0, +1),
    (-1, +1, 0),
    (0, +1, -1),
    (+1, 0, -1),
)


def direction_delta(direction: HexDirection | int) -> Triple:
    return CUBE_DIRECTIONS[HexDirection(direction)]


def neighbor_triples(q: int, r: int, s: int) -> tuple[Triple, ...]:
    return tuple((q + dq, r + dr, s + ds) for dq, dr, ds in CUBE_DIRECTIONS)


__all__ = ["CUBE_DIRECTIONS", "HexDirection", "Triple", "direction_delta", "neighbor_triples"]
