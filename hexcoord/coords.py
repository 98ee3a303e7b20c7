"""Cube coordinate value type for a single hex cell."""

from __future__ import annotations

from dataclasses import dataclass, field

from .conversions import cartesian_to_cube, coerce_number, cube_to_cartesian, read_number
from .errors import InvalidCoordinateError
from .geometry import Point, edge_markers, vertex_offsets
from .heuristics import cube_length
from .neighbors import HexDirection, Triple, direction_delta, neighbor_triples


@dataclass(frozen=True, slots=True)
class HexCoordinate:
    """Immutable position of one hex cell in cube coordinates.

    ``q + r + s`` must be zero. Identity is ``(q, r, s)`` only; ``radius``
    sets the cell size used for the cartesian centre and does not take part
    in equality or hashing. Derived values are computed once on construction.
    """

    q: int
    r: int
    s: int
    radius: float = field(default=1.0, compare=False)

    x: float = field(init=False, compare=False, repr=False)
    y: float = field(init=False, compare=False, repr=False)
    neighbors: tuple[Triple, ...] = field(init=False, compare=False, repr=False)
    vertexes: tuple[Point, ...] = field(init=False, compare=False, repr=False)
    edges: tuple[int, ...] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if read_number(self.q) + read_number(self.r) + read_number(self.s) != 0:
            raise InvalidCoordinateError(self.q, self.r, self.s)

        q, r, s = coerce_number(self.q), coerce_number(self.r), coerce_number(self.s)
        radius = coerce_number(self.radius, default=1)
        if radius <= 0:
            radius = 1
        radius = float(radius)

        x, y = cube_to_cartesian(q, r, s, radius)

        object.__setattr__(self, "q", q)
        object.__setattr__(self, "r", r)
        object.__setattr__(self, "s", s)
        object.__setattr__(self, "radius", radius)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "neighbors", neighbor_triples(q, r, s))
        object.__setattr__(self, "vertexes", vertex_offsets(radius))
        object.__setattr__(self, "edges", edge_markers())

    @classmethod
    def create(cls, q: object, r: object, s: object, radius: object = 1.0) -> HexCoordinate:
        return cls(q, r, s, radius)  # type: ignore[arg-type]

    @classmethod
    def from_cartesian(cls, x: float, y: float, radius: float = 1.0) -> HexCoordinate:
        """Return the cell containing the point ``(x, y)``.

        ``radius`` scales the point only; the returned coordinate always has
        the default radius of 1.
        """

        return cls(*cartesian_to_cube(x, y, radius))

    def __add__(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q + other.q, self.r + other.r, self.s + other.s, self.radius)

    def __sub__(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q - other.q, self.r - other.r, self.s - other.s, self.radius)

    def __str__(self) -> str:
        return self.to_string()

    def to_string(self) -> str:
        """Return ``"q,r,s"``; stable enough to key a mapping of cells."""

        return f"{self.q},{self.r},{self.s}"

    def to_axial(self) -> tuple[int, int]:
        # pairs q with s, not r
        return self.q, self.s

    def to_cube(self) -> Triple:
        return self.q, self.r, self.s

    def equals(self, other: HexCoordinate) -> bool:
        return self == other

    def length(self) -> int:
        """Number of steps from the origin cell."""

        return cube_length(self.q, self.r, self.s)

    def distance_to(self, other: HexCoordinate) -> int:
        return (other - self).length()

    def neighbor(self, direction: HexDirection | int) -> HexCoordinate:
        dq, dr, ds = direction_delta(direction)
        return HexCoordinate(self.q + dq, self.r + dr, self.s + ds, self.radius)

    def neighbor_coordinates(self) -> list[HexCoordinate]:
        return [HexCoordinate(q, r, s, self.radius) for q, r, s in self.neighbors]

    def line_to(self, other: HexCoordinate) -> list[HexCoordinate]:
        """Return the cells on a straight line from ``self`` to ``other``.

        Both ends are included and the last element is ``other`` itself.
        Intermediate cells are located from evenly spaced points between the
        two cartesian centres and carry ``self.radius``.
        """

        distance = self.distance_to(other)
        if distance == 0:
            return [other]

        dx = (other.x - self.x) / distance
        dy = (other.y - self.y) / distance

        line = [
            HexCoordinate(*cartesian_to_cube(self.x + dx * i, self.y + dy * i, self.radius), self.radius)
            for i in range(int(distance))
        ]
        line.append(other)
        return line


def create(q: object, r: object, s: object, radius: object = 1.0) -> HexCoordinate:
    """Build a :class:`HexCoordinate`, raising :class:`InvalidCoordinateError` when ``q + r + s != 0``."""

    return HexCoordinate.create(q, r, s, radius)


def from_cartesian(x: float, y: float, radius: float = 1.0) -> HexCoordinate:
    return HexCoordinate.from_cartesian(x, y, radius)


__all__ = ["HexCoordinate", "create", "from_cartesian"]
