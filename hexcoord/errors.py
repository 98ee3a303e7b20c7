"""Exceptions raised by the hex coordinate model."""

from __future__ import annotations


class HexCoordinateError(ValueError):
    """Base class for errors raised by :mod:`hexcoord`."""


class InvalidCoordinateError(HexCoordinateError):
    """Raised when cube coordinates do not satisfy ``q + r + s == 0``."""

    def __init__(self, q: object, r: object, s: object) -> None:
        self.q = q
        self.r = r
        self.s = s
        super().__init__(f"Invalid hex coordinates: q + r + s must be 0, got ({q!r}, {r!r}, {s!r})")


__all__ = ["HexCoordinateError", "InvalidCoordinateError"]
