"""Validated layout configuration for hosts that work at a fixed cell size."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .conversions import SQRT3
from .coords import HexCoordinate


class HexLayoutConfig(BaseModel):
    """Cell size shared by every coordinate a host creates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    radius: float = Field(default=1.0, gt=0.0)

    @field_validator("radius")
    @classmethod
    def _coerce_float(cls, value: float) -> float:
        return float(value)

    @property
    def cell_width(self) -> float:
        return SQRT3 * self.radius

    @property
    def cell_height(self) -> float:
        return 2 * self.radius

    def create(self, q: int, r: int, s: int) -> HexCoordinate:
        """Build a coordinate at the configured radius."""

        return HexCoordinate(q, r, s, self.radius)

    def locate(self, x: float, y: float) -> HexCoordinate:
        """Return the cell under ``(x, y)`` measured at the configured radius."""

        return HexCoordinate.from_cartesian(x, y, self.radius)


__all__ = ["HexLayoutConfig"]
