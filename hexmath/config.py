"""Validated settings for binding a hex grid to Cartesian space."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .coords import RoundingMode
from .rounding import coerce_rounding_mode

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .system import FloatHexCoordinateSystem, HexCoordinateSystem


class HexGridSettings(BaseModel):
    """Cell size and default narrowing policy shared by a grid's coordinate systems."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    cell_size: float = Field(default=1.0, gt=0.0, allow_inf_nan=False)
    rounding_mode: RoundingMode = Field(default=RoundingMode.FLOOR)

    @field_validator("rounding_mode", mode="before")
    @classmethod
    def _coerce_rounding_mode(cls, value: object) -> RoundingMode:
        return coerce_rounding_mode(value)  # type: ignore[arg-type]

    def integer_system(self) -> HexCoordinateSystem:
        """Instantiate a :class:`~hexmath.system.HexCoordinateSystem` for these settings."""

        from .system import HexCoordinateSystem

        return HexCoordinateSystem(self.cell_size, rounding_mode=self.rounding_mode)

    def float_system(self) -> FloatHexCoordinateSystem:
        """Instantiate a :class:`~hexmath.system.FloatHexCoordinateSystem`."""

        from .system import FloatHexCoordinateSystem

        return FloatHexCoordinateSystem(self.cell_size)


__all__ = ["HexGridSettings"]
