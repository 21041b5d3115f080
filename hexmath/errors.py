"""Exceptions raised by :mod:`hexmath`."""

from __future__ import annotations


class HexMathError(Exception):
    """Base class for every error raised by the package."""


class UnsupportedRoundingModeError(HexMathError, ValueError):
    """Raised when a float-to-int conversion receives an unknown rounding mode."""

    def __init__(self, mode: object) -> None:
        super().__init__(f"unsupported rounding mode: {mode!r}")
        self.mode = mode


class InvariantViolationError(HexMathError, ValueError):
    """Raised when a hand-built cube coordinate breaks ``q + s + r == 0``.

    The check only runs while ``__debug__`` is true, so it disappears under
    ``python -O``.
    """


class InvalidCellSizeError(HexMathError, ValueError):
    """Raised when a cell size is zero, negative or not finite."""

    def __init__(self, size: object) -> None:
        super().__init__(f"cell size must be a finite number greater than zero, got {size!r}")
        self.size = size


__all__ = [
    "HexMathError",
    "InvalidCellSizeError",
    "InvariantViolationError",
    "UnsupportedRoundingModeError",
]
