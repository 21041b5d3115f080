"""Tolerance used by every float comparison in the package.

``EPSILON`` is an absolute bound measured in cell units. It is deliberately
fixed rather than relative: the same band applies to float-float and
float-int comparisons, which keeps ``==`` symmetric across the two
coordinate families. Like any absolute tolerance it is not transitive; two
values ``EPSILON`` apart from a third are not guaranteed to be equal to each
other.
"""

from __future__ import annotations

from typing import Final

EPSILON: Final[float] = 1e-4


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return ``True`` when ``a`` and ``b`` differ by at most ``epsilon``."""

    return abs(a - b) <= epsilon


def components_equal(
    left: tuple[float, ...], right: tuple[float, ...], *, exact: bool
) -> bool:
    """Compare two component tuples exactly or within :data:`EPSILON`."""

    if len(left) != len(right):
        return False
    if exact:
        return left == right
    return all(approx_equal(a, b) for a, b in zip(left, right))


__all__ = ["EPSILON", "approx_equal", "components_equal"]
