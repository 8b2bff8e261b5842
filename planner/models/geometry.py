"""Geometric primitives used throughout the planner."""

from __future__ import annotations
import math
from enum import Enum
from pydantic import BaseModel


TOLERANCE = 0.01  # 10mm, the smallest supported movement granularity
ID_PRECISION = 4  # Decimals used when snapping coordinates and formatting ids


class Orientation(str, Enum):
    HORIZONTAL = "horizontal"  # Constant z, varies along x
    VERTICAL = "vertical"      # Constant x, varies along z


class Point2D(BaseModel):
    """Point on the floor plane (X-Z in Three.js convention)."""
    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)

    def is_close(self, other: Point2D, tol: float = TOLERANCE) -> bool:
        return abs(self.x - other.x) < tol and abs(self.z - other.z) < tol

    def along(self, orientation: Orientation) -> float:
        """Coordinate that varies along a line of the given orientation."""
        return self.x if orientation == Orientation.HORIZONTAL else self.z

    def across(self, orientation: Orientation) -> float:
        """Coordinate that is fixed along a line of the given orientation."""
        return self.z if orientation == Orientation.HORIZONTAL else self.x


def on_line(orientation: Orientation, position: float, t: float) -> Point2D:
    """Build the point at `t` along the line `orientation` @ `position`."""
    if orientation == Orientation.HORIZONTAL:
        return Point2D(x=t, z=position)
    return Point2D(x=position, z=t)


def orientation(p1: Point2D, p2: Point2D, tol: float = TOLERANCE) -> Orientation:
    """Orientation of an axis-aligned segment. Undefined for diagonals."""
    if abs(p1.z - p2.z) < tol:
        return Orientation.HORIZONTAL
    return Orientation.VERTICAL


def is_axis_aligned(p1: Point2D, p2: Point2D, tol: float = TOLERANCE) -> bool:
    return abs(p1.z - p2.z) < tol or abs(p1.x - p2.x) < tol


def normalized_range(a: float, b: float) -> tuple[float, float]:
    return (min(a, b), max(a, b))


def ranges_overlap(
    min1: float, max1: float, min2: float, max2: float, tol: float = TOLERANCE,
) -> bool:
    """Strict interior overlap; touching ranges do not overlap."""
    return max1 > min2 + tol and max2 > min1 + tol


def snap(value: float) -> float:
    """Round to id precision, clearing negative zero."""
    return round(value, ID_PRECISION) + 0.0


def format_coord(value: float) -> str:
    return f"{snap(value):.{ID_PRECISION}f}"
