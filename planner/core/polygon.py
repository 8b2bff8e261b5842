"""Outline helpers shared by the deriver, the mover and the room rules."""

from __future__ import annotations

from shapely.geometry import Polygon

from planner.models import TOLERANCE, Point2D


def signed_area(vertices: list[Point2D]) -> float:
    """Shoelace area. Positive for clockwise outlines when z points down."""
    n = len(vertices)
    total = 0.0
    for i in range(n):
        a, b = vertices[i], vertices[(i + 1) % n]
        total += a.x * b.z - b.x * a.z
    return total / 2


def _dedupe(vertices: list[Point2D], tol: float) -> list[Point2D]:
    cleaned: list[Point2D] = []
    for v in vertices:
        if not cleaned or not cleaned[-1].is_close(v, tol):
            cleaned.append(v)
    # Closure: the outline wraps, so a last vertex equal to the first is redundant
    while len(cleaned) > 1 and cleaned[0].is_close(cleaned[-1], tol):
        cleaned.pop()
    return cleaned


def _is_collinear(prev: Point2D, v: Point2D, nxt: Point2D, tol: float) -> bool:
    same_x = abs(prev.x - v.x) < tol and abs(v.x - nxt.x) < tol
    same_z = abs(prev.z - v.z) < tol and abs(v.z - nxt.z) < tol
    return same_x or same_z


def cleanup_outline(vertices: list[Point2D], tol: float = TOLERANCE) -> list[Point2D]:
    """
    Canonical form of an axis-aligned outline.

    Collapses repeated vertices and removes vertices lying in the middle of
    a straight run. Zero-width spikes fold away as well, since their tip is
    collinear with both neighbours.
    """
    current = list(vertices)
    while True:
        current = _dedupe(current, tol)
        n = len(current)
        if n < 3:
            return current
        for i in range(n):
            if _is_collinear(current[i - 1], current[i], current[(i + 1) % n], tol):
                del current[i]
                break
        else:
            return current


def to_polygon(vertices: list[Point2D]) -> Polygon:
    return Polygon([(v.x, v.z) for v in vertices])
