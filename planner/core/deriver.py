"""Wall derivation: turns room outlines into classified wall segments."""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass

from planner.models import (
    TOLERANCE, DerivedWall, Orientation, Room, WallType,
    make_wall_id, normalized_range, on_line, orientation, snap,
)


@dataclass(frozen=True)
class RoomEdge:
    """One edge of a room outline, seen from the line it lies on."""
    room_id: str
    orientation: Orientation
    position: float  # z for horizontal, x for vertical
    lo: float        # Span along the varying axis
    hi: float
    direction: int   # +1 if traversed from lo to hi, -1 otherwise

    def covers(self, start: float, end: float, tol: float = TOLERANCE) -> bool:
        return self.lo <= start + tol and self.hi >= end - tol


class WallDeriver:
    """
    Derives walls from room outlines.

    All edges lying on the same infinite line are cut at every edge endpoint
    on that line. Each resulting piece becomes one wall, owned by the rooms
    whose edges cover it. A piece is interior when two different rooms
    cover it from opposite sides; with clockwise winding that means they
    traverse it in opposite directions.
    """

    def __init__(self, tol: float = TOLERANCE) -> None:
        self.tol = tol

    def derive(self, rooms: Mapping[str, Room]) -> list[DerivedWall]:
        walls: list[DerivedWall] = []
        for (orient, position), edges in self._group_by_line(rooms).items():
            walls.extend(self._walls_on_line(orient, position, edges))

        # Sorted so the result is independent of room and vertex order
        walls.sort(key=lambda w: (w.orientation.value, w.position, w.range_start))
        return walls

    def extract_edges(self, room: Room) -> list[RoomEdge]:
        edges: list[RoomEdge] = []
        for a, b in room.edges():
            if a.is_close(b, self.tol):
                continue
            orient = orientation(a, b, self.tol)
            a_t, b_t = a.along(orient), b.along(orient)
            lo, hi = normalized_range(a_t, b_t)
            edges.append(RoomEdge(
                room_id=room.id,
                orientation=orient,
                position=snap(a.across(orient)),
                lo=lo,
                hi=hi,
                direction=1 if b_t > a_t else -1,
            ))
        return edges

    def _group_by_line(
        self, rooms: Mapping[str, Room],
    ) -> dict[tuple[Orientation, float], list[RoomEdge]]:
        groups: dict[tuple[Orientation, float], list[RoomEdge]] = {}
        for room in rooms.values():
            for edge in self.extract_edges(room):
                groups.setdefault((edge.orientation, edge.position), []).append(edge)
        return groups

    def _breakpoints(self, edges: list[RoomEdge]) -> list[float]:
        """Sorted distinct span endpoints along a line, merged within tolerance."""
        raw = sorted(t for e in edges for t in (e.lo, e.hi))
        points: list[float] = []
        for t in raw:
            if not points or t - points[-1] >= self.tol:
                points.append(t)
        return points

    def _walls_on_line(
        self, orient: Orientation, position: float, edges: list[RoomEdge],
    ) -> list[DerivedWall]:
        walls: list[DerivedWall] = []
        points = self._breakpoints(edges)

        for seg_start, seg_end in zip(points, points[1:]):
            positive: set[str] = set()
            negative: set[str] = set()
            for edge in edges:
                if edge.covers(seg_start, seg_end, self.tol):
                    (positive if edge.direction > 0 else negative).add(edge.room_id)

            room_ids = positive | negative
            if not room_ids:
                continue  # Gap between rooms on this line

            # A room on both sides of the same piece is a notch, not a boundary
            folded = positive & negative
            interior = any(
                p != n for p in positive - folded for n in negative - folded
            )

            walls.append(DerivedWall(
                id=make_wall_id(orient, position, seg_start, seg_end),
                type=WallType.INTERIOR if interior else WallType.EXTERIOR,
                orientation=orient,
                start=on_line(orient, position, seg_start),
                end=on_line(orient, position, seg_end),
                room_ids=sorted(room_ids),
            ))
        return walls


def derive_walls(rooms: Mapping[str, Room]) -> list[DerivedWall]:
    """Derive the classified wall list for a room map."""
    return WallDeriver().derive(rooms)
