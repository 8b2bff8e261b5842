"""Structural outline rules: vertex count, axis alignment, winding, simplicity."""

from __future__ import annotations

from planner.core.polygon import signed_area, to_polygon
from planner.models import PlanParams, Room, is_axis_aligned
from planner.rules.base import RoomRule


class MinVertexCountRule(RoomRule):
    """A closed outline needs at least three corners."""

    priority = 10

    def get_id(self) -> str:
        return "room.min_vertices"

    def get_name(self) -> str:
        return "Minimum Vertex Count"

    def check(self, room: Room, params: PlanParams) -> list[str]:
        if len(room.vertices) < 3:
            return [f"has {len(room.vertices)} vertices, need at least 3"]
        return []


class AxisAlignedRule(RoomRule):
    """Every edge must be horizontal or vertical."""

    priority = 20

    def get_id(self) -> str:
        return "room.axis_aligned"

    def get_name(self) -> str:
        return "Axis-Aligned Edges"

    def check(self, room: Room, params: PlanParams) -> list[str]:
        return [
            f"edge ({a.x}, {a.z}) -> ({b.x}, {b.z}) is diagonal"
            for a, b in room.edges()
            if not is_axis_aligned(a, b)
        ]


class SimplePolygonRule(RoomRule):
    """The outline must not touch or cross itself."""

    priority = 30

    def get_id(self) -> str:
        return "room.simple_polygon"

    def get_name(self) -> str:
        return "Simple Polygon"

    def check(self, room: Room, params: PlanParams) -> list[str]:
        if len(room.vertices) < 3:
            return []
        if not to_polygon(room.vertices).is_valid:
            return ["outline intersects itself"]
        return []


class ClockwiseWindingRule(RoomRule):
    """Vertices run clockwise (x right, z down), i.e. positive signed area."""

    priority = 40

    def get_id(self) -> str:
        return "room.clockwise"

    def get_name(self) -> str:
        return "Clockwise Winding"

    def check(self, room: Room, params: PlanParams) -> list[str]:
        area = signed_area(room.vertices)
        if area <= 0:
            return [f"signed area {area:.4f} is not positive"]
        return []
