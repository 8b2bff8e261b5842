"""Minimum room size rule."""

from __future__ import annotations

from planner.core.polygon import to_polygon
from planner.models import TOLERANCE, MoveFailure, PlanParams, Room
from planner.rules.base import RoomRule


class MinRoomSizeRule(RoomRule):
    """
    The room must fit a square of `min_room_size` somewhere inside it.

    Checked by shrinking the outline inwards by half the minimum size:
    if nothing is left, every part of the room is too narrow.
    """

    priority = 90
    failure = MoveFailure.TOO_SMALL

    def get_id(self) -> str:
        return "room.min_size"

    def get_name(self) -> str:
        return "Minimum Room Size"

    def check(self, room: Room, params: PlanParams) -> list[str]:
        if params.min_room_size <= 0 or len(room.vertices) < 3:
            return []
        polygon = to_polygon(room.vertices)
        if not polygon.is_valid:
            return []  # Reported by room.simple_polygon
        inset = (params.min_room_size - TOLERANCE) / 2
        if polygon.buffer(-inset, join_style="mitre").is_empty:
            return [f"narrower than {params.min_room_size:.2f}m everywhere"]
        return []
