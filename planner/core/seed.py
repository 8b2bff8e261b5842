"""Seed floor plan used at startup and on reset."""

from __future__ import annotations

from planner.models import Point2D, Room


# L-shaped building with 2 rooms (x to the right, z downward):
#
#      0    4.5    9
#   0  +-----+-----+
#      |     |     |
#      | R1  |     |
#      |     | R2  |
#   6  +-----+     |
#            |     |
#   9        +-----+

def _room(room_id: str, name: str, coords: list[tuple[float, float]]) -> Room:
    return Room(
        id=room_id,
        name=name,
        vertices=[Point2D(x=x, z=z) for x, z in coords],
    )


def create_initial_rooms() -> dict[str, Room]:
    """Return a fresh copy of the seed L-shape, clockwise winding."""
    rooms = [
        _room("room1", "Room 1", [(0, 0), (4.5, 0), (4.5, 6), (0, 6)]),
        _room("room2", "Room 2", [(4.5, 0), (9, 0), (9, 9), (4.5, 9), (4.5, 6)]),
    ]
    return {r.id: r for r in rooms}
