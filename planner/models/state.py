"""Building state: the room store plus view selection."""

from __future__ import annotations
from pydantic import BaseModel

from .building import Room


class BuildingState(BaseModel):
    """
    Holds the only persistent geometry: the room outlines.

    Walls are never stored; they are derived from `rooms` on demand.
    Selection fields are weak references to derived wall ids and may
    dangle after a move or reset.
    """
    rooms: dict[str, Room]
    selected_wall_id: str | None = None
    hovered_wall_id: str | None = None

    def get_room(self, room_id: str) -> Room | None:
        return self.rooms.get(room_id)

    def reset_selection(self) -> None:
        self.selected_wall_id = None
        self.hovered_wall_id = None
