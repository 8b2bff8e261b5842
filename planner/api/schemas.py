"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel

from planner.models import (
    DerivedWall, Direction, MoveResult, PlanParams, Room,
)


class WallOut(DerivedWall):
    """Derived wall plus the box dimensions the renderer needs."""
    thickness: float
    height: float

    @classmethod
    def from_wall(cls, wall: DerivedWall, params: PlanParams) -> WallOut:
        return cls(
            **wall.model_dump(),
            thickness=params.thickness_for(wall.type),
            height=params.wall_height,
        )


class StateResponse(BaseModel):
    """Everything a frame of the floor plan view needs."""
    rooms: list[Room]
    walls: list[WallOut]
    selected_wall_id: str | None = None
    hovered_wall_id: str | None = None


class MoveRequest(BaseModel):
    direction: Direction


class WallRef(BaseModel):
    """Selection or hover target; null clears it."""
    wall_id: str | None = None


class SelectionMoveResponse(BaseModel):
    result: MoveResult
    selected_wall_id: str | None = None


class RuleInfo(BaseModel):
    id: str
    name: str
