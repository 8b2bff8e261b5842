"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from planner.models import MoveResult, Room
from planner.services.building_service import BuildingService
from planner.api.schemas import (
    MoveRequest, RuleInfo, SelectionMoveResponse, StateResponse, WallOut, WallRef,
)

router = APIRouter()

# Shared service instance
_service = BuildingService()


def _walls_out() -> list[WallOut]:
    return [WallOut.from_wall(w, _service.params) for w in _service.walls()]


@router.get("/state", response_model=StateResponse)
async def get_state() -> StateResponse:
    """Rooms, derived walls and the current selection."""
    state = _service.snapshot()
    return StateResponse(
        rooms=list(state.rooms.values()),
        walls=_walls_out(),
        selected_wall_id=state.selected_wall_id,
        hovered_wall_id=state.hovered_wall_id,
    )


@router.get("/rooms", response_model=list[Room])
async def list_rooms() -> list[Room]:
    return list(_service.snapshot().rooms.values())


@router.get("/walls", response_model=list[WallOut])
async def list_walls() -> list[WallOut]:
    """Walls derived from the current room outlines."""
    return _walls_out()


@router.post("/walls/{wall_id}/move", response_model=MoveResult)
async def move_wall(wall_id: str, request: MoveRequest) -> MoveResult:
    """Move one wall a single step. A rejected move reports why."""
    return _service.try_move_wall(wall_id, request.direction)


@router.put("/selection", response_model=WallRef)
async def select_wall(request: WallRef) -> WallRef:
    _service.select_wall(request.wall_id)
    return WallRef(wall_id=request.wall_id)


@router.delete("/selection", response_model=WallRef)
async def clear_selection() -> WallRef:
    _service.clear_selection()
    return WallRef()


@router.put("/hover", response_model=WallRef)
async def set_hovered_wall(request: WallRef) -> WallRef:
    _service.set_hovered_wall(request.wall_id)
    return WallRef(wall_id=request.wall_id)


@router.post("/selection/move", response_model=SelectionMoveResponse)
async def move_selected_wall(request: MoveRequest) -> SelectionMoveResponse:
    """Move the selected wall and follow it to its new id."""
    result = _service.move_selected_wall(request.direction)
    return SelectionMoveResponse(
        result=result,
        selected_wall_id=_service.snapshot().selected_wall_id,
    )


@router.post("/reset", response_model=StateResponse)
async def reset_building() -> StateResponse:
    """Restore the seed L-shaped floor plan."""
    _service.reset_building()
    return await get_state()


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List the room rules checked after every move."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
