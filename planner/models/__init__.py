from .geometry import (
    TOLERANCE, Orientation, Point2D, on_line, orientation, is_axis_aligned,
    normalized_range, ranges_overlap, snap, format_coord,
)
from .building import (
    Room, DerivedWall, WallType, Direction, MoveFailure, MoveResult, make_wall_id,
)
from .parameters import PlanParams, ValidationConfig
from .state import BuildingState

__all__ = [
    "TOLERANCE", "Orientation", "Point2D", "on_line", "orientation",
    "is_axis_aligned", "normalized_range", "ranges_overlap", "snap", "format_coord",
    "Room", "DerivedWall", "WallType", "Direction", "MoveFailure", "MoveResult",
    "make_wall_id",
    "PlanParams", "ValidationConfig",
    "BuildingState",
]
