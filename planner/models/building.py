"""Building element models: rooms, derived walls, and move outcomes."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import Orientation, Point2D, format_coord


class WallType(str, Enum):
    EXTERIOR = "exterior"
    INTERIOR = "interior"


class Direction(str, Enum):
    UP = "up"        # -z
    DOWN = "down"    # +z
    LEFT = "left"    # -x
    RIGHT = "right"  # +x

    @property
    def sign(self) -> int:
        return -1 if self in (Direction.UP, Direction.LEFT) else 1

    def moves(self, orientation: Orientation) -> bool:
        """True if this direction translates a wall of the given orientation."""
        if orientation == Orientation.HORIZONTAL:
            return self in (Direction.UP, Direction.DOWN)
        return self in (Direction.LEFT, Direction.RIGHT)


class Room(BaseModel):
    """A room outline: axis-aligned polygon, clockwise with z pointing down."""
    id: str
    name: str
    vertices: list[Point2D]

    def edges(self) -> list[tuple[Point2D, Point2D]]:
        n = len(self.vertices)
        return [(self.vertices[i], self.vertices[(i + 1) % n]) for i in range(n)]


def make_wall_id(
    orientation: Orientation, position: float, start: float, end: float,
) -> str:
    return (
        f"wall-{orientation.value}-{format_coord(position)}"
        f"-{format_coord(start)}-{format_coord(end)}"
    )


class DerivedWall(BaseModel):
    """A wall segment derived from room outlines. Never stored."""
    id: str
    type: WallType
    orientation: Orientation
    start: Point2D  # Lower end along the varying axis
    end: Point2D
    room_ids: list[str]

    @property
    def position(self) -> float:
        """Fixed coordinate of the wall's line (z if horizontal, x if vertical)."""
        return self.start.across(self.orientation)

    @property
    def range_start(self) -> float:
        return min(self.start.along(self.orientation), self.end.along(self.orientation))

    @property
    def range_end(self) -> float:
        return max(self.start.along(self.orientation), self.end.along(self.orientation))

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class MoveFailure(str, Enum):
    NOT_FOUND = "not_found"
    INVALID_DIRECTION = "invalid_direction"
    BLOCKED = "blocked"
    DEGENERATE = "degenerate"
    TOO_SMALL = "too_small"


class MoveResult(BaseModel):
    """Outcome of a wall move. A rejected move is a normal result, not an error."""
    moved: bool
    wall_id: str | None = None
    reason: MoveFailure | None = None
    violations: list[str] = []

    @classmethod
    def success(cls, wall_id: str) -> MoveResult:
        return cls(moved=True, wall_id=wall_id)

    @classmethod
    def failure(
        cls, reason: MoveFailure, violations: list[str] | None = None,
    ) -> MoveResult:
        return cls(moved=False, reason=reason, violations=violations or [])
