"""Wall movement: relocates a derived wall by editing the room outlines."""

from __future__ import annotations
import logging
from dataclasses import dataclass

from planner.models import (
    TOLERANCE, DerivedWall, Direction, MoveFailure, MoveResult, Orientation,
    PlanParams, Point2D, Room, ValidationConfig, WallType,
    normalized_range, on_line, orientation, ranges_overlap, snap,
)
from planner.core.deriver import WallDeriver
from planner.core.polygon import cleanup_outline
from planner.core.registry import RuleRegistry, create_default_registry

console_logger = logging.getLogger(__name__)


@dataclass
class EdgeMatch:
    """The edge of one room's outline that carries the wall being moved."""
    room_id: str
    index: int  # Index of the edge's first vertex in `outline`
    outline: list[Point2D]
    lo: float
    hi: float
    direction: int  # +1 if the outline runs from lo to hi

    @property
    def start(self) -> Point2D:
        return self.outline[self.index]

    @property
    def end(self) -> Point2D:
        return self.outline[(self.index + 1) % len(self.outline)]

    def is_full(self, wall: DerivedWall, tol: float = TOLERANCE) -> bool:
        return (
            abs(self.lo - wall.range_start) < tol
            and abs(self.hi - wall.range_end) < tol
        )

    def interior_side(self, orient: Orientation) -> int:
        """Side of the line (-1 or +1 along the fixed axis) the room lies on.

        Clockwise with z down: a room is below edges running +x and left of
        edges running +z.
        """
        if orient == Orientation.HORIZONTAL:
            return self.direction
        return -self.direction


class WallMover:
    """
    Moves walls one step at a time.

    A move is a transaction over the room map: resolve the wall, check
    corner safety, compute every edited outline on the side, validate the
    outlines, and only then write them back. A rejected move leaves the
    rooms untouched.
    """

    def __init__(
        self,
        params: PlanParams | None = None,
        registry: RuleRegistry | None = None,
        config: ValidationConfig | None = None,
        tol: float = TOLERANCE,
    ) -> None:
        self.params = params or PlanParams()
        self.registry = registry or create_default_registry()
        self.config = config or ValidationConfig()
        self.tol = tol
        self.deriver = WallDeriver(tol)

    def move(
        self, rooms: dict[str, Room], wall_id: str, direction: Direction,
    ) -> MoveResult:
        wall = self._find_wall(rooms, wall_id)
        if wall is None:
            console_logger.info(f"Wall {wall_id} not found")
            return MoveResult.failure(MoveFailure.NOT_FOUND)

        if not direction.moves(wall.orientation):
            console_logger.info(
                f"Cannot move {wall.orientation.value} wall {wall_id} {direction.value}"
            )
            return MoveResult.failure(MoveFailure.INVALID_DIRECTION)

        delta = direction.sign * self.params.step_for(wall.type)
        new_position = snap(wall.position + delta)

        matches: list[EdgeMatch] = []
        for room_id in wall.room_ids:
            room = rooms.get(room_id)
            if room is None:
                continue
            match = self._match_edge(room, wall)
            if match is None:
                console_logger.warning(f"Room {room_id} has no edge under wall {wall_id}")
                continue
            matches.append(match)

        if not matches:
            return MoveResult.failure(MoveFailure.NOT_FOUND)

        if wall.type == WallType.INTERIOR:
            blocking = self._blocking_rooms(wall, matches, delta)
            if blocking:
                console_logger.info(
                    f"Move of {wall_id} {direction.value} blocked by {', '.join(blocking)}"
                )
                return MoveResult.failure(MoveFailure.BLOCKED)

        staged: dict[str, list[Point2D]] = {}
        for match in matches:
            if match.is_full(wall, self.tol):
                vertices = self._shift_edge(match, wall.orientation, new_position)
            else:
                vertices = self._insert_step(match, wall, new_position)
            vertices = cleanup_outline(vertices, self.tol)
            if len(vertices) < 3:
                console_logger.info(f"Move of {wall_id} collapses room {match.room_id}")
                return MoveResult.failure(MoveFailure.DEGENERATE)
            staged[match.room_id] = vertices

        candidates = [
            rooms[room_id].model_copy(update={"vertices": vertices})
            for room_id, vertices in staged.items()
        ]
        violations = self.registry.validate(candidates, self.params, self.config)
        if violations:
            console_logger.info(
                f"Move of {wall_id} rejected: {'; '.join(str(v) for v in violations)}"
            )
            return MoveResult.failure(
                violations[0].failure, [str(v) for v in violations],
            )

        for room_id, vertices in staged.items():
            rooms[room_id].vertices = vertices

        new_id = self._locate_moved_wall(rooms, wall, new_position)
        console_logger.debug(f"Moved {wall_id} {direction.value} -> {new_id}")
        return MoveResult.success(new_id)

    def _find_wall(self, rooms: dict[str, Room], wall_id: str) -> DerivedWall | None:
        for wall in self.deriver.derive(rooms):
            if wall.id == wall_id:
                return wall
        return None

    def _match_edge(self, room: Room, wall: DerivedWall) -> EdgeMatch | None:
        """Find the outline edge on the wall's line that overlaps its range.

        Works on the cleaned outline, so a boundary stored as several
        collinear pieces is matched as one edge.
        """
        outline = cleanup_outline(room.vertices, self.tol)
        orient = wall.orientation
        n = len(outline)
        for i in range(n):
            a, b = outline[i], outline[(i + 1) % n]
            if a.is_close(b, self.tol) or orientation(a, b, self.tol) != orient:
                continue
            if (
                abs(a.across(orient) - wall.position) >= self.tol
                or abs(b.across(orient) - wall.position) >= self.tol
            ):
                continue
            lo, hi = normalized_range(a.along(orient), b.along(orient))
            if not ranges_overlap(lo, hi, wall.range_start, wall.range_end, self.tol):
                continue
            return EdgeMatch(
                room_id=room.id,
                index=i,
                outline=outline,
                lo=lo,
                hi=hi,
                direction=1 if b.along(orient) > a.along(orient) else -1,
            )
        return None

    def _blocking_rooms(
        self, wall: DerivedWall, matches: list[EdgeMatch], delta: float,
    ) -> list[str]:
        """Rooms that would shrink but only partially own the wall.

        Sliding such a wall would drag it past the corner where the
        room's longer edge turns, leaving a notch in the envelope.
        """
        moving_side = 1 if delta > 0 else -1
        return [
            m.room_id
            for m in matches
            if m.interior_side(wall.orientation) == moving_side
            and not m.is_full(wall, self.tol)
        ]

    def _shift_edge(
        self, match: EdgeMatch, orient: Orientation, new_position: float,
    ) -> list[Point2D]:
        vertices = list(match.outline)
        n = len(vertices)
        for idx in (match.index, (match.index + 1) % n):
            v = vertices[idx]
            vertices[idx] = on_line(orient, new_position, v.along(orient))
        return vertices

    def _insert_step(
        self, match: EdgeMatch, wall: DerivedWall, new_position: float,
    ) -> list[Point2D]:
        """Carve the wall's range out of a longer edge.

        The edge's first vertex is replaced by: the unmoved lead-in, a
        corner back to the old line, the moved run, and a corner forward
        to the old line. Vertices are emitted in the edge's own direction
        so the winding is kept.
        """
        orient = wall.orientation
        old = wall.position
        a_t = match.start.along(orient)
        b_t = match.end.along(orient)

        if match.direction > 0:
            near, far = wall.range_start, wall.range_end
            lead_in = a_t < near - self.tol
            lead_out = b_t > far + self.tol
        else:
            near, far = wall.range_end, wall.range_start
            lead_in = a_t > near + self.tol
            lead_out = b_t < far - self.tol

        step: list[Point2D] = []
        if lead_in:
            step += [match.start, on_line(orient, old, near)]
        step += [on_line(orient, new_position, near), on_line(orient, new_position, far)]
        if lead_out:
            step.append(on_line(orient, old, far))

        i = match.index
        return match.outline[:i] + step + match.outline[i + 1:]

    def _locate_moved_wall(
        self, rooms: dict[str, Room], wall: DerivedWall, new_position: float,
    ) -> str:
        on_new_line = [
            w for w in self.deriver.derive(rooms)
            if w.orientation == wall.orientation
            and abs(w.position - new_position) < self.tol
        ]
        for w in on_new_line:
            if (
                abs(w.range_start - wall.range_start) < self.tol
                and abs(w.range_end - wall.range_end) < self.tol
            ):
                return w.id

        # The moved run may have merged with a neighbour on the new line
        middle = (wall.range_start + wall.range_end) / 2
        for w in on_new_line:
            if w.range_start - self.tol <= middle <= w.range_end + self.tol:
                return w.id
        return wall.id


def move_wall(
    rooms: dict[str, Room], wall_id: str, direction: Direction,
) -> MoveResult:
    """Move a wall one step with default parameters and rules."""
    return WallMover().move(rooms, wall_id, direction)
