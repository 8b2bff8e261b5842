"""Building service: the facade the API and input layers act through."""

from __future__ import annotations
import logging
import threading

from planner.models import (
    BuildingState, DerivedWall, Direction, MoveFailure, MoveResult,
    PlanParams, ValidationConfig,
)
from planner.core.deriver import WallDeriver
from planner.core.mover import WallMover
from planner.core.registry import RuleRegistry, create_default_registry
from planner.core.seed import create_initial_rooms

console_logger = logging.getLogger(__name__)


class BuildingService:
    """Owns the building state; reads derive walls, writes go through the mover.

    Every action holds one lock for its whole read-then-write sequence,
    so concurrent API requests never interleave on the room map.
    """

    def __init__(
        self,
        params: PlanParams | None = None,
        registry: RuleRegistry | None = None,
        config: ValidationConfig | None = None,
    ) -> None:
        self.params = params or PlanParams()
        self.registry = registry or create_default_registry()
        self.deriver = WallDeriver()
        self.mover = WallMover(self.params, self.registry, config)
        self.state = BuildingState(rooms=create_initial_rooms())
        self._lock = threading.Lock()

    def snapshot(self) -> BuildingState:
        with self._lock:
            return self.state.model_copy(deep=True)

    def walls(self) -> list[DerivedWall]:
        with self._lock:
            return self.deriver.derive(self.state.rooms)

    def get_wall(self, wall_id: str | None) -> DerivedWall | None:
        if wall_id is None:
            return None
        for wall in self.walls():
            if wall.id == wall_id:
                return wall
        return None

    def selected_wall(self) -> DerivedWall | None:
        """The selected wall, or None if nothing is selected or the id went stale."""
        return self.get_wall(self.state.selected_wall_id)

    def select_wall(self, wall_id: str | None) -> None:
        with self._lock:
            self.state.selected_wall_id = wall_id

    def clear_selection(self) -> None:
        with self._lock:
            self.state.selected_wall_id = None

    def set_hovered_wall(self, wall_id: str | None) -> None:
        with self._lock:
            self.state.hovered_wall_id = wall_id

    def try_move_wall(self, wall_id: str, direction: Direction) -> MoveResult:
        with self._lock:
            return self.mover.move(self.state.rooms, wall_id, direction)

    def move_wall(self, wall_id: str, direction: Direction) -> str | None:
        """Move a wall; return its new id, or None if it did not move."""
        result = self.try_move_wall(wall_id, direction)
        return result.wall_id if result.moved else None

    def move_selected_wall(self, direction: Direction) -> MoveResult:
        """Move the selected wall and follow it to its new id."""
        with self._lock:
            wall_id = self.state.selected_wall_id
            if wall_id is None:
                return MoveResult.failure(MoveFailure.NOT_FOUND)

            result = self.mover.move(self.state.rooms, wall_id, direction)
            if result.moved:
                self.state.selected_wall_id = result.wall_id
            return result

    def reset_building(self) -> None:
        with self._lock:
            self.state.rooms = create_initial_rooms()
            self.state.reset_selection()
        console_logger.info("Building reset to seed floor plan")

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
