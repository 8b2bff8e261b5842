"""Tests for the building service (selection and actions)."""

import unittest

from planner.core.seed import create_initial_rooms
from planner.models import Direction, MoveFailure, Orientation, PlanParams, WallType
from planner.services.building_service import BuildingService
from tests.unit.plan_utils import find_wall

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL

INTERIOR_ID = "wall-vertical-4.5000-0.0000-6.0000"
RIGHT_ID = "wall-vertical-9.0000-0.0000-9.0000"


class TestSeedState(unittest.TestCase):
    def test_starts_with_seed_rooms(self):
        service = BuildingService()
        state = service.snapshot()
        assert set(state.rooms) == {"room1", "room2"}
        assert state.rooms["room2"].vertices == create_initial_rooms()["room2"].vertices
        assert state.selected_wall_id is None
        assert state.hovered_wall_id is None

    def test_snapshot_is_a_copy(self):
        service = BuildingService()
        state = service.snapshot()
        state.rooms["room1"].vertices.clear()
        assert len(service.snapshot().rooms["room1"].vertices) == 4


class TestSelection(unittest.TestCase):
    def setUp(self):
        self.service = BuildingService()

    def test_select_and_clear(self):
        self.service.select_wall(INTERIOR_ID)
        assert self.service.selected_wall().id == INTERIOR_ID
        self.service.clear_selection()
        assert self.service.selected_wall() is None

    def test_stale_selection_is_no_selection(self):
        self.service.select_wall("wall-vertical-1.0000-0.0000-1.0000")
        assert self.service.selected_wall() is None

    def test_hover_is_independent_of_selection(self):
        self.service.select_wall(INTERIOR_ID)
        self.service.set_hovered_wall(RIGHT_ID)
        state = self.service.snapshot()
        assert state.selected_wall_id == INTERIOR_ID
        assert state.hovered_wall_id == RIGHT_ID
        self.service.set_hovered_wall(None)
        assert self.service.snapshot().hovered_wall_id is None


class TestMoves(unittest.TestCase):
    def setUp(self):
        self.service = BuildingService()

    def test_move_wall_returns_new_id(self):
        new_id = self.service.move_wall(RIGHT_ID, Direction.RIGHT)
        assert new_id == "wall-vertical-9.3000-0.0000-9.0000"
        assert self.service.get_wall(new_id).type == WallType.EXTERIOR

    def test_move_wall_returns_none_when_blocked(self):
        assert self.service.move_wall(INTERIOR_ID, Direction.RIGHT) is None
        result = self.service.try_move_wall(INTERIOR_ID, Direction.RIGHT)
        assert result.reason == MoveFailure.BLOCKED

    def test_move_selected_follows_the_wall(self):
        self.service.select_wall(RIGHT_ID)
        result = self.service.move_selected_wall(Direction.RIGHT)
        assert result.moved
        assert self.service.snapshot().selected_wall_id == result.wall_id
        self.service.move_selected_wall(Direction.RIGHT)
        wall = self.service.selected_wall()
        assert wall is not None
        assert abs(wall.position - 9.6) < 1e-9

    def test_failed_move_keeps_selection(self):
        self.service.select_wall(INTERIOR_ID)
        result = self.service.move_selected_wall(Direction.UP)
        assert result.reason == MoveFailure.INVALID_DIRECTION
        assert self.service.snapshot().selected_wall_id == INTERIOR_ID

    def test_move_without_selection(self):
        result = self.service.move_selected_wall(Direction.LEFT)
        assert result.reason == MoveFailure.NOT_FOUND

    def test_params_control_step(self):
        service = BuildingService(PlanParams(exterior_move_step=0.6))
        assert service.move_wall(RIGHT_ID, Direction.LEFT) == "wall-vertical-8.4000-0.0000-9.0000"


class TestReset(unittest.TestCase):
    def test_reset_restores_seed_and_clears_selection(self):
        service = BuildingService()
        service.select_wall(RIGHT_ID)
        service.set_hovered_wall(INTERIOR_ID)
        service.move_selected_wall(Direction.RIGHT)

        service.reset_building()

        state = service.snapshot()
        assert state.selected_wall_id is None
        assert state.hovered_wall_id is None
        assert state.rooms["room2"].vertices == create_initial_rooms()["room2"].vertices
        walls = service.walls()
        assert find_wall(walls, V, 9, 0, 9) is not None
        assert find_wall(walls, V, 4.5, 0, 6, WallType.INTERIOR) is not None
