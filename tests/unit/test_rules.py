"""Tests for room rules and the rule registry."""

import unittest

from planner.core.registry import RuleRegistry, create_default_registry
from planner.models import MoveFailure, PlanParams, ValidationConfig
from planner.rules.room.outline import (
    AxisAlignedRule,
    ClockwiseWindingRule,
    MinVertexCountRule,
    SimplePolygonRule,
)
from planner.rules.room.size import MinRoomSizeRule
from tests.unit.plan_utils import make_room, rect


class TestOutlineRules(unittest.TestCase):
    def setUp(self):
        self.params = PlanParams()

    def test_rectangle_passes_every_rule(self):
        room = rect("r", 0, 0, 4, 3)
        for rule in create_default_registry().list_rules():
            with self.subTest(rule=rule.get_id()):
                assert rule.check(room, self.params) == []

    def test_two_vertices_fail(self):
        room = make_room("r", [(0, 0), (4, 0)])
        assert MinVertexCountRule().check(room, self.params)

    def test_diagonal_edge_fails(self):
        room = make_room("r", [(0, 0), (4, 0), (4, 3), (1, 4)])
        messages = AxisAlignedRule().check(room, self.params)
        assert len(messages) == 2

    def test_counter_clockwise_fails(self):
        room = make_room("r", [(0, 0), (0, 3), (4, 3), (4, 0)])
        assert ClockwiseWindingRule().check(room, self.params)

    def test_self_intersection_fails(self):
        # Two squares joined at a single corner
        room = make_room("r", [
            (0, 0), (2, 0), (2, 2), (4, 2), (4, 4), (2, 4), (2, 2), (0, 2),
        ])
        assert SimplePolygonRule().check(room, self.params)


class TestMinRoomSize(unittest.TestCase):
    def test_narrow_room_fails(self):
        room = rect("r", 0, 0, 0.5, 6)
        rule = MinRoomSizeRule()
        assert rule.check(room, PlanParams())
        assert rule.failure == MoveFailure.TOO_SMALL

    def test_room_at_minimum_passes(self):
        assert MinRoomSizeRule().check(rect("r", 0, 0, 0.6, 6), PlanParams()) == []

    def test_narrow_wing_on_wide_room_passes(self):
        room = make_room("r", [(0, 0), (4, 0), (4, 4), (0.3, 4), (0.3, 8), (0, 8)])
        assert MinRoomSizeRule().check(room, PlanParams()) == []

    def test_zero_minimum_disables(self):
        room = rect("r", 0, 0, 0.1, 6)
        assert MinRoomSizeRule().check(room, PlanParams(min_room_size=0)) == []


class TestRuleRegistry(unittest.TestCase):
    def test_default_rules(self):
        ids = {r.get_id() for r in create_default_registry().list_rules()}
        assert ids == {
            "room.min_vertices",
            "room.axis_aligned",
            "room.simple_polygon",
            "room.clockwise",
            "room.min_size",
        }

    def test_applicable_rules_sorted_by_priority(self):
        rules = create_default_registry().get_applicable_rules(ValidationConfig())
        priorities = [r.priority for r in rules]
        assert priorities == sorted(priorities)
        assert rules[-1].get_id() == "room.min_size"

    def test_enabled_and_disabled_rules(self):
        registry = create_default_registry()
        only = registry.get_applicable_rules(
            ValidationConfig(enabled_rules=["room.clockwise", "room.min_size"]),
        )
        assert [r.get_id() for r in only] == ["room.clockwise", "room.min_size"]
        without = registry.get_applicable_rules(
            ValidationConfig(disabled_rules=["room.min_size"]),
        )
        assert "room.min_size" not in {r.get_id() for r in without}

    def test_validate_reports_room_and_rule(self):
        registry = create_default_registry()
        rooms = [rect("ok", 0, 0, 4, 3), rect("thin", 0, 0, 0.2, 3)]
        violations = registry.validate(rooms, PlanParams())
        assert [(v.room_id, v.rule_id) for v in violations] == [("thin", "room.min_size")]
        assert violations[0].failure == MoveFailure.TOO_SMALL
        assert str(violations[0]).startswith("room.min_size: thin: ")

    def test_register_and_unregister(self):
        registry = RuleRegistry()
        registry.register(MinVertexCountRule())
        assert registry.get_rule("room.min_vertices") is not None
        registry.unregister("room.min_vertices")
        assert registry.get_rule("room.min_vertices") is None
        assert registry.validate([make_room("r", [(0, 0)])], PlanParams()) == []
