"""Rule registry: stores room rules and runs the enabled ones."""

from __future__ import annotations

from planner.models import PlanParams, Room, ValidationConfig
from planner.rules.base import RoomRule, RuleViolation


class RuleRegistry:
    """
    Central registry for all room rules.

    Rules are registered at startup. After a move, the mover asks the
    registry to check every edited room against the enabled rules in
    priority order.
    """

    def __init__(self) -> None:
        self._rules: dict[str, RoomRule] = {}

    def register(self, rule: RoomRule) -> None:
        """Register a room rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> RoomRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[RoomRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def get_applicable_rules(self, config: ValidationConfig) -> list[RoomRule]:
        """
        Return the enabled rules, sorted by priority.

        Respects ValidationConfig.enabled_rules and disabled_rules.
        """
        candidates = list(self._rules.values())

        # If enabled_rules is specified, only use those
        if config.enabled_rules:
            candidates = [r for r in candidates if r.get_id() in config.enabled_rules]

        # Remove explicitly disabled rules
        if config.disabled_rules:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_rules]

        candidates.sort(key=lambda r: r.priority)
        return candidates

    def validate(
        self,
        rooms: list[Room],
        params: PlanParams,
        config: ValidationConfig | None = None,
    ) -> list[RuleViolation]:
        """Check each room against every applicable rule."""
        if config is None:
            config = ValidationConfig()

        rules = self.get_applicable_rules(config)
        violations: list[RuleViolation] = []
        for room in rooms:
            for rule in rules:
                violations.extend(rule.violations(room, params))
        return violations


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard room rules."""
    from planner.rules.room.outline import (
        AxisAlignedRule, ClockwiseWindingRule, MinVertexCountRule, SimplePolygonRule,
    )
    from planner.rules.room.size import MinRoomSizeRule

    registry = RuleRegistry()
    registry.register(MinVertexCountRule())
    registry.register(AxisAlignedRule())
    registry.register(SimplePolygonRule())
    registry.register(ClockwiseWindingRule())
    registry.register(MinRoomSizeRule())
    return registry
