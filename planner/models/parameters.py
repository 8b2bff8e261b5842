"""Planner parameters and validation configuration."""

from __future__ import annotations
from pydantic import BaseModel

from .building import WallType


class PlanParams(BaseModel):
    """User-adjustable parameters for wall movement and rendering."""
    exterior_move_step: float = 0.3   # Meters (300mm)
    interior_move_step: float = 0.1   # Meters (100mm)
    exterior_thickness: float = 0.3   # Meters (300mm)
    interior_thickness: float = 0.1   # Meters (100mm)
    wall_height: float = 2.7          # Meters (2700mm)
    min_room_size: float = 0.6        # Smallest room dimension (600mm)

    def step_for(self, wall_type: WallType) -> float:
        if wall_type == WallType.EXTERIOR:
            return self.exterior_move_step
        return self.interior_move_step

    def thickness_for(self, wall_type: WallType) -> float:
        if wall_type == WallType.EXTERIOR:
            return self.exterior_thickness
        return self.interior_thickness


class ValidationConfig(BaseModel):
    """Controls which room rules are checked after a move."""
    enabled_rules: list[str] = []   # Empty = use all registered defaults
    disabled_rules: list[str] = []  # Explicitly disable specific rules
