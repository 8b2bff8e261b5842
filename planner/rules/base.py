"""Abstract base class for all room rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each checks one invariant of a room outline
- Composable: the registry runs every enabled rule on each edited room
- Ordered: structural checks run before the ones that assume a sane outline
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from pydantic import BaseModel

from planner.models import MoveFailure, PlanParams, Room


class RuleViolation(BaseModel):
    """A single failed check on a room."""
    rule_id: str
    room_id: str
    message: str
    failure: MoveFailure = MoveFailure.DEGENERATE

    def __str__(self) -> str:
        return f"{self.rule_id}: {self.room_id}: {self.message}"


class RoomRule(ABC):
    """
    Base class for all room rules.

    Subclasses implement `check()`, returning one message per problem.
    The registry sorts rules by `priority` and reports violations as
    the `failure` of the rule that found them.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # How a move that breaks this rule is reported.
    failure: MoveFailure = MoveFailure.DEGENERATE

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'room.axis_aligned')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Axis-Aligned Edges')."""
        ...

    @abstractmethod
    def check(self, room: Room, params: PlanParams) -> list[str]:
        """Return a description of every way `room` breaks this rule."""
        ...

    def violations(self, room: Room, params: PlanParams) -> list[RuleViolation]:
        return [
            RuleViolation(
                rule_id=self.get_id(),
                room_id=room.id,
                message=message,
                failure=self.failure,
            )
            for message in self.check(room, params)
        ]
