"""Scanning models: per-scan candidates and scan reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from lootbrain.core.geometry import Vector3
from lootbrain.core.loot import LootObject, LootType, WorldObject


class Rejection(Enum):
    """Why a candidate was skipped. None of these are errors."""

    MISSING = auto()
    """Collider vanished or carries no loot part."""

    INELIGIBLE = auto()
    """Failed role, value, lock, quest or ignore checks."""

    CLAIMED = auto()
    """Another agent holds the claim."""

    UNREACHABLE = auto()
    """Navigation snap or path query failed."""

    OUT_OF_RANGE = auto()
    """Path length exceeds the loot type's detection distance."""


@dataclass(slots=True)
class Candidate:
    """Ephemeral scan record, discarded after one scan pass.

    Attributes:
        collider: Collider returned by the world query.
        straight_distance: Straight-line distance from the agent to the collider center.
        loot: Loot variant once classified.
        destination: Navigable destination once resolved.
        path_distance: Path length to `destination` once computed.
    """

    collider: WorldObject
    straight_distance: float
    loot: LootObject | None = None
    destination: Vector3 | None = None
    path_distance: float | None = None

    @property
    def loot_type(self) -> LootType | None:
        return self.loot.loot_type if self.loot is not None else None


@dataclass(slots=True)
class ScanReport:
    """Statistics for one scan call.

    Attributes:
        agent_id: Scanning agent.
        candidates: Colliders returned by the overlap query.
        evaluated: Candidates examined before the scan stopped.
        rejections: Count of skipped candidates per reason.
        selected: Chosen loot id, if any.
        timings_ms: Phase name -> elapsed milliseconds.

    Example:
        report = ScanReport()
        scanner.find_target(agent, report=report)
        report.rejections[Rejection.OUT_OF_RANGE]  # 3
    """

    agent_id: str | None = None
    candidates: int = 0
    evaluated: int = 0
    rejections: dict[Rejection, int] = field(default_factory=dict)
    selected: str | None = None
    timings_ms: dict[str, float] = field(default_factory=dict)

    def reject(self, reason: Rejection) -> None:
        self.rejections[reason] = self.rejections.get(reason, 0) + 1

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "agent_id": self.agent_id,
            "candidates": self.candidates,
            "evaluated": self.evaluated,
            "rejections": {reason.name: count for reason, count in self.rejections.items()},
            "selected": self.selected,
            "timings_ms": dict(self.timings_ms),
        }
