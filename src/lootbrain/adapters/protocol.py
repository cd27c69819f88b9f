"""Adapter protocols for the external simulation.

Defines the interfaces the scanner consumes: world overlap queries, the
navigation surface and eligibility predicates. Navigation failures are
reported as None, never raised.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lootbrain.core.geometry import Vector3
from lootbrain.core.inventory import Item
from lootbrain.core.loot import LootType, WorldObject


@runtime_checkable
class WorldQuery(Protocol):
    """Spatial queries against world colliders.

    Usage:
        for obj in world.overlap(agent.position, radius=75.0, max_results=250):
            ...
    """

    def overlap(self, center: Vector3, radius: float, max_results: int) -> list[WorldObject]:
        """Colliders overlapping a sphere.

        Args:
            center: Sphere center.
            radius: Sphere radius.
            max_results: Buffer size; extra hits are dropped.

        Returns:
            At most `max_results` colliders, in no particular order.
        """
        ...


@runtime_checkable
class Navigation(Protocol):
    """Queries against the walkable navigation surface."""

    def snap_to_walkable(self, point: Vector3, max_distance: float) -> Vector3 | None:
        """Nearest walkable point within `max_distance` of `point`, or None."""
        ...

    def path_length(self, start: Vector3, end: Vector3) -> float | None:
        """Navigable path length between two points, or None if no path exists."""
        ...


@runtime_checkable
class Eligibility(Protocol):
    """Configuration-driven eligibility checks."""

    def is_role_enabled(self, loot_type: LootType, role: str) -> bool:
        """Whether agents with `role` may loot objects of `loot_type`."""
        ...

    def is_valuable_enough(self, item: Item) -> bool:
        """Whether `item` is worth picking up."""
        ...

    def is_ignored(self, loot_id: str) -> bool:
        """Whether `loot_id` is on the ignore list."""
        ...
