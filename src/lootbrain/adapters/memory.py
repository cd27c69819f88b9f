"""In-memory adapter implementations.

Simple brute-force implementations of the adapter protocols, suitable for
headless simulations and testing.

Usage:
    world = InMemoryWorld()
    world.add(crate)
    navigation = PlanarNavigation(walkable=[(-100, -100, 100, 100)])
    eligibility = SettingsEligibility(LootingSettings())
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from lootbrain.config import LootingSettings
from lootbrain.core.geometry import Vector3
from lootbrain.core.inventory import Item
from lootbrain.core.loot import LootType, WorldObject

Rect = tuple[float, float, float, float]
"""Walkable area on the floor plane: (min_x, min_z, max_x, max_z)."""


class InMemoryWorld:
    """Collider registry answering overlap queries by linear scan.

    Objects are returned in insertion order.
    """

    def __init__(self, objects: Iterable[WorldObject] = ()):
        self._lock = threading.Lock()
        self._objects: dict[str, WorldObject] = {}
        for obj in objects:
            self.add(obj)

    def add(self, obj: WorldObject) -> None:
        with self._lock:
            self._objects[obj.id] = obj

    def remove(self, object_id: str) -> WorldObject | None:
        """Remove an object and mark it destroyed for holders of stale references."""
        with self._lock:
            obj = self._objects.pop(object_id, None)
        if obj is not None:
            obj.destroyed = True
        return obj

    def get(self, object_id: str) -> WorldObject | None:
        return self._objects.get(object_id)

    def __len__(self) -> int:
        return len(self._objects)

    def overlap(self, center: Vector3, radius: float, max_results: int) -> list[WorldObject]:
        with self._lock:
            objects = list(self._objects.values())
        hits: list[WorldObject] = []
        for obj in objects:
            if obj.bounds.intersects_sphere(center, radius):
                hits.append(obj)
                if len(hits) >= max_results:
                    break
        return hits


class PlanarNavigation:
    """Flat navigation surface made of walkable rectangles at one floor height.

    Path length is the horizontal straight-line distance, which is exact on
    a convex floor with no obstacles.

    Args:
        walkable: Walkable rectangles as (min_x, min_z, max_x, max_z).
        floor_y: Height of the floor plane.
    """

    def __init__(self, walkable: Iterable[Rect], floor_y: float = 0.0):
        self._walkable = list(walkable)
        self._floor_y = floor_y

    def _nearest_on_floor(self, point: Vector3) -> Vector3 | None:
        best: Vector3 | None = None
        best_dist = float("inf")
        for min_x, min_z, max_x, max_z in self._walkable:
            candidate = Vector3(
                min(max(point.x, min_x), max_x),
                self._floor_y,
                min(max(point.z, min_z), max_z),
            )
            dist = candidate.distance_to(point)
            if dist < best_dist:
                best, best_dist = candidate, dist
        return best

    def is_walkable(self, point: Vector3) -> bool:
        return any(
            min_x <= point.x <= max_x and min_z <= point.z <= max_z
            for min_x, min_z, max_x, max_z in self._walkable
        )

    def snap_to_walkable(self, point: Vector3, max_distance: float) -> Vector3 | None:
        nearest = self._nearest_on_floor(point)
        if nearest is None or nearest.distance_to(point) > max_distance:
            return None
        return nearest

    def path_length(self, start: Vector3, end: Vector3) -> float | None:
        if not self.is_walkable(end):
            return None
        return (end - start).horizontal().length()


class SettingsEligibility:
    """Eligibility backed by LootingSettings plus a mutable ignore list.

    Args:
        settings: Source of role toggles and the minimum item value.
        ignored: Initial ignored loot ids.
    """

    def __init__(self, settings: LootingSettings, ignored: Iterable[str] = ()):
        self._settings = settings
        self._lock = threading.Lock()
        self._ignored: set[str] = set(ignored)

    def ignore(self, loot_id: str) -> None:
        with self._lock:
            self._ignored.add(loot_id)

    def unignore(self, loot_id: str) -> None:
        with self._lock:
            self._ignored.discard(loot_id)

    def is_role_enabled(self, loot_type: LootType, role: str) -> bool:
        return self._settings.is_role_enabled(loot_type, role)

    def is_valuable_enough(self, item: Item) -> bool:
        return item.value >= self._settings.min_item_value

    def is_ignored(self, loot_id: str) -> bool:
        return loot_id in self._ignored
