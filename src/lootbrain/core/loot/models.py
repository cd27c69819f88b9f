"""Loot models: world objects, the tagged loot variant, agents and targets.

A `WorldObject` is what an overlap query hands back: a collider with optional
capability parts (a lootable container, an item, a corpse). Classification
resolves it once into exactly one `LootObject` variant.

Usage:
    crate = WorldObject(
        id="crate-7",
        bounds=Bounds(Vector3(4, 0.5, 0), Vector3(0.5, 0.5, 0.5)),
        lootable=LootableContainer(Container("crate-7", grids=[Grid("g0", 4, 4)])),
    )
    loot = classify(crate)  # ContainerLoot(...)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from lootbrain.core.geometry import Bounds, Vector3
from lootbrain.core.inventory import Container, Equipment, Item


class LootType(Enum):
    """Kind of lootable object."""

    CORPSE = 0
    CONTAINER = 1
    ITEM = 2


@dataclass(frozen=True, slots=True)
class LootableContainer:
    """World container part: the searchable container plus its door state."""

    container: Container
    locked: bool = False
    active: bool = True


@dataclass(frozen=True, slots=True)
class CorpseBody:
    """Corpse part. `owner_agent_id` is None for static, scripted bodies."""

    owner_agent_id: str | None = None


@dataclass(slots=True)
class WorldObject:
    """A collider found in the world, with whatever loot parts it carries.

    Attributes:
        id: Stable identity of the object.
        bounds: World-space bounding volume of the collider.
        position: Transform position (defaults to the bounds center).
        lootable: Container part, if any.
        item: Item part, if any.
        corpse: Corpse part, if any.
        destroyed: Set when the object disappeared after the query.
    """

    id: str
    bounds: Bounds
    position: Vector3 | None = None
    lootable: LootableContainer | None = None
    item: Item | None = None
    corpse: CorpseBody | None = None
    destroyed: bool = False


@dataclass(frozen=True, slots=True)
class ContainerLoot:
    id: str
    bounds: Bounds
    position: Vector3
    lootable: LootableContainer

    @property
    def loot_type(self) -> LootType:
        return LootType.CONTAINER


@dataclass(frozen=True, slots=True)
class ItemLoot:
    id: str
    bounds: Bounds
    position: Vector3
    item: Item

    @property
    def loot_type(self) -> LootType:
        return LootType.ITEM


@dataclass(frozen=True, slots=True)
class CorpseLoot:
    id: str
    bounds: Bounds
    position: Vector3
    body: CorpseBody

    @property
    def loot_type(self) -> LootType:
        return LootType.CORPSE


LootObject = ContainerLoot | ItemLoot | CorpseLoot


@dataclass(frozen=True, slots=True)
class Target:
    """A claimed loot object and where to stand to loot it.

    Attributes:
        loot: The claimed loot object.
        loot_position: Transform position of the loot object.
        destination: Navigable point next to the object.
        distance: Path length from the agent to `destination`.
    """

    loot: LootObject
    loot_position: Vector3
    destination: Vector3
    distance: float

    @property
    def loot_id(self) -> str:
        return self.loot.id

    @property
    def loot_type(self) -> LootType:
        return self.loot.loot_type


@dataclass(slots=True)
class Agent:
    """An autonomous looter, owned by the simulation.

    The scanner only reads this, except for writing `target`.

    Attributes:
        id: Stable agent identity.
        position: Current world position.
        role: Role/category used by role toggles.
        free_cells: Free inventory cells available for pickups.
        equipment: Equipped containers, if tracked.
        target: Current loot target, written by the scanner.
    """

    id: str
    position: Vector3
    role: str = "default"
    free_cells: int = 0
    equipment: Equipment | None = None
    target: Target | None = None
