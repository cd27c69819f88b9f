"""Loot classification."""

from __future__ import annotations

from lootbrain.core.loot.models import (
    ContainerLoot,
    CorpseLoot,
    ItemLoot,
    LootObject,
    WorldObject,
)


def classify(obj: WorldObject | None) -> LootObject | None:
    """Resolve a world object into its loot variant.

    Container parts win over items, items over corpses. An item that is
    itself a corpse is treated as a corpse.

    Args:
        obj: Collider returned by the world query.

    Returns:
        The loot variant, or None if the object is gone or carries no loot part.
    """
    if obj is None or obj.destroyed:
        return None
    position = obj.position if obj.position is not None else obj.bounds.center
    if obj.lootable is not None:
        return ContainerLoot(obj.id, obj.bounds, position, obj.lootable)
    if obj.item is not None and obj.corpse is None:
        return ItemLoot(obj.item.id, obj.bounds, position, obj.item)
    if obj.corpse is not None:
        return CorpseLoot(obj.id, obj.bounds, position, obj.corpse)
    return None
