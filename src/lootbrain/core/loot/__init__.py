"""Loot functionality: world objects, loot variants, agents and targets."""

from lootbrain.core.loot.models import (
    Agent,
    ContainerLoot,
    CorpseBody,
    CorpseLoot,
    ItemLoot,
    LootableContainer,
    LootObject,
    LootType,
    Target,
    WorldObject,
)
from lootbrain.core.loot.operations import classify

__all__ = [
    # Models
    "LootType",
    "LootObject",
    "ContainerLoot",
    "ItemLoot",
    "CorpseLoot",
    "LootableContainer",
    "CorpseBody",
    "WorldObject",
    "Agent",
    "Target",
    # Operations
    "classify",
]
