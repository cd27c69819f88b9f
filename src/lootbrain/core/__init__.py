"""Core functionalities: stateless models and primitives.

Architecture Note:
    core/ contains plain data models and pure helpers with no shared state.
    Grids are the only objects mutated in place, and only by their single owner.
    For stateful services, see claims/, scanning/, packing/ and session/.
"""

from lootbrain.core.geometry import Bounds, Vector3
from lootbrain.core.inventory import (
    Container,
    Equipment,
    EquipmentSlot,
    Grid,
    GridPlacementError,
    Item,
    ItemAddress,
    ItemCategory,
    LocationInGrid,
    container_size,
    sort_grids,
    sort_items_largest_first,
)
from lootbrain.core.loot import (
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
    classify,
)

__all__ = [
    # Geometry
    "Vector3",
    "Bounds",
    # Inventory
    "Item",
    "ItemCategory",
    "Grid",
    "GridPlacementError",
    "LocationInGrid",
    "ItemAddress",
    "Container",
    "Equipment",
    "EquipmentSlot",
    "container_size",
    "sort_grids",
    "sort_items_largest_first",
    # Loot
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
    "classify",
]
