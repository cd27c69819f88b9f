"""Inventory functionality: items, grids, containers and equipment."""

from lootbrain.core.inventory.models import (
    Container,
    Equipment,
    EquipmentSlot,
    Grid,
    GridPlacementError,
    Item,
    ItemAddress,
    ItemCategory,
    LocationInGrid,
)
from lootbrain.core.inventory.operations import (
    container_size,
    sort_grids,
    sort_items_largest_first,
)

__all__ = [
    # Models
    "Item",
    "ItemCategory",
    "Grid",
    "GridPlacementError",
    "LocationInGrid",
    "ItemAddress",
    "Container",
    "Equipment",
    "EquipmentSlot",
    # Operations
    "container_size",
    "sort_grids",
    "sort_items_largest_first",
]
