"""Grid prioritization for picking up a new item.

Usage:
    grids = prioritize(agent.equipment, item)
    address = find_grid_to_pick_up(agent.equipment, item)
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from lootbrain.core.inventory import (
    Equipment,
    EquipmentSlot,
    Grid,
    Item,
    ItemAddress,
    ItemCategory,
    sort_grids,
)

RESERVED_SLOT_SIZE = 2
"""Cells held back in the vest for reloaded magazines."""


def reserve_slot(grids: Sequence[Grid], reserve: int = RESERVED_SLOT_SIZE) -> list[Grid]:
    """Withhold the first grid that can still take a `reserve`-cell item.

    Args:
        grids: Grids in priority order.
        reserve: Minimum area and free cells for the withheld grid.

    Returns:
        `grids` without the first grid of area >= `reserve` having at least
        `reserve` free cells. Unchanged if no grid qualifies.
    """
    remaining = list(grids)
    for grid in remaining:
        if grid.area >= reserve and grid.free_cells() >= reserve:
            remaining.remove(grid)
            break
    return remaining


def _slot_grids(equipment: Equipment, slot: EquipmentSlot) -> list[Grid]:
    container = equipment.get(slot)
    return list(container.grids) if container is not None else []


def prioritize(equipment: Equipment, item: Item) -> list[Grid]:
    """Order the agent's grids by suitability for `item`.

    Vest and backpack grids are sorted smallest first, and one vest grid is
    reserved for ammunition. Slot order depends on category:

    - ammo and magazines: vest, pockets, backpack, secure container
    - grenades: pockets, vest, backpack, secure container
    - everything else: backpack, vest, pockets, secure container

    Args:
        equipment: The agent's equipped containers. Missing slots contribute nothing.
        item: Item about to be picked up.

    Returns:
        Grids to try, in order.

    Raises:
        TypeError: If `equipment` is None.
    """
    if equipment is None:
        raise TypeError("prioritize() requires equipment, got None")

    vest = reserve_slot(sort_grids(_slot_grids(equipment, EquipmentSlot.TACTICAL_VEST)))
    backpack = sort_grids(_slot_grids(equipment, EquipmentSlot.BACKPACK))
    pockets = _slot_grids(equipment, EquipmentSlot.POCKETS)
    secure = _slot_grids(equipment, EquipmentSlot.SECURED_CONTAINER)

    if item.category in (ItemCategory.AMMO, ItemCategory.MAGAZINE):
        return vest + pockets + backpack + secure
    if item.category is ItemCategory.GRENADE:
        return pockets + vest + backpack + secure
    return backpack + vest + pockets + secure


def find_grid_to_pick_up(
    equipment: Equipment,
    item: Item,
    grids: Iterable[Grid] | None = None,
) -> ItemAddress | None:
    """First free address for `item` across prioritized grids.

    Args:
        equipment: The agent's equipped containers.
        item: Item about to be picked up.
        grids: Explicit grid order (defaults to `prioritize(equipment, item)`).

    Returns:
        Where the item would go, or None if there is no room.
    """
    ordered = grids if grids is not None else prioritize(equipment, item)
    for grid in ordered:
        location = grid.find_free_space(item)
        if location is not None:
            return ItemAddress(grid, location)
    return None
