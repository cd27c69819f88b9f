"""Packing engine: first-fit-decreasing repack with rollback.

Items are sorted largest first and grids smallest first, so each item lands
in the smallest grid that still has room and large grids stay available for
large items.

Usage:
    result = repack(container)
    if result.failed:
        ...  # grids are exactly as before the call

    address = pick_up(agent.equipment, item)
"""

from __future__ import annotations

import logging

from lootbrain.core.inventory import (
    Container,
    Equipment,
    Item,
    ItemAddress,
    sort_grids,
    sort_items_largest_first,
)
from lootbrain.packing.models import (
    FailureReason,
    PackingFailure,
    PackingResult,
    PackingSuccess,
    PackingTransaction,
)
from lootbrain.packing.prioritizer import find_grid_to_pick_up
from lootbrain.packing.protocol import GridListener

logger = logging.getLogger(__name__)


def repack(container: Container | None, listener: GridListener | None = None) -> PackingResult:
    """Re-sort a container's contents as compactly as possible.

    All-or-nothing: if any item cannot be placed, every grid is restored to
    its exact pre-call layout. The caller must hold exclusive access to the
    container for the duration of the call.

    Args:
        container: Container to repack.
        listener: Optional receiver of grid-cleared notifications.

    Returns:
        PackingSuccess with the new layout, or PackingFailure naming the
        reason and the first unplaceable item.
    """
    if container is None:
        logger.error("No container to repack")
        return PackingFailure(FailureReason.NO_CONTAINER)

    transaction = PackingTransaction()
    items: list[Item] = []
    for grid in container.grids:
        transaction.set_old_positions(grid, grid.locations())
        items.extend(grid.items)

    try:
        for grid in container.grids:
            grid.remove_all()
            if listener is not None:
                listener.on_grid_cleared(grid)

        grids = sort_grids(container.grids)
        for item in sort_items_largest_first(items):
            for grid in grids:
                location = grid.add(item)
                if location is not None:
                    transaction.add_item_to_grid(grid, item, location)
                    break
            else:
                transaction.rollback()
                logger.error("Repack of %s failed: no room for item %s", container.id, item.id)
                return PackingFailure(FailureReason.UNPLACEABLE_ITEM, item)
    except BaseException:
        transaction.rollback()
        logger.exception("Repack of %s aborted, original layout restored", container.id)
        raise

    logger.debug("Repacked %d item(s) in %s", len(items), container.id)
    return PackingSuccess(transaction.placements)


def pick_up(equipment: Equipment, item: Item) -> ItemAddress | None:
    """Place `item` into the best prioritized grid of `equipment`.

    Returns:
        The address the item now occupies, or None if nothing had room.
    """
    address = find_grid_to_pick_up(equipment, item)
    if address is None:
        logger.debug("No room to pick up %s", item.id)
        return None
    address.grid.place(item, address.location)
    return address
