"""Pure helpers over inventory models."""

from __future__ import annotations

from collections.abc import Iterable

from lootbrain.core.inventory.models import Container, Grid, Item


def container_size(container: Container) -> int:
    """Total cell count across all grids of a container."""
    return sum(grid.area for grid in container.grids)


def sort_grids(grids: Iterable[Grid]) -> list[Grid]:
    """Order grids smallest area first.

    Stable, so equal-area grids keep their container order.

    Args:
        grids: Grids to order.

    Returns:
        New list sorted ascending by `height * width`.
    """
    return sorted(grids, key=lambda grid: grid.area)


def sort_items_largest_first(items: Iterable[Item]) -> list[Item]:
    """Order items by footprint, largest first, ties broken by id."""
    return sorted(items, key=lambda item: (-item.size, item.id))
