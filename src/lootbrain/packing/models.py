"""Packing models: results and the undo log used for rollback.

Usage:
    result = repack(container)
    if result.failed:
        log.warning("could not place %s", result.item.id)
    else:
        for item_id, address in result.layout.items():
            ...
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from lootbrain.core.inventory import Grid, Item, ItemAddress, LocationInGrid


class FailureReason(Enum):
    NO_CONTAINER = auto()
    UNPLACEABLE_ITEM = auto()


@dataclass(frozen=True, slots=True)
class PackingSuccess:
    """Every item placed; the new layout is already applied to the grids.

    Attributes:
        placements: (item, new address) pairs in placement order.
    """

    placements: tuple[tuple[Item, ItemAddress], ...] = ()

    @property
    def failed(self) -> bool:
        return False

    @property
    def layout(self) -> dict[str, ItemAddress]:
        """Item id -> new address."""
        return {item.id: address for item, address in self.placements}

    def placed_size(self) -> int:
        """Sum of footprints of all placed items."""
        return sum(item.size for item, _ in self.placements)


@dataclass(frozen=True, slots=True)
class PackingFailure:
    """Nothing changed; the original layout was restored.

    Attributes:
        reason: Why packing failed.
        item: First item that could not be placed (None for NO_CONTAINER).
    """

    reason: FailureReason
    item: Item | None = None

    @property
    def failed(self) -> bool:
        return True


PackingResult = PackingSuccess | PackingFailure


class PackingTransaction:
    """Undo log for one repack call.

    Records each grid's original placements before it is cleared and every
    placement made afterwards. `rollback` clears all touched grids and
    replays the original placements at their exact offsets.
    """

    def __init__(self) -> None:
        self._old_positions: dict[int, tuple[Grid, list[tuple[Item, LocationInGrid]]]] = {}
        self._placed: list[tuple[Item, ItemAddress]] = []

    def set_old_positions(self, grid: Grid, locations: list[tuple[Item, LocationInGrid]]) -> None:
        self._old_positions[id(grid)] = (grid, list(locations))

    def add_item_to_grid(self, grid: Grid, item: Item, location: LocationInGrid) -> None:
        self._placed.append((item, ItemAddress(grid, location)))

    @property
    def placements(self) -> tuple[tuple[Item, ItemAddress], ...]:
        return tuple(self._placed)

    def rollback(self) -> None:
        """Restore every recorded grid to its original placements."""
        touched = {id(address.grid): address.grid for _, address in self._placed}
        for grid, _ in self._old_positions.values():
            touched[id(grid)] = grid
        for grid in touched.values():
            grid.remove_all()
        for grid, locations in self._old_positions.values():
            for item, location in locations:
                grid.place(item, location)
        self._placed.clear()
