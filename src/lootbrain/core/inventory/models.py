"""Inventory models: items, grids, containers and equipment slots.

Usage:
    rig = Container("rig", grids=[Grid("rig-0", width=1, height=2), Grid("rig-1", width=2, height=2)])
    mag = Item("mag-1", width=1, height=2, category=ItemCategory.MAGAZINE)
    rig.grids[0].add(mag)  # LocationInGrid(x=0, y=0)

Grids are the only mutable objects here. A grid never holds two items with
overlapping footprints; `place` raises GridPlacementError instead of breaking that.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto


class GridPlacementError(Exception):
    """Raised when an item is placed out of bounds or over another item."""

    pass


class ItemCategory(Enum):
    """Item categories relevant to grid prioritization."""

    AMMO = auto()
    MAGAZINE = auto()
    GRENADE = auto()
    KEY = auto()
    GENERIC = auto()


@dataclass(frozen=True, slots=True)
class Item:
    """A stackable-free inventory item occupying a width × height footprint.

    Attributes:
        id: Stable item identity.
        width: Footprint width in cells.
        height: Footprint height in cells.
        category: Category used for grid prioritization.
        quest_item: Quest items are never looted.
        max_key_uses: Maximum number of uses for keys (None for non-keys).
        value: Estimated worth, consumed by value predicates.
    """

    id: str
    width: int = 1
    height: int = 1
    category: ItemCategory = ItemCategory.GENERIC
    quest_item: bool = False
    max_key_uses: int | None = None
    value: float = 0.0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Item id must be non-empty")
        if self.width < 1 or self.height < 1:
            raise ValueError(
                f"Item {self.id!r} must be at least 1x1, got {self.width}x{self.height}"
            )

    @property
    def size(self) -> int:
        """Footprint area in cells."""
        return self.width * self.height

    @property
    def is_single_use_key(self) -> bool:
        return self.max_key_uses == 1


@dataclass(frozen=True, slots=True)
class LocationInGrid:
    """Top-left cell offset of a placed item."""

    x: int
    y: int


class Grid:
    """Rectangular cell array holding items at integer offsets.

    Structure:
        _cells[y][x] = id of the item covering that cell, or None
        _placements[item_id] = (item, location)

    Placement order is preserved, so `items` and `locations()` iterate in the
    order items were added.

    Args:
        id: Grid identity, unique within its container.
        width: Number of columns.
        height: Number of rows.
        items: Initial (item, location) pairs.
    """

    def __init__(
        self,
        id: str,
        width: int,
        height: int,
        items: Iterable[tuple[Item, LocationInGrid]] = (),
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Grid {id!r} must be at least 1x1, got {width}x{height}")
        self.id = id
        self.width = width
        self.height = height
        self._cells: list[list[str | None]] = [[None] * width for _ in range(height)]
        self._placements: dict[str, tuple[Item, LocationInGrid]] = {}
        for item, location in items:
            self.place(item, location)

    def __repr__(self) -> str:
        return f"Grid({self.id!r}, {self.width}x{self.height}, items={len(self._placements)})"

    def __len__(self) -> int:
        return len(self._placements)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._placements

    def __iter__(self) -> Iterator[tuple[Item, LocationInGrid]]:
        return iter(list(self._placements.values()))

    @property
    def area(self) -> int:
        """Total cell count (height × width)."""
        return self.width * self.height

    @property
    def items(self) -> list[Item]:
        return [item for item, _ in self._placements.values()]

    def contained_size(self) -> int:
        """Sum of footprints of the items in this grid."""
        return sum(item.size for item, _ in self._placements.values())

    def free_cells(self) -> int:
        return self.area - self.contained_size()

    def location_of(self, item_id: str) -> LocationInGrid | None:
        placement = self._placements.get(item_id)
        return placement[1] if placement is not None else None

    def locations(self) -> list[tuple[Item, LocationInGrid]]:
        """Snapshot of every placement, in placement order."""
        return list(self._placements.values())

    def fits_at(self, item: Item, location: LocationInGrid) -> bool:
        """Check whether `item` can occupy `location` without overlap.

        Args:
            item: Item to test.
            location: Candidate top-left offset.

        Returns:
            True if the footprint is inside the grid and every covered cell is free.
        """
        if location.x < 0 or location.y < 0:
            return False
        if location.x + item.width > self.width or location.y + item.height > self.height:
            return False
        for row in range(location.y, location.y + item.height):
            cells = self._cells[row]
            for col in range(location.x, location.x + item.width):
                if cells[col] is not None:
                    return False
        return True

    def find_free_space(self, item: Item) -> LocationInGrid | None:
        """First free offset for `item`, scanning rows top to bottom, left to right."""
        if item.width > self.width or item.height > self.height:
            return None
        if item.size > self.free_cells():
            return None
        for y in range(self.height - item.height + 1):
            for x in range(self.width - item.width + 1):
                location = LocationInGrid(x, y)
                if self.fits_at(item, location):
                    return location
        return None

    def place(self, item: Item, location: LocationInGrid) -> None:
        """Place `item` at an explicit offset.

        Raises:
            GridPlacementError: If the item is already in this grid, or the
                footprint is out of bounds or overlaps another item.
        """
        if item.id in self._placements:
            raise GridPlacementError(f"Item {item.id!r} is already placed in grid {self.id!r}")
        if not self.fits_at(item, location):
            raise GridPlacementError(
                f"Item {item.id!r} ({item.width}x{item.height}) does not fit "
                f"at ({location.x}, {location.y}) in grid {self.id!r}"
            )
        for row in range(location.y, location.y + item.height):
            for col in range(location.x, location.x + item.width):
                self._cells[row][col] = item.id
        self._placements[item.id] = (item, location)

    def add(self, item: Item) -> LocationInGrid | None:
        """Place `item` at the first free offset.

        Returns:
            The chosen location, or None if the item does not fit anywhere.
        """
        location = self.find_free_space(item)
        if location is not None:
            self.place(item, location)
        return location

    def remove(self, item_id: str) -> bool:
        """Remove an item. Returns True if it was present."""
        placement = self._placements.pop(item_id, None)
        if placement is None:
            return False
        item, location = placement
        for row in range(location.y, location.y + item.height):
            for col in range(location.x, location.x + item.width):
                self._cells[row][col] = None
        return True

    def remove_all(self) -> list[tuple[Item, LocationInGrid]]:
        """Empty the grid.

        Returns:
            The removed (item, location) pairs in placement order.
        """
        removed = self.locations()
        self._placements.clear()
        self._cells = [[None] * self.width for _ in range(self.height)]
        return removed


@dataclass(frozen=True, slots=True)
class ItemAddress:
    """Where an item lives: a grid plus an offset inside it."""

    grid: Grid
    location: LocationInGrid


@dataclass(slots=True)
class Container:
    """A searchable item owning an ordered collection of grids (rig, backpack, crate)."""

    id: str
    grids: list[Grid] = field(default_factory=list)

    def items(self) -> list[Item]:
        return [item for grid in self.grids for item in grid.items]

    def free_cells(self) -> int:
        return sum(grid.free_cells() for grid in self.grids)


class EquipmentSlot(Enum):
    """Equipment slots that can hold a container."""

    TACTICAL_VEST = auto()
    BACKPACK = auto()
    POCKETS = auto()
    SECURED_CONTAINER = auto()


@dataclass(slots=True)
class Equipment:
    """Containers equipped by an agent. Empty slots are simply absent."""

    slots: dict[EquipmentSlot, Container] = field(default_factory=dict)

    def get(self, slot: EquipmentSlot) -> Container | None:
        return self.slots.get(slot)

    def free_cells(self) -> int:
        return sum(container.free_cells() for container in self.slots.values())
