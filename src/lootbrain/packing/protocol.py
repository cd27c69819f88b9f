"""Listener protocol for packing events."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lootbrain.core.inventory import Grid


@runtime_checkable
class GridListener(Protocol):
    """Receives grid change notifications during a repack (e.g., to refresh UI)."""

    def on_grid_cleared(self, grid: Grid) -> None:
        """Called after a grid has been emptied for re-sorting."""
        ...
