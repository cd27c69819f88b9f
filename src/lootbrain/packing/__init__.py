"""Container packing: grid prioritization and first-fit-decreasing repack.

Usage:
    from lootbrain.packing import repack, prioritize

    result = repack(container)
    grids = prioritize(equipment, item)
"""

from lootbrain.packing.engine import pick_up, repack
from lootbrain.packing.models import (
    FailureReason,
    PackingFailure,
    PackingResult,
    PackingSuccess,
    PackingTransaction,
)
from lootbrain.packing.prioritizer import (
    RESERVED_SLOT_SIZE,
    find_grid_to_pick_up,
    prioritize,
    reserve_slot,
)
from lootbrain.packing.protocol import GridListener

__all__ = [
    # Engine
    "repack",
    "pick_up",
    # Prioritizer
    "prioritize",
    "reserve_slot",
    "find_grid_to_pick_up",
    "RESERVED_SLOT_SIZE",
    # Models
    "PackingResult",
    "PackingSuccess",
    "PackingFailure",
    "FailureReason",
    "PackingTransaction",
    # Protocols
    "GridListener",
]
