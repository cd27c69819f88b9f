"""lootbrain: loot target selection and container packing for simulation agents.

Usage:
    from lootbrain import (
        Agent, InMemoryWorld, LootingSession, LootingSettings, PlanarNavigation, Vector3,
    )

    world = InMemoryWorld()
    navigation = PlanarNavigation(walkable=[(-100, -100, 100, 100)])
    session = LootingSession(world, navigation, settings=LootingSettings())

    agent = Agent("scav-1", Vector3(0, 0, 0), role="scav", free_cells=20)
    target = session.update(agent)      # claims at most one target
    ...
    result = session.repack(container)  # all-or-nothing re-sort
"""

__version__ = "0.1.0"

# Adapters
from lootbrain.adapters import (
    Eligibility,
    InMemoryWorld,
    Navigation,
    PlanarNavigation,
    SettingsEligibility,
    WorldQuery,
)

# Claims
from lootbrain.claims import ClaimCache, LocalClaimCache

# Configuration
from lootbrain.config import LootingSettings, configure_logging

# Core primitives
from lootbrain.core import (
    Agent,
    Bounds,
    Container,
    ContainerLoot,
    CorpseBody,
    CorpseLoot,
    Equipment,
    EquipmentSlot,
    Grid,
    GridPlacementError,
    Item,
    ItemAddress,
    ItemCategory,
    ItemLoot,
    LocationInGrid,
    LootableContainer,
    LootObject,
    LootType,
    Target,
    Vector3,
    WorldObject,
    classify,
)

# Packing
from lootbrain.packing import (
    FailureReason,
    PackingFailure,
    PackingResult,
    PackingSuccess,
    find_grid_to_pick_up,
    pick_up,
    prioritize,
    repack,
)

# Scanning
from lootbrain.scanning import CandidateScanner, Rejection, ScanReport, find_target

# Session
from lootbrain.session import LootingSession

__all__ = [
    # Version
    "__version__",
    # Core
    "Vector3",
    "Bounds",
    "Item",
    "ItemCategory",
    "Grid",
    "GridPlacementError",
    "LocationInGrid",
    "ItemAddress",
    "Container",
    "Equipment",
    "EquipmentSlot",
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
    # Adapters
    "WorldQuery",
    "Navigation",
    "Eligibility",
    "InMemoryWorld",
    "PlanarNavigation",
    "SettingsEligibility",
    # Claims
    "ClaimCache",
    "LocalClaimCache",
    # Config
    "LootingSettings",
    "configure_logging",
    # Scanning
    "CandidateScanner",
    "find_target",
    "ScanReport",
    "Rejection",
    # Packing
    "repack",
    "pick_up",
    "prioritize",
    "find_grid_to_pick_up",
    "PackingResult",
    "PackingSuccess",
    "PackingFailure",
    "FailureReason",
    # Session
    "LootingSession",
]
