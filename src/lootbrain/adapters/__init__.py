"""External simulation adapters.

Provides protocols and implementations for:
- WorldQuery: collider overlap queries
- Navigation: walkable-surface snapping and path lengths
- Eligibility: role toggles, value and ignore-list checks

Usage:
    from lootbrain.adapters import WorldQuery, Navigation, Eligibility

    # Reference implementations
    from lootbrain.adapters import InMemoryWorld, PlanarNavigation, SettingsEligibility
"""

from lootbrain.adapters.memory import InMemoryWorld, PlanarNavigation, SettingsEligibility
from lootbrain.adapters.protocol import Eligibility, Navigation, WorldQuery

__all__ = [
    # Protocols
    "WorldQuery",
    "Navigation",
    "Eligibility",
    # Implementations
    "InMemoryWorld",
    "PlanarNavigation",
    "SettingsEligibility",
]
