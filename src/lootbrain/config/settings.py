"""Configuration settings using Pydantic Settings.

Provides typed, validated tuning for the scanner, claim cache and session.

Usage:
    from lootbrain.config import LootingSettings

    # Load from environment variables (LOOTING_*)
    settings = LootingSettings()

    # Or override with explicit values
    settings = LootingSettings(detect_container_distance=40.0)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lootbrain.core.loot import LootType

ALL_ROLES = "*"


class LootingSettings(BaseSettings):  # type: ignore[misc]
    """Tunable distances, role toggles and budgets for looting.

    Attributes:
        detect_container_distance: Max path length to a container target.
        detect_item_distance: Max path length to a loose item target.
        detect_corpse_distance: Max path length to a corpse target.
        container_looting_roles: Roles allowed to loot containers ("*" = all).
        item_looting_roles: Roles allowed to loot loose items ("*" = all).
        corpse_looting_roles: Roles allowed to loot corpses ("*" = all).
        reserved_slot_count: Free cells kept back for ammo; no scan at or below it.
        collider_buffer_size: Max colliders examined per scan.
        nav_snap_distance: Search radius when snapping to the navigation surface.
        destination_drop: Extra drop below the collider bottom before snapping.
        min_item_value: Minimum item value for the default value predicate.
        claim_stripes: Number of lock stripes in the claim cache.
        scan_workers: Thread pool size for `LootingSession.tick` (1 = inline).

    Environment Variables:
        LOOTING_DETECT_CONTAINER_DISTANCE
        LOOTING_DETECT_ITEM_DISTANCE
        LOOTING_DETECT_CORPSE_DISTANCE
        LOOTING_CONTAINER_LOOTING_ROLES (JSON list)
        LOOTING_ITEM_LOOTING_ROLES (JSON list)
        LOOTING_CORPSE_LOOTING_ROLES (JSON list)
        LOOTING_RESERVED_SLOT_COUNT
        LOOTING_COLLIDER_BUFFER_SIZE
        LOOTING_NAV_SNAP_DISTANCE
        LOOTING_DESTINATION_DROP
        LOOTING_MIN_ITEM_VALUE
        LOOTING_CLAIM_STRIPES
        LOOTING_SCAN_WORKERS
    """

    model_config = SettingsConfigDict(
        env_prefix="LOOTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    detect_container_distance: float = Field(default=75.0, gt=0)
    detect_item_distance: float = Field(default=75.0, gt=0)
    detect_corpse_distance: float = Field(default=75.0, gt=0)

    container_looting_roles: frozenset[str] = frozenset({ALL_ROLES})
    item_looting_roles: frozenset[str] = frozenset({ALL_ROLES})
    corpse_looting_roles: frozenset[str] = frozenset({ALL_ROLES})

    reserved_slot_count: int = Field(default=2, ge=0)
    collider_buffer_size: int = Field(default=250, ge=1)
    nav_snap_distance: float = Field(default=1.0, gt=0)
    destination_drop: float = Field(default=0.4, ge=0)
    min_item_value: float = 0.0
    claim_stripes: int = Field(default=16, ge=1)
    scan_workers: int = Field(default=1, ge=1)

    def detection_distance(self, loot_type: LootType) -> float:
        """Range threshold for one loot type."""
        if loot_type is LootType.CONTAINER:
            return self.detect_container_distance
        if loot_type is LootType.ITEM:
            return self.detect_item_distance
        return self.detect_corpse_distance

    def detection_radius(self) -> float:
        """Overlap radius covering every loot type."""
        return max(
            self.detect_item_distance,
            self.detect_container_distance,
            self.detect_corpse_distance,
        )

    def enabled_roles(self, loot_type: LootType) -> frozenset[str]:
        if loot_type is LootType.CONTAINER:
            return self.container_looting_roles
        if loot_type is LootType.ITEM:
            return self.item_looting_roles
        return self.corpse_looting_roles

    def is_role_enabled(self, loot_type: LootType, role: str) -> bool:
        roles = self.enabled_roles(loot_type)
        return ALL_ROLES in roles or role in roles
