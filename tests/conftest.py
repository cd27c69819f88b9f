"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from lootbrain import (
    Bounds,
    Container,
    CorpseBody,
    Grid,
    InMemoryWorld,
    Item,
    LocalClaimCache,
    LootableContainer,
    LootingSettings,
    PlanarNavigation,
    SettingsEligibility,
    Vector3,
    WorldObject,
)

UNIT = Vector3(0.5, 0.5, 0.5)


def crate_at(x: float, z: float = 0.0, object_id: str | None = None, **flags) -> WorldObject:
    """World container resting on the floor at (x, z)."""
    object_id = object_id or f"crate-{x:g}-{z:g}"
    container = Container(object_id, grids=[Grid(f"{object_id}-g0", width=4, height=4)])
    return WorldObject(
        id=object_id,
        bounds=Bounds(Vector3(x, 0.5, z), UNIT),
        lootable=LootableContainer(container, **flags),
    )


def item_at(x: float, z: float = 0.0, item: Item | None = None) -> WorldObject:
    """Loose item lying on the floor at (x, z)."""
    item = item or Item(f"item-{x:g}-{z:g}", value=10.0)
    return WorldObject(
        id=f"collider-{item.id}",
        bounds=Bounds(Vector3(x, 0.1, z), Vector3(0.1, 0.1, 0.1)),
        item=item,
    )


def corpse_at(x: float, z: float = 0.0, owner: str | None = "pmc-dead") -> WorldObject:
    """Body lying on the floor at (x, z). `owner=None` is a static body."""
    return WorldObject(
        id=f"corpse-{x:g}-{z:g}",
        bounds=Bounds(Vector3(x, 0.3, z), Vector3(0.9, 0.3, 0.4)),
        corpse=CorpseBody(owner_agent_id=owner),
    )


@pytest.fixture
def settings():
    """Settings with explicit distances, independent of the environment."""
    return LootingSettings(
        detect_container_distance=75.0,
        detect_item_distance=75.0,
        detect_corpse_distance=75.0,
        _env_file=None,
    )


@pytest.fixture
def world():
    """Empty world."""
    return InMemoryWorld()


@pytest.fixture
def navigation():
    """Flat floor covering a 400 x 400 area around the origin."""
    return PlanarNavigation(walkable=[(-200.0, -200.0, 200.0, 200.0)])


@pytest.fixture
def eligibility(settings):
    return SettingsEligibility(settings)


@pytest.fixture
def claims():
    return LocalClaimCache(stripes=4)


@pytest.fixture
def make_crate():
    return crate_at


@pytest.fixture
def make_item():
    return item_at


@pytest.fixture
def make_corpse():
    return corpse_at
