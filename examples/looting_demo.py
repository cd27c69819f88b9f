"""Basic lootbrain usage example.

Demonstrates:
- Building a world with containers, loose items and a corpse
- Scanning for targets with claims shared across agents
- Completing a target and repacking the opened container
- Picking up an item into prioritized equipment grids
"""

import logging

from lootbrain import (
    Agent,
    Bounds,
    Container,
    CorpseBody,
    Equipment,
    EquipmentSlot,
    Grid,
    InMemoryWorld,
    Item,
    ItemCategory,
    LocationInGrid,
    LootableContainer,
    LootingSession,
    LootingSettings,
    PlanarNavigation,
    Vector3,
    WorldObject,
    configure_logging,
)


def build_world() -> InMemoryWorld:
    """A small yard with two crates, a loose GPU and a body."""
    crate = Container(
        "crate-north",
        grids=[
            Grid("crate-north-0", width=3, height=2),
            Grid("crate-north-1", width=1, height=2),
            Grid("crate-north-2", width=2, height=2),
        ],
    )
    crate.grids[0].place(Item("ammo-box", width=2, height=1), LocationInGrid(1, 1))
    crate.grids[2].place(Item("medkit", width=2, height=2), LocationInGrid(0, 0))
    crate.grids[0].place(Item("bolts"), LocationInGrid(0, 0))

    world = InMemoryWorld()
    world.add(
        WorldObject(
            "crate-north",
            Bounds(Vector3(0.0, 0.5, 12.0), Vector3(0.5, 0.5, 0.5)),
            lootable=LootableContainer(crate),
        )
    )
    world.add(
        WorldObject(
            "crate-east",
            Bounds(Vector3(30.0, 0.5, 0.0), Vector3(0.5, 0.5, 0.5)),
            lootable=LootableContainer(Container("crate-east"), locked=True),
        )
    )
    world.add(
        WorldObject(
            "collider-gpu",
            Bounds(Vector3(-8.0, 0.1, 3.0), Vector3(0.1, 0.1, 0.1)),
            item=Item("gpu", width=2, height=1, value=250.0),
        )
    )
    world.add(
        WorldObject(
            "corpse-pmc-3",
            Bounds(Vector3(20.0, 0.3, -20.0), Vector3(0.9, 0.3, 0.4)),
            corpse=CorpseBody(owner_agent_id="pmc-3"),
        )
    )
    return world


def main():
    configure_logging(logging.INFO)

    world = build_world()
    navigation = PlanarNavigation(walkable=[(-50.0, -50.0, 50.0, 50.0)])
    settings = LootingSettings(scan_workers=2)
    session = LootingSession(world, navigation, settings=settings)

    equipment = Equipment(
        {
            EquipmentSlot.TACTICAL_VEST: Container(
                "vest", [Grid("vest-0", 1, 2), Grid("vest-1", 2, 2)]
            ),
            EquipmentSlot.BACKPACK: Container("pack", [Grid("pack-0", 4, 4)]),
        }
    )
    agents = [
        Agent("scav-1", Vector3(0.0, 0.0, 0.0), role="scav", free_cells=20, equipment=equipment),
        Agent("scav-2", Vector3(2.0, 0.0, 2.0), role="scav", free_cells=12),
        Agent("scav-3", Vector3(-4.0, 0.0, 0.0), role="scav", free_cells=2),
    ]

    print("--- Tick 0 ---")
    for agent_id, target in session.tick(agents).items():
        if target is None:
            print(f"  {agent_id}: nothing to loot")
        else:
            print(f"  {agent_id}: {target.loot_type.name} {target.loot_id} ({target.distance:.1f}m)")

    looter = agents[0]
    if looter.target is not None and looter.target.loot_id == "crate-north":
        container = looter.target.loot.lootable.container
        result = session.repack(container)
        if not result.failed:
            for item_id, address in result.layout.items():
                print(f"  {item_id} -> {address.grid.id} {address.location}")
        session.complete(looter)

    address = session.pick_up(looter, Item("mag-1", height=2, category=ItemCategory.MAGAZINE))
    print(f"Magazine stored in {address.grid.id if address else 'nowhere'}")
    print(f"Open claims: {session.claims.snapshot()}")
    session.close()
    print("Done.")


if __name__ == "__main__":
    main()
