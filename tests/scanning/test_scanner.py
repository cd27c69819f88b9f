"""Tests for the candidate scanner."""

import math

import pytest

from lootbrain import (
    Agent,
    CandidateScanner,
    InMemoryWorld,
    Item,
    ItemCategory,
    LocalClaimCache,
    LootingSettings,
    LootType,
    PlanarNavigation,
    Rejection,
    ScanReport,
    SettingsEligibility,
    Vector3,
    find_target,
)


@pytest.fixture
def scanner(world, navigation, eligibility, claims, settings):
    return CandidateScanner(world, navigation, eligibility, claims, settings)


@pytest.fixture
def agent():
    return Agent("scav-1", Vector3.ZERO, role="scav", free_cells=20)


class DetourNavigation(PlanarNavigation):
    """Flat floor where some destinations need a detour."""

    def __init__(self, detours: dict[float, float]):
        super().__init__(walkable=[(-200.0, -200.0, 200.0, 200.0)])
        self._detours = detours

    def path_length(self, start, end):
        return self._detours.get(end.x, super().path_length(start, end))


def test_selects_nearest_container_and_claims_it(world, scanner, claims, agent, make_crate):
    far, near = make_crate(30.0), make_crate(10.0)
    world.add(far)
    world.add(near)

    target = scanner.find_target(agent)

    assert target is not None
    assert target.loot_id == near.id
    assert target.loot_type is LootType.CONTAINER
    assert target.destination == Vector3(10.0, 0.0, 0.0)
    assert math.isclose(target.distance, 10.0)
    assert agent.target is target
    assert claims.claimed_by(near.id) == agent.id


def test_container_beyond_its_detection_distance_is_rejected(
    world, navigation, eligibility, claims, make_crate
):
    settings = LootingSettings(
        detect_container_distance=40.0,
        detect_item_distance=75.0,
        detect_corpse_distance=75.0,
        _env_file=None,
    )
    scanner = CandidateScanner(world, navigation, eligibility, claims, settings)
    agent = Agent("scav-1", Vector3.ZERO, free_cells=20)
    world.add(make_crate(50.0))
    report = ScanReport()

    assert scanner.find_target(agent, report) is None
    assert agent.target is None
    assert report.rejections == {Rejection.OUT_OF_RANGE: 1}
    assert len(claims) == 0


def test_claimed_by_other_agent_is_skipped(world, scanner, claims, agent, make_crate):
    near, far = make_crate(5.0), make_crate(15.0)
    world.add(near)
    world.add(far)
    claims.claim(near.id, "pmc-7")
    report = ScanReport()

    target = scanner.find_target(agent, report)

    assert target is not None
    assert target.loot_id == far.id
    assert report.rejections == {Rejection.CLAIMED: 1}
    assert claims.claimed_by(near.id) == "pmc-7"


def test_own_claim_does_not_block_retargeting(world, scanner, claims, agent, make_crate):
    crate = make_crate(5.0)
    world.add(crate)
    claims.claim(crate.id, agent.id)

    target = scanner.find_target(agent)

    assert target is not None
    assert target.loot_id == crate.id


@pytest.mark.parametrize("flags", [{"locked": True}, {"active": False}])
def test_locked_or_inactive_containers_are_ineligible(world, scanner, agent, make_crate, flags):
    world.add(make_crate(5.0, **flags))
    report = ScanReport()

    assert scanner.find_target(agent, report) is None
    assert report.rejections == {Rejection.INELIGIBLE: 1}


@pytest.mark.parametrize(
    "item",
    [
        Item("quest-flash-drive", quest_item=True, value=100.0),
        Item("unknown-key", category=ItemCategory.KEY, max_key_uses=1, value=100.0),
        Item("huge-case", width=4, height=5, value=100.0),
        Item("bolts", value=-1.0),
    ],
    ids=["quest", "single-use-key", "too-big", "worthless"],
)
def test_ineligible_items(world, scanner, agent, make_item, item):
    world.add(make_item(5.0, item=item))

    assert scanner.find_target(agent) is None
    assert agent.target is None


def test_item_must_be_strictly_smaller_than_free_capacity(world, scanner, make_item):
    world.add(make_item(5.0, item=Item("ammo-box", width=2, height=2, value=5.0)))
    tight = Agent("scav-1", Vector3.ZERO, free_cells=4)
    roomy = Agent("scav-2", Vector3.ZERO, free_cells=5)

    assert scanner.find_target(tight) is None
    assert scanner.find_target(roomy) is not None


def test_item_target_is_keyed_by_item_id(world, scanner, claims, agent, make_item):
    world.add(make_item(5.0, item=Item("gpu", value=100.0)))

    target = scanner.find_target(agent)

    assert target is not None
    assert target.loot_type is LootType.ITEM
    assert claims.claimed_by("gpu") == agent.id


def test_static_corpse_is_ineligible(world, scanner, agent, make_corpse):
    world.add(make_corpse(5.0, owner=None))
    defeated = make_corpse(8.0, owner="pmc-dead")
    world.add(defeated)

    target = scanner.find_target(agent)

    assert target is not None
    assert target.loot_id == defeated.id
    assert target.loot_type is LootType.CORPSE


def test_role_toggle_disables_loot_type(world, navigation, claims, make_crate, make_item):
    settings = LootingSettings(container_looting_roles=frozenset({"pmc"}), _env_file=None)
    scanner = CandidateScanner(
        world, navigation, SettingsEligibility(settings), claims, settings
    )
    world.add(make_crate(5.0))
    world.add(make_item(9.0, item=Item("gpu", value=1.0)))

    scav_target = scanner.find_target(Agent("scav-1", Vector3.ZERO, role="scav", free_cells=20))
    pmc_target = scanner.find_target(Agent("pmc-1", Vector3.ZERO, role="pmc", free_cells=20))

    assert scav_target is not None and scav_target.loot_id == "gpu"
    assert pmc_target is not None and pmc_target.loot_type is LootType.CONTAINER


def test_ignored_loot_is_skipped(world, scanner, eligibility, agent, make_crate):
    crate = make_crate(5.0)
    world.add(crate)
    eligibility.ignore(crate.id)

    assert scanner.find_target(agent) is None


def test_unreachable_candidate_is_skipped(world, eligibility, claims, settings, agent, make_crate):
    navigation = PlanarNavigation(walkable=[(0.0, -20.0, 20.0, 20.0)])
    scanner = CandidateScanner(world, navigation, eligibility, claims, settings)
    world.add(make_crate(-5.0))
    world.add(make_crate(15.0))
    report = ScanReport()

    target = scanner.find_target(agent, report)

    assert target is not None
    assert target.loot_id == make_crate(15.0).id
    assert report.rejections == {Rejection.UNREACHABLE: 1}


def test_failed_path_query_is_unreachable(world, eligibility, claims, settings, agent, make_crate):
    navigation = DetourNavigation({5.0: math.inf})
    scanner = CandidateScanner(world, navigation, eligibility, claims, settings)
    world.add(make_crate(5.0))
    report = ScanReport()

    assert scanner.find_target(agent, report) is None
    assert report.rejections == {Rejection.UNREACHABLE: 1}


def test_destination_is_pushed_away_from_overhang(scanner, make_crate):
    crate = make_crate(200.8)

    destination = scanner.get_destination(crate.bounds)

    assert destination is not None
    assert math.isclose(destination.x, 199.8)
    assert destination.y == 0.0


def test_greedy_selection_prefers_straight_line_order(
    world, eligibility, claims, settings, agent, make_crate
):
    """The nearer crate wins even though the farther one has a shorter path."""
    navigation = DetourNavigation({10.0: 60.0, 20.0: 20.0})
    scanner = CandidateScanner(world, navigation, eligibility, claims, settings)
    world.add(make_crate(20.0))
    world.add(make_crate(10.0))

    target = scanner.find_target(agent)

    assert target is not None
    assert target.loot_id == make_crate(10.0).id
    assert target.distance == 60.0


def test_collider_buffer_overflow_is_capped(world, navigation, eligibility, claims, make_crate):
    settings = LootingSettings(collider_buffer_size=2, _env_file=None)
    scanner = CandidateScanner(world, navigation, eligibility, claims, settings)
    for x in (30.0, 20.0, 10.0):
        world.add(make_crate(x))
    report = ScanReport()

    target = scanner.find_target(Agent("scav-1", Vector3.ZERO, free_cells=20), report)

    assert report.candidates == 2
    assert target is not None
    assert target.loot_id == make_crate(20.0).id


def test_lost_claim_race_moves_to_next_candidate(
    world, navigation, eligibility, settings, agent, make_crate
):
    class RacingClaims(LocalClaimCache):
        def claim(self, loot_id, agent_id):
            if loot_id == make_crate(5.0).id:
                return False
            return super().claim(loot_id, agent_id)

    scanner = CandidateScanner(world, navigation, eligibility, RacingClaims(), settings)
    world.add(make_crate(5.0))
    world.add(make_crate(10.0))
    report = ScanReport()

    target = scanner.find_target(agent, report)

    assert target is not None
    assert target.loot_id == make_crate(10.0).id
    assert report.rejections == {Rejection.CLAIMED: 1}


def test_destroyed_candidate_is_skipped(world, scanner, agent, make_crate):
    gone = make_crate(5.0)
    world.add(gone)
    world.add(make_crate(10.0))
    gone.destroyed = True
    report = ScanReport()

    target = scanner.find_target(agent, report)

    assert target is not None
    assert report.rejections == {Rejection.MISSING: 1}


def test_update_skips_scan_when_capacity_is_reserved(world, scanner, make_crate):
    world.add(make_crate(5.0))
    full = Agent("scav-1", Vector3.ZERO, free_cells=2)

    assert scanner.update(full) is None
    assert full.target is None

    full.free_cells = 3
    assert scanner.update(full) is not None


def test_scan_is_deterministic_for_a_fixed_snapshot(
    navigation, eligibility, settings, make_crate, make_item, make_corpse
):
    def build_world():
        return InMemoryWorld(
            [make_item(12.0, z=3.0), make_corpse(7.0, z=-7.0), make_crate(-6.0, z=6.0)]
        )

    results = []
    for _ in range(3):
        agent = Agent("scav-1", Vector3(1.0, 0.0, 1.0), free_cells=20)
        target = find_target(
            agent, build_world(), navigation, eligibility, LocalClaimCache(), settings
        )
        assert target is not None
        results.append((target.loot_id, target.destination, target.distance))

    assert results[0] == results[1] == results[2]


def test_report_to_dict(world, scanner, agent, make_crate):
    world.add(make_crate(5.0, locked=True))
    world.add(make_crate(6.0))
    report = ScanReport()

    scanner.find_target(agent, report)
    data = report.to_dict()

    assert data["agent_id"] == agent.id
    assert data["candidates"] == 2
    assert data["evaluated"] == 2
    assert data["rejections"] == {"INELIGIBLE": 1}
    assert data["selected"] == make_crate(6.0).id
    assert set(data["timings_ms"]) == {"query", "sort", "evaluate"}
