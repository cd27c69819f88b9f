"""Candidate scanner: pick the nearest reachable, eligible loot for one agent.

Usage:
    scanner = CandidateScanner(world, navigation, eligibility, claims, settings)
    target = scanner.update(agent)  # scans only if the agent has spare capacity
    if target is not None:
        move_to(agent, target.destination)

Selection is greedy: candidates are evaluated nearest-first by straight-line
distance and the first one passing eligibility, reachability and path-length
range checks wins. A farther candidate with a shorter path is not considered
once an earlier candidate qualifies.
"""

from __future__ import annotations

import logging
import math
import time

from lootbrain.adapters.protocol import Eligibility, Navigation, WorldQuery
from lootbrain.claims.protocol import ClaimCache
from lootbrain.config import LootingSettings
from lootbrain.core.geometry import Bounds, Vector3
from lootbrain.core.loot import (
    Agent,
    ContainerLoot,
    CorpseLoot,
    ItemLoot,
    LootObject,
    LootType,
    Target,
    classify,
)
from lootbrain.scanning.models import Candidate, Rejection, ScanReport

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


class CandidateScanner:
    """Scans the world around an agent and claims at most one target per call.

    Args:
        world: Overlap query adapter.
        navigation: Navigation surface adapter.
        eligibility: Role, value and ignore-list predicates.
        claims: Shared claim cache.
        settings: Tuning (defaults to LootingSettings()).
    """

    def __init__(
        self,
        world: WorldQuery,
        navigation: Navigation,
        eligibility: Eligibility,
        claims: ClaimCache,
        settings: LootingSettings | None = None,
    ):
        self._world = world
        self._navigation = navigation
        self._eligibility = eligibility
        self._claims = claims
        self._settings = settings if settings is not None else LootingSettings()

    @property
    def settings(self) -> LootingSettings:
        return self._settings

    def should_scan(self, agent: Agent) -> bool:
        """Only scan while more than the reserved ammo slots are free."""
        return agent.free_cells > self._settings.reserved_slot_count

    def update(self, agent: Agent, report: ScanReport | None = None) -> Target | None:
        """Per-tick entry point: scan if the agent has room for more loot."""
        if not self.should_scan(agent):
            return None
        return self.find_target(agent, report)

    def find_target(self, agent: Agent, report: ScanReport | None = None) -> Target | None:
        """Find, claim and assign the first qualifying loot target.

        On success the target is written to `agent.target`. Otherwise the
        agent is left untouched.

        Args:
            agent: Scanning agent.
            report: Optional report to fill with counts and timings.

        Returns:
            The claimed target, or None if nothing qualified.
        """
        report = report if report is not None else ScanReport()
        report.agent_id = agent.id

        start = time.perf_counter()
        candidates = self._gather(agent)
        report.candidates = len(candidates)
        report.timings_ms["query"] = _elapsed_ms(start)

        start = time.perf_counter()
        candidates.sort(key=lambda candidate: candidate.straight_distance)
        report.timings_ms["sort"] = _elapsed_ms(start)

        start = time.perf_counter()
        target: Target | None = None
        for candidate in candidates:
            report.evaluated += 1
            rejection = self._evaluate(agent, candidate)
            if rejection is not None:
                report.reject(rejection)
                continue
            target = self._accept(
                agent, candidate.loot, candidate.destination, candidate.path_distance
            )
            if target is not None:
                break
            report.reject(Rejection.CLAIMED)
        report.timings_ms["evaluate"] = _elapsed_ms(start)

        if target is not None:
            report.selected = target.loot_id
        logger.debug(
            "Agent %s scan: %d candidates, selected=%s, timings=%s",
            agent.id,
            report.candidates,
            report.selected,
            report.timings_ms,
        )
        return target

    def _gather(self, agent: Agent) -> list[Candidate]:
        buffer_size = self._settings.collider_buffer_size
        colliders = self._world.overlap(
            agent.position, self._settings.detection_radius(), buffer_size
        )
        # The adapter may ignore the buffer size; overflow is dropped silently.
        return [
            Candidate(collider, collider.bounds.center.distance_to(agent.position))
            for collider in colliders[:buffer_size]
            if collider is not None
        ]

    def _evaluate(self, agent: Agent, candidate: Candidate) -> Rejection | None:
        loot = classify(candidate.collider)
        if loot is None:
            return Rejection.MISSING
        candidate.loot = loot

        if not self._is_eligible(agent, loot):
            return Rejection.INELIGIBLE
        owner = self._claims.claimed_by(loot.id)
        if owner is not None and owner != agent.id:
            return Rejection.CLAIMED

        destination = self.get_destination(loot.bounds)
        if destination is None:
            logger.debug("Unable to snap %s to the navigation surface, ignoring", loot.id)
            return Rejection.UNREACHABLE
        candidate.destination = destination

        distance = self.path_distance(agent, destination)
        if distance is None:
            return Rejection.UNREACHABLE
        candidate.path_distance = distance

        if not self.is_in_range(loot.loot_type, distance):
            return Rejection.OUT_OF_RANGE
        return None

    def _accept(
        self, agent: Agent, loot: LootObject, destination: Vector3, distance: float
    ) -> Target | None:
        if not self._claims.claim(loot.id, agent.id):
            return None
        target = Target(
            loot=loot,
            loot_position=loot.position,
            destination=destination,
            distance=distance,
        )
        agent.target = target
        logger.info(
            "Agent %s targeting %s %s at distance %.1f",
            agent.id,
            loot.loot_type.name.lower(),
            loot.id,
            target.distance,
        )
        return target

    def _is_eligible(self, agent: Agent, loot: LootObject) -> bool:
        eligibility = self._eligibility
        if not eligibility.is_role_enabled(loot.loot_type, agent.role):
            return False
        if eligibility.is_ignored(loot.id):
            return False
        match loot:
            case ContainerLoot(lootable=lootable):
                return lootable.active and not lootable.locked
            case ItemLoot(item=item):
                return (
                    not item.quest_item
                    and not item.is_single_use_key
                    and eligibility.is_valuable_enough(item)
                    and agent.free_cells > item.size
                )
            case CorpseLoot(body=body):
                return body.owner_agent_id is not None
        return False

    def get_destination(self, bounds: Bounds) -> Vector3 | None:
        """Navigable point to stand on while looting an object.

        Snaps the bottom of the bounds (lowered by `destination_drop`) to the
        navigation surface, then pushes that point one unit horizontally
        towards the snapped point and snaps again, so agents do not stand
        directly under the object.

        Returns:
            The padded destination, or None if either snap fails.
        """
        settings = self._settings
        center = bounds.base(drop=settings.destination_drop)
        nearby = self._navigation.snap_to_walkable(center, settings.nav_snap_distance)
        if nearby is None:
            return None
        padding = (center - nearby).horizontal().normalized()
        return self._navigation.snap_to_walkable(center - padding, settings.nav_snap_distance)

    def path_distance(self, agent: Agent, destination: Vector3) -> float | None:
        distance = self._navigation.path_length(agent.position, destination)
        if distance is None or not math.isfinite(distance):
            return None
        return distance

    def is_in_range(self, loot_type: LootType, distance: float) -> bool:
        """Check a path length against the loot type's detection distance."""
        return distance <= self._settings.detection_distance(loot_type)


def find_target(
    agent: Agent,
    world: WorldQuery,
    navigation: Navigation,
    eligibility: Eligibility,
    claims: ClaimCache,
    settings: LootingSettings | None = None,
) -> Target | None:
    """Scan once for `agent` without keeping a scanner around."""
    return CandidateScanner(world, navigation, eligibility, claims, settings).find_target(agent)
