"""LootingSession: per-simulation owner of the claim cache and adapters.

Usage:
    session = LootingSession(world, navigation, settings=LootingSettings())

    # Every tick
    targets = session.tick(agents)

    # Agent behavior callbacks
    session.complete(agent)          # looted the target
    session.abandon(agent)           # gave up on the target
    session.destroy_agent(agent.id)  # agent removed from the world

    # Opening a container
    result = session.repack(container)

    # Shutting down (or use the session as a context manager)
    session.close()
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager

from lootbrain.adapters.memory import SettingsEligibility
from lootbrain.adapters.protocol import Eligibility, Navigation, WorldQuery
from lootbrain.claims.local import LocalClaimCache
from lootbrain.claims.protocol import ClaimCache
from lootbrain.config import LootingSettings
from lootbrain.core.inventory import Container, Item, ItemAddress
from lootbrain.core.loot import Agent, Target
from lootbrain.packing.engine import pick_up, repack
from lootbrain.packing.models import PackingResult
from lootbrain.packing.protocol import GridListener
from lootbrain.scanning.models import ScanReport
from lootbrain.scanning.scanner import CandidateScanner

logger = logging.getLogger(__name__)


class LootingSession:
    """Central looting state for one running simulation.

    Owns the claim cache explicitly; nothing here is process-global. Scans
    for different agents may run concurrently. Repacks take an exclusive
    per-container lock.

    Args:
        world: Overlap query adapter.
        navigation: Navigation surface adapter.
        eligibility: Eligibility predicates (defaults to SettingsEligibility).
        settings: Tuning (defaults to LootingSettings()).
        claims: Claim cache (defaults to a LocalClaimCache sized from settings).
    """

    def __init__(
        self,
        world: WorldQuery,
        navigation: Navigation,
        eligibility: Eligibility | None = None,
        settings: LootingSettings | None = None,
        claims: ClaimCache | None = None,
    ):
        self._settings = settings if settings is not None else LootingSettings()
        self._claims = (
            claims if claims is not None else LocalClaimCache(stripes=self._settings.claim_stripes)
        )
        self._eligibility = (
            eligibility if eligibility is not None else SettingsEligibility(self._settings)
        )
        self._scanner = CandidateScanner(
            world, navigation, self._eligibility, self._claims, self._settings
        )
        # Kept per container id until `forget_container` or `close`.
        self._container_locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()
        self._pool: ThreadPoolExecutor | None = None

    def __enter__(self) -> LootingSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Shut down the scan pool and drop all container locks."""
        with self._locks_guard:
            pool, self._pool = self._pool, None
            self._container_locks.clear()
        if pool is not None:
            pool.shutdown(wait=True)

    @property
    def settings(self) -> LootingSettings:
        return self._settings

    @property
    def claims(self) -> ClaimCache:
        return self._claims

    @property
    def scanner(self) -> CandidateScanner:
        return self._scanner

    def find_target(self, agent: Agent, report: ScanReport | None = None) -> Target | None:
        """Scan once for `agent`, regardless of its free capacity."""
        return self._scanner.find_target(agent, report)

    def update(self, agent: Agent, report: ScanReport | None = None) -> Target | None:
        """Per-tick scan for an agent without a target.

        Agents already holding a target are left alone; reconciling a held
        target is up to the behavior layer.
        """
        if agent.target is not None:
            return None
        return self._scanner.update(agent, report)

    def tick(self, agents: Sequence[Agent]) -> dict[str, Target | None]:
        """Run `update` for many agents, on a thread pool if `scan_workers` > 1.

        Returns:
            Agent id -> newly claimed target (None if nothing was claimed).
        """
        workers = self._settings.scan_workers
        if workers <= 1 or len(agents) <= 1:
            return {agent.id: self.update(agent) for agent in agents}
        results = list(self._scan_pool().map(self.update, agents))
        return {agent.id: target for agent, target in zip(agents, results, strict=True)}

    def _scan_pool(self) -> ThreadPoolExecutor:
        with self._locks_guard:
            if self._pool is None:
                self._pool = ThreadPoolExecutor(
                    max_workers=self._settings.scan_workers, thread_name_prefix="loot-scan"
                )
            return self._pool

    def release(self, loot_id: str, owner: str | None = None) -> bool:
        """Release a claim. No-op if it does not exist."""
        return self._claims.release(loot_id, owner)

    def complete(self, agent: Agent) -> None:
        """The agent finished looting its target."""
        self._clear_target(agent, "completed")

    def abandon(self, agent: Agent) -> None:
        """The agent gave up on its target."""
        self._clear_target(agent, "abandoned")

    def _clear_target(self, agent: Agent, outcome: str) -> None:
        target = agent.target
        if target is None:
            return
        agent.target = None
        self._claims.release(target.loot_id, owner=agent.id)
        logger.info("Agent %s %s %s", agent.id, outcome, target.loot_id)

    def destroy_agent(self, agent_id: str) -> list[str]:
        """Release every claim held by a destroyed agent."""
        return self._claims.release_agent(agent_id)

    @contextmanager
    def exclusive(self, container: Container) -> Iterator[Container]:
        """Hold the exclusive lock for `container`."""
        with self._locks_guard:
            lock = self._container_locks.setdefault(container.id, threading.Lock())
        with lock:
            yield container

    def forget_container(self, container_id: str) -> None:
        """Drop the lock kept for a container that left the world."""
        with self._locks_guard:
            self._container_locks.pop(container_id, None)

    def repack(
        self, container: Container | None, listener: GridListener | None = None
    ) -> PackingResult:
        """Repack `container` while holding its exclusive lock."""
        if container is None:
            return repack(None, listener)
        with self.exclusive(container):
            return repack(container, listener)

    def pick_up(self, agent: Agent, item: Item) -> ItemAddress | None:
        """Place `item` into the agent's equipment and update its free capacity.

        Raises:
            TypeError: If the agent has no equipment.
        """
        if agent.equipment is None:
            raise TypeError(f"Agent {agent.id} has no equipment to pick up into")
        address = pick_up(agent.equipment, item)
        if address is not None:
            agent.free_cells = agent.equipment.free_cells()
        return address
