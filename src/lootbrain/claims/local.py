"""Local in-memory claim cache with striped locking.

Usage:
    claims = LocalClaimCache(stripes=16)
    claims.claim("crate-7", "agent-1")  # True
    claims.claim("crate-7", "agent-2")  # False
    claims.release("crate-7")
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class _Stripe:
    __slots__ = ("lock", "owners")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.owners: dict[str, str] = {}


class LocalClaimCache:
    """Claim ledger partitioned into independently locked stripes.

    Structure:
        _stripes[hash(loot_id) % n].owners[loot_id] = agent_id

    Each stripe owns its own dict, so a check-then-claim on one loot id holds
    exactly one lock and never races another claim on the same id. Claims on
    ids in different stripes proceed in parallel.

    Args:
        stripes: Number of lock stripes (default 16).
    """

    def __init__(self, stripes: int = 16):
        if stripes < 1:
            raise ValueError(f"stripes must be >= 1, got {stripes}")
        self._stripes = [_Stripe() for _ in range(stripes)]

    def _stripe(self, loot_id: str) -> _Stripe:
        return self._stripes[hash(loot_id) % len(self._stripes)]

    @contextmanager
    def _all_locked(self) -> Iterator[None]:
        """Hold every stripe lock, always acquired in index order."""
        for stripe in self._stripes:
            stripe.lock.acquire()
        try:
            yield
        finally:
            for stripe in reversed(self._stripes):
                stripe.lock.release()

    def claim(self, loot_id: str, agent_id: str) -> bool:
        """Reserve `loot_id` for `agent_id`.

        Idempotent for the same pair; rejected if another agent holds the claim.

        Args:
            loot_id: Loot object to claim.
            agent_id: Claiming agent.

        Returns:
            True if `agent_id` holds the claim after the call.
        """
        if not loot_id or not agent_id:
            raise ValueError("loot_id and agent_id must be non-empty")
        stripe = self._stripe(loot_id)
        with stripe.lock:
            owner = stripe.owners.get(loot_id)
            if owner is None:
                stripe.owners[loot_id] = agent_id
                logger.debug("Agent %s claimed %s", agent_id, loot_id)
                return True
        if owner != agent_id:
            logger.debug("Agent %s lost claim on %s to %s", agent_id, loot_id, owner)
        return owner == agent_id

    def release(self, loot_id: str, owner: str | None = None) -> bool:
        """Drop the claim on `loot_id`. No-op if it does not exist.

        Args:
            loot_id: Loot object to release.
            owner: If given, only release when this agent holds the claim.

        Returns:
            True if a claim was removed.
        """
        stripe = self._stripe(loot_id)
        with stripe.lock:
            current = stripe.owners.get(loot_id)
            if current is None or (owner is not None and current != owner):
                return False
            del stripe.owners[loot_id]
        logger.debug("Released claim on %s held by %s", loot_id, current)
        return True

    def is_claimed(self, loot_id: str) -> bool:
        return self.claimed_by(loot_id) is not None

    def claimed_by(self, loot_id: str) -> str | None:
        stripe = self._stripe(loot_id)
        with stripe.lock:
            return stripe.owners.get(loot_id)

    def claims_of(self, agent_id: str) -> list[str]:
        """Loot ids currently held by `agent_id`."""
        with self._all_locked():
            return [
                loot_id
                for stripe in self._stripes
                for loot_id, owner in stripe.owners.items()
                if owner == agent_id
            ]

    def release_agent(self, agent_id: str) -> list[str]:
        """Drop every claim held by `agent_id` (e.g., when the agent is destroyed).

        Returns:
            Released loot ids.
        """
        released: list[str] = []
        with self._all_locked():
            for stripe in self._stripes:
                owned = [loot_id for loot_id, owner in stripe.owners.items() if owner == agent_id]
                for loot_id in owned:
                    del stripe.owners[loot_id]
                released.extend(owned)
        if released:
            logger.debug("Released %d claim(s) held by %s", len(released), agent_id)
        return released

    def snapshot(self) -> dict[str, str]:
        """Consistent copy of every claim."""
        with self._all_locked():
            return {
                loot_id: owner for stripe in self._stripes for loot_id, owner in stripe.owners.items()
            }

    def clear(self) -> None:
        with self._all_locked():
            for stripe in self._stripes:
                stripe.owners.clear()

    def __len__(self) -> int:
        with self._all_locked():
            return sum(len(stripe.owners) for stripe in self._stripes)

    def __contains__(self, loot_id: object) -> bool:
        return isinstance(loot_id, str) and self.is_claimed(loot_id)
