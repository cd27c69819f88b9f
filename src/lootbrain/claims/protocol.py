"""Claim cache protocol for swappable backends.

A claim is an exclusive reservation of one loot object by one agent. It
lives until the owning agent releases it; there is no expiry.

Usage:
    claims = LocalClaimCache()
    session = LootingSession(world, navigation, claims=claims)
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ClaimCache(Protocol):
    """Abstract claim ledger: loot id -> claiming agent id.

    Thread Safety:
        Implementations must make check-then-claim atomic per loot id.

    Caller obligation:
        The agent behavior layer must call `release` when an agent completes
        or abandons a target, and `release_agent` when an agent is destroyed.
    """

    def claim(self, loot_id: str, agent_id: str) -> bool:
        """Reserve `loot_id` for `agent_id`.

        Returns:
            True if the agent now holds the claim (including when it already
            did), False if another agent holds it.
        """
        ...

    def release(self, loot_id: str, owner: str | None = None) -> bool:
        """Drop the claim on `loot_id`. No-op if unclaimed.

        Args:
            loot_id: Loot object to release.
            owner: If given, only release when this agent holds the claim.

        Returns:
            True if a claim was removed.
        """
        ...

    def is_claimed(self, loot_id: str) -> bool:
        """Check whether any agent holds `loot_id`."""
        ...

    def claimed_by(self, loot_id: str) -> str | None:
        """Agent holding `loot_id`, or None."""
        ...

    def release_agent(self, agent_id: str) -> list[str]:
        """Drop every claim held by `agent_id`. Returns the released loot ids."""
        ...
