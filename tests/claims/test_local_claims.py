"""Tests for the striped claim cache."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given
from hypothesis import strategies as st

from lootbrain import ClaimCache, LocalClaimCache


def test_local_claim_cache_satisfies_protocol():
    assert isinstance(LocalClaimCache(), ClaimCache)


def test_claim_is_exclusive_and_idempotent(claims):
    assert claims.claim("crate-1", "agent-a")
    assert claims.claim("crate-1", "agent-a")
    assert not claims.claim("crate-1", "agent-b")

    assert claims.claimed_by("crate-1") == "agent-a"
    assert claims.is_claimed("crate-1")
    assert "crate-1" in claims


def test_release_unclaimed_is_noop(claims):
    assert not claims.release("never-claimed")
    assert not claims.is_claimed("never-claimed")
    assert len(claims) == 0


def test_release_then_reclaim_by_other_agent(claims):
    claims.claim("crate-1", "agent-a")

    assert claims.release("crate-1")
    assert claims.claim("crate-1", "agent-b")
    assert claims.claimed_by("crate-1") == "agent-b"


def test_release_with_wrong_owner_keeps_claim(claims):
    claims.claim("crate-1", "agent-a")

    assert not claims.release("crate-1", owner="agent-b")
    assert claims.claimed_by("crate-1") == "agent-a"
    assert claims.release("crate-1", owner="agent-a")


def test_release_agent_drops_only_that_agents_claims(claims):
    for loot_id in ("a", "b", "c"):
        claims.claim(loot_id, "agent-a")
    claims.claim("d", "agent-b")

    released = claims.release_agent("agent-a")

    assert sorted(released) == ["a", "b", "c"]
    assert claims.snapshot() == {"d": "agent-b"}
    assert claims.claims_of("agent-a") == []


def test_claim_rejects_empty_ids(claims):
    with pytest.raises(ValueError):
        claims.claim("", "agent-a")


def test_invalid_stripe_count():
    with pytest.raises(ValueError, match="stripes"):
        LocalClaimCache(stripes=0)


def test_concurrent_claims_exactly_one_winner():
    """CRITICAL: N agents racing for one loot id produce exactly one owner."""
    claims = LocalClaimCache(stripes=8)
    agents = [f"agent-{i}" for i in range(32)]
    barrier = threading.Barrier(len(agents))

    def race(agent_id: str) -> bool:
        barrier.wait()
        return claims.claim("contested-crate", agent_id)

    with ThreadPoolExecutor(max_workers=len(agents)) as pool:
        results = list(pool.map(race, agents))

    winners = [agent for agent, won in zip(agents, results, strict=True) if won]
    assert len(winners) == 1
    assert claims.claimed_by("contested-crate") == winners[0]


@given(
    attempts=st.lists(
        st.tuples(st.sampled_from(["l1", "l2", "l3"]), st.sampled_from(["a1", "a2", "a3"])),
        max_size=30,
    )
)
def test_first_claimant_owns_each_id(attempts):
    """PROPERTY: without releases, each id is owned by its first claimant."""
    claims = LocalClaimCache(stripes=2)
    first: dict[str, str] = {}
    for loot_id, agent_id in attempts:
        first.setdefault(loot_id, agent_id)
        assert claims.claim(loot_id, agent_id) == (first[loot_id] == agent_id)

    assert claims.snapshot() == first
