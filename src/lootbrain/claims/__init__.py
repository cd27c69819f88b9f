from lootbrain.claims.local import LocalClaimCache
from lootbrain.claims.protocol import ClaimCache

__all__ = ["ClaimCache", "LocalClaimCache"]
