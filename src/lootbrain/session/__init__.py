from lootbrain.session.session import LootingSession

__all__ = ["LootingSession"]
