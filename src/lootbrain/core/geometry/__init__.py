"""Geometry primitives: points and bounding volumes."""

from lootbrain.core.geometry.models import Bounds, Vector3

__all__ = [
    "Vector3",
    "Bounds",
]
