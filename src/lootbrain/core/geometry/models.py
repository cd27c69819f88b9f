"""World-space geometry primitives.

Usage:
    agent = Vector3(0.0, 0.0, 0.0)
    crate = Bounds(center=Vector3(5.0, 0.5, 0.0), extents=Vector3(0.5, 0.5, 0.5))
    crate.base(drop=0.4)  # Vector3(5.0, -0.4, 0.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Vector3:
    """Immutable 3D point/vector. The y axis points up."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other: Vector3) -> float:
        return (self - other).length()

    def horizontal(self) -> Vector3:
        """Project onto the ground plane (drop the y component)."""
        return Vector3(self.x, 0.0, self.z)

    def normalized(self) -> Vector3:
        """Unit vector in the same direction. The zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector3.ZERO
        return Vector3(self.x / length, self.y / length, self.z / length)


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding volume described by center and half-size extents."""

    center: Vector3
    extents: Vector3 = Vector3.ZERO

    @property
    def min(self) -> Vector3:
        return self.center - self.extents

    @property
    def max(self) -> Vector3:
        return self.center + self.extents

    def base(self, drop: float = 0.0) -> Vector3:
        """Bottom-center point of the volume, lowered by an extra `drop`.

        Args:
            drop: Additional distance below the bottom face.

        Returns:
            Point at the footprint center on (or under) the bottom face.
        """
        return Vector3(self.center.x, self.center.y - self.extents.y - drop, self.center.z)

    def closest_point(self, point: Vector3) -> Vector3:
        """Closest point inside the volume to `point`."""
        lo, hi = self.min, self.max
        return Vector3(
            min(max(point.x, lo.x), hi.x),
            min(max(point.y, lo.y), hi.y),
            min(max(point.z, lo.z), hi.z),
        )

    def intersects_sphere(self, center: Vector3, radius: float) -> bool:
        """Check whether a sphere overlaps this volume."""
        return self.closest_point(center).distance_to(center) <= radius
