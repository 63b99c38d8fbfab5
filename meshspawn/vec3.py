"""Three-component float vector used for node positions."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass
class Vec3:
    """A mutable point or direction in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar):
        if isinstance(scalar, Vec3) or not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __str__(self) -> str:
        return f"X = {self.x:g} Y = {self.y:g}"


def magnitude(v: Vec3) -> float:
    """Euclidean length of ``v``."""
    return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Vec3) -> Vec3:
    """Unit vector pointing the same way as ``v``."""
    mag = magnitude(v)
    if mag == 0:
        raise ValueError("cannot normalize a zero-length vector")
    return Vec3(v.x / mag, v.y / mag, v.z / mag)


def perpendicular(v: Vec3) -> Vec3:
    """Vector perpendicular to ``v`` in the horizontal (x, z) plane."""
    return Vec3(-v.z, v.y, v.x)