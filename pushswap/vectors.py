"""Immutable 2D, 3D and 4D vector types."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Vec2i", "Vec2", "Vec3", "Vec4"]


@dataclass(frozen=True)
class Vec2i:
    """2D vector with integer components."""

    x: int
    y: int

    @classmethod
    def splat(cls, n: int) -> Vec2i:
        """Vector with both components equal to ``n``."""
        return cls(n, n)

    @classmethod
    def from_floats(cls, x: float, y: float) -> Vec2i:
        """Vector from float components, truncated toward zero."""
        return cls(int(x), int(y))

    @classmethod
    def splat_float(cls, n: float) -> Vec2i:
        """Vector with both components equal to ``n`` truncated toward zero."""
        value = int(n)
        return cls(value, value)

    def add(self, other: Vec2i) -> Vec2i:
        return Vec2i(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2i) -> Vec2i:
        return Vec2i(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> Vec2i:
        """Multiply by ``s`` and truncate each component toward zero."""
        return Vec2i(int(float(self.x) * s), int(float(self.y) * s))

    __add__ = add
    __sub__ = sub
    __mul__ = scale


@dataclass(frozen=True)
class Vec2:
    """2D vector with float components."""

    x: float
    y: float

    @classmethod
    def splat(cls, n: float) -> Vec2:
        return cls(n, n)

    def add(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> Vec2:
        return Vec2(self.x * s, self.y * s)

    __add__ = add
    __sub__ = sub
    __mul__ = scale


@dataclass(frozen=True)
class Vec3:
    """3D vector with float components."""

    x: float
    y: float
    z: float

    @classmethod
    def splat(cls, n: float) -> Vec3:
        return cls(n, n, n)

    @classmethod
    def from_vec4(cls, v: Vec4) -> Vec3:
        """Drop the ``w`` component of a 4D vector."""
        return cls(v.x, v.y, v.z)

    def add(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, s: float) -> Vec3:
        return Vec3(self.x * s, self.y * s, self.z * s)

    def cross(self, other: Vec3) -> Vec3:
        """Vector perpendicular to both ``self`` and ``other``."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vec3.splat(0.0)
        return Vec3(self.x / length, self.y / length, self.z / length)

    __add__ = add
    __sub__ = sub
    __mul__ = scale


@dataclass(frozen=True)
class Vec4:
    """4D vector with float components."""

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def splat(cls, n: float) -> Vec4:
        return cls(n, n, n, n)

    @classmethod
    def from_vec3(cls, v: Vec3, w: float) -> Vec4:
        """Extend a 3D vector with a ``w`` component."""
        return cls(v.x, v.y, v.z, w)

    def add(self, other: Vec4) -> Vec4:
        return Vec4(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def sub(self, other: Vec4) -> Vec4:
        return Vec4(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def scale(self, s: float) -> Vec4:
        return Vec4(self.x * s, self.y * s, self.z * s, self.w * s)

    __add__ = add
    __sub__ = sub
    __mul__ = scale