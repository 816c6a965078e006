"""Row-major 4x4 matrices for affine transforms of 3D and 4D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from pushswap.vectors import Vec3, Vec4

__all__ = ["Mat4"]

_SIZE = 4

Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Mat4:
    """Immutable 4x4 matrix stored as a tuple of four rows."""

    m: tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.m)
        if len(rows) != _SIZE or any(len(row) != _SIZE for row in rows):
            raise ValueError("a Mat4 needs 4 rows of 4 values")
        object.__setattr__(self, "m", rows)

    def __getitem__(self, row: int) -> Row:
        return self.m[row]

    @classmethod
    def zero(cls) -> Mat4:
        """Matrix with every element set to 0."""
        return cls(((0.0,) * _SIZE,) * _SIZE)

    @classmethod
    def identity(cls) -> Mat4:
        """Matrix with 1 on the main diagonal and 0 elsewhere."""
        return cls(
            tuple(
                tuple(1.0 if i == j else 0.0 for j in range(_SIZE))
                for i in range(_SIZE)
            )
        )

    @classmethod
    def _identity_with(cls, entries: dict[tuple[int, int], float]) -> Mat4:
        """Identity matrix with the given ``(row, column)`` entries replaced."""
        return cls(
            tuple(
                tuple(
                    entries.get((i, j), 1.0 if i == j else 0.0)
                    for j in range(_SIZE)
                )
                for i in range(_SIZE)
            )
        )

    def mul(self, other: Mat4) -> Mat4:
        """Matrix product ``self * other``."""
        columns = tuple(zip(*other.m))
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.m
            )
        )

    def mul_vec4(self, v: Vec4) -> Vec4:
        """Apply the matrix to a 4D column vector."""
        components = (v.x, v.y, v.z, v.w)
        return Vec4(
            *(sum(a * b for a, b in zip(row, components)) for row in self.m)
        )

    def mul_vec3(self, v: Vec3) -> Vec3:
        """Apply the matrix to a 3D direction (``w`` = 0), dropping ``w``."""
        return Vec3.from_vec4(self.mul_vec4(Vec4.from_vec3(v, 0.0)))

    @classmethod
    def translation(cls, t: Vec3) -> Mat4:
        """Matrix translating points by ``t``."""
        return cls._identity_with({(0, 3): t.x, (1, 3): t.y, (2, 3): t.z})

    @classmethod
    def scaling(cls, s: Vec3) -> Mat4:
        """Matrix scaling each axis by the matching component of ``s``."""
        return cls._identity_with({(0, 0): s.x, (1, 1): s.y, (2, 2): s.z})

    @classmethod
    def rot_x(cls, angle: float) -> Mat4:
        """Rotation about the X axis by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls._identity_with(
            {(1, 1): cos, (1, 2): -sin, (2, 1): sin, (2, 2): cos}
        )

    @classmethod
    def rot_y(cls, angle: float) -> Mat4:
        """Rotation about the Y axis by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls._identity_with(
            {(0, 0): cos, (0, 2): sin, (2, 0): -sin, (2, 2): cos}
        )

    @classmethod
    def rot_z(cls, angle: float) -> Mat4:
        """Rotation about the Z axis by ``angle`` radians."""
        cos, sin = math.cos(angle), math.sin(angle)
        return cls._identity_with(
            {(0, 0): cos, (0, 1): -sin, (1, 0): sin, (1, 1): cos}
        )

    @classmethod
    def rotation(cls, rot: Vec3) -> Mat4:
        """Combined rotation applying X, then Y, then Z (``Rz * Ry * Rx``)."""
        return cls.rot_z(rot.z).mul(cls.rot_y(rot.y)).mul(cls.rot_x(rot.x))

    __matmul__ = mul