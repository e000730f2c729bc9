"""4x4 matrices for transforms and camera projection."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

# Entries are listed column by column, hence the transpose.
OPENGL_TO_WGPU_MATRIX = np.array(
    [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [0.0, 0.0, 0.5, 0.5],
        [0.0, 0.0, 0.0, 1.0],
    ],
    dtype=np.float64,
).T


def _identity() -> np.ndarray:
    return np.eye(4, dtype=np.float32)


@dataclass(eq=False)
class MatrixUniform:
    """A transform matrix as handed to the vertex shader."""

    view_proj: np.ndarray = field(default_factory=_identity)

    @classmethod
    def identity(cls) -> MatrixUniform:
        return cls(_identity())

    @classmethod
    def translation(cls, coords) -> MatrixUniform:
        """A matrix translating by the first three of coords."""
        coords = list(coords)
        if len(coords) < 3:
            raise ValueError("a translation needs three coordinates")
        matrix = _identity()
        matrix[:3, 3] = coords[:3]
        return cls(matrix)

    def update(self, matrix) -> None:
        """Replace the stored matrix."""
        array = np.array(matrix, dtype=np.float32)
        if array.shape != (4, 4):
            raise ValueError("expected a 4x4 matrix")
        self.view_proj = array

    def to_bytes(self) -> bytes:
        """The matrix as little-endian float32 values in column-major order."""
        return np.ascontiguousarray(self.view_proj.T, dtype="<f4").tobytes()


def _normalize(v: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at_rh(eye, target, up) -> np.ndarray:
    """Right-handed view matrix looking from eye toward target."""
    eye = np.asarray(eye, dtype=np.float64)
    f = _normalize(np.asarray(target, dtype=np.float64) - eye)
    s = _normalize(np.cross(f, np.asarray(up, dtype=np.float64)))
    u = np.cross(s, f)
    return np.array(
        [
            [s[0], s[1], s[2], -eye.dot(s)],
            [u[0], u[1], u[2], -eye.dot(u)],
            [-f[0], -f[1], -f[2], eye.dot(f)],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def perspective(fovy_degrees, aspect, znear, zfar) -> np.ndarray:
    """Perspective projection with a vertical field of view in degrees."""
    if not 0.0 < fovy_degrees < 180.0:
        raise ValueError("the field of view must lie strictly between 0 and 180 degrees")
    if aspect == 0.0:
        raise ValueError("the aspect ratio must not be zero")
    if znear <= 0.0 or zfar <= 0.0:
        raise ValueError("clip planes must be positive")
    if znear == zfar:
        raise ValueError("near and far clip planes must differ")
    f = 1.0 / math.tan(math.radians(fovy_degrees) / 2.0)
    depth = znear - zfar
    return np.array(
        [
            [f / aspect, 0.0, 0.0, 0.0],
            [0.0, f, 0.0, 0.0],
            [0.0, 0.0, (zfar + znear) / depth, 2.0 * zfar * znear / depth],
            [0.0, 0.0, -1.0, 0.0],
        ]
    )


def axis_angle(axis, angle) -> np.ndarray:
    """Rotation by angle radians about a unit axis, as a 4x4 matrix."""
    x, y, z = (float(c) for c in axis)
    s, c = math.sin(angle), math.cos(angle)
    t = 1.0 - c
    return np.array(
        [
            [t * x * x + c, t * x * y - s * z, t * x * z + s * y, 0.0],
            [t * x * y + s * z, t * y * y + c, t * y * z - s * x, 0.0],
            [t * x * z - s * y, t * y * z + s * x, t * z * z + c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )