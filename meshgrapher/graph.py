"""Tessellation of the (x, z) plane and helpers for graphing y = f(x, z)."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from meshgrapher.meshdata import MeshData, Vertex

SurfaceFunction = Callable[[float, float], float]

_MAX_INDEX_COUNT = 1 << 16


@dataclass(frozen=True)
class Square:
    """One grid cell, given by vertex indices clockwise from back-left."""

    corners: tuple[int, int, int, int]

    def triangle_vertices(self) -> tuple[int, ...]:
        """Indices of the two top-facing and two bottom-facing triangles."""
        c0, c1, c2, c3 = self.corners
        return (
            # top faces
            c0, c2, c3,
            c0, c1, c2,
            # bottom faces
            c0, c3, c2,
            c0, c2, c1,
        )


@dataclass
class UnitSquareTesselation:
    """A square of the (x, z) plane divided into n by n equal cells."""

    n: int
    vertices: list[list[float]] = field(default_factory=list)
    squares: list[Square] = field(default_factory=list)

    FLOOR_COLOR = (
        0.8 * 168.0 / 255.0,
        0.8 * 125.0 / 255.0,
        0.8 * 50.0 / 255.0,
    )
    FUNCT_COLOR = (1.0, 0.0, 0.0)

    @classmethod
    def generate(cls, n: int, width: float) -> UnitSquareTesselation:
        """Build an n by n grid spanning [0, width] in both x and z."""
        if n < 1:
            raise ValueError("the grid needs at least one subdivision")
        row = n + 1
        if row * row > _MAX_INDEX_COUNT:
            raise ValueError("too many subdivisions for 16-bit vertex indices")

        step = width / n
        ticks = [i * step for i in range(row)]

        # rows left to right, visited from back to front
        vertices = [[x, 0.0, z] for z in ticks for x in ticks]

        squares = [
            Square(
                (
                    z * row + x,
                    z * row + x + 1,
                    (z + 1) * row + x + 1,
                    (z + 1) * row + x,
                )
            )
            for z in range(n)
            for x in range(n)
        ]
        return cls(n=n, vertices=vertices, squares=squares)

    def apply_function(self, f: SurfaceFunction) -> UnitSquareTesselation:
        """Set every vertex height to f(x, z); returns self for chaining."""
        for vertex in self.vertices:
            vertex[1] = f(vertex[0], vertex[2])
        return self

    def mesh_data(self, color) -> MeshData:
        """Turn the grid into a coloured triangle mesh."""
        vertices = [Vertex(list(position), color) for position in self.vertices]
        indices = [i for square in self.squares for i in square.triangle_vertices()]
        return MeshData(vertices=vertices, indices=indices)


def shift_scale_input(
    f: SurfaceFunction,
    x_shift: float,
    x_scale: float,
    z_shift: float,
    z_scale: float,
) -> SurfaceFunction:
    """Wrap f so that its inputs are shifted, then scaled."""

    def shifted(x: float, z: float) -> float:
        return f((x - x_shift) * x_scale, (z - z_shift) * z_scale)

    return shifted


def shift_scale_output(f: SurfaceFunction, y_shift: float, y_scale: float) -> SurfaceFunction:
    """Wrap f so that its output is scaled, then shifted."""

    def shifted(x: float, z: float) -> float:
        return f(x, z) * y_scale + y_shift

    return shifted