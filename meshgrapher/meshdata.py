"""Vertices and index lists that make up a drawable mesh."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Vertex:
    """A mesh vertex: a position in space and an RGB colour."""

    position: list[float]
    color: tuple[float, float, float]

    def __post_init__(self) -> None:
        self.position = [float(c) for c in self.position]
        self.color = tuple(float(c) for c in self.color)
        if len(self.position) != 3:
            raise ValueError("a vertex position has exactly three coordinates")
        if len(self.color) != 3:
            raise ValueError("a vertex colour has exactly three components")


@dataclass
class MeshData:
    """A triangle mesh: vertices plus a flat list of triangle indices."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def set_uniform_color(self, rgb) -> None:
        """Paint every vertex with the same colour."""
        color = tuple(float(c) for c in rgb)
        if len(color) != 3:
            raise ValueError("a colour has exactly three components")
        for vertex in self.vertices:
            vertex.color = color

    def copy(self) -> MeshData:
        """Return an independent copy of this mesh."""
        return MeshData(
            vertices=[Vertex(list(v.position), v.color) for v in self.vertices],
            indices=list(self.indices),
        )