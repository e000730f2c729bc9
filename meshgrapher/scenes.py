"""Scenes made of meshes, including animated ones."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from meshgrapher import graph, wave_eqn
from meshgrapher.graph import UnitSquareTesselation
from meshgrapher.matrix import MatrixUniform
from meshgrapher.meshdata import MeshData, Vertex


@dataclass(eq=False)
class MeshRenderData:
    """A mesh ready for drawing: packed vertex arrays, indices and a transform."""

    positions: np.ndarray
    colors: np.ndarray
    indices: np.ndarray
    num_indices: int
    matrix: MatrixUniform


def _render_data(mesh: MeshData, matrix: MatrixUniform) -> MeshRenderData:
    positions, colors = _pack_vertices(mesh.vertices)
    indices = np.array(mesh.indices, dtype=np.uint16)
    return MeshRenderData(
        positions=positions,
        colors=colors,
        indices=indices,
        num_indices=len(mesh.indices),
        matrix=matrix,
    )


def _pack_vertices(vertices) -> tuple[np.ndarray, np.ndarray]:
    positions = np.array([v.position for v in vertices], dtype=np.float32).reshape(-1, 3)
    colors = np.array([v.color for v in vertices], dtype=np.float32).reshape(-1, 3)
    return positions, colors


def _write_vertices(target: MeshRenderData, vertices) -> None:
    positions, colors = _pack_vertices(vertices)
    if positions.shape != target.positions.shape:
        raise ValueError("vertex data does not fit the mesh it is written to")
    target.positions = positions
    target.colors = colors


@dataclass(eq=False)
class Scene:
    """A list of meshes drawn together."""

    meshes: list[MeshRenderData] = field(default_factory=list)

    @property
    def scene(self) -> Scene:
        return self

    def update(self) -> None:
        """A static scene has nothing to advance."""


def build_scene(mesh_data) -> Scene:
    """Build a scene from (mesh, matrix) pairs."""
    meshes = [_render_data(mesh, matrix) for mesh, matrix in mesh_data]
    if not meshes:
        raise ValueError("a scene needs at least one mesh")
    return Scene(meshes=meshes)


_TEST_MESH = MeshData(
    vertices=[
        Vertex([0.0, 1.0, 0.0], (1.0, 0.0, 0.0)),
        Vertex([-0.5, 0.0, 0.0], (1.0, 0.0, 0.0)),
        Vertex([0.5, 0.0, 0.0], (1.0, 0.0, 0.0)),
    ],
    indices=[0, 1, 2, 0, 2, 1],
)

GOLD = (168.0 / 255.0, 125.0 / 255.0, 50.0 / 255.0)


def test_scene() -> Scene:
    """Two triangles, a gold one behind a red one."""
    back_mesh = _TEST_MESH.copy()
    back_mesh.set_uniform_color(GOLD)
    front_mesh = _TEST_MESH.copy()
    return build_scene(
        [
            (back_mesh, MatrixUniform.translation([0.0, -0.5, -0.5])),
            (front_mesh, MatrixUniform.translation([0.0, -0.5, 0.5])),
        ]
    )


def _radial_sinc(x: float, z: float) -> float:
    r = math.hypot(x, z)
    return 1.0 if r == 0.0 else math.sin(r) / r


def graph_scene() -> Scene:
    """A floor grid and the graph of sin(r)/r over it."""
    subdivisions = 128
    width = 2.0

    floor_mesh = UnitSquareTesselation.generate(subdivisions, width).mesh_data(
        UnitSquareTesselation.FLOOR_COLOR
    )
    translation = [-width / 2.0, -width / 4.0, -width / 2.0]

    f = graph.shift_scale_input(_radial_sinc, 1.0, 20.0, 1.0, 20.0)
    f = graph.shift_scale_output(f, 0.25, 0.85)

    func_mesh = (
        UnitSquareTesselation.generate(subdivisions, width)
        .apply_function(f)
        .mesh_data(UnitSquareTesselation.FUNCT_COLOR)
    )
    return build_scene(
        [
            (floor_mesh, MatrixUniform.translation(translation)),
            (func_mesh, MatrixUniform.translation(translation)),
        ]
    )


@dataclass(eq=False)
class MeltingScene:
    """A graph that sinks toward the floor a little every frame."""

    scene: Scene
    func_mesh: MeshData

    SCALE_FACTOR = 0.9995

    def update(self) -> None:
        """Scale every height down and rewrite the graph's vertex data."""
        for vertex in self.func_mesh.vertices:
            vertex.position[1] *= self.SCALE_FACTOR
        _write_vertices(self.scene.meshes[1], self.func_mesh.vertices)


def _wavy(x: float, z: float) -> float:
    return math.sin(x) * math.cos(z)


def melting_graph_scene() -> MeltingScene:
    """A floor grid and a melting graph of sin(x)cos(z)."""
    subdivisions = 200
    width = 2.0

    floor_mesh = UnitSquareTesselation.generate(subdivisions, width).mesh_data(
        UnitSquareTesselation.FLOOR_COLOR
    )
    translation = [-width / 2.0, -0.2, -width / 2.0]

    f = graph.shift_scale_input(_wavy, 0.5, 8.0, 0.5, 8.0)
    f = graph.shift_scale_output(f, 0.55, 0.5)

    func_mesh = (
        UnitSquareTesselation.generate(subdivisions, width)
        .apply_function(f)
        .mesh_data(UnitSquareTesselation.FUNCT_COLOR)
    )
    scene = build_scene(
        [
            (floor_mesh, MatrixUniform.translation(translation)),
            (func_mesh.copy(), MatrixUniform.translation(translation)),
        ]
    )
    return MeltingScene(scene=scene, func_mesh=func_mesh)


@dataclass(eq=False)
class WaveEquationScene:
    """A surface driven by the wave equation solver."""

    scene: Scene
    func_mesh: MeshData
    wave_eqn: wave_eqn.WaveEquationData

    SCALE = 0.002

    def update(self) -> None:
        """Step the solver and copy its field into the surface heights."""
        self.wave_eqn.update()
        heights = (self.SCALE * self.wave_eqn.u_0).ravel()
        for vertex, height in zip(self.func_mesh.vertices, heights):
            vertex.position[1] = float(height)
        _write_vertices(self.scene.meshes[0], self.func_mesh.vertices)


def wave_eqn_scene() -> WaveEquationScene:
    """A flat surface, one grid point per solver cell, ready to ripple."""
    # the solver grid is square, and has one more point than squares per side
    subdivisions = wave_eqn.X_SIZE - 1
    width = 2.0

    func_mesh = UnitSquareTesselation.generate(subdivisions, width).mesh_data(
        UnitSquareTesselation.FUNCT_COLOR
    )
    translation = [-width / 2.0, -0.2, -width / 2.0]
    scene = build_scene([(func_mesh.copy(), MatrixUniform.translation(translation))])
    return WaveEquationScene(
        scene=scene,
        func_mesh=func_mesh,
        wave_eqn=wave_eqn.WaveEquationData(),
    )